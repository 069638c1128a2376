import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import click
import yaml  # type: ignore
from dotenv import load_dotenv

from docblock.abstract_block import AbstractBlock
from docblock.block import Block
from docblock.document import Document
from docblock.json_utils import json_dumps
from docblock.loader import document_to_dict, load_document
from docblock.substitutors import Substitutor, load_substitutions

try:
    __version__ = version("docblock")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="DOCBLOCK_LOG_FILE",
)
@click.version_option(__version__, prog_name="docblock")
def cli(debug: bool, trace: bool, log_file: Optional[str] = None) -> None:
    """Configure logging and load environment variables.

    Args:
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
    """
    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")
    load_dotenv()


def _substitutor(modules: tuple[str, ...]) -> Substitutor:
    """Build a substitution registry from the given plugin modules.

    Args:
        modules: Dotted module names exporting ``SUBSTITUTIONS``.

    Returns:
        Registry holding the substitutions of every module.

    Throws:
        click.ClickException: If a module or its mapping is missing.
    """

    substitutor = Substitutor()
    for module in modules:
        try:
            load_substitutions(module, substitutor)
        except (ImportError, AttributeError) as exc:
            raise click.ClickException(
                f"Cannot load substitutions from {module}: {exc}"
            ) from exc
    return substitutor


def _load(definition: str, modules: tuple[str, ...] = ()) -> Document:
    """Load a definition file, reporting errors as click exceptions.

    Definition errors and malformed JSON both surface as ``ValueError``.
    """

    try:
        return load_document(Path(definition), _substitutor(modules))
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    except yaml.YAMLError as exc:
        raise click.ClickException(f"Invalid definition file: {exc}") from exc


def _split_modules(
    ctx: click.Context, param: click.Parameter, value: tuple[str, ...]
) -> tuple[str, ...]:
    """Accept comma separated module lists, as given through the env."""

    modules: list[str] = []
    for item in value:
        modules.extend(m.strip() for m in item.split(",") if m.strip())
    return tuple(modules)


@cli.command()
@click.argument("definition", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--substitutions",
    "modules",
    multiple=True,
    envvar="DOCBLOCK_SUBSTITUTIONS",
    callback=_split_modules,
    help="Module exporting a SUBSTITUTIONS mapping (repeatable).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "yaml"]),
    default="text",
    help="Output format.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=False),
    default=None,
    help="Write output to FILE instead of the console.",
)
def render(
    definition: str,
    modules: tuple[str, ...] = (),
    output_format: str = "text",
    output_path: Optional[str] = None,
) -> None:
    """Render the blocks of a definition file.

    Args:
        definition: JSON or YAML file describing the document blocks.
        modules: Modules providing the substitutions used by the blocks.
        output_format: ``text`` renders the document content, ``json`` and
            ``yaml`` export the block tree with source and content.
        output_path: Optional file for the output.
    """

    doc = _load(definition, modules)

    if output_format == "text":
        content = doc.render()
    elif output_format == "json":
        content = json_dumps(document_to_dict(doc), indent=True)
    else:
        content = yaml.safe_dump(
            document_to_dict(doc), allow_unicode=True, sort_keys=False
        )

    if output_path:
        Path(output_path).write_text(content, encoding="utf-8")
    else:
        click.echo(content)


@cli.command()
@click.argument("definition", type=click.Path(exists=True, dir_okay=False))
def source(definition: str) -> None:
    """Print the raw source of each top-level block."""

    doc = _load(definition)
    sources = [
        block.source() for block in doc.blocks if isinstance(block, Block)
    ]
    click.echo("\n\n".join(sources))


def _describe(block: AbstractBlock, depth: int = 0) -> list[str]:
    """Return diagnostic lines for ``block`` and its children."""

    lines = [f"{'  ' * depth}{block!r}"]
    for child in block.blocks:
        lines.extend(_describe(child, depth + 1))
    return lines


@cli.command()
@click.argument("definition", type=click.Path(exists=True, dir_okay=False))
def inspect(definition: str) -> None:
    """Print the diagnostic summary of every block in the tree."""

    doc = _load(definition)
    for block in doc.blocks:
        click.echo("\n".join(_describe(block)))
