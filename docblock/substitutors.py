"""Substitution pipeline applied to block text."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Protocol, overload

from .helpers import EOL
from .types import LineList, Source

logger = logging.getLogger(__name__)

SubstitutionFn = Callable[[str], str]


class SubstitutionPipeline(Protocol):
    """Callable applying named substitutions in the listed order.

    String input yields a string; a line sequence yields a new list of lines
    whose length may differ from the input.
    """

    @overload
    def __call__(self, source: str, subs: Sequence[str]) -> str: ...

    @overload
    def __call__(
        self, source: Sequence[str], subs: Sequence[str]
    ) -> LineList: ...

    def __call__(self, source: Source, subs: Sequence[str]) -> str | LineList:
        ...


class Substitutor:
    """Registry of named substitutions acting as a substitution pipeline.

    Example:
        >>> subs = Substitutor({"upper": str.upper})
        >>> subs("a\\nb", ["upper"])
        'A\\nB'
    """

    def __init__(
        self, substitutions: Mapping[str, SubstitutionFn] | None = None
    ) -> None:
        self._registry: dict[str, SubstitutionFn] = {}
        for name, fn in (substitutions or {}).items():
            self.register(name, fn)

    def register(self, name: str, fn: SubstitutionFn) -> None:
        """Register ``fn`` under ``name``, replacing any earlier entry."""

        if not callable(fn):
            raise TypeError(f"Substitution {name!r} is not callable")
        self._registry[name] = fn

    def unregister(self, name: str) -> None:
        self._registry.pop(name, None)

    def names(self) -> list[str]:
        return list(self._registry)

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def apply_text(self, text: str, subs: Sequence[str]) -> str:
        """Apply ``subs`` to ``text`` in order.

        Args:
            text: Joined block text.
            subs: Substitution names; later ones see earlier results.

        Returns:
            The substituted text. Unknown names are logged and skipped.
        """

        for name in subs:
            fn = self._registry.get(name)
            if fn is None:
                logger.warning(
                    f"Unknown substitution type {name!r}; skipping"
                )
                continue
            text = fn(text)
        return text

    def apply_lines(
        self, lines: Sequence[str], subs: Sequence[str]
    ) -> LineList:
        """Apply ``subs`` to a line sequence.

        The lines are joined with :data:`~docblock.helpers.EOL`, substituted
        as one text and split again on every separator, so substitutions
        may add or remove lines. A trailing separator in the substituted text
        yields a trailing empty line.
        """

        if not subs:
            return list(lines)
        if not lines:
            return []

        text = self.apply_text(EOL.join(lines), subs)
        return text.split(EOL)

    def __call__(self, source: Source, subs: Sequence[str]) -> str | LineList:
        if isinstance(source, str):
            if not subs:
                return source
            return self.apply_text(source, subs)
        return self.apply_lines(source, subs)


def load_substitutions(
    module_name: str, substitutor: Substitutor | None = None
) -> Substitutor:
    """Register the ``SUBSTITUTIONS`` mapping exported by a module.

    Args:
        module_name: Dotted name of the module to import.
        substitutor: Registry to extend; a new one is created when omitted.

    Returns:
        The registry holding the module's substitutions.

    Throws:
        ImportError: If the module cannot be imported.
        AttributeError: If the module has no ``SUBSTITUTIONS`` mapping.
    """

    module = importlib.import_module(module_name)
    mapping = getattr(module, "SUBSTITUTIONS")

    substitutor = substitutor if substitutor is not None else Substitutor()
    for name, fn in mapping.items():
        substitutor.register(name, fn)

    logger.debug(
        f"Loaded {len(mapping)} substitutions from {module_name}: "
        f"{', '.join(mapping)}"
    )
    return substitutor

