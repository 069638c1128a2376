"""Shared fixtures for block tests."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from docblock import Document, Substitutor


class RecordingPipeline:
    """Substitution pipeline that records its calls.

    Each call stores the received ``source`` and ``subs``; the result is
    taken from ``result`` when set, otherwise the source is echoed back in
    the same shape.
    """

    def __init__(self, result: Any = None) -> None:  # noqa: ANN401
        self.calls: list[tuple[Any, list[str]]] = []
        self.result = result

    def __call__(
        self, source: Any, subs: Sequence[str]  # noqa: ANN401
    ) -> Any:  # noqa: ANN401
        self.calls.append((source, list(subs)))
        if self.result is not None:
            return self.result
        return source if isinstance(source, str) else list(source)


@pytest.fixture
def substitutor() -> Substitutor:
    """Registry with a few simple textual substitutions."""

    return Substitutor(
        {
            "upper": str.upper,
            "exclaim": lambda text: text.replace(".", "!"),
            "bracket": lambda text: f"[{text}]",
        }
    )


@pytest.fixture
def document(substitutor: Substitutor) -> Document:
    """Document using the ``substitutor`` fixture."""
    return Document(substitutor=substitutor)


@pytest.fixture
def recorder() -> RecordingPipeline:
    return RecordingPipeline()


@pytest.fixture
def recording_document(recorder: RecordingPipeline) -> Document:
    """Document whose substitutions are recorded by ``recorder``."""
    return Document(substitutor=recorder)
