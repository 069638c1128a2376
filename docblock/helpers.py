"""Line handling shared by blocks and substitutors."""

from __future__ import annotations

import re

from .types import LineList

# Separator used whenever lines are joined into flat text.
EOL = "\n"

UTF_8_BOM = "\ufeff"

# Recognized line terminators, longest first so CRLF is a single break.
LINE_BREAK_RX = re.compile(r"\r\n|\n|\r")


def normalize_lines_from_string(data: str | None) -> LineList:
    """Split raw source text into lines without terminators.

    Args:
        data: Source text using LF, CRLF or CR line endings, possibly mixed.

    Returns:
        Fresh list of lines. A trailing terminator does not produce an extra
        empty line and a leading byte order mark is dropped.
    """

    if not data:
        return []

    if data.startswith(UTF_8_BOM):
        data = data[len(UTF_8_BOM) :]

    lines = LINE_BREAK_RX.split(data)

    # "a\nb\n" ends in a terminator, not in an empty line.
    if lines and lines[-1] == "" and len(lines) > 1:
        lines.pop()
    elif lines == [""]:
        return []

    return lines


def is_blank(line: str) -> bool:
    """Return ``True`` for empty or whitespace-only lines."""
    return not line.strip()
