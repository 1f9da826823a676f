# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Underline construction for the marker line beneath an annotated source line."""

from __future__ import annotations

from typing import Final

MARKER_GLYPH: Final[str] = "^"


def build_marker(column: int, char_len: int, glyph: str = MARKER_GLYPH) -> str:
    """Return ``column`` spaces followed by the marker glyphs for a range.

    A point annotation (``char_len == 0``) yields a single glyph; otherwise one
    glyph is emitted per character of the range. Nothing is clipped to the
    width of the rendered line.

    Args:
        column: Zero-based character column of the range start.
        char_len: Number of characters covered by the range.
        glyph: Marker character to repeat.

    Returns:
        str: Indentation plus marker glyphs.
    """

    if column < 0 or char_len < 0:
        raise ValueError(f"column and length must be non-negative, got {column} and {char_len}")
    return " " * column + glyph * max(char_len, 1)


__all__ = ["MARKER_GLYPH", "build_marker"]
