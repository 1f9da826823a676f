# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve byte ranges into line numbers, character columns and line text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .errors import MultilineRangeNotSupported, RangeOutOfBounds
from .models import ByteRange, SpanLike, coerce_range

LINE_TERMINATOR: Final[bytes] = b"\n"
_CARRIAGE_RETURN: Final[str] = "\r"
_CONTINUATION_MASK: Final[int] = 0xC0
_CONTINUATION_TAG: Final[int] = 0x80


@dataclass(frozen=True, slots=True)
class ResolvedLocation:
    """Position of an annotated range within its containing line."""

    line_number: int
    column: int
    line_text: str
    char_len: int = 0


def encode_source(source: str | bytes) -> bytes:
    """Return the UTF-8 encoding used to address ``source`` by byte offset."""

    if isinstance(source, bytes):
        return source
    return source.encode("utf-8")


def is_char_boundary(data: bytes, offset: int) -> bool:
    """Return ``True`` when ``offset`` does not split a multi-byte character."""

    if offset in (0, len(data)):
        return True
    return (data[offset] & _CONTINUATION_MASK) != _CONTINUATION_TAG


def check_bounds(data: bytes, span: ByteRange) -> None:
    """Raise :class:`RangeOutOfBounds` unless ``span`` addresses ``data`` validly.

    Args:
        data: UTF-8 encoded source text.
        span: Range to validate.

    Raises:
        RangeOutOfBounds: If the range is reversed, negative, extends past the
            end of ``data`` or cuts through a multi-byte character.
    """

    start, end = span
    if start < 0:
        raise RangeOutOfBounds(start, end, "starts before the source text")
    if start > end:
        raise RangeOutOfBounds(start, end, f"is invalid: {end} < {start}")
    if end > len(data):
        raise RangeOutOfBounds(start, end, f"ends after the source text ({len(data)} bytes)")
    for offset in (start, end):
        if not is_char_boundary(data, offset):
            raise RangeOutOfBounds(start, end, f"splits a character at byte {offset}")


def locate(source: str | bytes, span: SpanLike) -> ResolvedLocation:
    """Resolve ``span`` against ``source`` by scanning from the first byte.

    Args:
        source: Source text, or its UTF-8 encoding.
        span: Byte range to resolve.

    Returns:
        ResolvedLocation: Line number, column, line text and character length.

    Raises:
        RangeOutOfBounds: If ``span`` is not a valid range of ``source``.
        MultilineRangeNotSupported: If a line terminator lies inside ``span``.
    """

    data = encode_source(source)
    byte_range = coerce_range(span)
    check_bounds(data, byte_range)
    start, end = byte_range

    line_start = data.rfind(LINE_TERMINATOR, 0, start) + 1
    line_end = data.find(LINE_TERMINATOR, start)
    if line_end == -1:
        line_end = len(data)
    if end > line_end:
        raise MultilineRangeNotSupported(start, end)

    line_text = data[line_start:line_end].decode("utf-8").removesuffix(_CARRIAGE_RETURN)
    # A stripped carriage return is not underlined.
    visible_end = max(start, min(end, line_start + len(line_text.encode("utf-8"))))
    return ResolvedLocation(
        line_number=data.count(LINE_TERMINATOR, 0, start) + 1,
        column=len(data[line_start:start].decode("utf-8")),
        line_text=line_text,
        char_len=len(data[start:visible_end].decode("utf-8")),
    )


__all__ = [
    "LINE_TERMINATOR",
    "ResolvedLocation",
    "check_bounds",
    "encode_source",
    "is_char_boundary",
    "locate",
]
