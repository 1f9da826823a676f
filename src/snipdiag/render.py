# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Compose annotation records into compiler-style text blocks.

Each block looks like::

    warning: punctuation problem
      --> hello.txt:1:5
       |
     1 | Hello world!
       |     ^^^ you probably forgot a comma

Blocks are emitted as Rich :class:`~rich.segment.Segment` sequences so the
same composition serves plain strings, ANSI strings and console output.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Final

from rich.color import ColorSystem
from rich.segment import Segment
from rich.style import Style

from .locator import ResolvedLocation
from .marker import build_marker
from .models import AnnotationRecord
from .stylesheet import Stylesheet

GUTTER_BAR: Final[str] = "|"
LOCATION_ARROW: Final[str] = "--> "
_NEWLINE: Final[Segment] = Segment.line()


def gutter_width(locations: Iterable[ResolvedLocation]) -> int:
    """Return the digit count of the largest line number in ``locations``."""

    return max((len(str(location.line_number)) for location in locations), default=1)


def _segment(text: str, style: str) -> Segment:
    return Segment(text, Style.parse(style) if style else None)


def marker_text(record: AnnotationRecord, location: ResolvedLocation) -> str:
    """Return the marker line content following the gutter bar.

    Ranges are underlined one glyph per character. A point annotation only
    shows a caret when it carries a footer to point with.
    """

    if location.char_len == 0 and record.footer is None:
        return ""
    marker = " " + build_marker(location.column, location.char_len)
    if record.footer is not None:
        marker += " "
    return marker


def render_block(
    record: AnnotationRecord,
    location: ResolvedLocation,
    *,
    filename: str,
    width: int,
    stylesheet: Stylesheet,
) -> list[Segment]:
    """Return the segments for a single annotation block.

    Args:
        record: Annotation being rendered.
        location: Resolved position of ``record`` within the source text.
        filename: File name displayed on the location line.
        width: Shared gutter width for every block of the report.
        stylesheet: Styles applied to each element of the block.

    Returns:
        list[Segment]: Segments making up the block, ending with a newline.
    """

    severity_style = stylesheet.by_severity(record.severity)
    padding = " " * (width + 2)
    segments = [
        _segment(f"{stylesheet.label(record.severity)}: {record.header}", severity_style),
        _NEWLINE,
        _segment(" " * (width + 1) + LOCATION_ARROW, stylesheet.linenr),
        _segment(f"{filename}:{location.line_number}:{location.column + 1}", stylesheet.filename),
        _NEWLINE,
        _segment(padding + GUTTER_BAR, stylesheet.linenr),
        _NEWLINE,
        _segment(f" {str(location.line_number).rjust(width)} {GUTTER_BAR} ", stylesheet.linenr),
        _segment(location.line_text, stylesheet.content),
        _NEWLINE,
        _segment(padding + GUTTER_BAR, stylesheet.linenr),
    ]
    marker = marker_text(record, location)
    if marker:
        segments.append(_segment(marker, severity_style))
        if record.footer is not None:
            segments.append(_segment(record.footer, stylesheet.footer))
    segments.append(_NEWLINE)
    return segments


def render_report(
    resolved: Sequence[tuple[AnnotationRecord, ResolvedLocation]],
    *,
    filename: str,
    stylesheet: Stylesheet,
) -> list[Segment]:
    """Return the segments for every block, preceded and separated by blank lines.

    Args:
        resolved: Records paired with their already resolved locations.
        filename: File name displayed on each location line.
        stylesheet: Styles applied to each block.

    Returns:
        list[Segment]: Segments of the full report; empty when ``resolved`` is.
    """

    width = gutter_width(location for _, location in resolved)
    segments: list[Segment] = []
    for record, location in resolved:
        segments.append(_NEWLINE)
        segments.extend(
            render_block(record, location, filename=filename, width=width, stylesheet=stylesheet),
        )
    return segments


def segments_to_plain(segments: Iterable[Segment]) -> str:
    """Join segment text, dropping every style."""

    return "".join(segment.text for segment in segments)


def segments_to_ansi(
    segments: Iterable[Segment],
    *,
    color_system: ColorSystem = ColorSystem.TRUECOLOR,
) -> str:
    """Join segment text wrapped in ANSI escape sequences for its style."""

    return "".join(
        segment.style.render(segment.text, color_system=color_system) if segment.style else segment.text
        for segment in segments
    )


__all__ = [
    "GUTTER_BAR",
    "LOCATION_ARROW",
    "gutter_width",
    "marker_text",
    "render_block",
    "render_report",
    "segments_to_ansi",
    "segments_to_plain",
]
