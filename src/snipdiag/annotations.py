# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Annotation lists bound to a single source text."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import IO

from rich.segment import Segment, Segments
from rich.text import Text

from .console import StreamName, build_console, detect_tty, get_console_manager
from .locator import ResolvedLocation, check_bounds, encode_source, locate
from .models import AnnotationRecord, SpanLike
from .render import render_report, segments_to_ansi, segments_to_plain
from .severity import Severity
from .stylesheet import Stylesheet

LOGGER = logging.getLogger(__name__)


class AnnotationList:
    """Ordered annotations applied to one source text.

    ``filename`` is only used to format location lines, so the file does not
    need to exist. Records render in insertion order.

    Args:
        filename: Name shown on every location line.
        source: Annotated text, or its UTF-8 encoding.
    """

    def __init__(self, filename: str, source: str | bytes) -> None:
        self._filename = str(filename)
        self._source = source.decode("utf-8") if isinstance(source, bytes) else source
        self._data = encode_source(self._source)
        self._records: list[AnnotationRecord] = []

    @property
    def filename(self) -> str:
        """Return the file name shown on location lines."""
        return self._filename

    @property
    def source(self) -> str:
        """Return the annotated source text."""
        return self._source

    @property
    def records(self) -> tuple[AnnotationRecord, ...]:
        """Return the records in rendering order."""
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[AnnotationRecord]:
        return iter(tuple(self._records))

    def __repr__(self) -> str:
        return f"AnnotationList(filename={self._filename!r}, records={len(self._records)})"

    # Mutation ----------------------------------------------------------------

    def add(self, record: AnnotationRecord) -> AnnotationList:
        """Append ``record`` after checking its range against the source text.

        Args:
            record: Record to append.

        Returns:
            AnnotationList: ``self`` to allow chaining.

        Raises:
            RangeOutOfBounds: If the range extends past the source text or
                splits a multi-byte character. The list is left unchanged.
        """

        check_bounds(self._data, record.span)
        self._records.append(record)
        LOGGER.debug(
            "added %s annotation %d..%d to %s",
            record.severity.value,
            record.start,
            record.end,
            self._filename,
        )
        return self

    def append(
        self,
        severity: Severity,
        span: SpanLike,
        header: str,
        footer: str | None = None,
    ) -> AnnotationList:
        """Create a record from the arguments and :meth:`add` it."""

        return self.add(AnnotationRecord.create(severity, span, header, footer))

    def error(self, span: SpanLike, header: str, footer: str | None = None) -> AnnotationList:
        """Append a :attr:`Severity.ERROR` annotation."""
        return self.append(Severity.ERROR, span, header, footer)

    def warning(self, span: SpanLike, header: str, footer: str | None = None) -> AnnotationList:
        """Append a :attr:`Severity.WARNING` annotation."""
        return self.append(Severity.WARNING, span, header, footer)

    def info(self, span: SpanLike, header: str, footer: str | None = None) -> AnnotationList:
        """Append a :attr:`Severity.INFO` annotation."""
        return self.append(Severity.INFO, span, header, footer)

    def clear(self) -> None:
        """Drop every record."""

        LOGGER.debug("cleared %d annotation(s) from %s", len(self._records), self._filename)
        self._records.clear()

    # Rendering ---------------------------------------------------------------

    def resolve(self) -> list[tuple[AnnotationRecord, ResolvedLocation]]:
        """Resolve every record before anything is composed.

        Raises:
            MultilineRangeNotSupported: If any record crosses a line boundary.
        """

        return [(record, locate(self._data, record.span)) for record in self._records]

    def render_segments(self, stylesheet: Stylesheet | None = None) -> list[Segment]:
        """Return the styled segments of the full report.

        Args:
            stylesheet: Styles to apply; monochrome when omitted.

        Returns:
            list[Segment]: Report segments, empty when the list has no records.

        Raises:
            MultilineRangeNotSupported: If any record crosses a line boundary;
                no segments are produced in that case.
        """

        resolved = self.resolve()
        LOGGER.debug("rendering %d annotation(s) for %s", len(resolved), self._filename)
        return render_report(
            resolved,
            filename=self._filename,
            stylesheet=Stylesheet.monochrome() if stylesheet is None else stylesheet,
        )

    def render_text(self, stylesheet: Stylesheet | None = None) -> Text:
        """Return the report as a Rich :class:`~rich.text.Text`, monochrome by default."""

        text = Text(end="")
        for segment in self.render_segments(stylesheet):
            text.append(segment.text, segment.style)
        return text

    def render_to_string(self, stylesheet: Stylesheet | None = None) -> str:
        """Render the report as text.

        The result is plain text for a monochrome stylesheet (the default) and
        carries ANSI escape sequences when ``stylesheet`` defines styles.
        """

        segments = self.render_segments(stylesheet)
        if stylesheet is None or stylesheet.is_plain:
            return segments_to_plain(segments)
        return segments_to_ansi(segments)

    def to_ansi_string(self, stylesheet: Stylesheet | None = None) -> str:
        """Render the report with ANSI escape sequences, coloured by default."""

        return segments_to_ansi(self.render_segments(stylesheet or Stylesheet.colored()))

    def to_bytes(self) -> bytes:
        """Render the monochrome report encoded as UTF-8."""

        return self.render_to_string().encode("utf-8")

    def to_ansi_bytes(self, stylesheet: Stylesheet | None = None) -> bytes:
        """Render the ANSI report, coloured by default, encoded as UTF-8."""

        return self.to_ansi_string(stylesheet).encode("utf-8")

    def write(
        self,
        stream: IO[str],
        stylesheet: Stylesheet | None = None,
        *,
        color: bool | None = None,
    ) -> None:
        """Write the report to ``stream``.

        Args:
            stream: Text stream receiving the report.
            stylesheet: Styles to apply; coloured when omitted.
            color: Explicit colour flag; ``None`` colours only when ``stream``
                is a TTY.
        """

        segments = self.render_segments(stylesheet or Stylesheet.colored())
        enabled = detect_tty(stream) if color is None else color
        build_console(file=stream, color=enabled).print(Segments(segments), end="", crop=False)

    def _write_standard(self, name: StreamName, stylesheet: Stylesheet | None) -> None:
        segments = self.render_segments(stylesheet or Stylesheet.colored())
        console = get_console_manager().get(stream=name)
        console.print(Segments(segments), end="", crop=False)

    def write_stdout(self, stylesheet: Stylesheet | None = None) -> None:
        """Print the report to stdout, coloured only when stdout is a TTY."""

        self._write_standard("stdout", stylesheet)

    def write_stderr(self, stylesheet: Stylesheet | None = None) -> None:
        """Print the report to stderr, coloured only when stderr is a TTY."""

        self._write_standard("stderr", stylesheet)


__all__ = ["AnnotationList"]
