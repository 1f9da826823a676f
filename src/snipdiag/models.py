# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models describing annotated byte ranges."""

from __future__ import annotations

import operator
from typing import NamedTuple, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import RangeOutOfBounds
from .severity import Severity


class ByteRange(NamedTuple):
    """Half-open ``[start, end)`` interval of UTF-8 byte offsets."""

    start: int
    end: int

    @property
    def is_point(self) -> bool:
        """Return ``True`` when the range is empty and marks a single position."""

        return self.start == self.end


SpanLike: TypeAlias = ByteRange | tuple[int, int] | range | slice


def _offset(value: object) -> int:
    if isinstance(value, bool):
        raise TypeError(f"byte offset must be an integer, got {value!r}")
    try:
        return operator.index(value)  # type: ignore[arg-type]
    except TypeError as exc:
        raise TypeError(f"byte offset must be an integer, got {value!r}") from exc


def coerce_range(span: SpanLike) -> ByteRange:
    """Normalise the range notations accepted by the public API.

    Args:
        span: A :class:`ByteRange`, ``(start, end)`` pair, step-1 ``range`` or
            ``slice`` with an explicit stop.

    Returns:
        ByteRange: Equivalent byte range.

    Raises:
        TypeError: If ``span`` is not one of the supported notations or an
            offset is not an integer.
    """

    if isinstance(span, ByteRange):
        return ByteRange(_offset(span.start), _offset(span.end))
    if isinstance(span, range):
        if span.step != 1:
            raise TypeError(f"range step must be 1, got {span.step}")
        return ByteRange(span.start, span.stop)
    if isinstance(span, slice):
        if span.step not in (None, 1) or span.stop is None:
            raise TypeError(f"slice must have an explicit stop and step 1, got {span!r}")
        return ByteRange(_offset(span.start or 0), _offset(span.stop))
    if isinstance(span, (tuple, list)) and len(span) == 2:
        start, end = span
        return ByteRange(_offset(start), _offset(end))
    raise TypeError(f"unsupported range notation: {span!r}")


class AnnotationRecord(BaseModel):
    """A single diagnostic attached to a byte range of the source text."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    start: int = Field(ge=0)
    end: int = Field(ge=0)
    header: str = Field(min_length=1)
    footer: str | None = None

    @model_validator(mode="after")
    def _check_order(self) -> AnnotationRecord:
        """Reject reversed ranges supplied through plain model validation."""
        if self.start > self.end:
            raise ValueError(f"range {self.start}..{self.end} is invalid: {self.end} < {self.start}")
        return self

    @property
    def span(self) -> ByteRange:
        """Return the annotated range as a :class:`ByteRange`."""
        return ByteRange(self.start, self.end)

    @classmethod
    def create(
        cls,
        severity: Severity,
        span: SpanLike,
        header: str,
        footer: str | None = None,
    ) -> AnnotationRecord:
        """Build a record, raising :class:`RangeOutOfBounds` for reversed ranges.

        Args:
            severity: Severity shown in the block header.
            span: Annotated byte range in any notation accepted by :func:`coerce_range`.
            header: Message displayed after the severity label.
            footer: Optional text displayed next to the marker glyphs.

        Returns:
            AnnotationRecord: Validated, immutable record.
        """

        start, end = coerce_range(span)
        if start < 0:
            raise RangeOutOfBounds(start, end, "starts before the source text")
        if start > end:
            raise RangeOutOfBounds(start, end, f"is invalid: {end} < {start}")
        return cls(severity=severity, start=start, end=end, header=header, footer=footer)

    @classmethod
    def error(cls, span: SpanLike, header: str, footer: str | None = None) -> AnnotationRecord:
        """Create a :attr:`Severity.ERROR` record."""
        return cls.create(Severity.ERROR, span, header, footer)

    @classmethod
    def warning(cls, span: SpanLike, header: str, footer: str | None = None) -> AnnotationRecord:
        """Create a :attr:`Severity.WARNING` record."""
        return cls.create(Severity.WARNING, span, header, footer)

    @classmethod
    def info(cls, span: SpanLike, header: str, footer: str | None = None) -> AnnotationRecord:
        """Create a :attr:`Severity.INFO` record."""
        return cls.create(Severity.INFO, span, header, footer)


__all__ = ["AnnotationRecord", "ByteRange", "SpanLike", "coerce_range"]
