# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exceptions raised while building or rendering annotation lists."""

from __future__ import annotations


class AnnotationError(ValueError):
    """Base class for annotation contract violations.

    Args:
        start: Start byte offset of the offending range.
        end: End byte offset of the offending range.
        reason: Human-readable description of the violation.
    """

    def __init__(self, start: int, end: int, reason: str) -> None:
        super().__init__(f"range {start}..{end} {reason}")
        self.start = start
        self.end = end
        self.reason = reason


class RangeOutOfBounds(AnnotationError):
    """Raised when a range is reversed, exceeds the source or splits a character."""


class MultilineRangeNotSupported(AnnotationError):
    """Raised at render time when a range crosses a line boundary."""

    def __init__(self, start: int, end: int) -> None:
        super().__init__(start, end, "crosses line boundary")


__all__ = ["AnnotationError", "MultilineRangeNotSupported", "RangeOutOfBounds"]
