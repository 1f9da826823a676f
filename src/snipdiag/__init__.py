# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render single-line source diagnostics as compiler-style text blocks.

Entry point is :class:`AnnotationList`. Create one for a file, add annotations
and render it with a :class:`Stylesheet`::

    notes = AnnotationList("hello.txt", "Hello world!")
    notes.warning(range(4, 7), "punctuation problem", "you probably forgot a comma")
    notes.info(range(0, 0), "consider adding some translations")
    print(notes.render_to_string(), end="")
"""

from __future__ import annotations

from importlib import metadata

from .annotations import AnnotationList
from .errors import AnnotationError, MultilineRangeNotSupported, RangeOutOfBounds
from .locator import ResolvedLocation, locate
from .marker import build_marker
from .models import AnnotationRecord, ByteRange, coerce_range
from .severity import Severity
from .stylesheet import Stylesheet

__all__ = [
    "AnnotationError",
    "AnnotationList",
    "AnnotationRecord",
    "ByteRange",
    "MultilineRangeNotSupported",
    "RangeOutOfBounds",
    "ResolvedLocation",
    "Severity",
    "Stylesheet",
    "__version__",
    "build_marker",
    "coerce_range",
    "locate",
]

try:
    __version__ = metadata.version("snipdiag")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
