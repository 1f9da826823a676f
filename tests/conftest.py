# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from snipdiag import AnnotationList, Stylesheet

MANY_NEWLINES = "\nstring\nwith\nmany\n\nnewlines\n\n"


@pytest.fixture
def hello_notes() -> AnnotationList:
    """Return the canonical two-annotation ``hello.txt`` list."""
    notes = AnnotationList("hello.txt", "Hello world!")
    notes.warning(range(4, 7), "punctuation problem", "you probably forgot a comma").info(
        range(0, 0), "consider adding some translations"
    )
    return notes


@pytest.fixture
def many_newlines() -> AnnotationList:
    """Return an empty list over a source with blank and trailing lines."""
    return AnnotationList("test.txt", MANY_NEWLINES)


@pytest.fixture
def monochrome() -> Stylesheet:
    return Stylesheet.monochrome()
