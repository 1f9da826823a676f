# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for annotation records, byte ranges and severities."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from snipdiag.errors import RangeOutOfBounds
from snipdiag.models import AnnotationRecord, ByteRange, coerce_range
from snipdiag.severity import Severity


@pytest.mark.parametrize(
    "span",
    [ByteRange(4, 7), (4, 7), [4, 7], range(4, 7), slice(4, 7)],
)
def test_coerce_range_accepts_common_notations(span: object) -> None:
    assert coerce_range(span) == ByteRange(4, 7)  # type: ignore[arg-type]


def test_coerce_range_defaults_slice_start() -> None:
    assert coerce_range(slice(None, 3)) == ByteRange(0, 3)


@pytest.mark.parametrize("span", [range(0, 6, 2), slice(1, None), (1, 2, 3), "4..7"])
def test_coerce_range_rejects_unsupported_notations(span: object) -> None:
    with pytest.raises(TypeError):
        coerce_range(span)  # type: ignore[arg-type]


@pytest.mark.parametrize("span", [(1.9, 3.7), (True, 3), (0, "3"), slice(0.5, 2), ByteRange(1.0, 2)])  # type: ignore[arg-type]
def test_coerce_range_rejects_non_integer_offsets(span: object) -> None:
    with pytest.raises(TypeError, match="must be an integer"):
        coerce_range(span)  # type: ignore[arg-type]


def test_byte_range_point() -> None:
    assert ByteRange(3, 3).is_point
    assert not ByteRange(3, 4).is_point


def test_record_helpers_match_create() -> None:
    created = AnnotationRecord.create(Severity.WARNING, (13, 17), "test2", "ann2")
    assert AnnotationRecord.warning(range(13, 17), "test2", "ann2") == created
    assert created.span == ByteRange(13, 17)
    assert AnnotationRecord.error((0, 0), "boom").severity is Severity.ERROR
    assert AnnotationRecord.info((0, 0), "fyi").footer is None


def test_record_create_rejects_reversed_range() -> None:
    with pytest.raises(RangeOutOfBounds) as excinfo:
        AnnotationRecord.info((10, 9), "test", "ann")
    assert (excinfo.value.start, excinfo.value.end) == (10, 9)


def test_record_is_immutable() -> None:
    record = AnnotationRecord.error((0, 1), "header")
    with pytest.raises(ValidationError):
        record.header = "changed"  # type: ignore[misc]


def test_record_requires_header() -> None:
    with pytest.raises(ValidationError):
        AnnotationRecord.error((0, 1), "")


def test_record_validates_plain_payloads() -> None:
    record = AnnotationRecord.model_validate(
        {"severity": "warning", "start": 1, "end": 2, "header": "h", "footer": "f"},
    )
    assert record.severity is Severity.WARNING
    with pytest.raises(ValidationError):
        AnnotationRecord.model_validate({"severity": "error", "start": 5, "end": 2, "header": "h"})
    with pytest.raises(ValidationError):
        AnnotationRecord.model_validate({"severity": "fatal", "start": 0, "end": 0, "header": "h"})


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("error", Severity.ERROR),
        ("ERR", Severity.ERROR),
        (" Warning ", Severity.WARNING),
        ("warn", Severity.WARNING),
        ("info", Severity.INFO),
        ("note", Severity.INFO),
    ],
)
def test_severity_from_name(name: str, expected: Severity) -> None:
    assert Severity.from_name(name) is expected


def test_severity_from_name_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="unknown severity"):
        Severity.from_name("fatal")


def test_severity_labels() -> None:
    assert [severity.label for severity in Severity] == ["error", "warning", "info"]
