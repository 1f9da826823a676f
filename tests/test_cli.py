# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the snipdiag command line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from snipdiag.cli import app, parse_span
from snipdiag.models import ByteRange

runner = CliRunner()


@pytest.fixture
def hello_file(tmp_path: Path) -> Path:
    path = tmp_path / "hello.txt"
    path.write_text("Hello world!", encoding="utf-8")
    return path


def test_parse_span() -> None:
    assert parse_span("4:7") == ByteRange(4, 7)
    assert parse_span("3") == ByteRange(3, 3)
    with pytest.raises(typer.BadParameter):
        parse_span("a:b")


def test_show_renders_single_annotation(hello_file: Path) -> None:
    result = runner.invoke(
        app,
        [
            "show",
            str(hello_file),
            "--span",
            "4:7",
            "--severity",
            "warning",
            "--header",
            "punctuation problem",
            "--footer",
            "you probably forgot a comma",
            "--filename",
            "hello.txt",
            "--color",
            "never",
        ],
    )
    assert result.exit_code == 0, result.output
    assert result.stdout == (
        "\nwarning: punctuation problem\n"
        "  --> hello.txt:1:5\n"
        "   |\n"
        " 1 | Hello world!\n"
        "   |     ^^^ you probably forgot a comma\n"
    )


def test_show_reports_out_of_bounds_range(hello_file: Path) -> None:
    result = runner.invoke(
        app,
        ["show", str(hello_file), "--span", "4:70", "--header", "too far", "--color", "never"],
    )
    assert result.exit_code == 1
    assert "ends after the source text" in result.output


def test_show_honours_color_env(hello_file: Path) -> None:
    result = runner.invoke(
        app,
        ["show", str(hello_file), "--span", "0:5", "--header", "greeting"],
        env={"SNIPDIAG_COLOR": "always"},
    )
    assert result.exit_code == 0, result.output
    assert "\x1b[" in result.stdout


def test_show_uses_stylesheet_labels(hello_file: Path, tmp_path: Path) -> None:
    style = tmp_path / "style.toml"
    style.write_text('[labels]\nerror = "oops"\n', encoding="utf-8")
    result = runner.invoke(
        app,
        [
            "show",
            str(hello_file),
            "--span",
            "0",
            "--header",
            "start here",
            "--stylesheet",
            str(style),
            "--color",
            "always",
        ],
    )
    assert result.exit_code == 0, result.output
    assert result.stdout.startswith("\noops: start here\n")


def test_report_renders_json_annotations(hello_file: Path, tmp_path: Path) -> None:
    annotations = tmp_path / "notes.json"
    annotations.write_text(
        json.dumps(
            [
                {
                    "severity": "warning",
                    "start": 4,
                    "end": 7,
                    "header": "punctuation problem",
                    "footer": "you probably forgot a comma",
                },
                {"severity": "info", "start": 0, "end": 0, "header": "consider adding some translations"},
            ],
        ),
        encoding="utf-8",
    )
    result = runner.invoke(
        app,
        ["report", str(hello_file), str(annotations), "--filename", "hello.txt", "--color", "never"],
    )
    assert result.exit_code == 0, result.output
    assert result.stdout == (
        "\nwarning: punctuation problem\n"
        "  --> hello.txt:1:5\n"
        "   |\n"
        " 1 | Hello world!\n"
        "   |     ^^^ you probably forgot a comma\n"
        "\n"
        "info: consider adding some translations\n"
        "  --> hello.txt:1:1\n"
        "   |\n"
        " 1 | Hello world!\n"
        "   |\n"
    )


def test_report_rejects_invalid_json_records(hello_file: Path, tmp_path: Path) -> None:
    annotations = tmp_path / "notes.json"
    annotations.write_text(json.dumps([{"severity": "fatal", "start": 0, "end": 1, "header": "x"}]), encoding="utf-8")
    result = runner.invoke(app, ["report", str(hello_file), str(annotations)])
    assert result.exit_code == 1
    assert "invalid annotations" in result.output


def test_report_rejects_multiline_ranges(tmp_path: Path) -> None:
    source = tmp_path / "two.txt"
    source.write_text("one\ntwo\n", encoding="utf-8")
    annotations = tmp_path / "notes.json"
    annotations.write_text(json.dumps([{"severity": "error", "start": 1, "end": 6, "header": "x"}]), encoding="utf-8")
    result = runner.invoke(app, ["report", str(source), str(annotations), "--color", "never"])
    assert result.exit_code == 1
    assert "crosses line boundary" in result.output


def test_report_warns_when_no_annotations(hello_file: Path, tmp_path: Path) -> None:
    annotations = tmp_path / "notes.json"
    annotations.write_text("[]", encoding="utf-8")
    result = runner.invoke(app, ["report", str(hello_file), str(annotations), "--color", "never"])
    assert result.exit_code == 0
    assert "no annotations listed" in result.output


def test_check_lists_annotation_positions(hello_file: Path, tmp_path: Path) -> None:
    annotations = tmp_path / "notes.json"
    annotations.write_text(
        json.dumps(
            [
                {"severity": "warning", "start": 4, "end": 7, "header": "punctuation problem"},
                {"severity": "info", "start": 0, "end": 0, "header": "consider adding some translations"},
            ],
        ),
        encoding="utf-8",
    )
    result = runner.invoke(
        app,
        ["check", str(hello_file), str(annotations), "--filename", "hello.txt", "--color", "never"],
    )
    assert result.exit_code == 0, result.output
    assert "hello.txt:1:5: warning: punctuation problem\n" in result.stdout
    assert "hello.txt:1:1: info: consider adding some translations\n" in result.stdout
    assert "2 annotation(s) fit hello.txt" in result.output


def test_check_reports_out_of_bounds_records(hello_file: Path, tmp_path: Path) -> None:
    annotations = tmp_path / "notes.json"
    annotations.write_text(json.dumps([{"severity": "error", "start": 0, "end": 99, "header": "x"}]), encoding="utf-8")
    result = runner.invoke(app, ["check", str(hello_file), str(annotations), "--emoji"])
    assert result.exit_code == 1
    assert "❌ range 0..99 ends after the source text" in result.output


def test_check_with_no_annotations(hello_file: Path, tmp_path: Path) -> None:
    annotations = tmp_path / "notes.json"
    annotations.write_text("[]", encoding="utf-8")
    result = runner.invoke(app, ["check", str(hello_file), str(annotations), "--filename", "hello.txt"])
    assert result.exit_code == 0
    assert "nothing to check in hello.txt" in result.output


def test_emoji_prefixes_status_messages(hello_file: Path, tmp_path: Path) -> None:
    annotations = tmp_path / "notes.json"
    annotations.write_text("[]", encoding="utf-8")
    result = runner.invoke(app, ["report", str(hello_file), str(annotations), "--emoji", "--color", "never"])
    assert result.exit_code == 0
    assert "⚠️ no annotations listed" in result.output
