# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line interface rendering annotations against files."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated, Final

import typer
from pydantic import TypeAdapter, ValidationError

from .annotations import AnnotationList
from .config import ColorMode, ConfigError, color_mode_from_env, load_stylesheet, resolve_color
from .errors import AnnotationError
from .logging import colorize, fail, info, ok, warn
from .models import AnnotationRecord, ByteRange
from .severity import Severity
from .stylesheet import Stylesheet

SPAN_SEPARATOR: Final[str] = ":"
EXIT_INVALID_ANNOTATION: Final[int] = 1
EXIT_UNREADABLE_INPUT: Final[int] = 2

_RECORDS_ADAPTER: Final[TypeAdapter[list[AnnotationRecord]]] = TypeAdapter(list[AnnotationRecord])

app = typer.Typer(
    name="snipdiag",
    help="Render single-line source diagnostics in a compiler-like format.",
    no_args_is_help=True,
    add_completion=False,
)

SourceArg = Annotated[
    Path,
    typer.Argument(exists=True, dir_okay=False, readable=True, help="Source file to annotate."),
]
AnnotationsArg = Annotated[
    Path,
    typer.Argument(
        exists=True,
        dir_okay=False,
        readable=True,
        help="JSON array of {severity, start, end, header, footer} objects.",
    ),
]
FilenameOpt = Annotated[
    str | None,
    typer.Option("--filename", help="Name shown on location lines (defaults to PATH)."),
]
ColorOpt = Annotated[
    ColorMode | None,
    typer.Option("--color", case_sensitive=False, help="Colour output: auto, always or never."),
]
StylesheetOpt = Annotated[
    Path | None,
    typer.Option("--stylesheet", dir_okay=False, help="TOML stylesheet (or pyproject.toml) to load."),
]
StderrOpt = Annotated[bool, typer.Option("--stderr", help="Write the report to stderr.")]
EmojiOpt = Annotated[bool, typer.Option("--emoji", help="Prefix status messages with emoji.")]


def parse_span(value: str) -> ByteRange:
    """Parse ``START:END`` (or a bare ``START`` point) into a byte range.

    Raises:
        typer.BadParameter: If ``value`` is not a pair of integers.
    """

    start_text, separator, end_text = value.partition(SPAN_SEPARATOR)
    try:
        start = int(start_text)
        end = int(end_text) if separator else start
    except ValueError as exc:
        raise typer.BadParameter(f"expected START:END byte offsets, got '{value}'") from exc
    return ByteRange(start, end)


def _read_source(path: Path, *, use_emoji: bool) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        fail(f"unable to read {path}: {exc}", use_emoji=use_emoji)
        raise typer.Exit(code=EXIT_UNREADABLE_INPUT) from exc


def _load_records(path: Path, *, use_emoji: bool) -> list[AnnotationRecord]:
    try:
        records = _RECORDS_ADAPTER.validate_json(path.read_bytes())
    except ValidationError as exc:
        fail(f"invalid annotations in {path}: {exc}", use_emoji=use_emoji)
        raise typer.Exit(code=EXIT_INVALID_ANNOTATION) from exc
    if not records:
        warn(f"no annotations listed in {path}", use_emoji=use_emoji)
    return records


def _color_mode(color: ColorMode | None) -> ColorMode:
    return color if color is not None else color_mode_from_env()


def _emit(
    notes: AnnotationList,
    *,
    color: ColorMode | None,
    stylesheet_path: Path | None,
    to_stderr: bool,
) -> None:
    mode = _color_mode(color)
    stylesheet = load_stylesheet(stylesheet_path) if stylesheet_path else Stylesheet.colored()
    stream = sys.stderr if to_stderr else sys.stdout
    notes.write(stream, stylesheet, color=resolve_color(mode, stream))


@app.command("show")
def show(
    path: SourceArg,
    span: Annotated[str, typer.Option("--span", "-s", help="Byte range START:END, or START for a point.")],
    header: Annotated[str, typer.Option("--header", "-m", help="Message shown after the severity label.")],
    severity: Annotated[
        Severity,
        typer.Option("--severity", case_sensitive=False, help="Severity of the annotation."),
    ] = Severity.ERROR,
    footer: Annotated[str | None, typer.Option("--footer", help="Text shown next to the marker.")] = None,
    filename: FilenameOpt = None,
    color: ColorOpt = None,
    stylesheet: StylesheetOpt = None,
    stderr: StderrOpt = False,
    use_emoji: EmojiOpt = False,
) -> None:
    """Render a single annotation against PATH."""

    notes = AnnotationList(filename or str(path), _read_source(path, use_emoji=use_emoji))
    try:
        notes.append(severity, parse_span(span), header, footer)
        _emit(notes, color=color, stylesheet_path=stylesheet, to_stderr=stderr)
    except (AnnotationError, ConfigError, ValidationError) as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=EXIT_INVALID_ANNOTATION) from exc


@app.command("report")
def report(
    path: SourceArg,
    annotations_file: AnnotationsArg,
    filename: FilenameOpt = None,
    color: ColorOpt = None,
    stylesheet: StylesheetOpt = None,
    stderr: StderrOpt = False,
    use_emoji: EmojiOpt = False,
) -> None:
    """Render every annotation listed in a JSON document against PATH."""

    notes = AnnotationList(filename or str(path), _read_source(path, use_emoji=use_emoji))
    records = _load_records(annotations_file, use_emoji=use_emoji)
    try:
        for record in records:
            notes.add(record)
        _emit(notes, color=color, stylesheet_path=stylesheet, to_stderr=stderr)
    except (AnnotationError, ConfigError) as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=EXIT_INVALID_ANNOTATION) from exc


@app.command("check")
def check(
    path: SourceArg,
    annotations_file: AnnotationsArg,
    filename: FilenameOpt = None,
    color: ColorOpt = None,
    use_emoji: EmojiOpt = False,
) -> None:
    """Validate annotations against PATH and list where each one lands."""

    name = filename or str(path)
    notes = AnnotationList(name, _read_source(path, use_emoji=use_emoji))
    records = _load_records(annotations_file, use_emoji=use_emoji)
    try:
        for record in records:
            notes.add(record)
        resolved = notes.resolve()
    except AnnotationError as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=EXIT_INVALID_ANNOTATION) from exc

    enabled = resolve_color(_color_mode(color), sys.stdout)
    styles = Stylesheet.colored()
    for record, location in resolved:
        label = colorize(styles.label(record.severity), styles.by_severity(record.severity), enabled)
        typer.echo(f"{name}:{location.line_number}:{location.column + 1}: {label}: {record.header}")
    if records:
        ok(f"{len(records)} annotation(s) fit {name}", use_emoji=use_emoji)
    else:
        info(f"nothing to check in {name}", use_emoji=use_emoji)


def main() -> None:
    """Console script entry point."""

    app()


__all__ = ["app", "main", "parse_span"]
