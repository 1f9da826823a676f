# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Stylesheet and colour configuration loading."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import IO, Any, Final

from pydantic import ValidationError

from .console import detect_tty
from .severity import Severity
from .stylesheet import Stylesheet

COLOR_ENV_VAR: Final[str] = "SNIPDIAG_COLOR"
BASE_KEY: Final[str] = "base"
LABELS_KEY: Final[str] = "labels"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION: Final[tuple[str, ...]] = ("tool", "snipdiag", "stylesheet")


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class ColorMode(str, Enum):
    """When rendered output should carry ANSI colour."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


_BASE_STYLESHEETS: Final[dict[str, Stylesheet]] = {
    "monochrome": Stylesheet.monochrome(),
    "colored": Stylesheet.colored(),
}


def color_mode_from_env(
    env: Mapping[str, str] | None = None,
    *,
    default: ColorMode = ColorMode.AUTO,
) -> ColorMode:
    """Return the colour mode requested through :data:`COLOR_ENV_VAR`.

    Raises:
        ConfigError: If the variable holds an unknown mode.
    """

    source = os.environ if env is None else env
    raw = source.get(COLOR_ENV_VAR, "").strip().lower()
    if not raw:
        return default
    try:
        return ColorMode(raw)
    except ValueError as exc:
        choices = ", ".join(mode.value for mode in ColorMode)
        raise ConfigError(f"{COLOR_ENV_VAR}={raw!r} is not one of: {choices}") from exc


def resolve_color(mode: ColorMode, stream: IO[str] | None = None) -> bool:
    """Return ``True`` when output to ``stream`` should be coloured under ``mode``."""

    if mode is ColorMode.ALWAYS:
        return True
    if mode is ColorMode.NEVER:
        return False
    return detect_tty(stream)


def stylesheet_from_mapping(mapping: Mapping[str, Any], *, source: str = "<mapping>") -> Stylesheet:
    """Build a stylesheet from a configuration table.

    The table may name a ``base`` stylesheet (``"monochrome"`` or
    ``"colored"``) whose styles the remaining keys override. Label overrides
    live in a ``labels`` sub-table keyed by severity name.

    Args:
        mapping: Parsed configuration table.
        source: Description of the origin used in error messages.

    Returns:
        Stylesheet: Validated stylesheet.

    Raises:
        ConfigError: If the base, a label or a style is invalid.
    """

    payload = dict(mapping)
    base_name = str(payload.pop(BASE_KEY, "monochrome")).strip().lower()
    base = _BASE_STYLESHEETS.get(base_name)
    if base is None:
        choices = ", ".join(sorted(_BASE_STYLESHEETS))
        raise ConfigError(f"{source}: unknown base stylesheet '{base_name}' (expected one of: {choices})")

    raw_labels = payload.pop(LABELS_KEY, {})
    if not isinstance(raw_labels, Mapping):
        raise ConfigError(f"{source}: '{LABELS_KEY}' must be a table")
    labels = dict(base.labels)
    for name, label in raw_labels.items():
        try:
            labels[Severity.from_name(str(name))] = str(label)
        except ValueError as exc:
            raise ConfigError(f"{source}: {exc}") from exc

    merged = base.model_dump()
    merged.update(payload)
    merged[LABELS_KEY] = labels
    try:
        return Stylesheet.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"{source}: invalid stylesheet: {exc}") from exc


def _select_table(document: Mapping[str, Any], path: Path) -> Mapping[str, Any]:
    if path.name != PYPROJECT_FILENAME:
        return document
    table: Any = document
    for key in PYPROJECT_SECTION:
        if not isinstance(table, Mapping) or key not in table:
            raise ConfigError(f"{path}: missing [{'.'.join(PYPROJECT_SECTION)}] table")
        table = table[key]
    if not isinstance(table, Mapping):
        raise ConfigError(f"{path}: [{'.'.join(PYPROJECT_SECTION)}] must be a table")
    return table


def load_stylesheet(path: Path) -> Stylesheet:
    """Load a stylesheet from a TOML file.

    A ``pyproject.toml`` is read from its ``[tool.snipdiag.stylesheet]`` table;
    any other file is treated as a stylesheet table in its entirety.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """

    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"unable to read stylesheet {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML in {path}: {exc}") from exc
    return stylesheet_from_mapping(_select_table(document, path), source=str(path))


__all__ = [
    "COLOR_ENV_VAR",
    "ColorMode",
    "ConfigError",
    "color_mode_from_env",
    "load_stylesheet",
    "resolve_color",
    "stylesheet_from_mapping",
]
