# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Styles applied to rendered annotation blocks."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator
from rich.errors import StyleSyntaxError
from rich.style import Style

from .severity import Severity

STYLE_FIELDS: Final[tuple[str, ...]] = (
    "info",
    "warning",
    "error",
    "linenr",
    "filename",
    "content",
    "footer",
)


class Stylesheet(BaseModel):
    """Rich style definitions for severities and structural block elements.

    Every style is a Rich style string such as ``"bold red"``; an empty string
    leaves the element unstyled. The default instance carries no styles and is
    the stylesheet to use for non-terminal output.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    info: str = ""
    warning: str = ""
    error: str = ""
    linenr: str = ""
    filename: str = ""
    content: str = ""
    footer: str = ""
    labels: dict[Severity, str] = Field(default_factory=dict)

    @field_validator(*STYLE_FIELDS)
    @classmethod
    def _validate_style(cls, value: str) -> str:
        """Ensure each non-empty style string parses as a Rich style."""
        cleaned = value.strip()
        if cleaned:
            try:
                Style.parse(cleaned)
            except StyleSyntaxError as exc:
                raise ValueError(f"invalid style '{value}': {exc}") from exc
        return cleaned

    @field_validator("labels")
    @classmethod
    def _validate_labels(cls, value: dict[Severity, str]) -> dict[Severity, str]:
        """Reject blank severity labels."""
        for severity, label in value.items():
            if not label.strip():
                raise ValueError(f"label for '{severity.value}' must not be empty")
        return value

    @classmethod
    def monochrome(cls) -> Stylesheet:
        """Return a stylesheet without any styles set."""

        return cls()

    @classmethod
    def colored(cls) -> Stylesheet:
        """Return the default compiler-like coloured stylesheet."""

        return cls(
            info="bold",
            warning="bold yellow",
            error="bold red",
            linenr="bold blue",
            filename="bold",
        )

    @property
    def is_plain(self) -> bool:
        """Return ``True`` when no element carries a style."""

        return not any(getattr(self, name) for name in STYLE_FIELDS)

    def by_severity(self, severity: Severity) -> str:
        """Return the style string used for ``severity`` headers and markers."""

        return {
            Severity.INFO: self.info,
            Severity.WARNING: self.warning,
            Severity.ERROR: self.error,
        }[severity]

    def label(self, severity: Severity) -> str:
        """Return the display label for ``severity``."""

        return self.labels.get(severity, severity.label)


__all__ = ["STYLE_FIELDS", "Stylesheet"]
