# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels an annotation can carry."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def label(self) -> str:
        """Return the default display label used in block headers."""

        return self.value

    @classmethod
    def from_name(cls, name: str) -> Severity:
        """Parse ``name`` case-insensitively, accepting common aliases.

        Args:
            name: Severity name such as ``"error"``, ``"WARN"`` or ``"note"``.

        Returns:
            Severity: Matching severity member.

        Raises:
            ValueError: If ``name`` does not identify a severity.
        """

        key = name.strip().lower()
        resolved = _SEVERITY_ALIASES.get(key)
        if resolved is None:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"unknown severity '{name}' (expected one of: {choices})")
        return resolved


_SEVERITY_ALIASES: Final[dict[str, Severity]] = {
    "error": Severity.ERROR,
    "err": Severity.ERROR,
    "warning": Severity.WARNING,
    "warn": Severity.WARNING,
    "info": Severity.INFO,
    "note": Severity.INFO,
}


__all__ = ["Severity"]
