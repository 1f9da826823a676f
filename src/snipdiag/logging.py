# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

from typing import IO

from rich.color import ColorSystem
from rich.errors import StyleSyntaxError
from rich.style import Style
from rich.text import Text

from .console import StreamName, detect_tty, get_console_manager


def colorize(text: str, style: str, enable: bool, *, stream: IO[str] | None = None) -> str:
    """Wrap ``text`` in the ANSI sequence for ``style`` when colouring is enabled.

    Args:
        text: Message text that may be colourised.
        style: Rich style definition such as ``"bold red"``.
        enable: Flag indicating whether colour output is requested.
        stream: Stream the text is destined for; stdout when ``None``.

    Returns:
        str: Colourised text when colouring is enabled and the stream is a
        terminal; otherwise the original text.
    """

    if not enable or not detect_tty(stream):
        return text
    try:
        parsed = Style.parse(style)
    except StyleSyntaxError:
        return text
    return parsed.render(text, color_system=ColorSystem.TRUECOLOR)


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_color: bool | None,
    stream: StreamName,
) -> None:
    """Render ``msg`` through the shared console manager."""

    console = get_console_manager().get(stream=stream, color=use_color)
    text = Text(msg)
    if style and console.color_system is not None:
        text.stylize(style)
    console.print(text)


def info(msg: str, *, use_emoji: bool = False, use_color: bool | None = None) -> None:
    """Emit an informational message to stderr."""

    _print_line(f"{emoji('ℹ️ ', use_emoji)}{msg}", style="cyan", use_color=use_color, stream="stderr")


def ok(msg: str, *, use_emoji: bool = False, use_color: bool | None = None) -> None:
    """Emit a success message to stderr."""

    _print_line(f"{emoji('✅ ', use_emoji)}{msg}", style="green", use_color=use_color, stream="stderr")


def warn(msg: str, *, use_emoji: bool = False, use_color: bool | None = None) -> None:
    """Emit a warning message to stderr."""

    _print_line(f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow", use_color=use_color, stream="stderr")


def fail(msg: str, *, use_emoji: bool = False, use_color: bool | None = None) -> None:
    """Emit an error message to stderr."""

    _print_line(f"{emoji('❌ ', use_emoji)}{msg}", style="red", use_color=use_color, stream="stderr")


__all__ = ["colorize", "emoji", "fail", "info", "ok", "warn"]
