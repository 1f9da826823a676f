# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console management utilities."""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import IO, Literal

from rich.console import Console

StreamName = Literal["stdout", "stderr"]


def detect_tty(stream: IO[str] | None = None) -> bool:
    """Return ``True`` when ``stream`` (stdout by default) is backed by a terminal.

    Args:
        stream: Stream to probe; ``None`` probes :data:`sys.stdout`.

    Returns:
        bool: ``True`` when the stream reports TTY support, ``False`` otherwise.
    """

    target = sys.stdout if stream is None else stream
    try:
        return target.isatty()
    except (AttributeError, ValueError):
        return False


def _stream_for(name: StreamName) -> IO[str]:
    return sys.stderr if name == "stderr" else sys.stdout


def build_console(*, file: IO[str] | None = None, stderr: bool = False, color: bool) -> Console:
    """Return a console that prints rendered blocks verbatim.

    Wrapping, highlighting, markup and emoji substitution are disabled so the
    console never alters the composed text; only styles are applied, and only
    when ``color`` is set. Rich's ``NO_COLOR`` handling still strips colours
    from a coloured console.

    Args:
        file: Explicit target stream; ``None`` follows the current stdout/stderr.
        stderr: Target stderr instead of stdout when ``file`` is ``None``.
        color: ``True`` to emit ANSI styles.

    Returns:
        Console: Configured Rich console.
    """

    target = file if file is not None else _stream_for("stderr" if stderr else "stdout")
    color_system: Literal["auto", "truecolor"] | None = None
    if color:
        color_system = "auto" if detect_tty(target) else "truecolor"
    return Console(
        file=file,
        stderr=stderr,
        color_system=color_system,
        force_terminal=color,
        no_color=None if color else True,
        soft_wrap=True,
        highlight=False,
        markup=False,
        emoji=False,
    )


class RichConsoleManager:
    """Provision Rich :class:`Console` instances keyed by stream and colour settings."""

    def __init__(self) -> None:
        """Initialise the manager with an in-memory cache keyed by presentation flags."""

        self._cache: dict[tuple[StreamName, bool, bool], Console] = {}

    def get(self, *, stream: StreamName = "stdout", color: bool | None = None) -> Console:
        """Return a console for ``stream`` honouring the ``color`` preference.

        Args:
            stream: Standard stream the console writes to.
            color: Explicit colour flag; ``None`` enables colour only on a TTY.

        Returns:
            Console: Cached or newly constructed console matching the preferences.
        """

        tty = detect_tty(_stream_for(stream))
        enabled = tty if color is None else color
        key = (stream, enabled, tty)
        if key not in self._cache:
            self._cache[key] = build_console(stderr=stream == "stderr", color=enabled)
        return self._cache[key]


@lru_cache(maxsize=1)
def get_console_manager() -> RichConsoleManager:
    """Return a cached :class:`RichConsoleManager` instance.

    Returns:
        RichConsoleManager: Singleton console manager bound to the process.
    """

    return RichConsoleManager()


__all__ = [
    "RichConsoleManager",
    "StreamName",
    "build_console",
    "detect_tty",
    "get_console_manager",
]
