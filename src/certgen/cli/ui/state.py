#!/usr/bin/env python3
from __future__ import annotations

import sys
from dataclasses import dataclass, field

from rich.console import Console
from rich.theme import Theme

# Styles referenced by name from the status spinner and the settings table.
THEME = Theme(
    {
        "status": "dim",
        "field": "bold",
    }
)


def _stream_is_tty(stderr: bool) -> bool:
    stream = sys.__stderr__ if stderr else sys.__stdout__
    if stream is None:
        stream = sys.stderr if stderr else sys.stdout
    try:
        return bool(stream.isatty())
    except (OSError, ValueError, AttributeError):
        return False


def _build_console(*, stderr: bool) -> Console:
    return Console(stderr=stderr, theme=THEME, force_terminal=_stream_is_tty(stderr))


@dataclass
class UIContext:
    console: Console = field(default_factory=lambda: _build_console(stderr=False))
    console_err: Console = field(default_factory=lambda: _build_console(stderr=True))
    animations_enabled: bool = True


DEFAULT_CONTEXT = UIContext()


def get_context() -> UIContext:
    return DEFAULT_CONTEXT
