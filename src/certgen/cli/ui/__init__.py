#!/usr/bin/env python3
from __future__ import annotations

from collections.abc import Sequence
from contextlib import contextmanager

from rich import box
from rich.live import Live
from rich.spinner import Spinner
from rich.table import Table
from rich.text import Text

from .state import UIContext, get_context

DEFAULT_CONTEXT = get_context()
console = DEFAULT_CONTEXT.console
console_err = DEFAULT_CONTEXT.console_err


def _resolve_context(context: UIContext | None) -> UIContext:
    return context or DEFAULT_CONTEXT


def configure_ui(
    *,
    no_color: bool,
    no_animations: bool,
    context: UIContext | None = None,
) -> None:
    context = _resolve_context(context)
    context.animations_enabled = not no_animations
    context.console.no_color = no_color
    context.console_err.no_color = no_color


@contextmanager
def status(message: str, *, quiet: bool, context: UIContext | None = None):
    context = _resolve_context(context)
    if quiet:
        yield None
        return
    if not context.animations_enabled or not context.console.is_terminal:
        yield None
        return
    spinner = Spinner("dots", text=Text(message, style="status"))
    with Live(spinner, console=context.console, transient=True, refresh_per_second=12) as live:
        yield live


def build_kv_table(rows: Sequence[tuple[str, str]], *, title: str | None = None) -> Table:
    table = Table(title=title, show_header=False, box=box.SIMPLE, show_lines=False)
    table.add_column("Field", style="field", no_wrap=True)
    table.add_column("Value")
    for key, value in rows:
        table.add_row(str(key), str(value))
    return table


__all__ = [
    "build_kv_table",
    "configure_ui",
    "console",
    "console_err",
    "status",
]
