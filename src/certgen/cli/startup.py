#!/usr/bin/env python3
from __future__ import annotations

from rich.traceback import install as install_rich_traceback

from ..config import init_user_config
from .ui import configure_ui, console


def run_startup(
    *,
    quiet: bool,
    no_color: bool,
    no_animations: bool,
    debug: bool,
    init_config: bool,
) -> bool:
    configure_ui(no_color=no_color, no_animations=no_animations)
    if debug:
        install_rich_traceback(show_locals=True)
    if init_config:
        config_path = init_user_config()
        if not quiet:
            console.print(f"User config ready at {config_path}", markup=False, soft_wrap=True)
        return True
    return False
