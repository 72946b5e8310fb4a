#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    config as config_command,
    generate as generate_command,
)


def register(app: typer.Typer) -> None:
    generate_command.register(app)
    config_command.register(app)
