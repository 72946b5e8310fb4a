#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

from pathlib import Path

import typer

from ...config import init_user_config, load_render_config, resolve_config_path
from ...core.models import RenderConfig, TextFieldConfig
from ...qr.codec import parse_error_level
from ..core.common import _ctx_value, _run_cli
from ..ui import build_kv_table, console

_CONFIG_HELP = (
    "Show the resolved render settings.\n\n"
    "Values are layered: built-in defaults, the TOML config, the optional .env file,\n"
    "then the process environment.\n\n"
    "Examples:\n"
    "  certgen config\n"
    "  certgen config --print-path\n"
    "  certgen config --init\n"
    "  certgen config --env-file .env\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_CONFIG_HELP)(config)


def config(
    ctx: typer.Context,
    config: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Read this TOML config file (overrides the default).",
        rich_help_panel="Config",
    ),
    env_file: Path | None = typer.Option(
        None,
        "--env-file",
        help="Layer this .env file over the TOML config.",
        rich_help_panel="Config",
    ),
    print_path: bool = typer.Option(
        False,
        "--print-path",
        help="Print the resolved config path and exit.",
        rich_help_panel="Behavior",
    ),
    init: bool = typer.Option(
        False,
        "--init",
        help="Copy the default config to the user config directory and exit.",
        rich_help_panel="Behavior",
    ),
) -> None:
    config_value = config or _ctx_value(ctx, "config")
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        if init:
            console.print(str(init_user_config()), markup=False, soft_wrap=True)
            return
        path = resolve_config_path(config_value)
        if print_path:
            console.print(str(path), markup=False, soft_wrap=True)
            return
        render_config = load_render_config(config_value, env_file=env_file)
        console.print(build_kv_table(_config_rows(render_config), title=str(path)))

    _run_cli(_run, debug=debug_value)


def _config_rows(config: RenderConfig) -> list[tuple[str, str]]:
    qr = config.qr
    rows = [
        ("Template image", str(config.template_path) if config.template_path else "(none)"),
        ("Template size", f"{config.template_width_px:g}x{config.template_height_px:g} px"),
        ("DPI", f"{config.dpi:g}"),
        ("Safety margin", f"{config.template_safety_mm:g} mm"),
        ("Font family", config.font_family),
        ("Font file", str(config.font_file) if config.font_file else "(core font)"),
    ]
    rows.extend(_field_rows("Name", config.name_field))
    rows.extend(_field_rows("Registration", config.registration_field))
    rows.extend(
        [
            ("QR position", f"{qr.left:g}, {qr.top:g} mm"),
            ("QR size", f"{qr.size_px} px"),
            ("QR error correction", parse_error_level(qr.error)),
            ("QR foreground", _color(qr.foreground)),
            ("QR background", _color(qr.background)),
            ("QR hand-off", qr.handoff),
            ("Verification URL", config.verification_base_url),
            ("File name", config.filename_mode),
        ]
    )
    return rows


def _field_rows(label: str, field: TextFieldConfig) -> list[tuple[str, str]]:
    return [
        (f"{label} size", f"{field.size:g}"),
        (f"{label} position", f"{field.left:g}, {field.top:g} mm ({field.align})"),
        (f"{label} color", _color(field.color)),
    ]


def _color(value: tuple[int, ...]) -> str:
    return "(" + ", ".join(str(channel) for channel in value) + ")"
