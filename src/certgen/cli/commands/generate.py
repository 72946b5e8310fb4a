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

from dataclasses import replace
from pathlib import Path

import typer

from ...config import load_render_config
from ...core.models import CertificateRequest, CertificateResult, RenderConfig
from ...generator import generate_certificate
from ..core.common import _ctx_value, _run_cli
from ..core.log import _warn
from ..ui import console, status

_GENERATE_HELP = (
    "Render a certificate PDF for one recipient.\n\n"
    "Layout, fonts and QR styling come from the TOML config, an optional .env file\n"
    "and environment variables (TEMPLATE_IMAGE, NAME_LEFT, QR_SIZE, ...).\n\n"
    "Examples:\n"
    '  certgen generate "Jane Doe" REG-001\n'
    '  certgen generate "Jane Doe" REG-001 -o ./out --env-file .env\n'
    '  certgen generate "Jane Doe" REG-001 --center --include-name\n'
)


def register(app: typer.Typer) -> None:
    app.command(help=_GENERATE_HELP)(generate)


def generate(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Recipient name printed on the certificate."),
    registration: str = typer.Argument(..., help="Registration number (also the file name)."),
    output_dir: Path = typer.Option(
        Path("."),
        "--output-dir",
        "-o",
        help="Directory for the generated PDF (created if missing).",
        rich_help_panel="Outputs",
    ),
    config: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Use this TOML config file.",
        rich_help_panel="Config",
    ),
    env_file: Path | None = typer.Option(
        None,
        "--env-file",
        help="Read settings from this .env file (process environment still wins).",
        rich_help_panel="Config",
    ),
    center: bool = typer.Option(
        False,
        "--center",
        help="Center name and registration text on their configured left coordinate.",
        rich_help_panel="Layout",
    ),
    include_name: bool = typer.Option(
        False,
        "--include-name",
        help="Name the PDF <registration>_<name>.pdf.",
        rich_help_panel="Outputs",
    ),
) -> None:
    config_value = config or _ctx_value(ctx, "config")
    quiet_value = bool(_ctx_value(ctx, "quiet"))
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        render_config = _apply_overrides(
            load_render_config(config_value, env_file=env_file),
            center=center,
            include_name=include_name,
        )
        output_dir.mkdir(parents=True, exist_ok=True)
        request = CertificateRequest(
            name=name,
            registration_number=registration,
            output_dir=output_dir,
        )
        with status("Rendering certificate...", quiet=quiet_value):
            result = generate_certificate(
                request,
                render_config,
                warn=lambda message: _warn(message, quiet=quiet_value),
            )
        if not quiet_value:
            _print_summary(result)

    _run_cli(_run, debug=debug_value)


def _apply_overrides(config: RenderConfig, *, center: bool, include_name: bool) -> RenderConfig:
    if center:
        config = replace(
            config,
            name_field=replace(config.name_field, align="center"),
            registration_field=replace(config.registration_field, align="center"),
        )
    if include_name:
        config = replace(config, filename_mode="name_registration")
    return config


def _print_summary(result: CertificateResult) -> None:
    console.print(
        f"Template: {result.template_width_px:.0f}x{result.template_height_px:.0f} px "
        f"@ {result.dpi:.0f} DPI → PDF: "
        f"{result.page_width_mm:.2f}x{result.page_height_mm:.2f} mm",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
    console.print(f"PDF generated: {result.filename}", markup=False, highlight=False, soft_wrap=True)
    console.print(str(result.output_path), markup=False, highlight=False, soft_wrap=True)
