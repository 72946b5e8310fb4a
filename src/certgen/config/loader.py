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

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import cast

from dotenv import dotenv_values

from ..core.models import (
    DEFAULT_VERIFICATION_BASE_URL,
    RGB,
    RGBA,
    FilenameMode,
    QrHandoff,
    QrStyle,
    RenderConfig,
    TextAlign,
    TextFieldConfig,
)
from .installer import resolve_config_path

# (table, key) in the TOML file -> environment variable name.
_TOML_KEYS: dict[tuple[str, str], str] = {
    ("template", "image"): "TEMPLATE_IMAGE",
    ("template", "width_px"): "TEMPLATE_WIDTH_PX",
    ("template", "height_px"): "TEMPLATE_HEIGHT_PX",
    ("template", "dpi"): "DPI",
    ("template", "safety_mm"): "TEMPLATE_SAFETY_MM",
    ("font", "family"): "FONT_FAMILY",
    ("font", "file"): "FONT_FILE",
    ("font", "bold_file"): "FONT_BOLD_FILE",
    ("name", "size"): "NAME_SIZE",
    ("name", "left"): "NAME_LEFT",
    ("name", "top"): "NAME_TOP",
    ("name", "align"): "NAME_ALIGN",
    ("registration", "size"): "REG_SIZE",
    ("registration", "left"): "REG_LEFT",
    ("registration", "top"): "REG_TOP",
    ("registration", "align"): "REG_ALIGN",
    ("qr", "left"): "QR_LEFT",
    ("qr", "top"): "QR_TOP",
    ("qr", "size"): "QR_SIZE",
    ("qr", "error_correction"): "QR_ERROR_CORRECTION",
    ("qr", "handoff"): "QR_HANDOFF",
    ("verification", "base_url"): "VERIFICATION_BASE_URL",
    ("output", "filename"): "OUTPUT_FILENAME",
}

# (table, key) holding a color list -> environment variable prefix.
_TOML_COLORS: dict[tuple[str, str], tuple[str, str]] = {
    ("name", "color"): ("NAME_COLOR_", "RGB"),
    ("registration", "color"): ("REG_COLOR_", "RGB"),
    ("qr", "foreground"): ("QR_FG_", "RGBA"),
    ("qr", "background"): ("QR_BG_", "RGBA"),
}

ENV_KEYS: tuple[str, ...] = (
    *_TOML_KEYS.values(),
    *(
        f"{prefix}{channel}"
        for prefix, channels in _TOML_COLORS.values()
        for channel in channels
    ),
)


def load_render_config(
    path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    env_file: str | Path | None = None,
) -> RenderConfig:
    """Resolve a RenderConfig snapshot.

    Later layers win: built-in defaults, the TOML config file, values from
    ``env_file`` and finally ``environ`` (``os.environ`` when omitted). Empty
    strings never override a lower layer.
    """
    env = os.environ if environ is None else environ
    config_path = resolve_config_path(path, environ=env)
    settings = settings_from_toml(_load_toml(config_path))
    if env_file is not None:
        settings.update(_non_empty(_load_env_file(Path(env_file))))
    settings.update(_non_empty({key: env.get(key) for key in ENV_KEYS}))
    return build_render_config(settings)


def settings_from_toml(data: Mapping[str, object]) -> dict[str, str]:
    settings: dict[str, str] = {}
    for (table, key), env_name in _TOML_KEYS.items():
        value = _get_dict(data, table).get(key)
        if value is None or isinstance(value, (dict, list)):
            continue
        settings[env_name] = str(value)
    for (table, key), (prefix, channels) in _TOML_COLORS.items():
        value = _get_dict(data, table).get(key)
        if not isinstance(value, list):
            continue
        for channel, component in zip(channels, value):
            settings[f"{prefix}{channel}"] = str(component)
    return _non_empty(settings)


def build_render_config(settings: Mapping[str, str]) -> RenderConfig:
    template_image = _get_str(settings, "TEMPLATE_IMAGE", "")
    font_file = _get_str(settings, "FONT_FILE", "")
    font_bold_file = _get_str(settings, "FONT_BOLD_FILE", "")
    return RenderConfig(
        template_path=Path(template_image) if template_image else None,
        font_family=_get_str(settings, "FONT_FAMILY", "Helvetica"),
        font_file=Path(font_file) if font_file else None,
        font_bold_file=Path(font_bold_file) if font_bold_file else None,
        template_width_px=_get_float(settings, "TEMPLATE_WIDTH_PX", 2500.0),
        template_height_px=_get_float(settings, "TEMPLATE_HEIGHT_PX", 1932.0),
        dpi=_get_float(settings, "DPI", 300.0),
        template_safety_mm=_get_float(settings, "TEMPLATE_SAFETY_MM", 1.0),
        name_field=TextFieldConfig(
            size=_get_float(settings, "NAME_SIZE", 42.0),
            left=_get_float(settings, "NAME_LEFT", 50.0),
            top=_get_float(settings, "NAME_TOP", 70.0),
            color=_get_rgb(settings, "NAME_COLOR_", (0, 0, 0)),
            align=_parse_align(settings.get("NAME_ALIGN")),
            style="B",
        ),
        registration_field=TextFieldConfig(
            size=_get_float(settings, "REG_SIZE", 18.0),
            left=_get_float(settings, "REG_LEFT", 50.0),
            top=_get_float(settings, "REG_TOP", 110.0),
            color=_get_rgb(settings, "REG_COLOR_", (0, 0, 0)),
            align=_parse_align(settings.get("REG_ALIGN")),
        ),
        qr=QrStyle(
            left=_get_float(settings, "QR_LEFT", 160.0),
            top=_get_float(settings, "QR_TOP", 110.0),
            size_px=_get_int(settings, "QR_SIZE", 180),
            error=_get_str(settings, "QR_ERROR_CORRECTION", "M"),
            foreground=_get_rgba(settings, "QR_FG_", (0, 0, 0, 255)),
            background=_get_rgba(settings, "QR_BG_", (0, 0, 0, 0)),
            handoff=_parse_handoff(settings.get("QR_HANDOFF")),
        ),
        verification_base_url=_get_str(
            settings, "VERIFICATION_BASE_URL", DEFAULT_VERIFICATION_BASE_URL
        ),
        filename_mode=_parse_filename_mode(settings.get("OUTPUT_FILENAME")),
    )


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _load_env_file(path: Path) -> dict[str, str | None]:
    if not path.is_file():
        raise FileNotFoundError(f"env file not found: {path}")
    return dict(dotenv_values(path))


def _non_empty(values: Mapping[str, str | None]) -> dict[str, str]:
    return {key: value for key, value in values.items() if value is not None and value != ""}


def _get_dict(data: Mapping[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _get_str(settings: Mapping[str, str], key: str, default: str) -> str:
    value = settings.get(key)
    if not value:
        return default
    return value


def _get_float(settings: Mapping[str, str], key: str, default: float) -> float:
    value = settings.get(key)
    if not value:
        return default
    try:
        return float(value.strip())
    except ValueError:
        return default


def _get_int(settings: Mapping[str, str], key: str, default: int) -> int:
    value = settings.get(key)
    if not value:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def _get_byte(settings: Mapping[str, str], key: str, default: int) -> int:
    # Channels are stored as a single byte, so larger values wrap.
    return _get_int(settings, key, default) % 256


def _get_rgb(settings: Mapping[str, str], prefix: str, default: RGB) -> RGB:
    return (
        _get_byte(settings, f"{prefix}R", default[0]),
        _get_byte(settings, f"{prefix}G", default[1]),
        _get_byte(settings, f"{prefix}B", default[2]),
    )


def _get_rgba(settings: Mapping[str, str], prefix: str, default: RGBA) -> RGBA:
    return (
        _get_byte(settings, f"{prefix}R", default[0]),
        _get_byte(settings, f"{prefix}G", default[1]),
        _get_byte(settings, f"{prefix}B", default[2]),
        _get_byte(settings, f"{prefix}A", default[3]),
    )


def _parse_align(value: str | None) -> TextAlign:
    normalized = (value or "").strip().lower()
    if normalized in {"center", "centre", "centered"}:
        return "center"
    return "left"


def _parse_handoff(value: str | None) -> QrHandoff:
    normalized = (value or "").strip().lower()
    if normalized == "file":
        return "file"
    return "memory"


def _parse_filename_mode(value: str | None) -> FilenameMode:
    normalized = (value or "").strip().lower().replace("-", "_")
    if normalized == "name_registration":
        return cast(FilenameMode, normalized)
    return "registration"
