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

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

TextAlign = Literal["left", "center"]
QrHandoff = Literal["memory", "file"]
FilenameMode = Literal["registration", "name_registration"]

RGB = tuple[int, int, int]
RGBA = tuple[int, int, int, int]

DEFAULT_VERIFICATION_BASE_URL = "https://peaceandhumanity.org/verification"
REGISTRATION_LABEL = "Registration Number : "


@dataclass(frozen=True)
class CertificateRequest:
    name: str
    registration_number: str
    output_dir: Path


@dataclass(frozen=True)
class TextFieldConfig:
    size: float
    left: float
    top: float
    color: RGB = (0, 0, 0)
    align: TextAlign = "left"
    style: str = ""


@dataclass(frozen=True)
class QrStyle:
    left: float = 160.0
    top: float = 110.0
    size_px: int = 180
    error: str = "M"
    foreground: RGBA = (0, 0, 0, 255)
    background: RGBA = (0, 0, 0, 0)
    handoff: QrHandoff = "memory"


@dataclass(frozen=True)
class RenderConfig:
    template_path: Path | None = None
    font_family: str = "Helvetica"
    font_file: Path | None = None
    font_bold_file: Path | None = None
    template_width_px: float = 2500.0
    template_height_px: float = 1932.0
    dpi: float = 300.0
    template_safety_mm: float = 1.0
    name_field: TextFieldConfig = field(
        default_factory=lambda: TextFieldConfig(size=42.0, left=50.0, top=70.0, style="B")
    )
    registration_field: TextFieldConfig = field(
        default_factory=lambda: TextFieldConfig(size=18.0, left=50.0, top=110.0)
    )
    qr: QrStyle = field(default_factory=QrStyle)
    verification_base_url: str = DEFAULT_VERIFICATION_BASE_URL
    filename_mode: FilenameMode = "registration"


@dataclass(frozen=True)
class CertificateResult:
    output_path: Path
    filename: str
    page_width_mm: float
    page_height_mm: float
    template_width_px: float
    template_height_px: float
    dpi: float


__all__ = [
    "CertificateRequest",
    "CertificateResult",
    "DEFAULT_VERIFICATION_BASE_URL",
    "FilenameMode",
    "QrHandoff",
    "QrStyle",
    "REGISTRATION_LABEL",
    "RGB",
    "RGBA",
    "RenderConfig",
    "TextAlign",
    "TextFieldConfig",
]
