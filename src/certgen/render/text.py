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

from fpdf import FPDF

from ..core.models import RenderConfig, TextFieldConfig
from .geometry import anchored_x


# Families fpdf2 resolves to its built-in PDF fonts; add_font refuses to replace them.
CORE_FAMILIES = frozenset({"arial", "courier", "helvetica", "symbol", "times", "zapfdingbats"})


def embedded_family(config: RenderConfig) -> str:
    if config.font_file is None or config.font_family.lower() not in CORE_FAMILIES:
        return config.font_family
    family = config.font_file.stem
    if family.lower() in CORE_FAMILIES:
        family = f"{family}-TTF"
    return family


def register_fonts(pdf: FPDF, config: RenderConfig) -> str:
    """Embed the configured TrueType files and return the family to draw with.

    A font file configured under a core family name (the default ``Helvetica``)
    is registered under its own file stem instead.
    """
    family = embedded_family(config)
    if config.font_file is None:
        return family
    pdf.add_font(family, style="", fname=str(config.font_file))
    bold = config.font_bold_file or config.font_file
    pdf.add_font(family, style="B", fname=str(bold))
    return family


def draw_text_field(
    pdf: FPDF,
    text: str,
    field: TextFieldConfig,
    *,
    font_family: str,
) -> float:
    pdf.set_font(font_family, style=field.style, size=field.size)
    pdf.set_text_color(*field.color)
    text_width = pdf.get_string_width(text)
    x = anchored_x(field.left, text_width, center=field.align == "center")
    pdf.set_xy(x, field.top)
    pdf.cell(text_width + 2 * pdf.c_margin, field.size, text)
    return x


__all__ = ["CORE_FAMILIES", "draw_text_field", "embedded_family", "register_fonts"]
