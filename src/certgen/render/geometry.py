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

MM_PER_INCH = 25.4


def px_to_mm(px: float, dpi: float) -> float:
    return (float(px) / float(dpi)) * MM_PER_INCH


def page_size_mm(width_px: float, height_px: float, dpi: float) -> tuple[float, float]:
    """Page size in millimeters for a template of the given pixel size.

    Portrait templates are turned sideways: the result always has
    width >= height.
    """
    width = px_to_mm(width_px, dpi)
    height = px_to_mm(height_px, dpi)
    if width < height:
        width, height = height, width
    return width, height


def inset_rect(
    page_w: float,
    page_h: float,
    inset: float,
) -> tuple[float, float, float, float]:
    return inset, inset, page_w - inset * 2, page_h - inset * 2


def anchored_x(anchor: float, text_width: float, *, center: bool) -> float:
    if center:
        return anchor - text_width / 2
    return anchor


__all__ = [
    "MM_PER_INCH",
    "anchored_x",
    "inset_rect",
    "page_size_mm",
    "px_to_mm",
]
