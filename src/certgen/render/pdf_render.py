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

import contextlib
from collections.abc import Callable
from pathlib import Path

from fpdf import FPDF
from fpdf.errors import FPDFException
from PIL import Image

from ..core.errors import (
    CertificateError,
    PDFWriteError,
    TemplateImageError,
    TemplateNotFoundError,
)
from ..core.models import REGISTRATION_LABEL, CertificateRequest, RenderConfig
from .geometry import inset_rect, px_to_mm
from .text import draw_text_field, embedded_family, register_fonts

WarnCallback = Callable[[str], None]


def new_page(page_w: float, page_h: float) -> FPDF:
    # fpdf2 swaps the format for landscape, so pass the short side first.
    pdf = FPDF(orientation="L", unit="mm", format=(page_h, page_w))
    pdf.set_margins(0, 0, 0)
    pdf.set_auto_page_break(False)
    pdf.add_page()
    return pdf


def draw_template(pdf: FPDF, config: RenderConfig, page_w: float, page_h: float) -> None:
    path = config.template_path
    if path is None:
        return
    if not path.is_file():
        raise TemplateNotFoundError(path)
    x, y, w, h = inset_rect(page_w, page_h, config.template_safety_mm)
    try:
        pdf.image(str(path), x=x, y=y, w=w, h=h)
    except (OSError, ValueError, FPDFException) as exc:
        raise TemplateImageError(f"cannot draw template image {path}: {exc}") from exc


def draw_texts(pdf: FPDF, request: CertificateRequest, config: RenderConfig) -> None:
    family = embedded_family(config)
    try:
        register_fonts(pdf, config)
        draw_text_field(
            pdf,
            request.name,
            config.name_field,
            font_family=family,
        )
        draw_text_field(
            pdf,
            f"{REGISTRATION_LABEL}{request.registration_number}",
            config.registration_field,
            font_family=family,
        )
    except (OSError, FPDFException) as exc:
        raise CertificateError(f"cannot render text with font {family!r}: {exc}") from exc


def draw_qr(
    pdf: FPDF,
    qr: Image.Image | Path,
    config: RenderConfig,
    *,
    warn: WarnCallback | None = None,
) -> bool:
    if isinstance(qr, Path) and not qr.is_file():
        if warn is not None:
            warn(f"QR image {qr} is missing; skipping QR overlay")
        return False
    size_mm = px_to_mm(config.qr.size_px, config.dpi)
    source = str(qr) if isinstance(qr, Path) else qr
    pdf.image(source, x=config.qr.left, y=config.qr.top, w=size_mm, h=size_mm)
    return True


def write_pdf(pdf: FPDF, output_path: Path) -> None:
    try:
        data = pdf.output()
    except FPDFException as exc:
        raise PDFWriteError(output_path, exc) from exc
    try:
        output_path.write_bytes(bytes(data))
    except OSError as exc:
        with contextlib.suppress(OSError):
            output_path.unlink(missing_ok=True)
        raise PDFWriteError(output_path, exc) from exc


def render_certificate_pdf(
    request: CertificateRequest,
    config: RenderConfig,
    qr: Image.Image | Path,
    *,
    page_size: tuple[float, float],
    output_path: Path,
    warn: WarnCallback | None = None,
) -> None:
    """Draw template, texts and QR (in that stacking order) and write the PDF."""
    page_w, page_h = page_size
    pdf = new_page(page_w, page_h)
    draw_template(pdf, config, page_w, page_h)
    draw_texts(pdf, request, config)
    draw_qr(pdf, qr, config, warn=warn)
    write_pdf(pdf, output_path)


__all__ = [
    "WarnCallback",
    "draw_qr",
    "draw_template",
    "draw_texts",
    "new_page",
    "render_certificate_pdf",
    "write_pdf",
]
