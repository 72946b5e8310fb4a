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

from .core.models import CertificateRequest, CertificateResult, RenderConfig
from .qr.codec import render_qr_image, temp_qr_file, verification_url
from .render.filenames import certificate_filename
from .render.geometry import page_size_mm
from .render.pdf_render import WarnCallback, render_certificate_pdf


def generate_certificate(
    request: CertificateRequest,
    config: RenderConfig,
    *,
    warn: WarnCallback | None = None,
) -> CertificateResult:
    """Render one certificate PDF into ``request.output_dir``.

    Raises a ``CertificateError`` subclass on failure; no PDF is left behind
    in that case and the temporary QR file (``file`` hand-off) is always
    removed.
    """
    page_size = page_size_mm(config.template_width_px, config.template_height_px, config.dpi)

    url = verification_url(config.verification_base_url, request.registration_number)
    qr_image = render_qr_image(url, config.qr)

    output_dir = Path(request.output_dir)
    filename = certificate_filename(
        request.registration_number,
        request.name,
        mode=config.filename_mode,
    )
    output_path = (output_dir / filename).absolute()

    if config.qr.handoff == "file":
        with temp_qr_file(qr_image, output_dir, request.registration_number) as qr_path:
            render_certificate_pdf(
                request,
                config,
                qr_path,
                page_size=page_size,
                output_path=output_path,
                warn=warn,
            )
    else:
        render_certificate_pdf(
            request,
            config,
            qr_image,
            page_size=page_size,
            output_path=output_path,
            warn=warn,
        )

    return CertificateResult(
        output_path=output_path,
        filename=filename,
        page_width_mm=page_size[0],
        page_height_mm=page_size[1],
        template_width_px=config.template_width_px,
        template_height_px=config.template_height_px,
        dpi=config.dpi,
    )


__all__ = ["generate_certificate"]
