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

"""Certificate PDF generator: template image, recipient texts and a verification QR code."""

from __future__ import annotations

from .config import load_render_config as load_render_config
from .core.errors import (
    CertificateError as CertificateError,
    PDFWriteError as PDFWriteError,
    QRGenerationError as QRGenerationError,
    TemplateImageError as TemplateImageError,
    TemplateNotFoundError as TemplateNotFoundError,
)
from .core.models import (
    CertificateRequest as CertificateRequest,
    CertificateResult as CertificateResult,
    RenderConfig as RenderConfig,
)
from .generator import generate_certificate as generate_certificate

__all__ = [
    "CertificateError",
    "CertificateRequest",
    "CertificateResult",
    "PDFWriteError",
    "QRGenerationError",
    "RenderConfig",
    "TemplateImageError",
    "TemplateNotFoundError",
    "generate_certificate",
    "load_render_config",
]
