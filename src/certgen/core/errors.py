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


class CertificateError(RuntimeError):
    """Base class for failures that abort a certificate generation call."""


class QRGenerationError(CertificateError):
    """The verification URL could not be rendered into a QR image."""


class TemplateNotFoundError(CertificateError):
    def __init__(self, path: str | Path) -> None:
        super().__init__(f"template image not found: {path}")
        self.path = Path(path)


class TemplateImageError(CertificateError):
    """The template file exists but cannot be drawn as an image."""


class PDFWriteError(CertificateError):
    def __init__(self, path: str | Path, reason: object) -> None:
        super().__init__(f"PDF save failed for {path}: {reason}")
        self.path = Path(path)


__all__ = [
    "CertificateError",
    "PDFWriteError",
    "QRGenerationError",
    "TemplateImageError",
    "TemplateNotFoundError",
]
