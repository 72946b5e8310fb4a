"""Shared certificate types and errors."""

from .errors import (
    CertificateError,
    PDFWriteError,
    QRGenerationError,
    TemplateImageError,
    TemplateNotFoundError,
)
from .models import (
    CertificateRequest,
    CertificateResult,
    QrStyle,
    RenderConfig,
    TextFieldConfig,
)

__all__ = [
    "CertificateError",
    "CertificateRequest",
    "CertificateResult",
    "PDFWriteError",
    "QRGenerationError",
    "QrStyle",
    "RenderConfig",
    "TemplateImageError",
    "TemplateNotFoundError",
    "TextFieldConfig",
]
