#!/usr/bin/env python3
from __future__ import annotations

from ..core.models import FilenameMode

RESERVED_CHARS = '\\/:*?"<>|'
PDF_SUFFIX = ".pdf"

_RESERVED_TABLE = str.maketrans({ch: "_" for ch in RESERVED_CHARS})


def sanitize_filename(value: str) -> str:
    """Trim whitespace and replace characters that are illegal in file names."""
    return value.strip().translate(_RESERVED_TABLE)


def certificate_stem(registration_number: str, name: str, *, mode: FilenameMode) -> str:
    if mode == "name_registration":
        return sanitize_filename(f"{registration_number}_{name}")
    return sanitize_filename(registration_number)


def certificate_filename(registration_number: str, name: str, *, mode: FilenameMode) -> str:
    return f"{certificate_stem(registration_number, name, mode=mode)}{PDF_SUFFIX}"


def temp_qr_filename(registration_number: str) -> str:
    return f"temp_qr_{sanitize_filename(registration_number)}.png"


__all__ = [
    "PDF_SUFFIX",
    "RESERVED_CHARS",
    "certificate_filename",
    "certificate_stem",
    "sanitize_filename",
    "temp_qr_filename",
]
