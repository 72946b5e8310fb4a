#!/usr/bin/env python3
from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import segno
from PIL import Image, ImageDraw

from ..core.errors import QRGenerationError
from ..core.models import RGBA, QrStyle
from ..render.filenames import temp_qr_filename

QUIET_ZONE_MODULES = 4
DEFAULT_ERROR_LEVEL = "M"

# Q is the "quartile" level, sometimes labelled "high" by other encoders.
_ERROR_LEVELS = ("L", "M", "Q", "H")

_DARK = 0
_LIGHT = 1


def parse_error_level(value: str | None) -> str:
    normalized = (value or "").strip().upper()
    if normalized in _ERROR_LEVELS:
        return normalized
    return DEFAULT_ERROR_LEVEL


def verification_url(base_url: str, registration_number: str) -> str:
    return f"{base_url.rstrip('/')}#{registration_number}"


def make_qr(data: str, *, error: str = DEFAULT_ERROR_LEVEL) -> Any:
    try:
        return segno.make(data, error=parse_error_level(error), boost_error=False)
    except ValueError as exc:
        raise QRGenerationError(f"QR creation failed: {exc}") from exc


def render_bitmap(qr: Any, size_px: int) -> Image.Image:
    """Draw the two-tone symbol (quiet zone included) centered on a square canvas.

    Modules are scaled by the largest whole number of pixels that fits; the
    leftover margin stays light.
    """
    modules, _ = qr.symbol_size(scale=1, border=QUIET_ZONE_MODULES)
    if size_px < modules:
        raise QRGenerationError(
            f"QR size {size_px}px is smaller than the {modules}-module symbol"
        )
    scale = size_px // modules
    offset = (size_px - modules * scale) // 2

    bitmap = Image.new("1", (size_px, size_px), _LIGHT)
    draw = ImageDraw.Draw(bitmap)
    for row_idx, row in enumerate(qr.matrix_iter(scale=1, border=QUIET_ZONE_MODULES)):
        for col_idx, is_dark in enumerate(row):
            if not is_dark:
                continue
            x = offset + col_idx * scale
            y = offset + row_idx * scale
            draw.rectangle((x, y, x + scale - 1, y + scale - 1), fill=_DARK)
    return bitmap


def recolor(bitmap: Image.Image, *, foreground: RGBA, background: RGBA) -> Image.Image:
    width, height = bitmap.size
    image = Image.new("RGBA", (width, height), background)
    source = bitmap.load()
    target = image.load()
    for y in range(height):
        for x in range(width):
            if source[x, y] == _DARK:
                target[x, y] = foreground
    return image


def render_qr_image(data: str, style: QrStyle) -> Image.Image:
    qr = make_qr(data, error=style.error)
    bitmap = render_bitmap(qr, style.size_px)
    return recolor(bitmap, foreground=style.foreground, background=style.background)


@contextmanager
def temp_qr_file(
    image: Image.Image,
    directory: str | Path,
    registration_number: str,
) -> Iterator[Path]:
    """Save ``image`` as a PNG next to the output and remove it on exit."""
    path = Path(directory) / temp_qr_filename(registration_number)
    try:
        try:
            image.save(path, format="PNG")
        except OSError as exc:
            raise QRGenerationError(f"cannot write temp QR file {path}: {exc}") from exc
        yield path
    finally:
        path.unlink(missing_ok=True)


__all__ = [
    "DEFAULT_ERROR_LEVEL",
    "QUIET_ZONE_MODULES",
    "make_qr",
    "parse_error_level",
    "recolor",
    "render_bitmap",
    "render_qr_image",
    "temp_qr_file",
    "verification_url",
]
