# gridcollage/domain/enums/image_format.py
from __future__ import annotations

from enum import StrEnum
from typing import Dict, Optional


class ImageFormat(StrEnum):
    """Raster formats a collage can be read from or written to.

    Values are MIME subtypes, so ``f"image/{fmt}"`` is the content type.
    """
    JPEG = "jpeg"
    PNG = "png"
    BMP = "bmp"
    GIF = "gif"
    WBMP = "vnd.wap.wbmp"

    @property
    def mime(self) -> str:
        return f"image/{self.value}"

    @classmethod
    def from_extension(cls, ext: str | None) -> Optional["ImageFormat"]:
        if not ext:
            return None
        return EXTENSION_FORMATS.get(ext.lower().lstrip("."))

    @classmethod
    def from_mime(cls, mime: str | None) -> Optional["ImageFormat"]:
        if not mime:
            return None
        subtype = mime.rsplit("/", 1)[-1].lower()
        try:
            return cls(subtype)
        except ValueError:
            return None


# The one extension table; validation and encoder dispatch both read it.
EXTENSION_FORMATS: Dict[str, ImageFormat] = {
    "jpeg": ImageFormat.JPEG,
    "jpg": ImageFormat.JPEG,
    "jfif": ImageFormat.JPEG,
    "jpe": ImageFormat.JPEG,
    "png": ImageFormat.PNG,
    "bmp": ImageFormat.BMP,
    "wbmp": ImageFormat.WBMP,
    "gif": ImageFormat.GIF,
}


def extensions_for(formats) -> list[str]:
    """Sorted extensions whose format is in `formats` (used in error messages)."""
    wanted = set(formats)
    return sorted(ext for ext, fmt in EXTENSION_FORMATS.items() if fmt in wanted)
