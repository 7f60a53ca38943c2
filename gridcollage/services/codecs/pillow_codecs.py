# gridcollage/services/codecs/pillow_codecs.py
from __future__ import annotations

import io
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Tuple

import PIL
from PIL import Image, UnidentifiedImageError, features

from gridcollage.common.logging import get_logger
from gridcollage.domain.dataclasses.probe import CodecProbe
from gridcollage.domain.enums.image_format import ImageFormat
from gridcollage.domain.errors import DecodeFailed, UnsupportedFormat
from gridcollage.domain.ports.codecs import ImageCodecPort

logger = get_logger(__name__)

# Pillow plugin ids. Pillow has no WBMP plugin, so WBMP never probes as available.
_PIL_IDS: Dict[ImageFormat, str] = {
    ImageFormat.JPEG: "JPEG",
    ImageFormat.PNG: "PNG",
    ImageFormat.BMP: "BMP",
    ImageFormat.GIF: "GIF",
}

# Compiled codecs a plugin needs on top of being registered
_REQUIRED_CODECS: Dict[ImageFormat, Tuple[str, ...]] = {
    ImageFormat.JPEG: ("jpg",),
    ImageFormat.PNG: ("zlib",),
}

_DECODE_ERRORS = (OSError, SyntaxError, ValueError, Image.DecompressionBombError)

# Leading magic bytes, checked only when Pillow cannot parse the header
_SIGNATURES: Tuple[Tuple[bytes, ImageFormat], ...] = (
    (b"\x89PNG\r\n\x1a\n", ImageFormat.PNG),
    (b"\xff\xd8\xff", ImageFormat.JPEG),
    (b"GIF87a", ImageFormat.GIF),
    (b"GIF89a", ImageFormat.GIF),
    (b"BM", ImageFormat.BMP),
)

GIF_TRANSPARENT_INDEX = 255


class PillowCodecs(ImageCodecPort):
    """
    Infrastructure adapter implementing ImageCodecPort with Pillow.
    Format detection goes through Image.open, which identifies files by their
    header bytes and ignores the filename.
    """

    def __init__(self, jpeg_quality: int = 75) -> None:
        self.jpeg_quality = int(jpeg_quality)

    # ---- Port API -------------------------------------------------------------
    def probe(self) -> CodecProbe:
        Image.init()
        formats: Dict[ImageFormat, Tuple[bool, bool]] = {}
        for fmt in ImageFormat:
            pil_id = _PIL_IDS.get(fmt)
            if pil_id is None:
                formats[fmt] = (False, False)
                continue
            compiled = all(features.check_codec(c) for c in _REQUIRED_CODECS.get(fmt, ()))
            formats[fmt] = (compiled and pil_id in Image.OPEN, compiled and pil_id in Image.SAVE)

        probe = CodecProbe(
            has_codecs=bool(Image.OPEN) and bool(Image.SAVE),
            can_sniff=any(accept is not None for _factory, accept in Image.OPEN.values()),
            formats=formats,
            version=PIL.__version__,
        )
        logger.debug("Pillow %s codecs: %s", probe.version, formats)
        return probe

    def sniff(self, path: Path) -> Optional[ImageFormat]:
        try:
            with Image.open(path) as im:
                mime = im.get_format_mimetype()
        except _DECODE_ERRORS as exc:
            # A recognizable signature with a broken header is still that format;
            # open_tile turns it into DecodeFailed.
            fmt = self._by_signature(path)
            if fmt is not None:
                logger.debug("Header of %s does not parse (%s); sniffed %s by signature", path, exc, fmt.value)
            return fmt
        return ImageFormat.from_mime(mime)

    @contextmanager
    def open_tile(self, path: Path, fmt: ImageFormat) -> Iterator[Image.Image]:
        try:
            im = Image.open(path, formats=[self._pil_id(fmt)])
        except _DECODE_ERRORS as exc:
            raise DecodeFailed(path, str(exc)) from exc
        try:
            try:
                im.load()
            except _DECODE_ERRORS as exc:
                raise DecodeFailed(path, str(exc)) from exc
            yield im
        finally:
            im.close()

    def encode(
        self,
        image: Image.Image,
        fmt: ImageFormat,
        transparent_color: Optional[Tuple[int, int, int]] = None,
    ) -> bytes:
        pil_id = self._pil_id(fmt)
        out, params = self._prepare(image, fmt, transparent_color)
        buf = io.BytesIO()
        try:
            out.save(buf, format=pil_id, **params)
        finally:
            if out is not image:
                out.close()
        return buf.getvalue()

    # ---- internals ----
    def _pil_id(self, fmt: ImageFormat) -> str:
        pil_id = _PIL_IDS.get(fmt)
        if pil_id is None:
            raise UnsupportedFormat(fmt.value, _PIL_IDS)
        return pil_id

    @staticmethod
    def _by_signature(path: Path) -> Optional[ImageFormat]:
        try:
            with open(path, "rb") as fh:
                head = fh.read(8)
        except OSError as exc:
            logger.debug("Cannot read %s: %s", path, exc)
            return None
        for magic, fmt in _SIGNATURES:
            if head.startswith(magic):
                return fmt
        return None

    def _prepare(
        self,
        image: Image.Image,
        fmt: ImageFormat,
        transparent_color: Optional[Tuple[int, int, int]],
    ) -> Tuple[Image.Image, Dict[str, Any]]:
        if fmt == ImageFormat.PNG:
            return image, {"optimize": True}
        if fmt == ImageFormat.JPEG:
            return image.convert("RGB"), {"quality": self.jpeg_quality}
        if fmt == ImageFormat.BMP:
            return image.convert("RGB"), {}
        if fmt == ImageFormat.GIF:
            return self._to_gif_palette(image, transparent_color)
        raise UnsupportedFormat(fmt.value, _PIL_IDS)

    @staticmethod
    def _to_gif_palette(
        image: Image.Image, transparent_color: Optional[Tuple[int, int, int]]
    ) -> Tuple[Image.Image, Dict[str, Any]]:
        rgb = image.convert("RGB")
        try:
            if transparent_color is None:
                return rgb.convert("P", palette=Image.Palette.ADAPTIVE, colors=256), {}

            # Reserve the last palette slot for the transparent color
            paletted = rgb.convert("P", palette=Image.Palette.ADAPTIVE, colors=GIF_TRANSPARENT_INDEX)
        finally:
            rgb.close()

        palette = list(paletted.getpalette() or [])
        palette += [0] * (768 - len(palette))
        start = GIF_TRANSPARENT_INDEX * 3
        palette[start:start + 3] = list(transparent_color[:3])
        paletted.putpalette(palette)

        if "A" in image.getbands():
            mask = image.getchannel("A").point(lambda a: 255 if a < 128 else 0)
            paletted.paste(GIF_TRANSPARENT_INDEX, None, mask)
            mask.close()
        paletted.info["transparency"] = GIF_TRANSPARENT_INDEX
        return paletted, {"transparency": GIF_TRANSPARENT_INDEX}
