# gridcollage/services/api/deps.py
from __future__ import annotations
from functools import lru_cache

from gridcollage.common.settings import get_settings
from gridcollage.domain.enums.image_format import ImageFormat
from gridcollage.domain.ports.codecs import ImageCodecPort
from gridcollage.services.codecs.pillow_codecs import PillowCodecs
from gridcollage.services.collage.capabilities import detect_capabilities


def get_codecs() -> ImageCodecPort:
    """
    Provide an ImageCodecPort implementation (Pillow) via DI.
    Tests override this with fakes.
    """
    return PillowCodecs(jpeg_quality=get_settings().jpeg_quality)


@lru_cache(maxsize=1)
def get_capabilities() -> frozenset[ImageFormat]:
    """Supported-format set, probed once per process."""
    return detect_capabilities(get_codecs())
