# gridcollage/services/collage/capabilities.py
from __future__ import annotations

from gridcollage.common.logging import get_logger
from gridcollage.domain.enums.image_format import ImageFormat
from gridcollage.domain.errors import MissingCapability
from gridcollage.domain.ports.codecs import ImageCodecPort

logger = get_logger(__name__)


def detect_capabilities(codecs: ImageCodecPort) -> frozenset[ImageFormat]:
    """
    Ask the codec backend what it can do and return the supported-format set:
    every format that can be both decoded and encoded.

    Call once at startup and hand the result to the resolver, enumerator and
    emitter. Raises MissingCapability when there is no codec facility at all
    or when formats cannot be detected from file content; both are required
    no matter which formats are available.
    """
    probe = codecs.probe()
    if not probe.has_codecs:
        raise MissingCapability("No image codec library is available")
    if not probe.can_sniff:
        raise MissingCapability("Image type detection from file content is not available")

    supported = probe.round_trip_formats()
    logger.info(
        "Image codecs %s: supported formats %s",
        probe.version,
        ", ".join(sorted(f.value for f in supported)) or "none",
    )
    return supported
