from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from gridcollage.domain.enums.image_format import ImageFormat


@dataclass
class CodecProbe:
    # What the codec backend reports about itself
    has_codecs: bool = False
    can_sniff: bool = False
    # format -> (can_decode, can_encode)
    formats: Dict[ImageFormat, Tuple[bool, bool]] = field(default_factory=dict)
    version: str = "unknown"

    def round_trip_formats(self) -> frozenset[ImageFormat]:
        return frozenset(f for f, (dec, enc) in self.formats.items() if dec and enc)
