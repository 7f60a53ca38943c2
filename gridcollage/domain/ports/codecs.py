from __future__ import annotations

from contextlib import AbstractContextManager
from pathlib import Path
from typing import Optional, Protocol, Tuple

from PIL import Image

from gridcollage.domain.dataclasses.probe import CodecProbe
from gridcollage.domain.enums.image_format import ImageFormat


class ImageCodecPort(Protocol):
    def probe(self) -> CodecProbe: ...

    def sniff(self, path: Path) -> Optional[ImageFormat]:
        """Format detected from the file's leading bytes, or None."""
        ...

    def open_tile(self, path: Path, fmt: ImageFormat) -> AbstractContextManager[Image.Image]:
        """Fully decoded image, closed when the context exits."""
        ...

    def encode(
        self,
        image: Image.Image,
        fmt: ImageFormat,
        transparent_color: Optional[Tuple[int, int, int]] = None,
    ) -> bytes: ...
