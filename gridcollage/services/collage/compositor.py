# gridcollage/services/collage/compositor.py
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

from PIL import Image

from gridcollage.common.logging import get_logger
from gridcollage.domain.entities.asset_entry import AssetEntry
from gridcollage.domain.enums.image_format import ImageFormat
from gridcollage.domain.errors import AssetCountMismatch, AssetDimensionMismatch
from gridcollage.domain.policies.grid_layout import GridLayout
from gridcollage.domain.ports.codecs import ImageCodecPort

logger = get_logger(__name__)

# White at zero alpha; also the GIF transparent palette entry
BACKGROUND: Tuple[int, int, int, int] = (255, 255, 255, 0)


@dataclass
class Canvas:
    image: Image.Image
    # Set when the output format keys transparency off a palette color (GIF)
    transparent_color: Optional[Tuple[int, int, int]] = None
    tiles_placed: int = 0

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size


def allocate_canvas(layout: GridLayout, output_format: ImageFormat) -> Canvas:
    image = Image.new("RGBA", layout.canvas_size, BACKGROUND)
    transparent = BACKGROUND[:3] if output_format == ImageFormat.GIF else None
    return Canvas(image=image, transparent_color=transparent)


@contextmanager
def compose(
    entries: Sequence[AssetEntry],
    layout: GridLayout,
    codecs: ImageCodecPort,
    *,
    output_format: ImageFormat,
) -> Iterator[Canvas]:
    """
    Paste each entry, in order, into its grid slot and yield the finished canvas.

    Tiles are copied verbatim (no scaling) and must be exactly tile-sized.
    Only one decoded tile is held at a time; the canvas is closed when the
    context exits, whether or not the build succeeded.
    """
    if len(entries) != layout.count:
        raise AssetCountMismatch(len(entries), layout.count)

    canvas = allocate_canvas(layout, output_format)
    try:
        for entry, origin in zip(entries, layout.origins()):
            with codecs.open_tile(entry.path, entry.format) as tile:
                if tile.size != layout.tile_size:
                    raise AssetDimensionMismatch(entry.path, tile.size, layout.tile_size)
                if tile.mode == "RGBA":
                    canvas.image.paste(tile, origin)
                else:
                    rgba = tile.convert("RGBA")
                    try:
                        canvas.image.paste(rgba, origin)
                    finally:
                        rgba.close()
            canvas.tiles_placed += 1
            logger.debug("Placed %s at %s", entry.path.name, origin)
        yield canvas
    finally:
        canvas.image.close()
