from __future__ import annotations

from dataclasses import dataclass
from math import ceil
from typing import Iterator, Tuple


@dataclass(frozen=True)
class GridLayout:
    """
    Domain policy for where tiles land on the collage canvas.

    Tiles fill rows left to right; spacing only sits *between* tiles, never
    around the outer edge. With the defaults the canvas is 1850x1098 and the
    tenth tile sits at (1488, 554).
    """
    count: int = 10
    columns: int = 5
    tile_width: int = 362
    tile_height: int = 544
    h_spacing: int = 10
    v_spacing: int = 10

    @property
    def rows(self) -> int:
        return ceil(self.count / self.columns)

    @property
    def tile_size(self) -> Tuple[int, int]:
        return (self.tile_width, self.tile_height)

    @property
    def canvas_size(self) -> Tuple[int, int]:
        width = self.columns * self.tile_width + (self.columns - 1) * self.h_spacing
        height = self.rows * self.tile_height + (self.rows - 1) * self.v_spacing
        return (width, height)

    def slot(self, index: int) -> Tuple[int, int]:
        """(column, row) of the tile at `index` in placement order."""
        if not 0 <= index < self.count:
            raise IndexError(f"slot index {index} outside 0..{self.count - 1}")
        return (index % self.columns, index // self.columns)

    def slot_origin(self, index: int) -> Tuple[int, int]:
        """Top-left pixel of the tile at `index`."""
        col, row = self.slot(index)
        return (
            col * (self.tile_width + self.h_spacing),
            row * (self.tile_height + self.v_spacing),
        )

    def origins(self) -> Iterator[Tuple[int, int]]:
        for i in range(self.count):
            yield self.slot_origin(i)


DEFAULT_LAYOUT = GridLayout()
