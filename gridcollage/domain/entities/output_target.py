# gridcollage/domain/entities/output_target.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from gridcollage.domain.enums.image_format import ImageFormat


@dataclass(frozen=True)
class OutputTarget:
    """Where the collage is written: <directory>/<filename>.<extension>."""
    directory: Path
    filename: str
    extension: str             # as requested, e.g. "jpg"
    format: ImageFormat        # normalized, e.g. ImageFormat.JPEG

    @property
    def path(self) -> Path:
        return self.directory / f"{self.filename}.{self.extension}"
