# gridcollage/domain/entities/asset_entry.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from gridcollage.domain.enums.image_format import ImageFormat


@dataclass(frozen=True)
class AssetEntry:
    """
    One source image found in the asset directory.
    `format` is what the file content says it is, not what its extension claims.
    """
    path: Path
    format: ImageFormat
