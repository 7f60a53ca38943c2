# gridcollage/services/collage/asset_enumerator.py
from __future__ import annotations

from pathlib import Path
from typing import Collection, List

from natsort import natsorted

from gridcollage.common.logging import get_logger
from gridcollage.domain.entities.asset_entry import AssetEntry
from gridcollage.domain.enums.image_format import ImageFormat
from gridcollage.domain.errors import AssetCountMismatch
from gridcollage.domain.ports.codecs import ImageCodecPort

logger = get_logger(__name__)

# Anything this small cannot hold a readable image header.
MIN_ASSET_BYTES = 12


def scan_assets(
    asset_dir: Path,
    supported: Collection[ImageFormat],
    codecs: ImageCodecPort,
) -> List[AssetEntry]:
    """Every regular file in `asset_dir` whose content is a supported image, unsorted."""
    asset_dir = Path(asset_dir)
    if not asset_dir.is_dir():
        logger.warning("Asset directory %s does not exist", asset_dir)
        return []

    found: List[AssetEntry] = []
    for p in asset_dir.iterdir():
        if not p.is_file():
            continue
        if p.stat().st_size < MIN_ASSET_BYTES:
            logger.debug("Skipping %s: too small to be an image", p.name)
            continue
        fmt = codecs.sniff(p)
        if fmt is None:
            logger.debug("Skipping %s: not a recognized image", p.name)
            continue
        if fmt not in supported:
            logger.debug("Skipping %s: %s is not a supported format", p.name, fmt.value)
            continue
        found.append(AssetEntry(path=p, format=fmt))
    return found


def enumerate_assets(
    asset_dir: Path,
    supported: Collection[ImageFormat],
    codecs: ImageCodecPort,
    *,
    expected: int = 10,
) -> List[AssetEntry]:
    """
    Return exactly `expected` source images in placement order.

    Order is the natural sort of the full path ("tile2" before "tile10"); it
    decides which grid slot each image lands in. Any other count, too few or
    too many, raises AssetCountMismatch rather than guessing which files were meant.
    """
    found = scan_assets(asset_dir, supported, codecs)
    if len(found) != expected:
        raise AssetCountMismatch(len(found), expected)

    ordered = natsorted(found, key=lambda e: str(e.path))
    logger.info("Found %d assets in %s", len(ordered), asset_dir)
    return ordered
