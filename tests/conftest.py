# tests/conftest.py
from __future__ import annotations
import struct
from pathlib import Path
from typing import Tuple

import pytest
from PIL import Image

from gridcollage.common import settings as settings_mod
from gridcollage.services.codecs.pillow_codecs import PillowCodecs
from gridcollage.services.collage.capabilities import detect_capabilities

TILE_SIZE = (362, 544)

# One distinct, opaque color per tile, in placement order (tile1..tile10)
TILE_COLORS = [
    (220, 20, 60),
    (255, 140, 0),
    (255, 215, 0),
    (50, 205, 50),
    (0, 128, 128),
    (30, 144, 255),
    (75, 0, 130),
    (238, 130, 238),
    (139, 69, 19),
    (0, 0, 0),
]

# "BM" magic followed by a header Pillow's BMP plugin cannot read
BROKEN_BMP = b"BM" + b"\x00" * 12 + b"\xff\xff\x00\x00" + b"\x00" * 40

# PNG signature and a well-formed 362x544 RGB IHDR, but with a wrong CRC
BROKEN_PNG = (
    b"\x89PNG\r\n\x1a\n"
    + struct.pack(">I", 13)
    + b"IHDR"
    + struct.pack(">IIBBBBB", 362, 544, 8, 2, 0, 0, 0)
    + b"\xde\xad\xbe\xef"
    + b"\x00" * 32
)


def make_tile(
    path: Path,
    color: Tuple[int, int, int],
    *,
    fmt: str = "PNG",
    size: Tuple[int, int] = TILE_SIZE,
) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", size, color).save(path, format=fmt)
    return path


def fill_assets(directory: Path, count: int = 10, fmt: str = "PNG", ext: str = "png") -> list[Path]:
    return [
        make_tile(directory / f"tile{i + 1}.{ext}", TILE_COLORS[i % len(TILE_COLORS)], fmt=fmt)
        for i in range(count)
    ]


@pytest.fixture()
def asset_dir(tmp_path) -> Path:
    d = tmp_path / "assets"
    fill_assets(d)
    return d


@pytest.fixture()
def out_dir(tmp_path) -> Path:
    return tmp_path / "out"


@pytest.fixture()
def cfg(asset_dir, out_dir, monkeypatch):
    """Settings pointed at the per-test asset and output directories."""
    settings_mod.get_settings.cache_clear()
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("ASSET_DIR", str(asset_dir))
    monkeypatch.setenv("OUTPUT_DIR", str(out_dir))
    try:
        yield settings_mod.get_settings()
    finally:
        settings_mod.get_settings.cache_clear()


@pytest.fixture(scope="session")
def codecs() -> PillowCodecs:
    return PillowCodecs()


@pytest.fixture(scope="session")
def capabilities(codecs):
    return detect_capabilities(codecs)
