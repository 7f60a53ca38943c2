# gridcollage/domain/errors.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Tuple

from gridcollage.domain.enums.image_format import extensions_for


class CollageError(RuntimeError):
    """Base for every failure that aborts a collage build. Never retried."""


class MissingCapability(CollageError):
    """The image codec facility or content sniffing is not available."""


class UnsupportedFormat(CollageError):
    def __init__(self, extension: Optional[str], supported: Iterable = ()) -> None:
        self.extension = extension
        self.supported = frozenset(supported)
        allowed = ", ".join(extensions_for(self.supported)) or "none"
        shown = f'"{extension}"' if extension else "(none)"
        super().__init__(f"Invalid file extension {shown}. Supported types: {allowed}")


class DirectoryCreateFailed(CollageError):
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot create directory {self.path}")


class InvalidFilename(CollageError):
    def __init__(self, requested: str) -> None:
        self.requested = requested
        super().__init__(f'Invalid file name "{requested}"')


class UnsafeOutputPath(CollageError):
    def __init__(self, requested: str, root: Path | str) -> None:
        self.requested = requested
        self.root = Path(root)
        super().__init__(f'Output path "{requested}" escapes {self.root}')


class AssetCountMismatch(CollageError):
    def __init__(self, count: int, expected: int = 10) -> None:
        self.count = count
        self.expected = expected
        super().__init__(f'Invalid asset count "{count}" (expected {expected})')


class DecodeFailed(CollageError):
    def __init__(self, path: Path | str, reason: str = "") -> None:
        self.path = Path(path)
        msg = f"Cannot decode image {self.path}"
        super().__init__(f"{msg}: {reason}" if reason else msg)


class AssetDimensionMismatch(CollageError):
    def __init__(self, path: Path | str, size: Tuple[int, int], expected: Tuple[int, int]) -> None:
        self.path = Path(path)
        self.size = tuple(size)
        self.expected = tuple(expected)
        super().__init__(
            f"Image {self.path} is {size[0]}x{size[1]}, expected {expected[0]}x{expected[1]}"
        )


class OutputWriteFailed(CollageError):
    def __init__(self, path: Path | str, reason: str = "") -> None:
        self.path = Path(path)
        msg = f"Cannot write {self.path}"
        super().__init__(f"{msg}: {reason}" if reason else msg)
