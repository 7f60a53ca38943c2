# gridcollage/services/collage/output_resolver.py
from __future__ import annotations

from pathlib import Path, PurePath
from typing import Collection, Optional, Tuple

from gridcollage.common.logging import get_logger
from gridcollage.common.path.safe import safe_join
from gridcollage.domain.entities.output_target import OutputTarget
from gridcollage.domain.enums.image_format import ImageFormat
from gridcollage.domain.errors import (
    DirectoryCreateFailed,
    InvalidFilename,
    UnsafeOutputPath,
    UnsupportedFormat,
)

logger = get_logger(__name__)


def split_output_path(requested: str) -> Tuple[str, str, str]:
    """
    Split "dir/sub/name.ext" into ("dir/sub", "name", "ext").
    The extension is whatever follows the last dot of the final component, so
    ".png" has an empty stem and "name" has no extension.
    """
    p = PurePath(requested)
    directory = str(p.parent)
    stem, dot, ext = p.name.rpartition(".")
    if not dot:
        stem, ext = p.name, ""
    return directory, stem, ext


def _supported_format(ext: str, supported: Collection[ImageFormat]) -> ImageFormat:
    fmt = ImageFormat.from_extension(ext)
    if fmt is None or fmt not in supported:
        raise UnsupportedFormat(ext, supported)
    return fmt


def resolve_output_target(
    requested: Optional[str],
    supported: Collection[ImageFormat],
    *,
    default_dir: Path,
    default_filename: str = "result",
    default_extension: str = "png",
    confine_to: Optional[Path] = None,
) -> OutputTarget:
    """
    Turn an optional caller-supplied path into a validated OutputTarget.

    Filename and extension are checked before anything touches the disk; the
    directory is only created (recursively) for a request that is otherwise valid.
    With `confine_to`, the directory part is taken relative to that root and
    must stay inside it.
    """
    if not requested:
        fmt = _supported_format(default_extension, supported)
        return OutputTarget(
            directory=_ensure_dir(Path(default_dir)),
            filename=default_filename,
            extension=default_extension,
            format=fmt,
        )

    dir_part, stem, ext = split_output_path(requested)
    if not stem:
        raise InvalidFilename(requested)
    fmt = _supported_format(ext, supported)

    if dir_part in ("", "."):
        directory = Path(default_dir)
    elif confine_to is not None:
        try:
            directory = safe_join(confine_to, dir_part)
        except ValueError as exc:
            raise UnsafeOutputPath(requested, confine_to) from exc
    else:
        directory = Path(dir_part).expanduser()

    return OutputTarget(directory=_ensure_dir(directory), filename=stem, extension=ext, format=fmt)


def _ensure_dir(directory: Path) -> Path:
    if not directory.is_dir():
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryCreateFailed(directory) from exc
        logger.info("Created output directory %s", directory)
    return directory
