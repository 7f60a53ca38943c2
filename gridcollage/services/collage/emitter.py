# gridcollage/services/collage/emitter.py
from __future__ import annotations

import os
import secrets
from dataclasses import dataclass
from pathlib import Path
from typing import Collection, Optional

from gridcollage.common.logging import get_logger
from gridcollage.domain.entities.output_target import OutputTarget
from gridcollage.domain.enums.image_format import ImageFormat
from gridcollage.domain.enums.invocation import InvocationContext
from gridcollage.domain.errors import OutputWriteFailed, UnsupportedFormat
from gridcollage.domain.ports.codecs import ImageCodecPort
from gridcollage.services.collage.compositor import Canvas

logger = get_logger(__name__)


@dataclass
class Emitted:
    path: Path
    format: ImageFormat
    bytes_written: int
    content: Optional[bytes] = None   # only for interactive invocations


def write_atomic(data: bytes, out_path: Path) -> None:
    """
    Write to a temp file beside `out_path` and rename it into place.
    The temp file is created with the umask-default mode, like a plain open().
    """
    tmp_path = out_path.with_name(f".{out_path.name}.{secrets.token_hex(4)}.part")
    try:
        try:
            fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o666)
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
            os.replace(tmp_path, out_path)
        except OSError as exc:
            raise OutputWriteFailed(out_path, exc.strerror or str(exc)) from exc
    finally:
        tmp_path.unlink(missing_ok=True)


def emit(
    canvas: Canvas,
    target: OutputTarget,
    supported: Collection[ImageFormat],
    codecs: ImageCodecPort,
    *,
    context: InvocationContext = InvocationContext.batch,
) -> Emitted:
    """
    Encode the canvas once and write it to `target.path`.
    Interactive invocations also get the encoded bytes back for the response body.
    """
    # Re-check here: a target that slipped past resolution must not write nothing quietly.
    fmt = ImageFormat.from_extension(target.extension)
    if fmt is None or fmt not in supported:
        raise UnsupportedFormat(target.extension, supported)

    data = codecs.encode(canvas.image, fmt, transparent_color=canvas.transparent_color)
    out_path = target.path
    write_atomic(data, out_path)
    logger.info("Wrote %s collage (%d bytes) to %s", fmt.value, len(data), out_path)

    return Emitted(
        path=out_path,
        format=fmt,
        bytes_written=len(data),
        content=data if context == InvocationContext.interactive else None,
    )
