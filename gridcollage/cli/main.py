"""
Command-line entry point: build the collage and write it to disk.

    gridcollage                      # <app root>/result.png
    gridcollage ./folder/image.jpg   # creates ./folder if needed
    gridcollage -- -draft.png        # a name starting with a dash
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from gridcollage.common.logging import get_logger
from gridcollage.common.settings import get_settings
from gridcollage.domain.enums.invocation import InvocationContext
from gridcollage.domain.errors import CollageError
from gridcollage.services.codecs.pillow_codecs import PillowCodecs
from gridcollage.services.collage.builder import CollageBuilder
from gridcollage.services.collage.capabilities import detect_capabilities


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="gridcollage",
        description="Tile the ten images of the asset directory into a 5x2 collage.",
        epilog="Put -- before an output path that starts with a dash, e.g. gridcollage -- -draft.png",
    )
    p.add_argument(
        "output",
        nargs="*",
        metavar="OUTPUT",
        help="Output path with file name and extension (jpg, jpeg, jfif, jpe, png, bmp, gif). "
             "Defaults to result.png in the application root.",
    )
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if len(args.output) > 1:
        print("Error: Too many arguments", file=sys.stderr)
        return 1

    cfg = get_settings()
    get_logger(level=cfg.log_level)

    try:
        codecs = PillowCodecs(jpeg_quality=cfg.jpeg_quality)
        capabilities = detect_capabilities(codecs)
        builder = CollageBuilder(capabilities=capabilities, codecs=codecs, cfg=cfg)
        rpt = builder.run(args.output[0] if args.output else None, context=InvocationContext.batch)
    except CollageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"File generated: {rpt.output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
