# gridcollage/services/api/routers/collage.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from gridcollage.common.settings import get_settings
from gridcollage.domain.enums.image_format import ImageFormat
from gridcollage.domain.enums.invocation import InvocationContext
from gridcollage.domain.ports.codecs import ImageCodecPort
from gridcollage.services.api.deps import get_capabilities, get_codecs
from gridcollage.services.collage.builder import CollageBuilder

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/collage", tags=["collage"])


@router.get("", response_class=Response)
def build_collage(
    name: str | None = Query(None, description="Output path, e.g. ./folder/image.png"),
    capabilities: frozenset[ImageFormat] = Depends(get_capabilities),
    codecs: ImageCodecPort = Depends(get_codecs),
) -> Response:
    """
    Build the collage, write it to disk and return the encoded image.
    The written file path is echoed in the X-Collage-Path header.
    CollageError subclasses are turned into JSON errors by the app's handler.
    """
    builder = CollageBuilder(capabilities=capabilities, codecs=codecs, cfg=get_settings())
    rpt = builder.run(name, context=InvocationContext.interactive)
    return Response(
        content=rpt.content or b"",
        media_type=rpt.media_type,
        headers={"X-Collage-Path": str(rpt.output_path)},
    )
