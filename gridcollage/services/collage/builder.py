# gridcollage/services/collage/builder.py
from __future__ import annotations

from typing import Collection, Optional

from gridcollage.common.logging import get_logger
from gridcollage.common.settings import Settings, get_settings
from gridcollage.domain.dataclasses.reports import CollageReport
from gridcollage.domain.enums.image_format import ImageFormat
from gridcollage.domain.enums.invocation import InvocationContext
from gridcollage.domain.policies.grid_layout import DEFAULT_LAYOUT, GridLayout
from gridcollage.domain.ports.codecs import ImageCodecPort
from gridcollage.services.codecs.pillow_codecs import PillowCodecs
from gridcollage.services.collage.asset_enumerator import enumerate_assets
from gridcollage.services.collage.compositor import compose
from gridcollage.services.collage.emitter import emit
from gridcollage.services.collage.output_resolver import resolve_output_target

logger = get_logger(__name__)


class CollageBuilder:
    """
    Builds the ten-tile collage:
      resolve output target -> enumerate assets -> compose canvas -> encode + write.

    The supported-format set is computed once by the caller (see
    detect_capabilities) and passed in; the builder never probes codecs itself.
    Each run re-scans the asset directory and uses a fresh canvas.
    """

    def __init__(
        self,
        *,
        capabilities: Collection[ImageFormat],
        codecs: Optional[ImageCodecPort] = None,
        cfg: Optional[Settings] = None,
        layout: GridLayout = DEFAULT_LAYOUT,
    ) -> None:
        self.cfg = cfg or get_settings()
        self.capabilities = frozenset(capabilities)
        self.codecs: ImageCodecPort = codecs or PillowCodecs(jpeg_quality=self.cfg.jpeg_quality)
        self.layout = layout

    def run(
        self,
        requested_path: Optional[str] = None,
        *,
        context: InvocationContext = InvocationContext.batch,
    ) -> CollageReport:
        rpt = CollageReport(context=context)
        rpt.start()

        confine = self.cfg.output_root if (
            context == InvocationContext.interactive and self.cfg.api.confine_output
        ) else None
        target = resolve_output_target(
            requested_path,
            self.capabilities,
            default_dir=self.cfg.output_root,
            default_filename=self.cfg.output_filename,
            default_extension=self.cfg.output_extension,
            confine_to=confine,
        )
        logger.info("Collage target %s (%s)", target.path, target.format.value)

        entries = enumerate_assets(
            self.cfg.asset_root, self.capabilities, self.codecs, expected=self.layout.count
        )

        with compose(entries, self.layout, self.codecs, output_format=target.format) as canvas:
            rpt.width, rpt.height = canvas.size
            rpt.tiles_placed = canvas.tiles_placed
            out = emit(canvas, target, self.capabilities, self.codecs, context=context)

        rpt.output_path = out.path
        rpt.format = out.format
        rpt.bytes_written = out.bytes_written
        rpt.content = out.content
        rpt.stop()
        return rpt
