# gridcollage/domain/dataclasses/reports.py
from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from gridcollage.domain.enums.image_format import ImageFormat
from gridcollage.domain.enums.invocation import InvocationContext


# ---------------------------------------------------------------------------
# Base report (shared fields + utilities)
# ---------------------------------------------------------------------------
@dataclass
class BaseReport:
    """Common report base:
    - timing: started_at / finished_at
    - helpers: start(), stop(), elapsed_sec, as_dict()
    """
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    def start(self) -> None:
        if self.started_at is None:
            self.started_at = datetime.now()

    def stop(self) -> None:
        self.finished_at = datetime.now()

    @property
    def elapsed_sec(self) -> Optional[float]:
        if self.started_at is None or self.finished_at is None:
            return None
        return (self.finished_at - self.started_at).total_seconds()

    def as_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if f.repr}


# ---------------------------------------------------------------------------
# Collage build report
# ---------------------------------------------------------------------------
@dataclass
class CollageReport(BaseReport):
    context: InvocationContext = InvocationContext.batch
    output_path: Optional[Path] = None
    format: Optional[ImageFormat] = None
    width: int = 0
    height: int = 0
    tiles_placed: int = 0
    bytes_written: int = 0
    # Encoded image, kept only for interactive builds (response body)
    content: Optional[bytes] = field(default=None, repr=False)

    @property
    def media_type(self) -> Optional[str]:
        return self.format.mime if self.format else None
