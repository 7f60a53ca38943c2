# gridcollage/services/api/routers/health.py
from __future__ import annotations
from fastapi import APIRouter, Depends
from gridcollage.common.settings import get_settings
from gridcollage.domain.enums.image_format import ImageFormat
from gridcollage.services.api.deps import get_capabilities
from gridcollage.services.schemas.health import HealthRead

router = APIRouter(tags=["health"])

@router.get("/healthz", response_model=HealthRead)
def healthz(capabilities: frozenset[ImageFormat] = Depends(get_capabilities)) -> HealthRead:
    s = get_settings()
    return HealthRead(
        ok=True,
        app=s.app_name,
        env=s.app_env,
        supported_formats=sorted(f.value for f in capabilities),
    )
