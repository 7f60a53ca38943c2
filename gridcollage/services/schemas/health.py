# gridcollage/services/schemas/health.py
from __future__ import annotations
from typing import List
from pydantic import BaseModel, Field

class HealthRead(BaseModel):
    ok: bool = True
    app: str
    env: str
    supported_formats: List[str] = Field(default_factory=list, examples=[["bmp", "gif", "jpeg", "png"]])
