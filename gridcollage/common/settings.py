# gridcollage/common/settings.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_ROOT = Path(__file__).resolve().parents[2]


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False

    # Keep request-supplied output paths inside output_root.
    confine_output: bool = True

    @field_validator("confine_output", "cors_allow_credentials", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "gridcollage"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Paths --------
    app_root: Path = APP_ROOT
    assets_subdir: str = "assets"

    # Optional absolute overrides (leave empty to use APP_ROOT [+ subdir])
    asset_dir_override: Optional[Path] = Field(default=None, alias="ASSET_DIR")
    output_dir_override: Optional[Path] = Field(default=None, alias="OUTPUT_DIR")

    # -------- Output defaults --------
    output_filename: str = "result"
    output_extension: str = "png"
    jpeg_quality: int = Field(75, ge=1, le=95, description="Quality used for JPEG collages")

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # ===== Derived paths =====
    @computed_field  # type: ignore[misc]
    @property
    def asset_root(self) -> Path:
        if self.asset_dir_override:
            return Path(self.asset_dir_override)
        return self.app_root / self.assets_subdir

    @computed_field  # type: ignore[misc]
    @property
    def output_root(self) -> Path:
        if self.output_dir_override:
            return Path(self.output_dir_override)
        return self.app_root


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from gridcollage.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
