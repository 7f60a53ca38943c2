from gridcollage.services.schemas.health import (
    HealthRead,
)
__all__ = [
    "HealthRead",
]
