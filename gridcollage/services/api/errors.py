# gridcollage/services/api/errors.py
from __future__ import annotations

from http import HTTPStatus
from typing import Dict, Type

from fastapi import Request
from fastapi.responses import JSONResponse

from gridcollage.common.logging import get_logger
from gridcollage.domain.errors import (
    AssetCountMismatch,
    AssetDimensionMismatch,
    CollageError,
    DecodeFailed,
    DirectoryCreateFailed,
    InvalidFilename,
    MissingCapability,
    OutputWriteFailed,
    UnsafeOutputPath,
    UnsupportedFormat,
)

logger = get_logger(__name__)

_STATUS: Dict[Type[CollageError], HTTPStatus] = {
    UnsupportedFormat: HTTPStatus.BAD_REQUEST,
    InvalidFilename: HTTPStatus.BAD_REQUEST,
    UnsafeOutputPath: HTTPStatus.BAD_REQUEST,
    AssetCountMismatch: HTTPStatus.UNPROCESSABLE_ENTITY,
    AssetDimensionMismatch: HTTPStatus.UNPROCESSABLE_ENTITY,
    DecodeFailed: HTTPStatus.UNPROCESSABLE_ENTITY,
    MissingCapability: HTTPStatus.SERVICE_UNAVAILABLE,
    DirectoryCreateFailed: HTTPStatus.INTERNAL_SERVER_ERROR,
    OutputWriteFailed: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def status_for(exc: CollageError) -> HTTPStatus:
    for cls in type(exc).__mro__:
        if cls in _STATUS:
            return _STATUS[cls]
    return HTTPStatus.INTERNAL_SERVER_ERROR


async def collage_error_handler(request: Request, exc: CollageError) -> JSONResponse:
    """Render any CollageError as {"detail": "..."} with a matching status."""
    status = status_for(exc)
    logger.warning("%s %s failed (%d): %s", request.method, request.url.path, status, exc)
    return JSONResponse(status_code=status, content={"detail": str(exc)})
