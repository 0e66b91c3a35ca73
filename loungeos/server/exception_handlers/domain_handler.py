"""
Domain Exception Handler.

Maps ``LoungeOSError`` subclasses raised by services to JSON responses:
404 for missing records, 400 for rejected operations, 409 for conflicts and
401 for failed sign-ins.
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from loungeos.core.errors import LoungeOSError
from loungeos.core.logging_config import get_logger

logger = get_logger(__name__)


async def domain_exception_handler(request: Request, exc: LoungeOSError) -> JSONResponse:
    logger.warning(
        f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": exc.status_code,
            "error_type": type(exc).__name__,
        },
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})
