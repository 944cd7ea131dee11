"""Error envelope for API responses.

Every failure body carries either a ``msg`` field or an ``errors`` array.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


def _validation_error_item(error: dict) -> dict:
    """Flatten a pydantic error into ``{msg, param, location}``."""
    loc = [str(part) for part in error.get("loc", ())]
    return {
        "msg": error.get("msg"),
        "param": ".".join(loc[1:]) if len(loc) > 1 else "",
        "location": loc[0] if loc else "",
    }


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTP errors as ``{"msg": ...}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"msg": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation errors as 400 ``{"errors": [...]}``."""
    errors = [_validation_error_item(error) for error in exc.errors()]
    logfire.info("Request validation failed", path=request.url.path, errors=len(errors))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"errors": errors}),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render anything unexpected as a generic 500 without internal detail."""
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"msg": "Server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the error envelope handlers on the app.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
