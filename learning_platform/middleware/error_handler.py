"""
Global exception handler middleware.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError


async def global_exception_handler(request: Request, call_next):
    try:
        response = await call_next(request)
        return response
    except SQLAlchemyError as exc:
        logger.exception(f"Database error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={"message": "Database error", "error": str(getattr(exc, "orig", None) or exc)},
        )
    except Exception as exc:
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={
                "message": "Server error",
                "error": type(exc).__name__,
            },
        )
