"""
Request / response logging middleware.
"""

import time
from fastapi import Request
from loguru import logger


async def logging_middleware(request: Request, call_next):
    start = time.perf_counter()
    client = request.client.host if request.client else "-"
    logger.info(f"→ {request.method} {request.url.path} from {client}")

    response = await call_next(request)

    elapsed = round((time.perf_counter() - start) * 1000, 2)
    level = "WARNING" if response.status_code >= 500 else "INFO"
    logger.log(level, f"← {request.method} {request.url.path} [{response.status_code}] {elapsed}ms")

    return response
