"""
Learning platform API — FastAPI entry point.
"""

from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from loguru import logger

from learning_platform.config import settings
from learning_platform.limiter import limiter
from learning_platform.models.database import init_db
from learning_platform.models.schemas import HealthResponse
from learning_platform.services.tutor_service import TutorService, get_tutor, tutor
from learning_platform.middleware.error_handler import global_exception_handler
from learning_platform.middleware.logging_middleware import logging_middleware

# ── Routes ───────────────────────────────────────────────
from learning_platform.routes.auth import router as auth_router
from learning_platform.routes.progress import router as progress_router
from learning_platform.routes.tutor import router as tutor_router


# ── Lifespan ─────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    await init_db()
    if tutor.ai_enabled:
        logger.info(f"OpenAI integration active (model={settings.OPENAI_MODEL})")
    else:
        logger.warning("OpenAI API key not configured - using fallback responses")
    yield
    await tutor.drain()
    await tutor.gateway.aclose()
    logger.info("Shutting down")


# ── App ──────────────────────────────────────────────────
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Learning platform API with an AI tutor",
    lifespan=lifespan,
)

# ── Rate Limiter ─────────────────────────────────────────
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# ── CORS ─────────────────────────────────────────────────
origins = settings.CORS_ORIGINS.split(",") if settings.CORS_ORIGINS != "*" else ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Custom Middleware ────────────────────────────────────
app.middleware("http")(global_exception_handler)
app.middleware("http")(logging_middleware)

# ── Register Routers ────────────────────────────────────
app.include_router(auth_router)
app.include_router(progress_router)
app.include_router(tutor_router)


# ── Health Check ─────────────────────────────────────────
@app.get("/api/health", tags=["health"], response_model=HealthResponse)
async def health(tutor: TutorService = Depends(get_tutor)):
    return HealthResponse(
        status="OK",
        message="Server is running",
        aiEnabled=tutor.ai_enabled,
    )


# ── Run ──────────────────────────────────────────────────
def run():
    import uvicorn
    uvicorn.run(
        "learning_platform.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="info",
    )


if __name__ == "__main__":
    run()
