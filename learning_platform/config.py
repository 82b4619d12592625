"""
Application configuration — reads all settings from environment variables.
"""

from pydantic_settings import BaseSettings

# Value shipped in the sample .env; treated the same as a missing key.
OPENAI_KEY_PLACEHOLDER = "your-openai-api-key-here"


class Settings(BaseSettings):
    # ── App ──────────────────────────────────────────────
    APP_NAME: str = "Punjab Learning Platform"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    SECRET_KEY: str = "change-me-in-production"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    CORS_ORIGINS: str = "*"

    # ── Database ─────────────────────────────────────────
    DATABASE_URL: str = "sqlite+aiosqlite:///./learning_platform.db"

    # ── OpenAI ───────────────────────────────────────────
    OPENAI_API_KEY: str = OPENAI_KEY_PLACEHOLDER
    OPENAI_MODEL: str = "gpt-3.5-turbo"
    AI_MAX_TOKENS: int = 300
    AI_TEMPERATURE: float = 0.7

    # ── Question history ─────────────────────────────────
    AI_HISTORY_LIMIT: int = 50

    # ── Rate Limiting ────────────────────────────────────
    RATE_LIMIT_PER_MINUTE: int = 60

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
