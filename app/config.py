# app/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Database ──────────────────────────────────────────────────────────
    DATABASE_URL: str = "postgresql://localhost:5432/digital_mechanic_db"

    # ── Network ───────────────────────────────────────────────────────────
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    CORS_ORIGINS: list[str] = ["*"]

    # ── Security ──────────────────────────────────────────────────────────
    BCRYPT_ROUNDS: int = 10                  # Cost factor for new password hashes

    # ── Vehicle Registry ──────────────────────────────────────────────────
    ENFORCE_CAR_OWNER_EXISTS: bool = False   # Reject cars whose userId has no user

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
