# backend/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./bazaar_inventory.db"

    # Static credential pair checked by the Basic auth dependency
    BASIC_AUTH_USER: str = "admin"
    BASIC_AUTH_PASS: str = "password"

    # Fixed window: RATE_LIMIT_MAX requests per client per window
    RATE_LIMIT_MAX: int = 40
    RATE_LIMIT_WINDOW_SECONDS: int = 15 * 60

    REQUEST_TIMEOUT_SECONDS: float = 30.0
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"

settings = Settings()
