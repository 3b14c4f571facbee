"""Application configuration using Pydantic Settings.

This module centralizes all configuration values that may vary between environments.
Values can be overridden via environment variables or .env file.
"""
import os
from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()

DEFAULT_SEED_PATH = Path(__file__).parent / "data" / "attractions.json"


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # ===== Runtime =====
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    API_V1_PREFIX: str = os.getenv("API_V1_PREFIX", "/api/v1")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5000",
        "http://127.0.0.1:5000",
    ]

    # ===== Seed Data =====
    SEED_DATA_PATH: str = os.getenv("SEED_DATA_PATH", str(DEFAULT_SEED_PATH))
    ADMIN_USERNAME: str = os.getenv("ADMIN_USERNAME", "admin")
    ADMIN_EMAIL: str = os.getenv("ADMIN_EMAIL", "admin@wanderly.com")
    ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD", "admin123")

    # ===== Auth Tokens =====
    TOKEN_SECRET: str = os.getenv("TOKEN_SECRET", "wanderly-secret-key-change-in-production")
    TOKEN_TTL_DAYS: int = int(os.getenv("TOKEN_TTL_DAYS", "7"))
    PASSWORD_HASH_ITERATIONS: int = int(os.getenv("PASSWORD_HASH_ITERATIONS", "120000"))

    # ===== Distance & Location =====
    NEARBY_DEFAULT_RADIUS_KM: float = float(os.getenv("NEARBY_DEFAULT_RADIUS_KM", "5.0"))
    NEARBY_RESULT_LIMIT: int = int(os.getenv("NEARBY_RESULT_LIMIT", "12"))
    NEARBY_MAX_RESULT_LIMIT: int = int(os.getenv("NEARBY_MAX_RESULT_LIMIT", "100"))

    # ===== Planner Per-diems (base currency units per person per day) =====
    ACCOMMODATION_PER_DIEM: float = float(os.getenv("ACCOMMODATION_PER_DIEM", "1000"))
    FOOD_PER_DIEM: float = float(os.getenv("FOOD_PER_DIEM", "500"))

    class Config:
        env_file = ".env"
        case_sensitive = True
        # Allow extra fields from .env that aren't defined here
        extra = "ignore"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are loaded once.
    """
    return Settings()
