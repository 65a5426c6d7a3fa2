"""Configuration settings for the workout blocks API."""
import os
from typing import List, Literal


EnvironmentType = Literal["development", "staging", "production"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:3001"


class Settings:
    """Application settings."""

    # Environment
    ENVIRONMENT: EnvironmentType = "development"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_BLOCK_PAYLOADS: bool = False

    # HTTP
    CORS_ORIGINS: List[str] = []

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"

        # Logging
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.LOG_LEVEL = level if level in LOG_LEVELS else "INFO"
        self.LOG_BLOCK_PAYLOADS = os.getenv("LOG_BLOCK_PAYLOADS", "false").lower() == "true"

        # HTTP
        origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
        self.CORS_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]


settings = Settings()
