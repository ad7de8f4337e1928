# File: app/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    # Basic app info
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "User Resource API")
    VERSION: str = "0.1.0"

    api_v1_prefix: str = os.getenv("API_V1_PREFIX", "/api/v1")
    debug: bool = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # CORS
    backend_cors_origins: List[str] = Field(
        os.getenv("BACKEND_CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173"),
        validate_default=True,
    )

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./users.db")

    # Password hashing cost (bcrypt log2 rounds)
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "12"))

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
