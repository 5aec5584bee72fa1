# File: app/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field, field_validator


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    # Basic app info
    PROJECT_NAME: str = "Inventory API"
    VERSION: str = "0.1.0"

    api_prefix: str = "/api"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS
    backend_cors_origins: List[str] = Field(
        default=os.getenv(
            "BACKEND_CORS_ORIGINS",
            "http://localhost:5173,http://127.0.0.1:5173",
        ),
        validate_default=True,
    )

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./inventory.db")

    # Security / auth
    secret_key: str = os.getenv("SECRET_KEY", "CHANGE_ME_IN_PRODUCTION")
    algorithm: str = os.getenv("JWT_ALGORITHM", "HS256")
    # 0 means tokens carry no exp claim
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "0"))
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "10"))

    # Order routes are public unless this is switched on
    orders_require_auth: bool = _env_flag("ORDERS_REQUIRE_AUTH")

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
