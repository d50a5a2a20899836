from __future__ import annotations

from typing import Annotated, Any, List
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import AnyUrl, Field, field_validator


class Settings(BaseSettings):
    # env names are matched case-insensitively
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="forbid",
    )

    APP_NAME: str = Field("Quiz App Backend", description="Title shown in the OpenAPI docs")
    APP_ENV: str = Field("dev", description="dev|staging|prod; dev runs uvicorn with reload")
    API_PREFIX: str = Field("", description="Mount point of the question/quiz routes, e.g. /api")
    BACKEND_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    SUPABASE_URL: AnyUrl
    SUPABASE_SERVICE_ROLE_KEY: str
    SUPABASE_SCHEMA: str = "public"

    FRONTEND_ORIGINS: Annotated[List[str], NoDecode] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    @field_validator("FRONTEND_ORIGINS", mode="before")
    @classmethod
    def _split_origins(cls, v: Any) -> Any:
        """http://a,http://b or http://a;http://b from .env becomes a list."""
        if isinstance(v, str):
            return [item.strip() for item in v.replace(";", ",").split(",") if item.strip()]
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper()


settings = Settings()
