from __future__ import annotations

from typing import List, Any
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, AliasChoices, field_validator


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="forbid",  # unknown keys in .env are an error (catches typos)
    )

    APP_NAME: str = "Quiz API"
    # "" keeps the routes at /quizzes, e.g. "/api/v1" mounts them below it
    API_PREFIX: str = ""

    HOST: str = Field(
        "0.0.0.0",
        validation_alias=AliasChoices("HOST", "app_host"),
        description="Interface to bind",
    )
    PORT: int = Field(
        3000,
        validation_alias=AliasChoices("PORT", "app_port"),
        description="Port to bind",
    )

    LOG_LEVEL: str = Field(
        "INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "log_level"),
        description="Root logger level name",
    )

    FRONTEND_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
    ]

    @field_validator("FRONTEND_ORIGINS", mode="before")
    @classmethod
    def _parse_origins(cls, v: Any) -> Any:
        """
        FRONTEND_ORIGINS may be given in .env as:
        - a JSON array: ["http://localhost:5173","http://localhost:3000"]
        - a comma separated string: http://localhost:5173,http://localhost:3000
        - or with ; as the separator
        """
        if isinstance(v, str):
            s = v.strip()
            if s.startswith("[") and s.endswith("]"):
                import json
                try:
                    return json.loads(s)
                except json.JSONDecodeError:
                    # malformed JSON falls through to the plain split
                    pass
            return [item.strip() for item in s.replace(";", ",").split(",") if item.strip()]
        return v


settings = Settings()
