# app/adapters/configuration/config.py

import json
from typing import Annotated, List, Union
from logging import getLevelName
from pydantic import field_validator, ConfigDict
from pydantic_settings import BaseSettings, NoDecode


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"  # "development", "production", "testing"

    # Debug flag
    DEBUG: bool = False

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./password_manager.db"
    DB_ECHO: bool = False

    # Storage tables
    CLIENT_TABLE: str = "Client"
    PASSWORD_TABLE: str = "Password"

    # Crypto (Fernet key, url-safe base64)
    ENCRYPTION_KEY: str

    # CORS
    # NoDecode hands the raw env string to the validator below
    CORS_ORIGINS: Annotated[List[str], NoDecode] = ["http://localhost:4200", "http://127.0.0.1:4200"]

    # API Documentation
    SCHEMA_VISIBILITY: bool = True

    @field_validator("DATABASE_URL", mode="before")
    def assemble_db_url(cls, value: str) -> str:
        """Use the async drivers for URLs written with the sync ones."""
        if isinstance(value, str) and value.startswith("postgresql+psycopg2"):
            return value.replace("postgresql+psycopg2", "postgresql+asyncpg", 1)
        if isinstance(value, str) and value.startswith("postgresql://"):
            return value.replace("postgresql://", "postgresql+asyncpg://", 1)
        return value

    @field_validator("CORS_ORIGINS", mode="before")
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """
        A CSV string (e.g. 'a,b,c') or a JSON array becomes a list.
        Lists are returned as they are.
        """
        if isinstance(v, str) and v.strip().startswith("["):
            v = json.loads(v)
        elif isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        if isinstance(v, list):
            return v
        raise ValueError(f"Invalid CORS_ORIGINS: {v!r}")

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """Ensure the value is a valid logging level."""
        lvl = v.upper()
        if not isinstance(getLevelName(lvl), int):
            raise ValueError(f"Invalid LOG_LEVEL: {v!r}")
        return lvl

    model_config = ConfigDict(env_file=".env", extra="ignore")


settings = Settings()
