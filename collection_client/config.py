# collection_client/config.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TIMEOUT_S = 20.0
DEFAULT_RETRIES = 2

@dataclass(frozen=True)
class ClientConfig:
    base_url: str                 # e.g., "http://localhost:8000"
    api_key: str | None = None    # sent as a Bearer token when set
    timeout_s: float = DEFAULT_TIMEOUT_S
    retries: int = DEFAULT_RETRIES
    strict_schema: bool = False   # validate schemas locally before create_collection


class ClientSettings(BaseSettings):
    """Client settings read from VECTORDB_* environment variables (or .env)."""

    base_url: str = "http://localhost:8000"
    api_key: Optional[str] = None
    timeout_s: float = DEFAULT_TIMEOUT_S
    retries: int = DEFAULT_RETRIES
    strict_schema: bool = False

    # --- Logging ---
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="VECTORDB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"VECTORDB_LOG_LEVEL must be a logging level name, got {v!r}")
        return v

    @field_validator("retries")
    @classmethod
    def _validate_retries(cls, v: int) -> int:
        if v < 0:
            raise ValueError("VECTORDB_RETRIES must be >= 0")
        return v

    def to_config(self) -> ClientConfig:
        return ClientConfig(
            base_url=self.base_url,
            api_key=self.api_key,
            timeout_s=self.timeout_s,
            retries=self.retries,
            strict_schema=self.strict_schema,
        )
