"""Pydantic configuration models for til."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from shared_types import ServiceBackend


class ServiceConfig(BaseModel):
    """Data service connection."""

    backend: ServiceBackend = ServiceBackend.SUPABASE
    url: Optional[str] = None
    api_key: Optional[str] = None
    table: str = "facts"
    timeout: Optional[float] = 30.0  # None = wait indefinitely

    @field_validator("table")
    @classmethod
    def validate_table(cls, v: str) -> str:
        if not v.isidentifier():
            raise ValueError(f"Invalid table name: {v}")
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError(f"timeout must be positive, got {v}")
        return v


class PathsConfig(BaseModel):
    """File paths configuration."""

    db: Path = Path("~/til/facts.db")
    log_file: Optional[Path] = None

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.db = self.db.expanduser()
        if self.log_file:
            self.log_file = self.log_file.expanduser()
        return self


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    json_mode: bool = Field(default=False, alias="json")

    model_config = {"populate_by_name": True}

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class BoardConfig(BaseModel):
    """Main configuration model."""

    service: ServiceConfig = Field(default_factory=ServiceConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def expand_env_vars(self):
        """Expand ${VAR} patterns in connection settings."""
        for attr in ("url", "api_key"):
            value = getattr(self.service, attr)
            if value and value.startswith("${") and value.endswith("}"):
                setattr(self.service, attr, os.getenv(value[2:-1], "") or None)
        return self
