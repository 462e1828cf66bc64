"""Configuration loading."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from dataservice import FactService, create_service

from .config_models import BoardConfig


class ConfigError(ValueError):
    """Config file unreadable or invalid."""


def find_config() -> Optional[Path]:
    """Find config file in standard locations."""
    locations = [
        Path.cwd() / "config.yaml",
        Path.home() / ".til" / "config.yaml",
    ]
    for loc in locations:
        if loc.exists():
            return loc
    return None


def load_config_model(config_path: Optional[Path] = None) -> BoardConfig:
    """Load configuration as Pydantic model with validation."""
    data = {}

    path = config_path or find_config()
    if path and path.exists():
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file: {e}") from e

    try:
        return BoardConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed: {e}") from e


def service_from_config(config: BoardConfig) -> FactService:
    """Build the configured data service."""
    svc = config.service
    return create_service(
        backend=svc.backend,
        url=svc.url,
        api_key=svc.api_key,
        table=svc.table,
        timeout=svc.timeout,
        db_path=config.paths.db,
    )
