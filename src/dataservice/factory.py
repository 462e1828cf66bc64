"""Data service factory."""

import os
from pathlib import Path
from typing import Optional

from shared_types import ServiceBackend

from .base import FactService

_ENV_URL = "SUPABASE_URL"
_ENV_KEY = "SUPABASE_KEY"


def create_service(
    backend: str = ServiceBackend.SUPABASE,
    url: Optional[str] = None,
    api_key: Optional[str] = None,
    table: str = "facts",
    timeout: Optional[float] = 30.0,
    db_path: Optional[Path] = None,
) -> FactService:
    """Create a fact service instance.

    Args:
        backend: "supabase" or "sqlite"
        url: Supabase project URL (falls back to $SUPABASE_URL)
        api_key: Supabase anon key (falls back to $SUPABASE_KEY)
        table: Table holding the facts
        timeout: HTTP timeout in seconds, None to wait indefinitely
        db_path: Database file for the sqlite backend

    Raises:
        ValueError: unknown backend or missing connection settings
    """
    if backend == ServiceBackend.SUPABASE:
        from .supabase import SupabaseFactService

        url = url or os.getenv(_ENV_URL)
        api_key = api_key or os.getenv(_ENV_KEY)
        if not url or not api_key:
            raise ValueError(
                f"Supabase backend needs service.url and service.api_key "
                f"(or ${_ENV_URL} / ${_ENV_KEY})"
            )
        return SupabaseFactService(url, api_key, table=table, timeout=timeout)
    elif backend == ServiceBackend.SQLITE:
        from .sqlite import SQLiteFactService

        if db_path is None:
            raise ValueError("SQLite backend needs paths.db")
        return SQLiteFactService(db_path, table=table)
    else:
        raise ValueError(f"Unknown backend: {backend}. Use: supabase, sqlite")
