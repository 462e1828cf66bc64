"""Data service adapters for the fact board."""

from .base import FactService
from .factory import create_service
from .sqlite import SQLiteFactService
from .supabase import SupabaseFactService

__all__ = ["FactService", "SQLiteFactService", "SupabaseFactService", "create_service"]
