"""Fact board core: catalog, validation, list state, votes and submissions."""

from .categories import ALL, CATEGORIES, Category, color_of
from .errors import (
    GENERIC_ERROR_MESSAGE,
    LOAD_ERROR_MESSAGE,
    CategoryNotFoundError,
    ServiceError,
)
from .models import Fact, is_disputed
from .store import FactStore
from .submission import FactForm, SubmissionWorkflow
from .validation import MAX_FACT_LENGTH, is_valid_fact_input, is_valid_url
from .votes import VoteEngine

__all__ = [
    "ALL",
    "CATEGORIES",
    "Category",
    "color_of",
    "CategoryNotFoundError",
    "ServiceError",
    "GENERIC_ERROR_MESSAGE",
    "LOAD_ERROR_MESSAGE",
    "Fact",
    "is_disputed",
    "FactStore",
    "FactForm",
    "SubmissionWorkflow",
    "MAX_FACT_LENGTH",
    "is_valid_fact_input",
    "is_valid_url",
    "VoteEngine",
]
