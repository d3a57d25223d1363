"""Client library for the MeiliSearch full-text search service."""

from .client import MeiliSearch
from .documents import Documents
from .exceptions import (
    ConfigError,
    IndexNotFoundError,
    MeiliError,
    NoSuchFieldError,
    UnexpectedStatus,
)
from .index import Index
from .indexes import Indexes
from .iteration import DEFAULT_SLICE, Traversal
from .models import SearchResult
from .search import Search

__all__ = [
    "MeiliSearch",
    "Index",
    "Indexes",
    "Documents",
    "Search",
    "SearchResult",
    "Traversal",
    "DEFAULT_SLICE",
    "MeiliError",
    "ConfigError",
    "UnexpectedStatus",
    "IndexNotFoundError",
    "NoSuchFieldError",
]
