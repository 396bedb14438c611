from .book import UNKNOWN, BookRecord, SubjectWork
from .query import (
    DEFAULT_LIMIT,
    IsbnSearch,
    NameSearch,
    Query,
    RandomGenre,
    SubjectSearch,
)

__all__ = [
    "UNKNOWN",
    "BookRecord",
    "SubjectWork",
    "DEFAULT_LIMIT",
    "IsbnSearch",
    "NameSearch",
    "Query",
    "RandomGenre",
    "SubjectSearch",
]
