from .base_http import BaseHttpClient
from .errors import (
    MissingFieldError,
    NoResultsError,
    ParseError,
    SearchError,
    TransportError,
)
from .open_library import OpenLibraryClient
from .query import OPEN_LIBRARY_URL, build_url

__all__ = [
    "BaseHttpClient",
    "OpenLibraryClient",
    "OPEN_LIBRARY_URL",
    "build_url",
    "SearchError",
    "TransportError",
    "ParseError",
    "NoResultsError",
    "MissingFieldError",
]
