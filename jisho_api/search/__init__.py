"""
Search subsystem exports.
"""

from .cache import InMemoryResultCache, RedisResultCache, ResultCache
from .coordinator import SearchCoordinator
from .errors import CacheError, CacheUnavailableError, FetchError, JishoApiError
from .extractor import EntryExtractor
from .fetcher import DocumentFetcher, JishoDocumentFetcher, parse_document
from .models import (
    DictionaryEntry,
    Meaning,
    SearchQuery,
    entries_from_json,
    entries_to_json,
)

__all__ = [
    "CacheError",
    "CacheUnavailableError",
    "DictionaryEntry",
    "DocumentFetcher",
    "EntryExtractor",
    "FetchError",
    "InMemoryResultCache",
    "JishoApiError",
    "JishoDocumentFetcher",
    "Meaning",
    "RedisResultCache",
    "ResultCache",
    "SearchCoordinator",
    "SearchQuery",
    "entries_from_json",
    "entries_to_json",
    "parse_document",
]
