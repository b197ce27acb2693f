from __future__ import annotations

import logging
from typing import List, Optional

from redis.exceptions import RedisError

from .cache import ResultCache
from .errors import CacheError
from .extractor import EntryExtractor
from .fetcher import DocumentFetcher
from .models import DictionaryEntry, SearchQuery, entries_from_json, entries_to_json

logger = logging.getLogger(__name__)


class SearchCoordinator:
    """
    Resolves a search either from the result cache or by fetching and
    extracting the jisho.org page (cache-aside).

    Caching is enabled only when a cache is given at construction. Concurrent
    identical searches on a cold key are not deduplicated: each fetches and the
    last write wins.
    """

    def __init__(
        self,
        fetcher: DocumentFetcher,
        extractor: Optional[EntryExtractor] = None,
        cache: Optional[ResultCache] = None,
    ):
        self.fetcher = fetcher
        self.extractor = extractor or EntryExtractor()
        self.cache = cache

    @property
    def cache_enabled(self) -> bool:
        return self.cache is not None

    def resolve(self, query: SearchQuery) -> List[DictionaryEntry]:
        if not self.cache_enabled:
            logger.info("cache disabled, querying jisho.org for %r page %d", query.query, query.page)
            return self.search(query)

        cached = self._read_cache(query)
        if cached is not None:
            logger.info("cache hit, skipped querying jisho.org for %r page %d", query.query, query.page)
            return cached

        logger.info("cache miss, querying jisho.org for %r page %d", query.query, query.page)
        entries = self.search(query)
        self._write_cache(query, entries)
        return entries

    def search(self, query: SearchQuery) -> List[DictionaryEntry]:
        """Fetch and extract without touching the cache. FetchError propagates."""
        doc = self.fetcher.fetch(query.query, query.page)
        entries = self.extractor.extract(doc)
        logger.debug("Extracted %d entries for %r page %d", len(entries), query.query, query.page)
        return entries

    def _read_cache(self, query: SearchQuery) -> Optional[List[DictionaryEntry]]:
        key = query.cache_key
        try:
            raw = self.cache.get(key)
        except (RedisError, CacheError) as exc:
            logger.warning("Cache read failed for %s, treating as miss: %s", key, exc)
            return None
        if raw is None:
            return None
        try:
            return entries_from_json(raw)
        except ValueError as exc:
            logger.warning("Discarding undecodable cache value for %s: %s", key, exc)
            return None

    def _write_cache(self, query: SearchQuery, entries: List[DictionaryEntry]) -> None:
        key = query.cache_key
        try:
            self.cache.set(key, entries_to_json(entries), ttl=None)
        except (RedisError, CacheError) as exc:
            logger.warning("Cache write failed for %s: %s", key, exc)
            return
        logger.info("caching jisho.org result for query %r", query.query, extra={"redis_key": key})
