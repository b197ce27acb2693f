from __future__ import annotations

from functools import lru_cache
from typing import Optional

from jisho_api.config import ServiceConfig
from jisho_api.search import (
    EntryExtractor,
    JishoDocumentFetcher,
    RedisResultCache,
    SearchCoordinator,
)


@lru_cache(maxsize=1)
def get_config() -> ServiceConfig:
    return ServiceConfig.from_env()


@lru_cache(maxsize=1)
def get_cache() -> Optional[RedisResultCache]:
    config = get_config()
    if not config.cache_enabled:
        return None
    return RedisResultCache(config.redis_addr, password=config.redis_password, db=config.redis_db)


@lru_cache(maxsize=1)
def get_fetcher() -> JishoDocumentFetcher:
    return JishoDocumentFetcher(timeout=get_config().fetch_timeout)


@lru_cache(maxsize=1)
def get_coordinator() -> SearchCoordinator:
    return SearchCoordinator(fetcher=get_fetcher(), extractor=EntryExtractor(), cache=get_cache())
