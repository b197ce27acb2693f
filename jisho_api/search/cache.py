from __future__ import annotations

import logging
import threading
from typing import Dict, Optional, Tuple

from redis import Redis
from redis.exceptions import RedisError

from .errors import CacheError, CacheUnavailableError

logger = logging.getLogger(__name__)


class ResultCache:
    """
    Abstract key-value store for serialized search results.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str, ttl: Optional[int] = None) -> None:
        raise NotImplementedError

    def ping(self) -> bool:
        raise NotImplementedError


class InMemoryResultCache(ResultCache):
    """
    Dict-backed cache for tests and local runs. Entries never expire.
    """

    def __init__(self):
        self._data: Dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str, ttl: Optional[int] = None) -> None:
        with self._lock:
            self._data[key] = value

    def ping(self) -> bool:
        return True


def split_redis_address(addr: str) -> Tuple[str, int]:
    host, sep, port = addr.rpartition(":")
    if not sep:
        return addr, 6379
    return host or "localhost", int(port)


class RedisResultCache(ResultCache):
    """
    Redis-backed cache. The underlying client keeps a connection pool, so a
    single instance is shared by all request threads.
    """

    def __init__(self, addr: str, password: Optional[str] = None, db: int = 0, client: Optional[Redis] = None):
        self.addr = addr
        self.host, self.port = split_redis_address(addr)
        self.password = password or None
        self.db = db
        self.redis = client or Redis(
            host=self.host,
            port=self.port,
            password=self.password,
            db=self.db,
        )

    def get(self, key: str) -> Optional[str]:
        raw = self.redis.get(key)
        if raw is None:
            return None
        if isinstance(raw, str):
            return raw
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise CacheError(f"Cached value for {key} is not valid UTF-8: {exc}") from exc

    def set(self, key: str, value: str, ttl: Optional[int] = None) -> None:
        # ex=None stores the key without expiry.
        self.redis.set(key, value, ex=ttl)

    def ping(self) -> bool:
        return bool(self.redis.ping())

    def check_connection(self, timeout: float = 5.0) -> None:
        """
        Ping the server through a short-lived client bounded by `timeout`.
        Raises CacheUnavailableError if the server cannot be reached.
        """
        probe = Redis(
            host=self.host,
            port=self.port,
            password=self.password,
            db=self.db,
            socket_connect_timeout=timeout,
            socket_timeout=timeout,
        )
        try:
            probe.ping()
        except RedisError as exc:
            raise CacheUnavailableError(f"failed to ping redis '{self.addr}': {exc}") from exc
        finally:
            probe.close()
        logger.info("Connected to redis at %s (db %s)", self.addr, self.db)
