from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

TRUTHY = {"1", "true", "t", "yes", "y", "on"}


def _parse_bool(raw: Optional[str]) -> bool:
    return (raw or "").strip().lower() in TRUTHY


def _parse_int(raw: Optional[str], default: int) -> int:
    try:
        return int((raw or "").strip())
    except ValueError:
        return default


def _parse_float(raw: Optional[str], default: float) -> float:
    try:
        return float((raw or "").strip())
    except ValueError:
        return default


@dataclass(frozen=True)
class ServiceConfig:
    redis_addr: str = ""
    redis_password: str = ""
    redis_db: int = 0
    redis_ping_timeout: float = 5.0
    host: str = ""
    port: int = 8080
    log_level: str = "info"
    log_json: bool = False
    log_concise: bool = False
    fetch_timeout: float = 30.0

    @property
    def cache_enabled(self) -> bool:
        return bool(self.redis_addr)

    @property
    def listen_host(self) -> str:
        # An empty host listens on every interface.
        return self.host or "0.0.0.0"

    @property
    def listen_addr(self) -> str:
        return f"{self.host}:{self.port}"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServiceConfig":
        env = os.environ if environ is None else environ
        return cls(
            redis_addr=env.get("JISHO_API_REDIS_ADDR", "").strip(),
            redis_password=env.get("JISHO_API_REDIS_PASS", ""),
            redis_db=_parse_int(env.get("JISHO_API_REDIS_DB"), 0),
            redis_ping_timeout=_parse_float(env.get("JISHO_API_REDIS_PING_TIMEOUT"), 5.0),
            host=env.get("JISHO_API_HOST", "").strip(),
            port=_parse_int(env.get("JISHO_API_PORT"), 8080),
            log_level=env.get("JISHO_API_LOG_LEVEL", "").strip().lower() or "info",
            log_json=_parse_bool(env.get("JISHO_API_LOG_JSON")),
            log_concise=_parse_bool(env.get("JISHO_API_LOG_CONCISE")),
            fetch_timeout=_parse_float(env.get("JISHO_API_FETCH_TIMEOUT"), 30.0),
        )
