from __future__ import annotations

import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request

from jisho_api.config import ServiceConfig
from jisho_api.logging_setup import setup_logging

from api.dependencies import get_cache, get_config
from api.routes.search import router as search_router

logger = logging.getLogger("jisho_api.http")

REQUEST_ID_HEADER = "X-Request-ID"


def client_ip(request: Request) -> Optional[str]:
    """Resolve the caller address, preferring proxy headers over the socket peer."""
    for header in ("True-Client-IP", "X-Real-IP"):
        value = (request.headers.get(header) or "").strip()
        if value:
            return value
    forwarded = request.headers.get("X-Forwarded-For") or ""
    first = forwarded.split(",")[0].strip()
    if first:
        return first
    return request.client.host if request.client else None


def create_app(config: Optional[ServiceConfig] = None) -> FastAPI:
    config = config or get_config()
    setup_logging(config.log_level, use_json=config.log_json, concise=config.log_concise)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Refuse to start half-configured: a configured cache must answer.
        if config.cache_enabled:
            get_cache().check_connection(timeout=config.redis_ping_timeout)
        logger.info("use redis cache: %s", config.cache_enabled)
        logger.info("use json logging: %s", config.log_json)
        logger.info("use concise logging: %s", config.log_concise)
        yield

    app = FastAPI(title="Jisho API", version="0.1.0", lifespan=lifespan)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers[REQUEST_ID_HEADER] = request_id

        if config.log_concise:
            logger.info("%s %s %d %.1fms", request.method, request.url.path, response.status_code, elapsed_ms)
        else:
            logger.info(
                "Response: %d %s %s",
                response.status_code,
                request.method,
                request.url.path,
                extra={
                    "request_id": request_id,
                    "remote_ip": client_ip(request),
                    "query": request.url.query,
                    "elapsed_ms": round(elapsed_ms, 3),
                },
            )
        return response

    app.include_router(search_router)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
