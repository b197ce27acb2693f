from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from jisho_api.search import FetchError, SearchCoordinator, SearchQuery

from api.dependencies import get_coordinator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


@router.get("/{query:path}")
def search(query: str, page: Optional[str] = None, coordinator: SearchCoordinator = Depends(get_coordinator)):
    if not query or not query.strip():
        raise HTTPException(status_code=400, detail="Query must not be empty")

    search_query = SearchQuery.create(query, page)
    try:
        entries = coordinator.resolve(search_query)
    except FetchError as exc:
        logger.error("error occurred while trying to scrape jisho.org: %s", exc)
        raise HTTPException(status_code=502, detail=f"jisho.org is unavailable: {exc}")
    return [entry.to_dict() for entry in entries]
