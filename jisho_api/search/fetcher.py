from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

import requests
from bs4 import BeautifulSoup

from .errors import FetchError

logger = logging.getLogger(__name__)

JISHO_SEARCH_URL = "https://jisho.org/search/{query}?page={page}"
BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/114.0.0.0 Safari/537.36"
)


def parse_document(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser")


class DocumentFetcher:
    """
    Abstract fetcher. Implementations return the search-results page as a
    traversable document and raise FetchError on any transport failure.
    """

    def fetch(self, query: str, page: int) -> BeautifulSoup:
        raise NotImplementedError


class JishoDocumentFetcher(DocumentFetcher):
    """
    Fetches jisho.org search pages with a single GET per call (no retries).

    The query is percent-encoded before substitution so that reserved
    characters such as `#` and `?` stay part of the path.
    """

    def __init__(
        self,
        timeout: Optional[float] = 30.0,
        session: Optional[requests.Session] = None,
        url_template: str = JISHO_SEARCH_URL,
    ):
        self.timeout = timeout
        self.url_template = url_template
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = BROWSER_USER_AGENT

    def build_url(self, query: str, page: int) -> str:
        return self.url_template.format(query=quote(query, safe="/"), page=page)

    def fetch(self, query: str, page: int) -> BeautifulSoup:
        url = self.build_url(query, page)
        logger.debug("Fetching %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise FetchError(f"Request to {url} failed: {exc}", url=url) from exc

        if not 200 <= response.status_code < 300:
            raise FetchError(
                f"Request to {url} returned HTTP {response.status_code}",
                url=url,
                status_code=response.status_code,
            )
        return parse_document(response.text)
