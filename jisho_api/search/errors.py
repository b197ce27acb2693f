from __future__ import annotations

from typing import Optional


class JishoApiError(Exception):
    """Base class for errors raised by the search subsystem."""


class FetchError(JishoApiError):
    """The remote search page could not be retrieved."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class CacheError(JishoApiError):
    pass


class CacheUnavailableError(CacheError):
    """The configured cache did not answer the startup connectivity check."""
