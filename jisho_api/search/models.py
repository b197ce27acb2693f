from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

CACHE_KEY_NAMESPACE = "jisho-concept-query"


@dataclass(frozen=True)
class Meaning:
    value: str
    tags: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "tags": list(self.tags)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Meaning":
        return cls(value=str(data["value"]), tags=tuple(data.get("tags") or ()))


@dataclass(frozen=True)
class DictionaryEntry:
    writing: str
    reading: str
    meanings: Tuple[Meaning, ...] = field(default_factory=tuple)
    tags: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "writing": self.writing,
            "reading": self.reading,
            "meanings": [m.to_dict() for m in self.meanings],
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DictionaryEntry":
        return cls(
            writing=str(data["writing"]),
            reading=str(data["reading"]),
            meanings=tuple(Meaning.from_dict(m) for m in data.get("meanings") or ()),
            tags=tuple(data.get("tags") or ()),
        )


@dataclass(frozen=True)
class SearchQuery:
    """
    Fetch/cache key for one search. jisho.org counts pages starting from 1,
    so use `create` to normalize a missing, zero or unparseable page.
    """

    query: str
    page: int = 1

    @classmethod
    def create(cls, query: str, page: Union[int, str, None] = None) -> "SearchQuery":
        if isinstance(page, str):
            try:
                page = int(page.strip())
            except ValueError:
                page = None
        if not page or page < 1:
            page = 1
        return cls(query=query, page=page)

    @property
    def cache_key(self) -> str:
        return f"{CACHE_KEY_NAMESPACE}:{self.query}@{self.page}"


def entries_to_json(entries: Iterable[DictionaryEntry]) -> str:
    return json.dumps([e.to_dict() for e in entries], ensure_ascii=False)


def entries_from_json(raw: str) -> List[DictionaryEntry]:
    """
    Decode a serialized entry list. Raises ValueError when the payload is not
    a list of entry objects.
    """
    payload = json.loads(raw)
    if not isinstance(payload, list):
        raise ValueError(f"Expected a JSON array of entries, got {type(payload).__name__}")
    try:
        return [DictionaryEntry.from_dict(item) for item in payload]
    except (KeyError, TypeError, AttributeError) as exc:
        raise ValueError(f"Malformed cached entry: {exc}") from exc
