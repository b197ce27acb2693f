from __future__ import annotations

import logging
from typing import List, Sequence

from bs4 import BeautifulSoup, NavigableString, Tag

from .models import DictionaryEntry, Meaning

logger = logging.getLogger(__name__)

RESULT_BLOCK_SELECTOR = "div.exact_block > div.concept_light"
WRITING_SELECTOR = "div.concept_light-readings > div.concept_light-representation > span.text"
FURIGANA_SLOT_SELECTOR = "div.concept_light-readings > div.concept_light-representation > span.furigana > span"
MEANINGS_WRAPPER_SELECTOR = "div.concept_light-meanings > div.meanings-wrapper"
MEANING_TAGS_SELECTOR = "div.meaning-tags"
MEANING_DEFINITION_SELECTOR = "div.meaning-definition"
MEANING_GLOSS_SELECTOR = "span.meaning-meaning"
STATUS_SELECTOR = "div.concept_light-status"
STATUS_TAG_SELECTOR = "span.concept_light-tag"

# Tag blocks with these markers share the meaning layout but carry no definition.
NON_DEFINITION_MARKERS = ("Other forms", "Notes")
MEANING_TAG_DELIMITER = ", "


class EntryExtractor:
    """
    Turns a jisho.org search-results document into dictionary entries.

    Only the "exact match" lexical blocks are read; kanji panels and other
    result types are ignored. The extractor holds no state and can be shared
    between threads.
    """

    def extract(self, doc: BeautifulSoup) -> List[DictionaryEntry]:
        return [self.extract_entry(block) for block in doc.select(RESULT_BLOCK_SELECTOR)]

    def extract_entry(self, block: Tag) -> DictionaryEntry:
        writing = self._extract_writing(block)
        return DictionaryEntry(
            writing=writing,
            reading=self._reconstruct_reading(writing, block.select(FURIGANA_SLOT_SELECTOR)),
            meanings=tuple(self._collect_meanings(block, writing)),
            tags=tuple(self._collect_tags(block)),
        )

    def _extract_writing(self, block: Tag) -> str:
        el = block.select_one(WRITING_SELECTOR)
        return el.get_text().strip() if el else ""

    def _reconstruct_reading(self, writing: str, slots: Sequence[Tag]) -> str:
        """
        Interleave each character of the writing with its furigana slot,
        e.g. 食べる + [た, "", ""] -> 食(た)べる.
        """
        if len(slots) != len(writing):
            if slots:
                logger.warning(
                    "Furigana slot count %d does not match %r (%d chars); reading left unannotated",
                    len(slots),
                    writing,
                    len(writing),
                )
            return writing

        parts = []
        for char, slot in zip(writing, slots):
            annotation = slot.get_text()
            parts.append(f"{char}({annotation})" if annotation else char)
        return "".join(parts)

    def _collect_meanings(self, block: Tag, writing: str) -> List[Meaning]:
        wrapper = block.select_one(MEANINGS_WRAPPER_SELECTOR)
        if wrapper is None:
            return []

        tag_blocks = wrapper.select(MEANING_TAGS_SELECTOR)
        definition_blocks = wrapper.select(MEANING_DEFINITION_SELECTOR)
        if len(tag_blocks) != len(definition_blocks):
            logger.warning(
                "Meaning tag/definition count mismatch for %r (%d tags, %d definitions); skipping meanings",
                writing,
                len(tag_blocks),
                len(definition_blocks),
            )
            return []

        meanings: List[Meaning] = []
        for tag_block, definition_block in zip(tag_blocks, definition_blocks):
            tag_text = self._leading_text(tag_block)
            if any(marker in tag_text for marker in NON_DEFINITION_MARKERS):
                continue
            gloss = definition_block.select_one(MEANING_GLOSS_SELECTOR)
            meanings.append(
                Meaning(
                    value=gloss.get_text() if gloss else "",
                    tags=tuple(tag_text.split(MEANING_TAG_DELIMITER)) if tag_text else (),
                )
            )
        return meanings

    def _collect_tags(self, block: Tag) -> List[str]:
        status = block.select_one(STATUS_SELECTOR)
        if status is None:
            return []
        return [el.get_text().strip() for el in status.select(STATUS_TAG_SELECTOR)]

    @staticmethod
    def _leading_text(el: Tag) -> str:
        # The tag list is the first text node; trailing children hold links/notes.
        first = next(iter(el.contents), None)
        if isinstance(first, NavigableString):
            return str(first)
        return ""
