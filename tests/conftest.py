from __future__ import annotations

import pytest

TABERU_BLOCK = """
<div class="concept_light clearfix">
  <div class="concept_light-wrapper columns zero-padding">
    <div class="concept_light-readings japanese japanese_gothic" lang="ja">
      <div class="concept_light-representation">
        <span class="furigana"><span class="kanji-1-up kanji">た</span><span></span><span></span></span>
        <span class="text">
          食<span>べる</span>
        </span>
      </div>
    </div>
    <div class="concept_light-status">
      <span class="concept_light-tag concept_light-common success label">  Common word </span>
      <span class="concept_light-tag label"><a href="//jisho.org/search/%23jlpt-n5">JLPT N5</a></span>
    </div>
  </div>
  <div class="concept_light-meanings medium-9 columns">
    <div class="meanings-wrapper">
      <div class="meaning-tags">Ichidan verb, Transitive verb</div>
      <div class="meaning-wrapper">
        <div class="meaning-definition zero-padding">
          <span class="meaning-definition-section_divider">1. </span><span class="meaning-meaning">to eat</span>
        </div>
      </div>
      <div class="meaning-tags">Ichidan verb, Transitive verb</div>
      <div class="meaning-wrapper">
        <div class="meaning-definition zero-padding">
          <span class="meaning-definition-section_divider">2. </span><span class="meaning-meaning">to live on (e.g. a salary)</span>
        </div>
      </div>
      <div class="meaning-tags">Other forms</div>
      <div class="meaning-wrapper">
        <div class="meaning-definition zero-padding">
          <span class="meaning-meaning">喰べる 【たべる】</span>
        </div>
      </div>
    </div>
  </div>
</div>
"""

BENKYOU_BLOCK = """
<div class="concept_light clearfix">
  <div class="concept_light-wrapper columns zero-padding">
    <div class="concept_light-readings japanese japanese_gothic" lang="ja">
      <div class="concept_light-representation">
        <span class="furigana"><span class="kanji-1-up kanji">べん</span><span class="kanji-1-up kanji">きょう</span></span>
        <span class="text">勉強</span>
      </div>
    </div>
    <div class="concept_light-status">
      <span class="concept_light-tag concept_light-common success label">Common word</span>
    </div>
  </div>
  <div class="concept_light-meanings medium-9 columns">
    <div class="meanings-wrapper">
      <div class="meaning-tags">Noun, Suru verb</div>
      <div class="meaning-wrapper">
        <div class="meaning-definition zero-padding"><span class="meaning-meaning">study</span></div>
      </div>
      <div class="meaning-tags">Notes</div>
      <div class="meaning-wrapper">
        <div class="meaning-definition zero-padding"><span class="meaning-meaning">Also written as 勉彊</span></div>
      </div>
    </div>
  </div>
</div>
"""


def results_page(*blocks: str, extra: str = "") -> str:
    return f"""
<html><body>
<div id="primary" class="large-8 columns">
  <div class="concepts">
    <div class="exact_block">
      <h4>Words <span class="result_count">— {len(blocks)} found</span></h4>
      {''.join(blocks)}
    </div>
    {extra}
    <a href="//jisho.org/search/%E9%A3%9F%E3%81%B9%E3%82%8B?page=2" class="more">More Words &gt;</a>
  </div>
</div>
</body></html>
"""


@pytest.fixture
def taberu_page() -> str:
    return results_page(TABERU_BLOCK)


@pytest.fixture
def two_entry_page() -> str:
    return results_page(TABERU_BLOCK, BENKYOU_BLOCK)
