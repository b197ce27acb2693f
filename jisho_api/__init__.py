"""
Jisho lookup core package.

The package focuses on the search subsystem: dataclasses for dictionary
entries, a document fetcher for jisho.org search pages, an extractor that
turns the result markup into entries, and a cache-aside coordinator that
memoizes extracted results in Redis.
"""
