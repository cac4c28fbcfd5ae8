"""
Han reading service for domain labels.

This module provides fast Han character to toneless pinyin conversion with
per-character memoization. Readings are informational only and never take
part in style classification.
"""
from __future__ import annotations

from functools import cache

import pypinyin

from domainstyle.types import CacheInfo, StyleConfig


@cache  # one entry per unique Han character
def _char_to_pinyin(ch: str) -> str:
    return pypinyin.lazy_pinyin(ch, style=pypinyin.Style.NORMAL)[0]


class HanReadingService:
    """Reads the Han characters of a label as toneless pinyin."""

    def __init__(self, config: StyleConfig):
        self._cjk_pattern = config.cjk_pattern

    # ---------- public API ----------
    def has_han(self, text: str) -> bool:
        return bool(self._cjk_pattern.search(text))

    def reading(self, text: str) -> tuple[str, ...]:
        """Return pinyin for every Han character in `text`, skipping everything else."""
        return tuple(_char_to_pinyin(c) for c in text if self._cjk_pattern.match(c))

    def get_cache_info(self) -> CacheInfo:
        info = _char_to_pinyin.cache_info()
        return CacheInfo(cache_size=info.currsize, hits=info.hits, misses=info.misses)

    def clear_cache(self) -> None:
        _char_to_pinyin.cache_clear()
