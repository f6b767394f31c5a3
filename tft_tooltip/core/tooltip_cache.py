"""LRU memo of resolved tooltips."""

import logging
from collections import OrderedDict
from typing import Any, Callable, Iterable, Optional

from .resolved import ResolvedTooltip

logger = logging.getLogger(__name__)

CacheKey = tuple[str, tuple[str, ...], int, str, str]


def item_set_signature(items: Iterable[Any]) -> tuple[str, ...]:
    """Order-independent signature of an item set.

    Accepts item ids or anything with an ``id`` attribute or key.
    """
    ids = []
    for item in items or ():
        if isinstance(item, str):
            ids.append(item)
        elif isinstance(item, dict):
            ids.append(str(item.get("id", "")))
        else:
            ids.append(str(getattr(item, "id", item)))
    return tuple(sorted(ids))


class TooltipCache:
    """
    Bounded LRU cache keyed by (unit id, item set, star level, style, locale).

    Usage:
        cache = TooltipCache(max_size=512)
        tooltip = cache.get_or_compute(key, lambda: engine.resolve(...))
    """

    def __init__(self, max_size: int = 512):
        self.max_size = max(int(max_size), 0)
        self._entries: OrderedDict[CacheKey, ResolvedTooltip] = OrderedDict()
        self.hits = 0
        self.misses = 0

    @staticmethod
    def make_key(
        unit_id: str,
        items: Iterable[Any],
        star_level: int,
        style: str,
        locale: str,
    ) -> CacheKey:
        return (unit_id, item_set_signature(items), int(star_level), str(style), str(locale))

    def get(self, key: CacheKey) -> Optional[ResolvedTooltip]:
        tooltip = self._entries.get(key)
        if tooltip is None:
            self.misses += 1
            return None
        self._entries.move_to_end(key)
        self.hits += 1
        return tooltip

    def put(self, key: CacheKey, tooltip: ResolvedTooltip) -> None:
        if self.max_size == 0:
            return
        self._entries[key] = tooltip
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_size:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Evicted tooltip %s", evicted)

    def get_or_compute(self, key: CacheKey, compute: Callable[[], ResolvedTooltip]) -> ResolvedTooltip:
        tooltip = self.get(key)
        if tooltip is None:
            tooltip = compute()
            self.put(key, tooltip)
        return tooltip

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: CacheKey) -> bool:
        return key in self._entries
