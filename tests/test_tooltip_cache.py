"""Tests for the tooltip LRU cache."""

import pytest

from tft_tooltip.core.resolved import ResolvedTooltip
from tft_tooltip.core.skill_classifier import SkillType
from tft_tooltip.core.tooltip_cache import TooltipCache, item_set_signature
from tft_tooltip.data.models.item import Item


def make_tooltip(name):
    return ResolvedTooltip(name=name, type=SkillType.PASSIVE)


class TestItemSetSignature:
    """Item order never changes the signature."""

    def test_order_independent(self):
        assert item_set_signature(["b", "a", "c"]) == item_set_signature(["c", "b", "a"]) == ("a", "b", "c")

    def test_duplicates_kept(self):
        assert item_set_signature(["rod", "rod"]) == ("rod", "rod")

    def test_accepts_items_and_dicts(self):
        items = [Item(id="rod", name="Rod"), {"id": "bow"}]

        assert item_set_signature(items) == ("bow", "rod")

    def test_empty(self):
        assert item_set_signature(None) == ()


class TestTooltipCache:
    """Tests for LRU behavior."""

    def test_make_key_ignores_item_order(self):
        first = TooltipCache.make_key("lux", ["a", "b"], 2, "current", "en")
        second = TooltipCache.make_key("lux", ["b", "a"], 2, "current", "en")

        assert first == second

    def test_key_distinguishes_star_style_and_locale(self):
        base = TooltipCache.make_key("lux", [], 2, "current", "en")

        assert base != TooltipCache.make_key("lux", [], 3, "current", "en")
        assert base != TooltipCache.make_key("lux", [], 2, "full_range", "en")
        assert base != TooltipCache.make_key("lux", [], 2, "current", "ko")

    def test_get_or_compute_computes_once(self):
        cache = TooltipCache(max_size=4)
        calls = []

        def compute():
            calls.append(1)
            return make_tooltip("Final Spark")

        key = TooltipCache.make_key("lux", [], 2, "current", "en")
        first = cache.get_or_compute(key, compute)
        second = cache.get_or_compute(key, compute)

        assert first is second
        assert len(calls) == 1
        assert cache.hits == 1
        assert cache.misses == 1

    def test_evicts_least_recently_used(self):
        cache = TooltipCache(max_size=2)
        keys = [TooltipCache.make_key(unit, [], 1, "current", "en") for unit in ("a", "b", "c")]

        cache.put(keys[0], make_tooltip("a"))
        cache.put(keys[1], make_tooltip("b"))
        cache.get(keys[0])
        cache.put(keys[2], make_tooltip("c"))

        assert keys[0] in cache
        assert keys[1] not in cache
        assert keys[2] in cache
        assert len(cache) == 2

    def test_zero_size_stores_nothing(self):
        cache = TooltipCache(max_size=0)
        key = TooltipCache.make_key("lux", [], 1, "current", "en")
        cache.put(key, make_tooltip("x"))

        assert len(cache) == 0

    def test_clear(self):
        cache = TooltipCache()
        key = TooltipCache.make_key("lux", [], 1, "current", "en")
        cache.put(key, make_tooltip("x"))
        cache.clear()

        assert len(cache) == 0
        assert cache.get(key) is None
