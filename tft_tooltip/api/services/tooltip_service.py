"""
Tooltip resolution service.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from tft_tooltip.core.constants import MAX_ITEMS
from tft_tooltip.core.description_renderer import RenderStyle
from tft_tooltip.core.stat_calculator import CombatStatsResolver, clamp_star_level
from tft_tooltip.core.tooltip_cache import TooltipCache
from tft_tooltip.core.tooltip_engine import TooltipEngine
from tft_tooltip.core.variable_scaler import ScalingTable
from tft_tooltip.data.loaders import (
    get_champion_by_id,
    get_items_by_ids,
    load_locale,
    load_scaling_overrides,
    resolve_locale,
)
from ..schemas.tooltip import ResolveTooltipRequest, TooltipResponse

logger = logging.getLogger(__name__)


class TooltipService:
    """Resolve tooltips for catalog champions and inline abilities."""

    def __init__(
        self,
        data_dir: Optional[str] = None,
        scaling_table_file: Optional[str] = None,
        default_locale: str = "en",
        default_star_level: int = 2,
        default_style: str = "current",
        cache_size: int = 512,
    ):
        self.data_dir = Path(data_dir) if data_dir else None
        self.default_locale = default_locale
        self.default_star_level = clamp_star_level(default_star_level)
        self.default_style = RenderStyle(default_style)

        overrides = load_scaling_overrides(Path(scaling_table_file) if scaling_table_file else None)
        self.scaling_table = ScalingTable.from_dict(overrides)

        self.stats_resolver = CombatStatsResolver()
        self.cache = TooltipCache(max_size=cache_size)
        self._engines: Dict[str, TooltipEngine] = {}

    def resolve_locale(self, locale: Optional[str] = None) -> str:
        """Requested locale if it has string tables, else ``UNKNOWN_LOCALE``."""
        return resolve_locale(locale or self.default_locale, self.data_dir)

    def get_engine(self, locale: Optional[str] = None) -> TooltipEngine:
        """Get (or build) the engine for a locale.

        Engines exist only for available locales plus one shared fallback.
        """
        locale = self.resolve_locale(locale)
        if locale not in self._engines:
            self._engines[locale] = TooltipEngine(
                locale=load_locale(locale, self.data_dir),
                scaling_table=self.scaling_table,
                style=self.default_style,
            )
        return self._engines[locale]

    def get_tooltip(
        self,
        champion_id: str,
        star_level: Optional[object] = None,
        item_ids: Iterable[str] = (),
        style: Optional[RenderStyle] = None,
        locale: Optional[str] = None,
        active_conditions: Iterable[str] = (),
    ) -> TooltipResponse:
        """
        Resolve the tooltip of a catalog champion.

        Args:
            champion_id: Champion ID.
            star_level: Requested star level, clamped into 1..3.
            item_ids: Equipped item IDs; order does not matter.
            style: Render style.
            locale: Locale code.
            active_conditions: Runtime conditions that currently hold.

        Returns:
            Tooltip response.

        Raises:
            ValueError: If the champion or an item is unknown.
        """
        champion = get_champion_by_id(champion_id, self.data_dir)
        if champion is None:
            raise ValueError(f"Champion {champion_id} not found")

        # Only the first three items are equipped; the cache key must see the same set
        items = get_items_by_ids(item_ids, self.data_dir)[:MAX_ITEMS]
        item_ids = [item.id for item in items]

        star = self.default_star_level if star_level is None else clamp_star_level(star_level)
        style = RenderStyle(style or self.default_style)
        locale = self.resolve_locale(locale)
        conditions = sorted(set(active_conditions))

        def compute():
            stats = self.stats_resolver.calculate_stats(champion, items, star_level=star)
            return self.get_engine(locale).resolve(
                champion.ability, stats, style=style, active_conditions=conditions
            )

        # Conditional views are rare; only the default view is memoized
        if conditions:
            tooltip = compute()
        else:
            key = TooltipCache.make_key(champion.id, item_ids, star, style.value, locale)
            tooltip = self.cache.get_or_compute(key, compute)

        return TooltipResponse.from_tooltip(tooltip, locale=locale, champion_id=champion.id)

    def resolve(self, request: ResolveTooltipRequest) -> TooltipResponse:
        """
        Resolve an inline ability against inline stats.

        Raises:
            ValueError: If an item ID is unknown.
        """
        items: List[object] = list(get_items_by_ids(request.items, self.data_dir))
        items.extend(request.item_stats)

        locale = self.resolve_locale(request.locale)
        stats = self.stats_resolver.calculate_stats(request.stats, items, star_level=request.star_level)
        tooltip = self.get_engine(locale).resolve(
            request.ability,
            stats,
            style=request.style,
            active_conditions=request.active_conditions,
        )
        return TooltipResponse.from_tooltip(tooltip, locale=locale)

    def cache_info(self) -> Dict[str, int]:
        """Cache statistics."""
        return {
            "size": len(self.cache),
            "max_size": self.cache.max_size,
            "hits": self.cache.hits,
            "misses": self.cache.misses,
        }

    def clear_cache(self) -> None:
        self.cache.clear()
        self._engines.clear()
