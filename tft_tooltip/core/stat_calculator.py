"""Combat stat resolution for tooltip calculations.

Derive a unit's effective stats from base stats, star level and equipped items.
"""

import logging
import math
from dataclasses import dataclass, fields
from typing import Any, Iterable, Mapping, Optional, Union

from tft_tooltip.data.models.champion import Champion, UnitStats
from tft_tooltip.data.models.item import Item, ItemStats
from tft_tooltip.data.models.numeric import to_number
from .constants import (
    BASE_ABILITY_POWER,
    BASE_CRIT_CHANCE,
    BASE_CRIT_DAMAGE,
    MAX_ITEMS,
    MAX_STAR_LEVEL,
    MIN_STAR_LEVEL,
    STAR_MULTIPLIER,
)

logger = logging.getLogger(__name__)

ItemLike = Union[Item, ItemStats, Mapping[str, Any]]


def clamp_star_level(star_level: Any) -> int:
    """Clamp a requested star level into 1..3.

    Out-of-range values are clamped rather than rejected; anything that is
    not a number resolves to 1 star.
    """
    number = to_number(star_level, default=MIN_STAR_LEVEL)
    clamped = int(min(max(math.floor(number), MIN_STAR_LEVEL), MAX_STAR_LEVEL))
    if clamped != number:
        logger.debug("Clamped star level %r to %d", star_level, clamped)
    return clamped


@dataclass
class CombatStats:
    """Resolved stats for one unit at one star level with items equipped."""

    health: float = 0.0
    mana: float = 0.0
    armor: float = 0.0
    magic_resist: float = 0.0
    attack_damage: float = 0.0
    attack_speed: float = 0.0
    ability_power: float = BASE_ABILITY_POWER
    crit_chance: float = BASE_CRIT_CHANCE
    crit_damage: float = BASE_CRIT_DAMAGE

    star_level: int = 1
    item_count: int = 0

    def __post_init__(self):
        """Enforce non-negative stats and a valid star level."""
        for f in fields(self):
            if f.name in ("star_level", "item_count"):
                continue
            setattr(self, f.name, max(to_number(getattr(self, f.name)), 0.0))
        self.star_level = clamp_star_level(self.star_level)
        self.item_count = max(int(to_number(self.item_count)), 0)

    def stat_for(self, name: str) -> float:
        """Look up a stat by attribute name, 0 if unknown."""
        return float(getattr(self, name, 0.0) or 0.0)


class CombatStatsResolver:
    """
    Calculate combat stats for a unit from:
    - Base stats (health and attack damage scaled by star level)
    - Item stats (flat, additive)

    Usage:
        resolver = CombatStatsResolver()
        stats = resolver.calculate_stats(champion.stats, items, star_level=2)
    """

    def __init__(self, star_multipliers: Optional[Mapping[int, float]] = None):
        """
        Initialize the resolver.

        Args:
            star_multipliers: Override for the per-star health/AD multipliers.
        """
        self.star_multipliers = dict(star_multipliers or STAR_MULTIPLIER)

    def calculate_stats(
        self,
        base: Union[UnitStats, Champion, Mapping[str, Any], None],
        items: Optional[Iterable[ItemLike]] = None,
        star_level: Any = 1,
    ) -> CombatStats:
        """
        Calculate complete stats for a unit.

        Args:
            base: Base unit stats (or a champion carrying them).
            items: Equipped items; only the first three are counted.
            star_level: Requested star level, clamped into 1..3.

        Returns:
            CombatStats with star scaling and item bonuses applied.
        """
        star = clamp_star_level(star_level)
        base_stats = self._coerce_base(base)

        stats = CombatStats(star_level=star)

        # 1. Apply base stats with star scaling
        self._apply_base_stats(stats, base_stats, star)

        # 2. Apply item stats
        equipped = list(items or [])
        if len(equipped) > MAX_ITEMS:
            logger.debug("Ignoring %d items beyond the first %d", len(equipped) - MAX_ITEMS, MAX_ITEMS)
            equipped = equipped[:MAX_ITEMS]
        self._apply_item_stats(stats, equipped)
        stats.item_count = len(equipped)

        return stats

    def star_multiplier(self, star_level: int) -> float:
        """Multiplier for health and attack damage at a star level."""
        return self.star_multipliers.get(clamp_star_level(star_level), 1.0)

    def _coerce_base(self, base: Union[UnitStats, Champion, Mapping[str, Any], None]) -> UnitStats:
        if isinstance(base, Champion):
            return base.stats
        if isinstance(base, UnitStats):
            return base
        if isinstance(base, Mapping):
            return UnitStats.model_validate(dict(base))
        return UnitStats()

    def _apply_base_stats(
        self,
        stats: CombatStats,
        base: UnitStats,
        star: int,
    ) -> None:
        """Apply base unit stats with star level scaling."""
        multiplier = self.star_multiplier(star)

        # Health and AD scale with stars
        stats.health = base.health * multiplier
        stats.attack_damage = base.attack_damage * multiplier

        # These don't scale with stars
        stats.mana = base.mana
        stats.armor = base.armor
        stats.magic_resist = base.magic_resist
        stats.attack_speed = base.attack_speed
        stats.ability_power = base.ability_power
        stats.crit_chance = base.crit_chance
        stats.crit_damage = base.crit_damage

    def _apply_item_stats(
        self,
        stats: CombatStats,
        items: list[ItemLike],
    ) -> None:
        """Apply stats from all equipped items."""
        for item in items:
            item_stats = self._coerce_item_stats(item)

            # Add flat stats
            stats.health += item_stats.health
            stats.mana += item_stats.mana
            stats.armor += item_stats.armor
            stats.magic_resist += item_stats.mr
            stats.attack_damage += item_stats.ad
            stats.ability_power += item_stats.ap

            # Add percentage stats (convert from percentage to decimal)
            stats.attack_speed += item_stats.attack_speed / 100
            stats.crit_chance += item_stats.crit_chance / 100
            stats.crit_damage += item_stats.crit_damage / 100

        # Item stats can be negative; the resolved stats never are
        stats.__post_init__()

    def _coerce_item_stats(self, item: ItemLike) -> ItemStats:
        # Handle Item, bare ItemStats and raw dicts alike
        if isinstance(item, Item):
            return item.stats
        if isinstance(item, ItemStats):
            return item
        if isinstance(item, Mapping):
            raw = item.get("stats", item)
            return ItemStats.model_validate(dict(raw or {}))
        return ItemStats()

    def get_effective_health(self, stats: CombatStats) -> float:
        """
        Effective health against physical damage.
        EHP = HP * (1 + Armor/100)

        Args:
            stats: The resolved stats.

        Returns:
            Physical effective health.
        """
        return stats.health * (1 + stats.armor / 100)

    def get_dps(self, stats: CombatStats) -> float:
        """
        Calculate theoretical auto-attack DPS.
        DPS = AD * AS * (1 + CritChance * (CritDamage - 1))

        Args:
            stats: The resolved stats.

        Returns:
            Theoretical DPS value.
        """
        crit_multiplier = 1 + (stats.crit_chance * (stats.crit_damage - 1))
        return stats.attack_damage * stats.attack_speed * crit_multiplier
