"""Derived metrics: burst, cast-cycle DPS, auto-attack DPS and effective health."""

import math
from typing import Iterable, Optional

from tft_tooltip.data.models.numeric import round_half_up
from .constants import MANA_PER_ATTACK
from .label_resolver import EffectCategory
from .resolved import DerivedMetrics, ResolvedVariable
from .skill_classifier import ManaInfo
from .stat_calculator import CombatStats, CombatStatsResolver

BURST_CATEGORIES = (EffectCategory.DAMAGE, EffectCategory.HEAL)


class DerivedMetricEstimator:
    """
    Estimate headline numbers for a resolved ability.

    Cast time assumes mana comes only from auto attacks:
        cast_time = ceil((cost - start) / mana_per_attack) / attack_speed
        dps       = damage total / cast_time
    """

    def __init__(self, mana_per_attack: int = MANA_PER_ATTACK):
        self.mana_per_attack = mana_per_attack
        self._stats = CombatStatsResolver()

    def estimate(
        self,
        variables: Iterable[ResolvedVariable],
        stats: CombatStats,
        mana_info: Optional[ManaInfo] = None,
    ) -> DerivedMetrics:
        variables = list(variables)
        cast_time = self.cast_time(mana_info, stats.attack_speed)

        return DerivedMetrics(
            burst_potential=self.burst_potential(variables),
            dps=self.ability_dps(variables, cast_time),
            cast_time=None if cast_time is None else round(cast_time, 2),
            auto_attack_dps=round(self._stats.get_dps(stats), 1),
            effective_health=round(self._stats.get_effective_health(stats), 1),
        )

    def burst_potential(self, variables: list[ResolvedVariable]) -> Optional[int]:
        """Sum of current damage and heal values, None if there are none."""
        values = [v.current_value for v in variables if v.category in BURST_CATEGORIES]
        return sum(values) if values else None

    def cast_time(self, mana_info: Optional[ManaInfo], attack_speed: float) -> Optional[float]:
        """Seconds between casts, None when it cannot be estimated."""
        if mana_info is None or attack_speed <= 0:
            return None
        missing = mana_info.cost - mana_info.start
        if missing <= 0:
            return 0.0
        attacks = math.ceil(missing / self.mana_per_attack)
        return attacks / attack_speed

    def ability_dps(self, variables: list[ResolvedVariable], cast_time: Optional[float]) -> Optional[int]:
        damage = [v.current_value for v in variables if v.category == EffectCategory.DAMAGE]
        if cast_time is None or not damage:
            return None
        total = sum(damage)
        # Starting with full mana: the first cast is immediate
        if cast_time == 0:
            return total
        return round_half_up(total / cast_time)
