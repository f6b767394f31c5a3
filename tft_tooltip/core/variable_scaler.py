"""Variable scaling: infer which stat a variable scales with and apply it."""

import json
import logging
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from tft_tooltip.data.models.ability import AbilityVariable
from tft_tooltip.data.models.numeric import round_half_up, to_number
from .constants import (
    COEFFICIENT_OVERRIDES,
    DEFAULT_SCALING_COEFFICIENTS,
    MAX_STAR_LEVEL,
    MIN_STAR_LEVEL,
    SCALING_KEYWORDS,
)
from .stat_calculator import CombatStats

logger = logging.getLogger(__name__)


class ScalingCategory(StrEnum):
    """Stat a variable scales with."""
    AP = "AP"
    AD = "AD"
    HP = "HP"
    HYBRID = "HYBRID"
    NONE = "NONE"


@dataclass(frozen=True)
class ScalingRule:
    """How one variable scales.

    ``inferred`` is True when the category came from the keyword heuristic
    rather than an explicit override. Those values are approximations.
    """
    category: ScalingCategory = ScalingCategory.NONE
    coefficient: float = 0.0
    inferred: bool = False


@dataclass(frozen=True)
class ScaledValues:
    """Per-star values of one variable after stat scaling."""
    base_values: list[float]
    final_values: list[int]
    current_value: int
    bonus: int
    rule: ScalingRule
    # Unrounded base + stat contribution, for fractional values shown scaled
    raw_values: list[float] = field(default_factory=list)


@dataclass
class ScalingTable:
    """Keyword and coefficient tables driving scaling inference.

    Every table can be replaced, either directly or from a JSON file with the
    same field names.
    """

    # Ordered (keyword, category); first keyword contained in the key wins
    keywords: list[tuple[str, str]] = field(default_factory=lambda: list(SCALING_KEYWORDS))

    # Coefficient when no per-key override exists
    category_defaults: dict[str, float] = field(
        default_factory=lambda: dict(DEFAULT_SCALING_COEFFICIENTS)
    )

    # Per-key coefficients
    coefficient_overrides: dict[str, float] = field(
        default_factory=lambda: dict(COEFFICIENT_OVERRIDES)
    )

    # Per-key categories, bypassing the keyword heuristic
    category_overrides: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ScalingTable":
        """Build a table, keeping defaults for any section not given."""
        table = cls()
        if "keywords" in data:
            table.keywords = [(str(k).lower(), str(c).upper()) for k, c in data["keywords"]]
        if "category_defaults" in data:
            table.category_defaults = {
                str(k).upper(): to_number(v) for k, v in data["category_defaults"].items()
            }
        if "coefficient_overrides" in data:
            table.coefficient_overrides = {
                str(k): to_number(v) for k, v in data["coefficient_overrides"].items()
            }
        if "category_overrides" in data:
            table.category_overrides = {
                str(k): str(v).upper() for k, v in data["category_overrides"].items()
            }
        return table

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "ScalingTable":
        with open(path, encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    def coefficient_override(self, key: str) -> Optional[float]:
        """Per-key coefficient, exact match then case-insensitive."""
        if key in self.coefficient_overrides:
            return self.coefficient_overrides[key]
        lowered = key.lower()
        for name, coefficient in self.coefficient_overrides.items():
            if name.lower() == lowered:
                return coefficient
        return None

    def category_override(self, key: str) -> Optional[ScalingCategory]:
        if key in self.category_overrides:
            return _to_category(self.category_overrides[key])
        lowered = key.lower()
        for name, category in self.category_overrides.items():
            if name.lower() == lowered:
                return _to_category(category)
        return None


def _to_category(value: str) -> ScalingCategory:
    try:
        return ScalingCategory(str(value).upper())
    except ValueError:
        logger.debug("Unknown scaling category %r, using NONE", value)
        return ScalingCategory.NONE


class VariableScaler:
    """
    Compute final per-star values for ability variables.

    final[star] = round_half_up(base[star] + coefficient * stat)
    bonus       = final[current star] - round_half_up(base[current star])

    Usage:
        scaler = VariableScaler()
        scaled = scaler.scale(variable, stats)
    """

    def __init__(self, table: Optional[ScalingTable] = None):
        self.table = table or ScalingTable()

    def infer_rule(self, key: str) -> ScalingRule:
        """
        Determine the scaling category and coefficient of a variable key.

        Args:
            key: Variable key, e.g. "ModifiedDamage".

        Returns:
            ScalingRule; ``inferred`` unless the category was overridden.
        """
        category = self.table.category_override(key)
        inferred = category is None
        if category is None:
            category = self._category_from_keywords(key)

        coefficient = self.table.coefficient_override(key)
        if coefficient is None or category == ScalingCategory.NONE:
            coefficient = self.table.category_defaults.get(category.value, 0.0)

        return ScalingRule(category=category, coefficient=coefficient, inferred=inferred)

    def _category_from_keywords(self, key: str) -> ScalingCategory:
        lowered = key.lower()
        for keyword, category in self.table.keywords:
            if keyword in lowered:
                return _to_category(category)
        return ScalingCategory.NONE

    def relevant_stat(self, category: ScalingCategory, stats: CombatStats) -> float:
        """Stat value a category scales with."""
        if category == ScalingCategory.AP:
            return stats.ability_power
        if category == ScalingCategory.AD:
            return stats.attack_damage
        if category == ScalingCategory.HP:
            return stats.health
        if category == ScalingCategory.HYBRID:
            return max(stats.ability_power, stats.attack_damage)
        return 0.0

    def scale(
        self,
        variable: AbilityVariable,
        stats: CombatStats,
        rule: Optional[ScalingRule] = None,
    ) -> ScaledValues:
        """
        Scale a variable at every star level.

        Args:
            variable: The ability variable.
            stats: Resolved combat stats; ``stats.star_level`` selects the
                current value.
            rule: Precomputed rule, inferred from the key if omitted.

        Returns:
            ScaledValues with integer final values for stars 1-3.
        """
        rule = rule or self.infer_rule(variable.key)
        added = rule.coefficient * self.relevant_stat(rule.category, stats)

        base_values = variable.star_values
        raw_values = [base + added for base in base_values]
        final_values = [round_half_up(value) for value in raw_values]

        star = min(max(stats.star_level, MIN_STAR_LEVEL), MAX_STAR_LEVEL)
        current = final_values[star - 1]
        bonus = current - round_half_up(base_values[star - 1])

        return ScaledValues(
            base_values=base_values,
            final_values=final_values,
            current_value=current,
            bonus=bonus,
            rule=rule,
            raw_values=raw_values,
        )
