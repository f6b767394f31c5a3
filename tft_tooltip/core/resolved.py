"""Computed tooltip values returned by the engine."""

from dataclasses import asdict, dataclass, field
from typing import Any, Optional

from .label_resolver import EffectCategory
from .skill_classifier import Confidence, ManaInfo, SkillType
from .variable_scaler import ScalingRule


@dataclass(frozen=True)
class ResolvedVariable:
    """One named numeric effect of an ability, fully resolved."""

    key: str
    label: str
    category: EffectCategory
    scaling: ScalingRule
    base_values: list[float]
    final_values: list[int]
    current_value: int
    bonus: int
    display_string: str
    color: str = "gray"
    priority: int = 9
    referenced: bool = True


@dataclass(frozen=True)
class DerivedMetrics:
    """Estimates computed from resolved variables and stats."""

    burst_potential: Optional[int] = None
    dps: Optional[int] = None
    cast_time: Optional[float] = None
    auto_attack_dps: Optional[float] = None
    effective_health: Optional[float] = None


@dataclass(frozen=True)
class ResolvedTooltip:
    """Everything needed to display an ability tooltip."""

    name: str
    type: SkillType
    mana_info: Optional[ManaInfo] = None
    paragraphs: list[str] = field(default_factory=list)
    variables: list[ResolvedVariable] = field(default_factory=list)
    derived_metrics: DerivedMetrics = field(default_factory=DerivedMetrics)
    conditional_effects: list[str] = field(default_factory=list)
    classification_confidence: Confidence = Confidence.LOW
    star_level: int = 1
    style: str = "current"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form for serialization."""
        data = asdict(self)
        data["mana_info"] = self.mana_info.to_dict() if self.mana_info else None
        return data
