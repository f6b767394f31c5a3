"""
Tooltip API schemas.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Any, List, Optional

from tft_tooltip.core.description_renderer import RenderStyle
from tft_tooltip.core.label_resolver import EffectCategory
from tft_tooltip.core.resolved import ResolvedTooltip
from tft_tooltip.core.skill_classifier import Confidence, SkillType
from tft_tooltip.core.stat_calculator import clamp_star_level
from tft_tooltip.core.variable_scaler import ScalingCategory
from tft_tooltip.data.models.ability import AbilityDefinition
from tft_tooltip.data.models.champion import UnitStats
from tft_tooltip.data.models.item import ItemStats


class ManaInfoSchema(BaseModel):
    """Mana bar of an active ability."""

    start: float
    cost: float
    display: str  # "25/75"


class ScalingSchema(BaseModel):
    """Scaling rule of one variable."""

    category: ScalingCategory
    coefficient: float
    inferred: bool


class ResolvedVariableSchema(BaseModel):
    """One resolved ability variable."""

    key: str
    label: str
    category: EffectCategory
    scaling: ScalingSchema
    base_values: List[float]
    final_values: List[int]
    current_value: int
    bonus: int
    display_string: str
    color: str
    priority: int
    referenced: bool


class DerivedMetricsSchema(BaseModel):
    """Estimated headline numbers."""

    burst_potential: Optional[int] = None
    dps: Optional[int] = None
    cast_time: Optional[float] = None
    auto_attack_dps: Optional[float] = None
    effective_health: Optional[float] = None


class TooltipResponse(BaseModel):
    """Resolved tooltip."""

    champion_id: Optional[str] = None
    name: str
    type: SkillType
    mana_info: Optional[ManaInfoSchema] = None
    paragraphs: List[str]
    variables: List[ResolvedVariableSchema]
    derived_metrics: DerivedMetricsSchema
    conditional_effects: List[str] = []
    classification_confidence: Confidence
    star_level: int
    style: str
    locale: str

    @classmethod
    def from_tooltip(
        cls,
        tooltip: ResolvedTooltip,
        locale: str,
        champion_id: Optional[str] = None,
    ) -> "TooltipResponse":
        return cls.model_validate({
            **tooltip.to_dict(),
            "champion_id": champion_id,
            "locale": locale,
        })


class ResolveTooltipRequest(BaseModel):
    """Resolve an inline ability against inline stats."""

    ability: Optional[AbilityDefinition] = None
    stats: UnitStats = Field(default_factory=UnitStats)
    items: List[str] = Field(default_factory=list, description="Item IDs from the item catalog")
    item_stats: List[ItemStats] = Field(default_factory=list, description="Ad-hoc item stat records")
    star_level: int = 2  # clamped into 1..3, never rejected
    style: RenderStyle = RenderStyle.CURRENT
    locale: Optional[str] = None
    active_conditions: List[str] = Field(default_factory=list)

    @field_validator("star_level", mode="before")
    @classmethod
    def _clamp_star_level(cls, value: Any) -> int:
        return clamp_star_level(value)
