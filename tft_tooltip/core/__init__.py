# Core tooltip resolution modules
from .constants import (
    MIN_STAR_LEVEL,
    MAX_STAR_LEVEL,
    DEFAULT_STAR_LEVEL,
    STAR_MULTIPLIER,
    MAX_ITEMS,
    MANA_PER_ATTACK,
)

from .stat_calculator import CombatStatsResolver, CombatStats, clamp_star_level
from .template_parser import (
    TemplateParser,
    ParsedTemplate,
    Paragraph,
    TextSegment,
    PlaceholderSegment,
    ConditionalBlock,
    tokenize,
)
from .variable_scaler import VariableScaler, ScalingTable, ScalingRule, ScalingCategory, ScaledValues
from .label_resolver import LabelResolver, VariableLabel, EffectCategory
from .description_renderer import DescriptionRenderer, RenderStyle, format_value
from .skill_classifier import SkillTypeClassifier, SkillClassification, SkillType, Confidence, ManaInfo
from .resolved import ResolvedTooltip, ResolvedVariable, DerivedMetrics
from .metric_estimator import DerivedMetricEstimator
from .tooltip_engine import TooltipEngine
from .tooltip_cache import TooltipCache, item_set_signature

__all__ = [
    # Constants
    "MIN_STAR_LEVEL",
    "MAX_STAR_LEVEL",
    "DEFAULT_STAR_LEVEL",
    "STAR_MULTIPLIER",
    "MAX_ITEMS",
    "MANA_PER_ATTACK",
    # Stats
    "CombatStatsResolver",
    "CombatStats",
    "clamp_star_level",
    # Parsing
    "TemplateParser",
    "ParsedTemplate",
    "Paragraph",
    "TextSegment",
    "PlaceholderSegment",
    "ConditionalBlock",
    "tokenize",
    # Scaling
    "VariableScaler",
    "ScalingTable",
    "ScalingRule",
    "ScalingCategory",
    "ScaledValues",
    # Labels and rendering
    "LabelResolver",
    "VariableLabel",
    "EffectCategory",
    "DescriptionRenderer",
    "RenderStyle",
    "format_value",
    # Classification and metrics
    "SkillTypeClassifier",
    "SkillClassification",
    "SkillType",
    "Confidence",
    "ManaInfo",
    "DerivedMetricEstimator",
    # Engine
    "ResolvedTooltip",
    "ResolvedVariable",
    "DerivedMetrics",
    "TooltipEngine",
    "TooltipCache",
    "item_set_signature",
]
