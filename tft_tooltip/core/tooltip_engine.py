"""Tooltip Engine - resolve an ability description against a unit's stats."""

import logging
from typing import Iterable, Optional

from tft_tooltip.data.models.ability import AbilityDefinition, AbilityVariable
from tft_tooltip.data.models.locale import LocaleBundle
from .description_renderer import DescriptionRenderer, RenderStyle, format_value
from .label_resolver import LabelResolver
from .metric_estimator import DerivedMetricEstimator
from .resolved import ResolvedTooltip, ResolvedVariable
from .skill_classifier import SkillType, SkillTypeClassifier
from .stat_calculator import CombatStats
from .template_parser import ParsedTemplate, TemplateParser
from .variable_scaler import ScaledValues, ScalingTable, VariableScaler

logger = logging.getLogger(__name__)


class TooltipEngine:
    """
    Pure (ability, stats) -> tooltip resolution.

    The engine holds configuration only; every call recomputes from scratch,
    so identical inputs always give identical tooltips.

    Usage:
        engine = TooltipEngine(locale=load_locale("ko"))
        stats = CombatStatsResolver().calculate_stats(champion, items, star_level=2)
        tooltip = engine.resolve(champion.ability, stats)
    """

    def __init__(
        self,
        locale: Optional[LocaleBundle] = None,
        scaling_table: Optional[ScalingTable] = None,
        style: RenderStyle = RenderStyle.CURRENT,
        translate_keywords: bool = True,
        parser: Optional[TemplateParser] = None,
        classifier: Optional[SkillTypeClassifier] = None,
        estimator: Optional[DerivedMetricEstimator] = None,
    ):
        self.locale = locale or LocaleBundle()
        self.style = RenderStyle(style)
        self.translate_keywords = translate_keywords
        self.parser = parser or TemplateParser()
        self.scaler = VariableScaler(scaling_table)
        self.labels = LabelResolver(self.locale)
        self.classifier = classifier or SkillTypeClassifier()
        self.estimator = estimator or DerivedMetricEstimator()

    def resolve(
        self,
        ability: Optional[AbilityDefinition],
        stats: CombatStats,
        style: Optional[RenderStyle] = None,
        active_conditions: Iterable[str] = (),
    ) -> ResolvedTooltip:
        """
        Resolve a tooltip.

        Args:
            ability: Ability definition; None yields a degraded tooltip.
            stats: Resolved combat stats (star level included).
            style: Render style, defaults to the engine's.
            active_conditions: Runtime conditions that currently hold.

        Returns:
            ResolvedTooltip
        """
        style = RenderStyle(style or self.style)
        star = stats.star_level

        if ability is None:
            logger.debug("No ability data, returning degraded tooltip")
            return ResolvedTooltip(
                name=self.locale.message("unknown_ability"),
                type=SkillType.PASSIVE,
                paragraphs=[self.locale.message("no_ability")],
                derived_metrics=self.estimator.estimate([], stats),
                star_level=star,
                style=style.value,
            )

        classification = self.classifier.classify(ability)
        parsed = self.parser.parse(ability.description, active_conditions)

        scaled = {v.key: self.scaler.scale(v, stats) for v in ability.variables}
        variables = self._resolve_variables(ability, parsed, scaled, style, star)

        renderer = DescriptionRenderer(
            style=style,
            translator=self.labels.translate if self.translate_keywords else None,
        )
        paragraphs = renderer.render(parsed, scaled, star)
        conditional_effects = self._conditional_effects(parsed, renderer, scaled, star)

        return ResolvedTooltip(
            name=self.locale.ability_name(ability.name) if ability.name else self.locale.message("unknown_ability"),
            type=classification.type,
            mana_info=classification.mana_info,
            paragraphs=paragraphs,
            variables=variables,
            derived_metrics=self.estimator.estimate(variables, stats, classification.mana_info),
            conditional_effects=conditional_effects,
            classification_confidence=classification.confidence,
            star_level=star,
            style=style.value,
        )

    def _resolve_variables(
        self,
        ability: AbilityDefinition,
        parsed: ParsedTemplate,
        scaled: dict[str, ScaledValues],
        style: RenderStyle,
        star: int,
    ) -> list[ResolvedVariable]:
        # Referenced variables first, in order of appearance
        ordered: list[AbilityVariable] = []
        seen: set[str] = set()
        for key in parsed.placeholder_keys:
            variable = ability.get_variable(key)
            if variable is not None and variable.key not in seen:
                ordered.append(variable)
                seen.add(variable.key)
        referenced = set(seen)

        # Then the rest in definition order
        for variable in ability.variables:
            if variable.key not in seen:
                ordered.append(variable)
                seen.add(variable.key)

        resolved = []
        for variable in ordered:
            values = scaled[variable.key]
            is_referenced = variable.key in referenced
            if not is_referenced and _is_meaningless(values):
                logger.debug("Hiding all-zero variable %r", variable.key)
                continue

            label = self.labels.resolve(variable.key)
            resolved.append(ResolvedVariable(
                key=variable.key,
                label=label.label,
                category=label.category,
                scaling=values.rule,
                base_values=values.base_values,
                final_values=values.final_values,
                current_value=values.current_value,
                bonus=values.bonus,
                display_string=format_value(values, style, star_level=star),
                color=label.color,
                priority=label.priority,
                referenced=is_referenced,
            ))
        return resolved

    def _conditional_effects(
        self,
        parsed: ParsedTemplate,
        renderer: DescriptionRenderer,
        scaled: dict[str, ScaledValues],
        star: int,
    ) -> list[str]:
        """One line per hidden ShowIf block, rendered as if its condition held."""
        effects = []
        for block in parsed.hidden_conditional_blocks:
            if block.negated:
                continue
            segments = self.parser.flatten_block(block, parsed.active_conditions)
            text = renderer.render_segments(segments, scaled, star)
            if not text:
                continue
            label = self.locale.labels.get(block.condition) or block.condition
            effects.append(f"{label}: {text}")
        return effects


def _is_meaningless(values: ScaledValues) -> bool:
    return not any(values.base_values) and not any(values.final_values)
