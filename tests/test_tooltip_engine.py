"""Tests for end-to-end tooltip resolution."""

import pytest

from tft_tooltip.core.description_renderer import RenderStyle
from tft_tooltip.core.label_resolver import EffectCategory
from tft_tooltip.core.skill_classifier import Confidence, SkillType
from tft_tooltip.core.stat_calculator import CombatStats, CombatStatsResolver
from tft_tooltip.core.template_parser import TemplateParser
from tft_tooltip.core.tooltip_engine import TooltipEngine
from tft_tooltip.core.variable_scaler import ScalingCategory, ScalingTable
from tft_tooltip.data.loaders import get_champion_by_id, load_locale
from tft_tooltip.data.models.ability import AbilityDefinition
from tft_tooltip.data.models.locale import LocaleBundle


@pytest.fixture
def engine():
    """Engine with an AP coefficient of 0.5 and no per-key overrides."""
    table = ScalingTable(category_defaults={"AP": 0.5}, coefficient_overrides={})
    return TooltipEngine(scaling_table=table)


@pytest.fixture
def blast():
    """Active ability: 25/75 mana, Damage [80, 120, 180]."""
    return AbilityDefinition.model_validate({
        "name": "Blast",
        "desc": "Deals @Damage@ to the nearest enemy.",
        "manaStart": 25,
        "manaCost": 75,
        "variables": [{"name": "Damage", "value": [0, 80, 120, 180]}],
    })


@pytest.fixture
def stats():
    """2-star unit with 40 AP and 1.0 attack speed."""
    return CombatStats(ability_power=40, attack_speed=1.0, star_level=2)


class TestScenarios:
    """Reference scenarios."""

    def test_active_ability_with_ap(self, engine, blast, stats):
        tooltip = engine.resolve(blast, stats)

        assert tooltip.type == SkillType.ACTIVE
        assert tooltip.classification_confidence == Confidence.HIGH
        assert tooltip.mana_info.display == "25/75"

        damage = tooltip.variables[0]
        assert damage.key == "Damage"
        assert damage.current_value == 140
        assert damage.bonus == 20
        assert damage.final_values == [100, 140, 200]
        assert damage.category == EffectCategory.DAMAGE
        assert damage.scaling.category == ScalingCategory.AP

    def test_rendered_text(self, engine, blast, stats):
        tooltip = engine.resolve(blast, stats)

        assert tooltip.paragraphs == ["Deals 140 to the nearest enemy."]

    def test_no_variables_no_mana(self, engine, stats):
        ability = AbilityDefinition(name="Thing", description="Does something.")
        tooltip = engine.resolve(ability, stats)

        assert tooltip.type == SkillType.PASSIVE
        assert tooltip.mana_info is None
        assert tooltip.variables == []

    def test_unmapped_variable(self, engine, stats):
        ability = AbilityDefinition.model_validate({
            "desc": "Gain @XyzUnmapped@ things.",
            "variables": [{"name": "XyzUnmapped", "value": [0, 5, 5, 5]}],
        })
        variable = engine.resolve(ability, stats).variables[0]

        assert variable.label == "XyzUnmapped"
        assert variable.category == EffectCategory.NONE
        assert variable.scaling.category == ScalingCategory.NONE
        assert variable.bonus == 0


class TestProperties:
    """Properties that hold for every input."""

    def test_idempotent(self, engine, blast, stats):
        assert engine.resolve(blast, stats) == engine.resolve(blast, stats)

    @pytest.mark.parametrize("requested,expected", [(0, 1), (4, 3)])
    def test_star_level_clamped(self, engine, blast, requested, expected):
        tooltip = engine.resolve(blast, CombatStats(star_level=requested))

        assert tooltip.star_level == expected
        assert tooltip.variables[0].current_value == [80, 120, 180][expected - 1]

    def test_round_trip_without_placeholders(self, engine, stats):
        description = "Fire a <magicDamage>beam</magicDamage>.<br>Afterward, rest."
        tooltip = engine.resolve(AbilityDefinition(description=description), stats)

        assert tooltip.paragraphs == TemplateParser().strip_markup(description)


class TestVariables:
    """Tests for variable ordering and filtering."""

    def test_order_and_filtering(self, engine, stats):
        ability = AbilityDefinition.model_validate({
            "desc": "Gain @Beta@ then @Alpha@.",
            "variables": {
                "Alpha": [0, 1, 2, 3],
                "Beta": [0, 4, 5, 6],
                "Zeroed": [0, 0, 0, 0],
                "Delta": [0, 7, 8, 9],
            },
        })
        variables = engine.resolve(ability, stats).variables

        assert [v.key for v in variables] == ["Beta", "Alpha", "Delta"]
        assert [v.referenced for v in variables] == [True, True, False]

    def test_referenced_zero_variable_kept(self, engine, stats):
        ability = AbilityDefinition.model_validate({
            "desc": "Gain @Zeroed@.",
            "variables": {"Zeroed": [0, 0, 0, 0]},
        })

        assert [v.key for v in engine.resolve(ability, stats).variables] == ["Zeroed"]

    def test_display_string_follows_style(self, engine, blast, stats):
        tooltip = engine.resolve(blast, stats, style=RenderStyle.BREAKDOWN)

        assert tooltip.variables[0].display_string == "140 [80/120/180]"
        assert tooltip.paragraphs == ["Deals 140 [80/120/180] to the nearest enemy."]
        assert tooltip.style == "breakdown"


class TestConditionalEffects:
    """Tests for ShowIf content."""

    @pytest.fixture
    def ability(self):
        return AbilityDefinition.model_validate({
            "desc": "Deal @Damage@.<br><ShowIf.TFT_X>Grant a @Shield@ Shield.</ShowIf.TFT_X>",
            "variables": [
                {"name": "Damage", "value": [0, 80, 120, 180]},
                {"name": "Shield", "value": [0, 100, 150, 200]},
            ],
        })

    def test_hidden_block_becomes_effect(self, ability):
        engine = TooltipEngine(locale=LocaleBundle(labels={"TFT_X": "Bonus"}))
        tooltip = engine.resolve(ability, CombatStats(star_level=2))

        assert tooltip.paragraphs == ["Deal 120."]
        assert tooltip.conditional_effects == ["Bonus: Grant a 150 Shield."]

    def test_unlabeled_condition_uses_raw_name(self, ability):
        tooltip = TooltipEngine().resolve(ability, CombatStats(star_level=1))

        assert tooltip.conditional_effects == ["TFT_X: Grant a 100 Shield."]

    def test_active_condition_inlines_block(self, ability):
        engine = TooltipEngine()
        tooltip = engine.resolve(ability, CombatStats(star_level=2), active_conditions={"TFT_X"})

        assert tooltip.paragraphs == ["Deal 120.", "Grant a 150 Shield."]
        assert tooltip.conditional_effects == []


class TestDegraded:
    """Missing ability data degrades instead of failing."""

    def test_missing_ability(self, engine, stats):
        tooltip = engine.resolve(None, stats)

        assert tooltip.type == SkillType.PASSIVE
        assert tooltip.paragraphs == ["No ability data available."]
        assert tooltip.variables == []
        assert tooltip.mana_info is None

    def test_missing_ability_localized(self, stats):
        engine = TooltipEngine(locale=LocaleBundle(locale="ko", messages={"no_ability": "스킬 정보가 없습니다."}))

        assert engine.resolve(None, stats).paragraphs == ["스킬 정보가 없습니다."]


class TestLocalization:
    """Tests for translated text and ability names."""

    def test_keywords_and_name(self, stats):
        bundle = LocaleBundle(
            locale="ko",
            keywords={"magic damage": "마법 피해"},
            ability_names={"blast": "폭발"},
        )
        ability = AbilityDefinition.model_validate({
            "name": "Blast",
            "desc": "Deals @Damage@ magic damage.",
            "variables": [{"name": "Damage", "value": [0, 80, 120, 180]}],
        })
        tooltip = TooltipEngine(locale=bundle).resolve(ability, CombatStats(star_level=1))

        assert tooltip.name == "폭발"
        assert tooltip.paragraphs == ["Deals 80 마법 피해."]

    def test_translation_can_be_disabled(self, stats):
        bundle = LocaleBundle(locale="ko", keywords={"damage": "피해"})
        ability = AbilityDefinition(description="Deals damage.")
        tooltip = TooltipEngine(locale=bundle, translate_keywords=False).resolve(ability, stats)

        assert tooltip.paragraphs == ["Deals damage."]


class TestCatalogChampions:
    """Resolve champions from the bundled data files."""

    def test_jinx_two_star(self):
        jinx = get_champion_by_id("jinx")
        stats = CombatStatsResolver().calculate_stats(jinx, star_level=2)
        tooltip = TooltipEngine(locale=load_locale("en")).resolve(jinx.ability, stats)

        assert tooltip.paragraphs == [
            "Fire a rocket at the current target, dealing 301 physical damage to all enemies within 1 hexes.",
            "Afterward, gain 35% Attack Speed for 3 seconds.",
        ]
        assert tooltip.mana_info.display == "0/60"

    def test_garen_is_passive(self):
        garen = get_champion_by_id("garen")
        stats = CombatStatsResolver().calculate_stats(garen, star_level=1)
        tooltip = TooltipEngine().resolve(garen.ability, stats)

        assert tooltip.type == SkillType.PASSIVE
        assert tooltip.classification_confidence == Confidence.MEDIUM
        assert tooltip.paragraphs == ["Passive: Every 4 seconds, heal 80 Health."]
