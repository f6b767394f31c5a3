"""Tests for variable label resolution and keyword translation."""

import pytest

from tft_tooltip.core.label_resolver import EffectCategory, LabelResolver, infer_effect_category
from tft_tooltip.data.models.locale import LocaleBundle


@pytest.fixture
def korean():
    """LabelResolver with a small Korean table."""
    bundle = LocaleBundle(
        locale="ko",
        labels={
            "Damage": "피해량",
            "MagicDamage": "마법 피해량",
            "ModifiedHeal": "체력 회복",
            "Shield": "보호막",
        },
        keywords={
            "damage": "피해",
            "magic damage": "마법 피해",
            "seconds": "초",
        },
    )
    return LabelResolver(bundle)


class TestResolve:
    """Tests for the label lookup chain."""

    def test_exact_match(self, korean):
        label = korean.resolve("Damage")

        assert label.label == "피해량"
        assert label.matched_by == "exact"
        assert label.category == EffectCategory.DAMAGE

    def test_case_insensitive_match(self, korean):
        assert korean.resolve("shield").label == "보호막"

    def test_trailing_digits_stripped(self, korean):
        label = korean.resolve("Damage2")

        assert label.label == "피해량"
        assert label.matched_by == "stripped"

    def test_longest_substring_wins(self, korean):
        label = korean.resolve("BonusMagicDamage")

        assert label.label == "마법 피해량"
        assert label.matched_by == "substring"

    def test_unmapped_key(self, korean):
        """Unknown keys fall back to the key itself."""
        label = korean.resolve("XyzUnmapped")

        assert label.label == "XyzUnmapped"
        assert label.category == EffectCategory.NONE
        assert label.matched_by == "raw"

    def test_unmapped_key_keeps_effect_category(self):
        label = LabelResolver().resolve("ExtraDamage")

        assert label.label == "ExtraDamage"
        assert label.category == EffectCategory.DAMAGE

    def test_color_and_priority(self, korean):
        heal = korean.resolve("ModifiedHeal")
        damage = korean.resolve("Damage")

        assert heal.category == EffectCategory.HEAL
        assert heal.color == "green"
        assert damage.color == "red"
        assert damage.priority < heal.priority


class TestEffectCategory:
    """Tests for effect category inference."""

    @pytest.mark.parametrize("key,category", [
        ("ModifiedDamage", EffectCategory.DAMAGE),
        ("ModifiedHeal", EffectCategory.HEAL),
        ("BonusHealth", EffectCategory.STAT),
        ("Shield", EffectCategory.SHIELD),
        ("StunDuration", EffectCategory.DURATION),
        ("SlowPercent", EffectCategory.CROWD_CONTROL),
        ("Radius", EffectCategory.UTILITY),
        ("Interval", EffectCategory.NONE),
    ])
    def test_infer(self, key, category):
        assert infer_effect_category(key) == category


class TestTranslate:
    """Tests for keyword translation of free-form text."""

    def test_longest_phrase_first(self, korean):
        assert korean.translate("Deals magic damage and damage.") == "Deals 마법 피해 and 피해."

    def test_case_insensitive(self, korean):
        assert korean.translate("Magic Damage for 3 Seconds") == "마법 피해 for 3 초"

    def test_word_boundaries(self, korean):
        assert korean.translate("damaged units") == "damaged units"

    def test_no_keywords_is_identity(self):
        resolver = LabelResolver(LocaleBundle(locale="en"))

        assert resolver.translate("Deals magic damage.") == "Deals magic damage."
