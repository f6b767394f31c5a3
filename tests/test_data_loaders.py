"""Tests for data loaders."""

import json

import pytest

from tft_tooltip.data.loaders import (
    load_champions,
    get_champion_by_id,
    get_champions_by_cost,
    load_items,
    get_item_by_id,
    get_items_by_ids,
    get_items_by_type,
    load_locale,
    available_locales,
    resolve_locale,
    UNKNOWN_LOCALE,
    load_scaling_overrides,
)
from tft_tooltip.data.loaders import champion_loader, locale_loader
from tft_tooltip.data.models.item import ItemType


class TestChampionLoader:
    """Tests for champion loading functionality."""

    def test_load_champions_returns_list(self):
        champions = load_champions()
        assert isinstance(champions, list)
        assert len(champions) == 5

    def test_get_champion_by_id_found(self):
        champion = get_champion_by_id("lux")
        assert champion is not None
        assert champion.name == "Lux"
        assert champion.cost == 3

    def test_get_champion_by_id_not_found(self):
        assert get_champion_by_id("nonexistent_champion") is None

    def test_get_champions_by_cost(self):
        one_costs = get_champions_by_cost(1)
        assert {c.id for c in one_costs} == {"garen", "target_dummy"}

    def test_ability_mana_from_stats(self):
        """Abilities borrow initialMana / mana from the champion stats."""
        ability = get_champion_by_id("lux").ability
        assert ability.mana_start == 30
        assert ability.mana_cost == 80

    def test_ability_without_mana_stats(self):
        ability = get_champion_by_id("garen").ability
        assert ability.mana_start is None
        assert ability.mana_cost is None

    def test_variables_mapping_form(self):
        ability = get_champion_by_id("garen").ability
        assert [v.key for v in ability.variables] == ["Interval", "ModifiedHeal"]
        assert ability.get_variable("modifiedheal").star_values == [80, 120, 180]

    def test_scalar_variable(self):
        ability = get_champion_by_id("rakan").ability
        assert ability.get_variable("HexRange").star_values == [2, 2, 2]

    def test_champion_without_ability(self):
        dummy = get_champion_by_id("target_dummy")
        assert dummy.ability is None

    def test_stat_aliases(self):
        stats = get_champion_by_id("jinx").stats
        assert stats.attack_damage == 60
        assert stats.magic_resist == 30
        assert stats.attack_speed == 0.75
        # "range" is present in the export but unused
        assert "attack_range" not in stats.model_dump()

    def test_custom_data_dir(self, tmp_path):
        (tmp_path / "champions").mkdir()
        (tmp_path / "champions" / "champions.json").write_text(json.dumps({
            "champions": [{"id": "test", "name": "Test", "cost": 2, "stats": {"health": "junk"}}],
        }))
        champion_loader.clear_cache()

        champions = load_champions(tmp_path)

        assert [c.id for c in champions] == ["test"]
        assert champions[0].stats.health == 0


class TestItemLoader:
    """Tests for item loading functionality."""

    def test_load_items(self):
        items = load_items()
        assert len(items) == 14

    def test_get_item_by_id(self):
        item = get_item_by_id("rabadons_deathcap")
        assert item.stats.ap == 50
        assert item.components == ("needlessly_large_rod", "needlessly_large_rod")

    def test_get_items_by_ids(self):
        items = get_items_by_ids(["bf_sword", "chain_vest"])
        assert [i.id for i in items] == ["bf_sword", "chain_vest"]

    def test_get_items_by_ids_unknown(self):
        with pytest.raises(ValueError):
            get_items_by_ids(["bf_sword", "no_such_item"])

    def test_get_items_by_type(self):
        components = get_items_by_type(ItemType.COMPONENT)
        assert len(components) == 8
        assert all(i.type == ItemType.COMPONENT for i in components)


class TestLocaleLoader:
    """Tests for locale loading functionality."""

    def test_load_korean(self):
        bundle = load_locale("ko")
        assert bundle.locale == "ko"
        assert bundle.labels["ModifiedDamage"] == "피해량"
        assert bundle.ability_name("Final Spark") == "최후의 섬광"
        assert bundle.message("no_ability") == "스킬 정보가 없습니다."

    def test_unknown_locale_is_empty(self):
        bundle = load_locale("xx")
        assert bundle.labels == {}
        assert bundle.message("no_ability") == "No ability data available."

    def test_malformed_locale_never_reads_files(self, tmp_path):
        (tmp_path / "outside.json").write_text('{"labels": {"Damage": "FROM OUTSIDE"}}')

        for locale in (str(tmp_path / "outside"), "../locales/ko", "en/../ko"):
            bundle = load_locale(locale)
            assert bundle.locale == UNKNOWN_LOCALE
            assert bundle.labels == {}

    @pytest.mark.parametrize("requested,expected", [
        ("ko", "ko"),
        ("xx", UNKNOWN_LOCALE),
        ("../ko", UNKNOWN_LOCALE),
        (None, UNKNOWN_LOCALE),
    ])
    def test_resolve_locale(self, requested, expected):
        assert resolve_locale(requested) == expected

    def test_available_locales(self):
        assert available_locales() == ["en", "ko"]

    def test_cache_clear(self):
        first = load_locale("en")
        locale_loader.clear_cache()
        assert load_locale("en") is not first


class TestScalingLoader:
    """Tests for scaling table loading."""

    def test_load_default_file(self):
        overrides = load_scaling_overrides()
        assert overrides["category_overrides"]["ShieldDuration"] == "NONE"

    def test_missing_file(self, tmp_path):
        assert load_scaling_overrides(tmp_path / "missing.json") == {}
