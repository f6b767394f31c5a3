"""Tests for derived tooltip metrics."""

import pytest

from tft_tooltip.core.label_resolver import EffectCategory
from tft_tooltip.core.metric_estimator import DerivedMetricEstimator
from tft_tooltip.core.resolved import ResolvedVariable
from tft_tooltip.core.skill_classifier import ManaInfo
from tft_tooltip.core.stat_calculator import CombatStats
from tft_tooltip.core.variable_scaler import ScalingRule


def make_variable(key, category, current):
    return ResolvedVariable(
        key=key,
        label=key,
        category=category,
        scaling=ScalingRule(),
        base_values=[current] * 3,
        final_values=[current] * 3,
        current_value=current,
        bonus=0,
        display_string=str(current),
    )


@pytest.fixture
def estimator():
    return DerivedMetricEstimator()


@pytest.fixture
def variables():
    return [
        make_variable("Damage", EffectCategory.DAMAGE, 140),
        make_variable("Heal", EffectCategory.HEAL, 80),
        make_variable("Shield", EffectCategory.SHIELD, 100),
    ]


class TestBurst:
    """Burst sums damage and heal values."""

    def test_burst_potential(self, estimator, variables):
        assert estimator.burst_potential(variables) == 220

    def test_no_burst_variables(self, estimator):
        assert estimator.burst_potential([make_variable("Radius", EffectCategory.UTILITY, 2)]) is None


class TestCastCycle:
    """Tests for cast time and ability DPS."""

    def test_scenario_cast_time(self, estimator, variables):
        """25/75 mana at 1.0 attack speed: 5 attacks per cast."""
        stats = CombatStats(attack_speed=1.0)
        metrics = estimator.estimate(variables, stats, ManaInfo(start=25, cost=75))

        assert metrics.cast_time == 5.0
        assert metrics.dps == 28

    def test_slower_attack_speed(self, estimator, variables):
        metrics = estimator.estimate(variables, CombatStats(attack_speed=0.5), ManaInfo(start=25, cost=75))

        assert metrics.cast_time == 10.0
        assert metrics.dps == 14

    def test_partial_attack_rounds_up(self, estimator):
        assert estimator.cast_time(ManaInfo(start=0, cost=45), 1.0) == 5.0

    def test_full_mana_at_start(self, estimator, variables):
        """Mana cost at or below starting mana: DPS equals the damage total."""
        metrics = estimator.estimate(variables, CombatStats(attack_speed=1.0), ManaInfo(start=100, cost=80))

        assert metrics.cast_time == 0.0
        assert metrics.dps == 140

    def test_no_mana_info(self, estimator, variables):
        metrics = estimator.estimate(variables, CombatStats(attack_speed=1.0), None)

        assert metrics.dps is None
        assert metrics.cast_time is None
        assert metrics.burst_potential == 220

    def test_zero_attack_speed(self, estimator, variables):
        metrics = estimator.estimate(variables, CombatStats(attack_speed=0), ManaInfo(start=0, cost=50))

        assert metrics.dps is None

    def test_no_damage_variables(self, estimator):
        heal = [make_variable("Heal", EffectCategory.HEAL, 80)]
        metrics = estimator.estimate(heal, CombatStats(attack_speed=1.0), ManaInfo(start=0, cost=50))

        assert metrics.dps is None
        assert metrics.cast_time == 5.0

    def test_custom_mana_per_attack(self, variables):
        estimator = DerivedMetricEstimator(mana_per_attack=25)
        metrics = estimator.estimate(variables, CombatStats(attack_speed=1.0), ManaInfo(start=25, cost=75))

        assert metrics.cast_time == 2.0
        assert metrics.dps == 70


class TestUnitMetrics:
    """Auto-attack DPS and effective health come straight from stats."""

    def test_auto_attack_dps(self, estimator):
        stats = CombatStats(attack_damage=100, attack_speed=1.0, crit_chance=0.25, crit_damage=1.4)

        assert estimator.estimate([], stats).auto_attack_dps == pytest.approx(110.0)

    def test_effective_health(self, estimator):
        stats = CombatStats(health=1000, armor=50)

        assert estimator.estimate([], stats).effective_health == pytest.approx(1500.0)
