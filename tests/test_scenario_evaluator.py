"""Efficiency ranking of what-if investment scenarios."""
from __future__ import annotations

import pytest

from engines.scenarios import ScenarioEvaluator, scenario_efficiency


def test_efficiency_is_raw_ratio_of_new_percentage_to_investment(scenario):
    quick_win = scenario("Quick Win", 5500.0, 80)
    assert scenario_efficiency(quick_win) == pytest.approx(80 / 5500)


def test_rank_orders_by_descending_efficiency(scenario):
    scenarios = [
        scenario("Strategic Investment", 13500.0, 95),
        scenario("Quick Win", 5500.0, 80),
        scenario("Moonshot", 50000.0, 100),
    ]
    ranked = ScenarioEvaluator().rank(scenarios)

    assert [r.scenario.scenario_name for r in ranked] == [
        "Quick Win", "Strategic Investment", "Moonshot",
    ]
    assert ranked[0].efficiency == pytest.approx(80 / 5500)
    assert all(a.efficiency >= b.efficiency for a, b in zip(ranked, ranked[1:]))


def test_best_is_the_maximum_efficiency_scenario(scenario):
    scenarios = [scenario("A", 1000.0, 90), scenario("B", 100.0, 20), scenario("C", 10.0, 1)]
    best = ScenarioEvaluator().best(scenarios)

    assert best.scenario_name == "B"
    assert scenario_efficiency(best) == max(scenario_efficiency(s) for s in scenarios)


def test_exact_ties_keep_first_in_input_order(scenario):
    scenarios = [
        scenario("Low", 1000.0, 10),
        scenario("First Tie", 1000.0, 80),
        scenario("Second Tie", 500.0, 40),
    ]
    evaluator = ScenarioEvaluator()

    assert evaluator.best(scenarios).scenario_name == "First Tie"
    assert [r.scenario.scenario_name for r in evaluator.rank(scenarios)] == [
        "First Tie", "Second Tie", "Low",
    ]


def test_ranking_uses_raw_ratio_not_marginal_gain(scenario):
    cheap = scenario("Cheap", 100.0, 10)
    solid = scenario("Solid", 1000.0, 95)
    # raw ratio 0.1 vs 0.095; gain over a 72% baseline would pick Solid
    assert ScenarioEvaluator().best([solid, cheap]).scenario_name == "Cheap"


def test_empty_scenario_list(scenario):
    evaluator = ScenarioEvaluator()
    assert evaluator.rank([]) == []
    assert evaluator.best([]) is None


def test_efficiency_policy_is_injectable(scenario):
    scenarios = [scenario("Cheap", 100.0, 10), scenario("Solid", 1000.0, 95)]
    by_percentage = ScenarioEvaluator(efficiency=lambda s: s.new_qualification_percentage)

    assert by_percentage.best(scenarios).scenario_name == "Solid"


def test_rank_does_not_mutate_input(scenario):
    scenarios = (scenario("B", 2000.0, 90), scenario("A", 1000.0, 90))
    ScenarioEvaluator().rank(scenarios)
    assert [s.scenario_name for s in scenarios] == ["B", "A"]
