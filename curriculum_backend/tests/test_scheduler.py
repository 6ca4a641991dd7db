from dataclasses import replace

from conftest import subject
from app.services.graph import build_graph
from app.services.scheduler import (
    SimulationOutcome,
    SimulationRules,
    effective_weekly_load,
    minimum_remaining_periods,
    pack_period,
    simulate_periods,
)


def test_unlocker_first_then_both_dependents(abc_graph, rules):
    result = simulate_periods(abc_graph, set(), 0, rules)

    assert result.periods == 2
    assert result.outcome is SimulationOutcome.COMPLETE
    assert result.exact
    assert [t.codes for t in result.terms] == [["A"], ["B", "C"]]


def test_one_dependent_per_period_when_load_is_tight(abc_graph, rules):
    result = simulate_periods(abc_graph, set(), 0, replace(rules, max_weekly_hours=6))

    assert result.periods == 3
    assert [t.codes for t in result.terms] == [["A"], ["B"], ["C"]]


def test_weight_beats_nominal_period(rules):
    graph = build_graph([
        subject("W", 1),
        subject("X", 2),
        subject("Y", 3, 72, ["X"]),
    ])

    result = simulate_periods(graph, set(), 0, replace(rules, max_weekly_hours=5))

    assert [t.codes for t in result.terms] == [["X"], ["W"], ["Y"]]


def test_large_load_takes_a_whole_period(rules):
    graph = build_graph([subject("L", 1, 540), subject("D", 2, 36)])
    wide = replace(rules, max_weekly_hours=30)

    assert effective_weekly_load(graph.get("L"), wide) == 30
    result = simulate_periods(graph, set(), 0, wide)

    assert [t.codes for t in result.terms] == [["L"], ["D"]]


def test_pack_keeps_fractional_loads_unrounded(rules):
    halves = [subject("P", 1, 63), subject("Q", 1, 63)]  # 3.5 h/week each

    taken, load = pack_period(halves, replace(rules, max_weekly_hours=7))

    assert [s.code for s in taken] == ["P", "Q"]
    assert load == 7.0


def test_pack_never_exceeds_cap(curriculum):
    rules = SimulationRules()
    taken, load = pack_period(list(curriculum.subjects), rules)

    assert load <= rules.max_weekly_hours
    assert sum(effective_weekly_load(s, rules) for s in taken) == load


def test_pack_is_first_fit_not_optimal(rules):
    ranked = [subject("M", 1, 108), subject("N", 1, 90), subject("O", 1, 72)]  # 6, 5, 4

    taken, load = pack_period(ranked, rules)

    # N no longer fits after M, but the walk goes on and O still does
    assert [s.code for s in taken] == ["M", "O"]
    assert load == 10


def test_spare_capacity_pays_elective_debt(rules):
    graph = build_graph([subject("A", 1)])
    wide = replace(rules, max_weekly_hours=30, required_elective_hours=600)

    result = simulate_periods(graph, set(), 0, wide)

    # 26 spare weekly hours absorb 468 of 600; the rest needs one more period
    assert result.periods == 2
    assert result.terms[0].elective_hours == 468
    assert result.terms[1].codes == []
    assert result.terms[1].elective_hours == 132
    assert result.remaining_elective_hours == 0


def test_elective_debt_absorbed_within_mandatory_periods(rules):
    graph = build_graph([subject("A", 1)])
    wide = replace(rules, max_weekly_hours=30, required_elective_hours=400)

    assert minimum_remaining_periods(graph, set(), 0, wide) == 1


def test_completed_elective_hours_reduce_debt(rules):
    graph = build_graph([subject("A", 1)])
    wide = replace(rules, max_weekly_hours=30, required_elective_hours=1200)

    assert minimum_remaining_periods(graph, set(), 0, wide) == 3
    assert minimum_remaining_periods(graph, set(), 800, wide) == 1


def test_only_electives_left(abc_graph, rules):
    debt = replace(rules, required_elective_hours=300)

    # 10 h/week * 18 weeks = 180 hours per elective-only period
    assert minimum_remaining_periods(abc_graph, {"A", "B", "C"}, 0, debt) == 2


def test_everything_done_is_zero(curriculum):
    codes = {s.code for s in curriculum.subjects}

    result = simulate_periods(curriculum, codes, 432, SimulationRules())

    assert result.periods == 0
    assert result.exact
    assert result.terms == []


def test_deadlock_is_reported(rules):
    graph = build_graph([subject("A", 1), subject("B", 2, 72, ["GHOST"])])

    result = simulate_periods(graph, set(), 0, rules)

    assert result.outcome is SimulationOutcome.DEADLOCK
    assert not result.exact
    assert result.periods == 2
    assert "B" in result.warnings[0]


def test_cycle_deadlocks_instead_of_looping(rules):
    graph = build_graph([
        subject("A", 1, 72, ["B"]),
        subject("B", 1, 72, ["A"]),
        subject("C", 1),
    ])

    result = simulate_periods(graph, set(), 0, rules)

    assert result.outcome is SimulationOutcome.DEADLOCK
    assert result.periods == 2


def test_nothing_fits_stops(rules):
    graph = build_graph([subject("A", 1)])

    result = simulate_periods(graph, set(), 0, replace(rules, max_weekly_hours=3))

    assert result.outcome is SimulationOutcome.STALLED
    assert result.periods == 1


def test_nothing_fits_keeps_paying_elective_debt(rules):
    graph = build_graph([subject("A", 1)])
    narrow = replace(rules, max_weekly_hours=3, required_elective_hours=100)

    result = simulate_periods(graph, set(), 0, narrow)

    # 54 elective hours per empty period: 100 -> 46 -> 0
    assert result.outcome is SimulationOutcome.STALLED
    assert result.periods == 2
    assert result.remaining_elective_hours == 0


def test_round_limit(chain_graph, rules):
    result = simulate_periods(chain_graph, set(), 0, replace(rules, max_rounds=2))

    assert result.outcome is SimulationOutcome.ROUND_LIMIT
    assert result.periods == 2


def test_caller_set_is_not_mutated(abc_graph, rules):
    completed = {"A"}

    simulate_periods(abc_graph, completed, 0, rules)

    assert completed == {"A"}


def test_unknown_completed_codes_are_ignored(abc_graph, rules):
    assert minimum_remaining_periods(abc_graph, {"A", "ZZZ"}, 0, rules) == 1


def test_more_progress_never_increases_estimate(chain_graph, rules):
    order = chain_graph.topo_order()
    estimates = [
        minimum_remaining_periods(chain_graph, set(order[:k]), 0, rules)
        for k in range(len(order) + 1)
    ]

    assert estimates == [4, 3, 2, 1, 0]


def test_bundled_curriculum_from_scratch(curriculum):
    rules = SimulationRules()

    result = simulate_periods(curriculum, set(), 0, rules)

    # longest prerequisite chain ends at the internship in nine steps
    assert result.exact
    assert result.periods >= 9
    assert all(t.weekly_load <= rules.max_weekly_hours for t in result.terms)
    scheduled = [code for t in result.terms for code in t.codes]
    assert sorted(scheduled) == sorted(s.code for s in curriculum.subjects)
