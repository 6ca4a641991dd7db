import math
from collections.abc import Iterable, Set
from dataclasses import dataclass

from app.core.config import settings
from app.models.subject import Elective
from app.services.analyzer import analyze_all
from app.services.eligibility import SubjectStatus
from app.services.graph import CurriculumGraph
from app.services.scheduler import SimulationResult, SimulationRules, simulate_periods


@dataclass
class ProgressSummary:
    completed_count: int
    available_count: int
    blocked_count: int
    completed_hours: int
    total_hours: int
    elective_hours: float
    valid_elective_hours: float
    required_elective_hours: float
    complementary_hours: float
    complementary_over_cap: bool
    progress_percent: int
    simulation: SimulationResult


def elective_hours(electives: Iterable[Elective]) -> float:
    return sum(e.hours for e in electives)


def valid_elective_hours(electives: Iterable[Elective], required: float) -> float:
    return min(elective_hours(electives), required)


def complementary_hours(electives: Iterable[Elective]) -> float:
    return sum(e.hours for e in electives if e.kind == "complementary")


def summarize_progress(
    graph: CurriculumGraph,
    completed: Set[str],
    electives: Iterable[Elective] = (),
    rules: SimulationRules | None = None,
    total_periods: int | None = None,
    max_complementary_hours: float | None = None,
) -> ProgressSummary:
    rules = rules or SimulationRules.from_settings()
    electives = list(electives)
    cap = settings.max_complementary_hours if max_complementary_hours is None else max_complementary_hours

    analyses = [
        a
        for group in analyze_all(graph, completed, total_periods or settings.total_periods).values()
        for a in group
    ]
    counts = {status: 0 for status in SubjectStatus}
    for a in analyses:
        counts[a.status] += 1

    done_hours = sum(a.subject.hours for a in analyses if a.status is SubjectStatus.COMPLETED)
    total_hours = sum(s.hours for s in graph.subjects)
    earned = elective_hours(electives)
    valid = valid_elective_hours(electives, rules.required_elective_hours)
    complementary = complementary_hours(electives)

    denominator = total_hours + rules.required_elective_hours
    ratio = (done_hours + valid) / denominator * 100 if denominator else 0.0
    # half-up, so 62.5 reads as 63 like the progress bar shows it
    percent = int(math.floor(ratio + 0.5))

    return ProgressSummary(
        completed_count=counts[SubjectStatus.COMPLETED],
        available_count=counts[SubjectStatus.AVAILABLE],
        blocked_count=counts[SubjectStatus.BLOCKED],
        completed_hours=done_hours,
        total_hours=total_hours,
        elective_hours=earned,
        valid_elective_hours=valid,
        required_elective_hours=rules.required_elective_hours,
        complementary_hours=complementary,
        complementary_over_cap=complementary > cap,
        progress_percent=percent,
        simulation=simulate_periods(graph, completed, valid, rules),
    )
