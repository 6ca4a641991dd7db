import math
from collections.abc import Sequence, Set
from dataclasses import dataclass, field
from enum import Enum

from loguru import logger

from app.core.config import Settings, settings
from app.models.subject import Subject
from app.services.eligibility import is_unlocked
from app.services.graph import CurriculumGraph
from app.services.weights import chain_weights


@dataclass(frozen=True)
class SimulationRules:
    max_weekly_hours: float = 30
    weeks_per_period: int = 18
    required_elective_hours: float = 432
    large_load_threshold: int = 200
    max_rounds: int = 30

    @classmethod
    def from_settings(cls, config: Settings = settings) -> "SimulationRules":
        return cls(
            max_weekly_hours=config.max_weekly_hours,
            weeks_per_period=config.weeks_per_period,
            required_elective_hours=config.required_elective_hours,
            large_load_threshold=config.large_load_threshold,
            max_rounds=config.simulation_max_rounds,
        )

    @property
    def hours_per_period(self) -> float:
        return self.max_weekly_hours * self.weeks_per_period


class SimulationOutcome(str, Enum):
    COMPLETE = "complete"
    DEADLOCK = "deadlock"  # nothing eligible, curriculum unfinished
    STALLED = "stalled"  # eligible subjects exist but none fit a period
    ROUND_LIMIT = "round_limit"


@dataclass
class PeriodPlan:
    period: int
    codes: list[str]
    weekly_load: float
    elective_hours: float


@dataclass
class SimulationResult:
    periods: int
    outcome: SimulationOutcome
    remaining_elective_hours: float
    terms: list[PeriodPlan] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def exact(self) -> bool:
        return self.outcome is SimulationOutcome.COMPLETE


def effective_weekly_load(subject: Subject, rules: SimulationRules) -> float:
    if subject.hours > rules.large_load_threshold:
        return rules.max_weekly_hours
    return subject.hours / rules.weeks_per_period


def pack_period(ranked: Sequence[Subject], rules: SimulationRules) -> tuple[list[Subject], float]:
    """First-fit: walk the ranked list once, admitting whatever still fits.

    Not an optimal bin pack; the period counts are calibrated to this order.
    """
    taken: list[Subject] = []
    load = 0.0
    for subject in ranked:
        weekly = effective_weekly_load(subject, rules)
        if load + weekly <= rules.max_weekly_hours:
            load += weekly
            taken.append(subject)
    return taken, load


def simulate_periods(
    graph: CurriculumGraph,
    completed: Set[str],
    completed_elective_hours: float = 0,
    rules: SimulationRules | None = None,
) -> SimulationResult:
    rules = rules or SimulationRules.from_settings()
    weights = chain_weights(graph)

    # codes outside the dataset would make the size check below lie
    working = {code for code in completed if code in graph}
    total = len(graph)
    remaining_electives = max(0, rules.required_elective_hours - completed_elective_hours)

    periods = 0
    rounds = 0
    terms: list[PeriodPlan] = []
    outcome = SimulationOutcome.COMPLETE

    while len(working) < total:
        if rounds >= rules.max_rounds:
            outcome = SimulationOutcome.ROUND_LIMIT
            break
        rounds += 1
        periods += 1

        candidates = [s for s in graph.subjects if s.code not in working and is_unlocked(s, working)]
        if not candidates:
            outcome = SimulationOutcome.DEADLOCK
            break

        candidates.sort(key=lambda s: (-weights[s.code], s.period))
        taken, load = pack_period(candidates, rules)

        absorbed = 0.0
        spare = rules.max_weekly_hours - load
        if remaining_electives > 0 and spare > 0:
            absorbed = min(remaining_electives, spare * rules.weeks_per_period)
            remaining_electives = max(0, remaining_electives - spare * rules.weeks_per_period)

        codes = [s.code for s in taken]
        terms.append(PeriodPlan(period=periods, codes=codes, weekly_load=load, elective_hours=absorbed))
        logger.debug(
            "Period {}: {} candidates, took {} ({:.2f} h/week), elective debt {}",
            periods, len(candidates), codes, load, remaining_electives,
        )

        if not taken:
            if remaining_electives <= 0:
                outcome = SimulationOutcome.STALLED
                break
            continue

        working.update(codes)

    if outcome is SimulationOutcome.COMPLETE and remaining_electives > 0:
        extra = math.ceil(remaining_electives / rules.hours_per_period)
        for _ in range(extra):
            periods += 1
            absorbed = min(remaining_electives, rules.hours_per_period)
            remaining_electives -= absorbed
            terms.append(PeriodPlan(period=periods, codes=[], weekly_load=0.0, elective_hours=absorbed))

    warnings: list[str] = []
    if outcome is not SimulationOutcome.COMPLETE:
        pending = sorted(s.code for s in graph.subjects if s.code not in working)
        warnings.append(
            f"Simulation stopped early ({outcome.value}) after {periods} period(s); "
            f"{len(pending)} subject(s) unscheduled: {', '.join(pending)}"
        )
        for message in warnings:
            logger.warning(message)

    return SimulationResult(
        periods=periods,
        outcome=outcome,
        remaining_elective_hours=remaining_electives,
        terms=terms,
        warnings=warnings,
    )


def minimum_remaining_periods(
    graph: CurriculumGraph,
    completed: Set[str],
    completed_elective_hours: float = 0,
    rules: SimulationRules | None = None,
) -> int:
    return simulate_periods(graph, completed, completed_elective_hours, rules).periods
