from collections.abc import Mapping, Set
from dataclasses import dataclass
from enum import Enum

from app.models.subject import Subject
from app.services.graph import CurriculumGraph
from app.services.weights import chain_weight


class SubjectStatus(str, Enum):
    COMPLETED = "completed"
    AVAILABLE = "available"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class SubjectAnalysis:
    subject: Subject
    status: SubjectStatus
    missing_prerequisites: tuple[str, ...]
    chain_weight: int


def is_unlocked(subject: Subject, completed: Set[str]) -> bool:
    if not subject.prerequisites:
        return True
    return any(all(code in completed for code in group) for group in subject.prerequisites)


def resolve_subject(
    graph: CurriculumGraph,
    subject: Subject,
    completed: Set[str],
    weights: Mapping[str, int] | None = None,
) -> SubjectAnalysis:
    weight = weights[subject.code] if weights is not None else chain_weight(graph, subject.code)

    if subject.code in completed:
        return SubjectAnalysis(subject, SubjectStatus.COMPLETED, (), weight)

    # Report the gap of the first declared group, not the smallest gap, so the
    # output matches the order prerequisites are printed in the curriculum.
    first_gap: tuple[str, ...] = ()
    for group in subject.prerequisites:
        missing = tuple(code for code in group if code not in completed)
        if not missing:
            return SubjectAnalysis(subject, SubjectStatus.AVAILABLE, (), weight)
        if not first_gap:
            first_gap = missing

    if not subject.prerequisites:
        return SubjectAnalysis(subject, SubjectStatus.AVAILABLE, (), weight)

    return SubjectAnalysis(subject, SubjectStatus.BLOCKED, first_gap, weight)
