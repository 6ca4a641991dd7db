from collections.abc import Set

from app.models.subject import Subject
from app.services.eligibility import SubjectAnalysis, SubjectStatus, resolve_subject
from app.services.graph import CurriculumGraph
from app.services.weights import chain_weights


def get_subject(graph: CurriculumGraph, code: str) -> Subject | None:
    return graph.get(code)


def subjects_in_period(graph: CurriculumGraph, period: int) -> list[Subject]:
    return [s for s in graph.subjects if s.period == period]


def analyze_all(
    graph: CurriculumGraph,
    completed: Set[str],
    total_periods: int,
) -> dict[int, list[SubjectAnalysis]]:
    """Resolve every subject against ``completed``, grouped by period.

    Periods 1..total_periods are always present, empty or not; a subject
    declared outside that range still gets its own key.
    """
    result: dict[int, list[SubjectAnalysis]] = {p: [] for p in range(1, total_periods + 1)}
    weights = chain_weights(graph)

    for subject in graph.subjects:
        analysis = resolve_subject(graph, subject, completed, weights)
        result.setdefault(subject.period, []).append(analysis)

    return result


def priority_key(analysis: SubjectAnalysis) -> tuple[int, int]:
    # heaviest bottleneck first, then stay on the nominal track
    return (-analysis.chain_weight, analysis.subject.period)


def recommend(
    graph: CurriculumGraph,
    completed: Set[str],
    limit: int | None = None,
) -> list[SubjectAnalysis]:
    weights = chain_weights(graph)
    available = [
        analysis
        for analysis in (resolve_subject(graph, s, completed, weights) for s in graph.subjects)
        if analysis.status is SubjectStatus.AVAILABLE
    ]
    available.sort(key=priority_key)
    return available if limit is None else available[:limit]
