from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from loguru import logger

from app.core.errors import CurriculumIntegrityError
from app.models.subject import Subject


@dataclass(frozen=True)
class CurriculumGraph:
    subjects: tuple[Subject, ...]
    by_code: Mapping[str, Subject]
    dependents: Mapping[str, tuple[str, ...]]  # prereq -> subjects that list it

    def __len__(self) -> int:
        return len(self.subjects)

    def __contains__(self, code: object) -> bool:
        return code in self.by_code

    def get(self, code: str) -> Subject | None:
        return self.by_code.get(code)

    def dependents_of(self, code: str) -> tuple[str, ...]:
        return self.dependents.get(code, ())

    def periods(self) -> list[int]:
        return sorted({s.period for s in self.subjects})

    def topo_order(self) -> list[str]:
        """Kahn ordering of subject codes; raises on a prerequisite cycle."""
        indegree = {s.code: 0 for s in self.subjects}
        for subject in self.subjects:
            for req in subject.prerequisite_codes():
                if req in indegree:
                    indegree[subject.code] += 1

        queue = deque([code for code, d in indegree.items() if d == 0])
        order: list[str] = []

        while queue:
            node = queue.popleft()
            order.append(node)
            for nxt in self.dependents_of(node):
                indegree[nxt] -= 1
                if indegree[nxt] == 0:
                    queue.append(nxt)

        if len(order) != len(indegree):
            stuck = sorted(code for code, d in indegree.items() if d > 0)
            raise CurriculumIntegrityError(
                [f"Cycle detected in prerequisites involving: {', '.join(stuck)}"]
            )

        return order


def build_graph(subjects: Iterable[Subject]) -> CurriculumGraph:
    ordered = tuple(subjects)
    dependents: dict[str, list[str]] = {}

    for subject in ordered:
        # a code repeated across groups of one subject is still one edge
        for req in subject.prerequisite_codes():
            dependents.setdefault(req, []).append(subject.code)

    return CurriculumGraph(
        subjects=ordered,
        by_code=MappingProxyType({s.code: s for s in ordered}),
        dependents=MappingProxyType({k: tuple(v) for k, v in dependents.items()}),
    )


def validate_curriculum(subjects: Iterable[Subject]) -> CurriculumGraph:
    """Build the graph and check the dataset preconditions.

    The engine itself tolerates dangling codes and cycles (they show up as
    permanently blocked subjects or undercounted chain weights), so this is
    meant to run once when a dataset is loaded, before any analysis.
    """
    ordered = tuple(subjects)
    problems: list[str] = []

    seen: set[str] = set()
    for subject in ordered:
        if subject.code in seen:
            problems.append(f"Duplicate subject code: {subject.code}")
        seen.add(subject.code)
        if subject.hours <= 0:
            problems.append(f"Non-positive hours for {subject.code}: {subject.hours}")
        if subject.period <= 0:
            problems.append(f"Non-positive period for {subject.code}: {subject.period}")

    for subject in ordered:
        for req in subject.prerequisite_codes():
            if req not in seen:
                problems.append(f"Unknown prerequisite {req} referenced by {subject.code}")

    graph = build_graph(ordered)
    if not problems:
        try:
            graph.topo_order()
        except CurriculumIntegrityError as exc:
            problems.extend(exc.problems)

    if problems:
        for line in problems:
            logger.error("Curriculum integrity: {}", line)
        raise CurriculumIntegrityError(problems)

    logger.info("Curriculum validated: {} subjects across {} periods", len(graph), len(graph.periods()))
    return graph
