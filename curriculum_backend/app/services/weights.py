from app.services.graph import CurriculumGraph


def chain_weight(graph: CurriculumGraph, code: str) -> int:
    """Count distinct subjects transitively unlocked by completing ``code``.

    Each call keeps its own visited set, seeded with the start code, so a
    cyclic dataset terminates (possibly undercounted) instead of recursing.
    """
    visited = {code}
    stack = list(graph.dependents_of(code))
    unlocked = 0

    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        unlocked += 1
        stack.extend(graph.dependents_of(node))

    return unlocked


def chain_weights(graph: CurriculumGraph) -> dict[str, int]:
    return {s.code: chain_weight(graph, s.code) for s in graph.subjects}
