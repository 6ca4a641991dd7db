from dataclasses import dataclass, field
from typing import Literal

ElectiveKind = Literal["discipline", "complementary"]


@dataclass(frozen=True)
class Subject:
    code: str
    name: str
    period: int
    hours: int
    # OR across groups, AND inside a group: ((A, B), (C,)) means (A and B) or C
    prerequisites: tuple[tuple[str, ...], ...] = ()
    credits: int | None = None

    def prerequisite_codes(self) -> list[str]:
        """Distinct codes referenced by any group, in first-seen order."""
        seen: dict[str, None] = {}
        for group in self.prerequisites:
            for code in group:
                seen.setdefault(code, None)
        return list(seen)


@dataclass(frozen=True)
class Elective:
    name: str
    hours: int
    kind: ElectiveKind = "discipline"
    id: str | None = field(default=None, compare=False)
