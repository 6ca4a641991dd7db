import pytest

from app.core.curriculum import get_curriculum
from app.models.subject import Subject
from app.services.graph import build_graph
from app.services.scheduler import SimulationRules


def subject(code, period=1, hours=72, *groups):
    return Subject(code=code, name=code, period=period, hours=hours, prerequisites=tuple(tuple(g) for g in groups))


@pytest.fixture
def abc_graph():
    # A unlocks B and C; each is 72h, i.e. 4 weekly hours over 18 weeks
    return build_graph([
        subject("A", 1),
        subject("B", 2, 72, ["A"]),
        subject("C", 2, 72, ["A"]),
    ])


@pytest.fixture
def or_graph():
    return build_graph([
        subject("X", 1),
        subject("Y", 1),
        subject("Z", 1),
        subject("S", 2, 72, ["X", "Y"], ["Z"]),
    ])


@pytest.fixture
def chain_graph():
    return build_graph([
        subject("A", 1),
        subject("B", 2, 72, ["A"]),
        subject("C", 3, 72, ["B"]),
        subject("D", 4, 72, ["C"]),
    ])


@pytest.fixture
def rules():
    return SimulationRules(
        max_weekly_hours=10,
        weeks_per_period=18,
        required_elective_hours=0,
        large_load_threshold=200,
        max_rounds=30,
    )


@pytest.fixture
def curriculum():
    return get_curriculum()
