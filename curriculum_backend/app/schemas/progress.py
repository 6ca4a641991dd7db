from pydantic import BaseModel

from app.schemas.elective import ElectiveCreate
from app.schemas.simulate import SimulateResponse


class ProgressRequest(BaseModel):
    completed_codes: list[str] = []
    electives: list[ElectiveCreate] = []


class ProgressResponse(BaseModel):
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
    simulation: SimulateResponse

    model_config = {"from_attributes": True}
