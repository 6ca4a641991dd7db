from pydantic import BaseModel, Field

from app.schemas.elective import ElectiveCreate
from app.services.scheduler import SimulationOutcome


class SimulateRequest(BaseModel):
    completed_codes: list[str] = []
    # Either a pre-summed total or the elective records; the total wins when both are sent
    completed_elective_hours: float | None = Field(None, ge=0)
    electives: list[ElectiveCreate] = []


class SimulatedPeriod(BaseModel):
    period: int
    codes: list[str] = []
    weekly_load: float
    elective_hours: float

    model_config = {"from_attributes": True}


class SimulateResponse(BaseModel):
    periods: int
    outcome: SimulationOutcome
    exact: bool
    remaining_elective_hours: float
    terms: list[SimulatedPeriod] = []
    warnings: list[str] = []

    model_config = {"from_attributes": True}
