from pydantic import BaseModel

from app.services.eligibility import SubjectStatus


class SubjectResponse(BaseModel):
    code: str
    name: str
    period: int
    hours: int
    prerequisites: list[list[str]] = []
    credits: int | None = None

    model_config = {"from_attributes": True}


class PeriodSubjectsResponse(BaseModel):
    period: int
    subjects: list[SubjectResponse] = []


class SubjectAnalysisResponse(BaseModel):
    subject: SubjectResponse
    status: SubjectStatus
    missing_prerequisites: list[str] = []
    chain_weight: int

    model_config = {"from_attributes": True}
