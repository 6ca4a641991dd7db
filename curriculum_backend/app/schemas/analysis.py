from pydantic import BaseModel, Field

from app.schemas.subject import SubjectAnalysisResponse


class AnalysisRequest(BaseModel):
    completed_codes: list[str] = []


class PeriodAnalysisResponse(BaseModel):
    period: int
    subjects: list[SubjectAnalysisResponse] = []


class AnalysisResponse(BaseModel):
    periods: list[PeriodAnalysisResponse] = []


class RecommendationRequest(AnalysisRequest):
    limit: int | None = Field(None, ge=1)


class RecommendationResponse(BaseModel):
    recommendations: list[SubjectAnalysisResponse] = []
