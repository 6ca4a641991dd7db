from fastapi import APIRouter, Depends, HTTPException

from app.core.config import settings
from app.core.curriculum import get_curriculum
from app.models.subject import Elective
from app.schemas.analysis import (
    AnalysisRequest,
    AnalysisResponse,
    PeriodAnalysisResponse,
    RecommendationRequest,
    RecommendationResponse,
)
from app.schemas.elective import ElectiveCreate
from app.schemas.progress import ProgressRequest, ProgressResponse
from app.schemas.simulate import SimulateRequest, SimulateResponse
from app.schemas.subject import PeriodSubjectsResponse, SubjectAnalysisResponse, SubjectResponse
from app.services.analyzer import analyze_all, get_subject, recommend, subjects_in_period
from app.services.graph import CurriculumGraph
from app.services.progress import summarize_progress, valid_elective_hours
from app.services.scheduler import SimulationRules, simulate_periods

router = APIRouter(prefix="/api")


def _completed_set(graph: CurriculumGraph, codes: list[str]) -> set[str]:
    unknown = sorted({c for c in codes if c not in graph})
    if unknown:
        raise HTTPException(
            status_code=422,
            detail=f"Unknown subject code(s): {', '.join(unknown)}",
        )
    return set(codes)


def _electives(items: list[ElectiveCreate]) -> list[Elective]:
    return [Elective(**item.model_dump()) for item in items]


@router.get("/curriculum", response_model=list[PeriodSubjectsResponse])
def get_curriculum_endpoint(graph: CurriculumGraph = Depends(get_curriculum)):
    periods = sorted(set(range(1, settings.total_periods + 1)) | set(graph.periods()))
    return [
        PeriodSubjectsResponse(
            period=p,
            subjects=[SubjectResponse.model_validate(s) for s in subjects_in_period(graph, p)],
        )
        for p in periods
    ]


@router.get("/subjects/{code}", response_model=SubjectResponse)
def get_subject_endpoint(code: str, graph: CurriculumGraph = Depends(get_curriculum)):
    subject = get_subject(graph, code)
    if subject is None:
        raise HTTPException(status_code=404, detail=f"Subject {code} not found.")
    return SubjectResponse.model_validate(subject)


@router.post("/analysis", response_model=AnalysisResponse)
def analysis_endpoint(
    payload: AnalysisRequest,
    graph: CurriculumGraph = Depends(get_curriculum),
):
    completed = _completed_set(graph, payload.completed_codes)
    grouped = analyze_all(graph, completed, settings.total_periods)
    return AnalysisResponse(
        periods=[
            PeriodAnalysisResponse(
                period=period,
                subjects=[SubjectAnalysisResponse.model_validate(a) for a in analyses],
            )
            for period, analyses in sorted(grouped.items())
        ]
    )


@router.post("/recommendations", response_model=RecommendationResponse)
def recommendations_endpoint(
    payload: RecommendationRequest,
    graph: CurriculumGraph = Depends(get_curriculum),
):
    completed = _completed_set(graph, payload.completed_codes)
    ranked = recommend(graph, completed, payload.limit)
    return RecommendationResponse(
        recommendations=[SubjectAnalysisResponse.model_validate(a) for a in ranked]
    )


@router.post("/simulate", response_model=SimulateResponse)
def simulate_endpoint(
    payload: SimulateRequest,
    graph: CurriculumGraph = Depends(get_curriculum),
):
    completed = _completed_set(graph, payload.completed_codes)
    rules = SimulationRules.from_settings()
    if payload.completed_elective_hours is not None:
        earned = payload.completed_elective_hours
    else:
        earned = valid_elective_hours(_electives(payload.electives), rules.required_elective_hours)
    result = simulate_periods(graph, completed, earned, rules)
    return SimulateResponse.model_validate(result)


@router.post("/progress", response_model=ProgressResponse)
def progress_endpoint(
    payload: ProgressRequest,
    graph: CurriculumGraph = Depends(get_curriculum),
):
    completed = _completed_set(graph, payload.completed_codes)
    summary = summarize_progress(graph, completed, _electives(payload.electives))
    return ProgressResponse.model_validate(summary)
