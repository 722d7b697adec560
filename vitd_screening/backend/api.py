"""
FastAPI backend for the Vitamin D screening camps
Scores patients and counts classifications for the doctor summary
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from vitd_screening.core.config import config
from vitd_screening.core.records import result_to_row
from vitd_screening.core.scoring.engine import ScoringEngine
from vitd_screening.core.scoring.errors import ScoringError, UnknownSchemeError
from vitd_screening.core.scoring.models import Comorbidities, PatientInput
from vitd_screening.core.scoring.summary import summarize

logging.basicConfig(
    level=config.logging_config['level'],
    format=config.logging_config['format'],
)
logger = logging.getLogger("vitd_screening")

app = FastAPI(title=config.api_config['title'], version=config.api_config['version'])

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.api_config['cors_origins'],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

engine = ScoringEngine(config.get_engine_config())


@app.on_event("startup")
async def startup_event():
    """Load scheme tables on startup"""
    logger.info("Starting Vitamin D Screening API...")
    engine.initialize()


class HealthResponse(BaseModel):
    status: str
    timestamp: str


class ScoreRequest(BaseModel):
    """One patient as captured on the camp form"""
    initials: Optional[str] = None
    age: int = Field(..., ge=1, le=120)
    gender: Literal["Male", "Female", "Other"]
    height_feet: Optional[int] = Field(None, ge=0)
    height_inches: Optional[int] = Field(None, ge=0)
    weight_kg: float = Field(..., gt=0)
    diabetes: bool = False
    hypertension: bool = False
    hypothyroidism: bool = False
    hyperthyroidism: bool = False
    other_comorbidity: Optional[str] = None
    questionnaire_responses: Dict[str, Any] = Field(default_factory=dict)
    scheme: Optional[str] = None  # active scheme when omitted


class ScoreResponse(BaseModel):
    scoring_scheme: str
    total_score: float
    risk_level: str
    raw_score: float
    section_a_score: float
    section_b_score: float
    height_meters: float
    bmi: float
    questionnaire_responses: Dict[str, str]
    contributions: Dict[str, float]


class SummaryRequest(BaseModel):
    risk_levels: List[str]
    scheme: Optional[str] = None


class SummaryResponse(BaseModel):
    total: int
    counts: Dict[str, int]
    percentages: Dict[str, int]


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now().isoformat()
    )


@app.get("/api/schemes")
async def list_schemes():
    """List every scheme the engine can replay"""
    return {
        "active": engine.active_scheme_id.value,
        "schemes": [
            {
                "id": s.id.value,
                "title": s.title,
                "superseded": s.superseded,
                "labels": [label.value for label in s.labels],
            }
            for s in engine.available_schemes
        ],
    }


@app.get("/api/schemes/{scheme_id}")
async def get_scheme(scheme_id: str):
    """Questions and option codes of one scheme"""
    try:
        scheme = engine.get_scheme(scheme_id)
    except UnknownSchemeError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return {
        "id": scheme.id.value,
        "title": scheme.title,
        "labels": [label.value for label in scheme.labels],
        "fact_rules": [
            {"id": r.id, "description": r.description, "points": r.points}
            for r in scheme.fact_rules
        ],
        "questions": [
            {
                "id": q.id,
                "role": q.role,
                "text": q.text,
                "options": {option.value: points for option, points in q.points.items()},
            }
            for q in scheme.questions
        ],
    }


@app.post("/api/score", response_model=ScoreResponse)
async def score_patient(request: ScoreRequest):
    """Score one patient"""
    patient = PatientInput(
        age=request.age,
        weight_kg=request.weight_kg,
        height_feet=request.height_feet,
        height_inches=request.height_inches,
    )
    comorbidities = Comorbidities(
        diabetes=request.diabetes,
        hypertension=request.hypertension,
        hypothyroidism=request.hypothyroidism,
        hyperthyroidism=request.hyperthyroidism,
        other=request.other_comorbidity,
    )

    try:
        result = engine.score(
            patient,
            comorbidities=comorbidities,
            answers=request.questionnaire_responses,
            scheme=request.scheme,
        )
    except UnknownSchemeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ScoringError as e:
        raise HTTPException(status_code=422, detail=str(e))

    row = result_to_row(result)
    return ScoreResponse(
        scoring_scheme=row["scoring_scheme"],
        total_score=row["total_score"],
        risk_level=row["risk_level"],
        raw_score=result.raw_score,
        section_a_score=row["section_a_score"],
        section_b_score=row["section_b_score"],
        height_meters=row["height_meters"],
        bmi=row["bmi"],
        questionnaire_responses=row["questionnaire_responses"],
        contributions=result.contributions,
    )


@app.post("/api/summary", response_model=SummaryResponse)
async def camp_summary(request: SummaryRequest):
    """Count a batch of stored risk levels per label"""
    try:
        scheme = engine.get_scheme(request.scheme)
    except UnknownSchemeError as e:
        raise HTTPException(status_code=400, detail=str(e))

    summary = summarize(request.risk_levels, scheme)
    return SummaryResponse(
        total=summary.total,
        counts=summary.counts,
        percentages=summary.percentages,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
