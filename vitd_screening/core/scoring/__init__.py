"""Vitamin D deficiency risk scoring engine"""

from .engine import ScoringEngine, get_engine, score
from .errors import (
    InvalidAnswerError,
    InvalidPatientInputError,
    ScoringError,
    UnknownSchemeError,
)
from .models import (
    Comorbidities,
    PatientInput,
    RiskLevel,
    SchemeId,
    ScoreResult,
)
from .summary import adequacy_distribution, count_by_classification, summarize

__all__ = [
    "ScoringEngine",
    "get_engine",
    "score",
    "ScoringError",
    "InvalidAnswerError",
    "InvalidPatientInputError",
    "UnknownSchemeError",
    "Comorbidities",
    "PatientInput",
    "RiskLevel",
    "SchemeId",
    "ScoreResult",
    "adequacy_distribution",
    "count_by_classification",
    "summarize",
]
