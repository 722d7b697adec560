"""Test configuration and fixtures"""

import pytest

from vitd_screening.core.scoring.engine import ScoringEngine
from vitd_screening.core.scoring.models import PatientInput


@pytest.fixture
def engine():
    """Engine with the default (scheme C) configuration"""
    e = ScoringEngine()
    e.initialize()
    return e


@pytest.fixture
def patient():
    """Adult under 50 with no height recorded (BMI unknown)"""
    return PatientInput(age=30, weight_kg=70.0)


@pytest.fixture
def lowest_risk_answers():
    """Scheme C questionnaire with every item at its zero option"""
    answers = {
        "q1": "no", "q2": "no", "q3": "dark", "q4": "shorts", "q5": "more_30",
        "q6": "no", "q7": "no", "q8": "regular",
        "q9": "no", "q10": "no", "q11": "no", "q12": "no",
        "q18": "no",
    }
    for qid in ("q13", "q14", "q15", "q16", "q17"):
        answers[qid] = "no"
    return answers


@pytest.fixture
def high_risk_answers():
    """Worked example: age 60, BMI 32, fair skin, full clothing, ..."""
    answers = {
        "q1": "yes", "q2": "yes", "q3": "fair", "q4": "full", "q5": "negligible",
        "q6": "no", "q7": "yes", "q8": "no_intake",
        "q9": "no", "q10": "no", "q11": "no", "q12": "no",
        "q18": "no",
    }
    for qid in ("q13", "q14", "q15", "q16", "q17"):
        answers[qid] = "often"
    return answers
