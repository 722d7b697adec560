"""
Adapter between stored patient rows and the scoring engine.

Rows use the column names of the ``patients`` table: ``age``,
``height_feet``, ``height_inches``, ``weight_kg``, the comorbidity booleans,
``other_comorbidity`` and ``questionnaire_responses`` on the way in;
``height_meters``, ``bmi``, ``section_a_score``, ``section_b_score``,
``total_score``, ``risk_level`` and ``scoring_scheme`` on the way out.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .scoring.answers import serialize_answers
from .scoring.engine import ScoringEngine
from .scoring.errors import InvalidPatientInputError, ScoringError
from .scoring.models import Comorbidities, PatientInput, ScoreResult

logger = logging.getLogger(__name__)

COMORBIDITY_FIELDS = ("diabetes", "hypertension", "hypothyroidism", "hyperthyroidism")


def _optional_int(row: Mapping[str, Any], name: str) -> Optional[int]:
    value = row.get(name)
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        number = None
    if number is None or not number.is_integer():
        raise InvalidPatientInputError(name, f"must be a whole number, got {value!r}")
    return int(number)


def _optional_float(row: Mapping[str, Any], name: str) -> Optional[float]:
    value = row.get(name)
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidPatientInputError(name, f"must be a number, got {value!r}") from None


def _responses(row: Mapping[str, Any]) -> Dict[str, Any]:
    raw = row.get("questionnaire_responses")
    if raw is None or raw == "":
        return {}
    if isinstance(raw, str):
        # JSON columns sometimes come back as text
        try:
            raw = json.loads(raw)
        except ValueError:
            raise InvalidPatientInputError(
                "questionnaire_responses", "is not valid JSON"
            ) from None
    if not isinstance(raw, Mapping):
        raise InvalidPatientInputError("questionnaire_responses", "must be a mapping")
    return dict(raw)


def patient_from_row(row: Mapping[str, Any]) -> PatientInput:
    """Build a PatientInput from a stored ``patients`` row."""
    return PatientInput(
        age=_optional_int(row, "age"),
        weight_kg=_optional_float(row, "weight_kg"),
        height_feet=_optional_int(row, "height_feet"),
        height_inches=_optional_int(row, "height_inches"),
        comorbidities=Comorbidities(
            diabetes=bool(row.get("diabetes")),
            hypertension=bool(row.get("hypertension")),
            hypothyroidism=bool(row.get("hypothyroidism")),
            hyperthyroidism=bool(row.get("hyperthyroidism")),
            other=row.get("other_comorbidity") or None,
        ),
        answers=_responses(row),
    )


def result_to_row(result: ScoreResult) -> Dict[str, Any]:
    """Fields to write back for a scored patient."""
    return {
        "height_meters": result.height_meters,
        "bmi": result.bmi,
        "section_a_score": result.section_a_score,
        "section_b_score": result.section_b_score,
        "total_score": result.composite_score,
        "risk_level": result.classification.value,
        "scoring_scheme": result.scheme_id.value,
        "questionnaire_responses": serialize_answers(result.answers),
    }


@dataclass
class AuditEntry:
    patient_number: Optional[int]
    scheme: str
    stored_score: Optional[float]
    recomputed_score: Optional[float]
    stored_risk_level: Optional[str]
    recomputed_risk_level: Optional[str]
    error: Optional[str] = None

    @property
    def matches(self) -> bool:
        if self.error is not None or self.stored_score is None:
            return False
        try:
            stored = float(self.stored_score)
        except (TypeError, ValueError):
            return False
        return (
            stored == self.recomputed_score
            and self.stored_risk_level == self.recomputed_risk_level
        )


def audit_rows(
    engine: ScoringEngine,
    rows: Iterable[Mapping[str, Any]],
    default_scheme=None,
) -> List[AuditEntry]:
    """Replay stored rows under the scheme recorded with each of them.

    Rows without a ``scoring_scheme`` use ``default_scheme`` (the active
    scheme when None). Rows that cannot be scored are reported, not raised,
    so one bad row does not hide the rest of the camp.
    """
    entries: List[AuditEntry] = []
    for row in rows:
        scheme_tag = row.get("scoring_scheme") or default_scheme
        try:
            scheme = engine.get_scheme(scheme_tag)
            result = engine.score(patient_from_row(row), scheme=scheme.id)
        except ScoringError as e:
            logger.warning("Audit could not rescore patient %s: %s", row.get("patient_number"), e)
            entries.append(AuditEntry(
                patient_number=row.get("patient_number"),
                scheme=str(scheme_tag),
                stored_score=row.get("total_score"),
                recomputed_score=None,
                stored_risk_level=row.get("risk_level"),
                recomputed_risk_level=None,
                error=str(e),
            ))
            continue

        entries.append(AuditEntry(
            patient_number=row.get("patient_number"),
            scheme=result.scheme_id.value,
            stored_score=row.get("total_score"),
            recomputed_score=result.composite_score,
            stored_risk_level=row.get("risk_level"),
            recomputed_risk_level=result.classification.value,
        ))

    mismatches = sum(1 for e in entries if not e.matches)
    logger.info("Audited %d rows, %d mismatches", len(entries), mismatches)
    return entries
