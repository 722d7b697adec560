"""
ScoringEngine: turns patient facts and questionnaire answers into a
composite score and a classification under a versioned rule table.

Scoring pipeline:
  1. Validate the mandatory facts (age, weight)
  2. Normalize height/weight into meters and BMI
  3. Map raw answers onto the scheme's closed option enums
  4. Apply fact rules, then every question (explicit, derived or 0)
  5. Floor the sum at 0 and classify it with the scheme's bands
"""

import logging
import math
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .anthropometrics import normalize
from .answers import parse_answers
from .errors import InvalidPatientInputError
from .models import (
    Comorbidities,
    PatientInput,
    SchemeId,
    ScoreResult,
    ScoringContext,
    ScoringScheme,
)

logger = logging.getLogger(__name__)


class ScoringEngine:
    """
    Registry of scoring schemes plus the single evaluator that replays any
    of them. Holds no per-patient state; one instance can be shared.
    """

    def __init__(self, config: Dict[str, Any] = None):
        self.config = config or {}
        # An unknown active scheme is a configuration error, raised here
        self.active_scheme_id = SchemeId.parse(self.config.get('active_scheme', 'scheme_c'))
        self.strict_answers = self.config.get('strict_answers', True)
        self.age_min = self.config.get('age_min', 1)
        self.age_max = self.config.get('age_max', 120)
        self.weight_min_kg = self.config.get('weight_min_kg', 0.0)

        self._schemes: Dict[SchemeId, ScoringScheme] = {}
        self._loaded = False

    def initialize(self) -> None:
        """Load all scheme rule tables from the data modules."""
        from .data.scheme_a import SCHEME_A
        from .data.scheme_b import SCHEME_B
        from .data.scheme_c import SCHEME_C, SCHEME_C_THREE_TIER

        self._schemes = {
            s.id: s for s in (SCHEME_A, SCHEME_B, SCHEME_C, SCHEME_C_THREE_TIER)
        }
        self._loaded = True
        logger.info(
            "ScoringEngine loaded %d schemes (active: %s)",
            len(self._schemes),
            self.active_scheme_id.value,
        )

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def available_schemes(self) -> List[ScoringScheme]:
        self._ensure_loaded()
        return list(self._schemes.values())

    def get_scheme(self, scheme_id=None) -> ScoringScheme:
        """Look up a scheme by id; None means the active one."""
        self._ensure_loaded()
        sid = self.active_scheme_id if scheme_id is None else SchemeId.parse(scheme_id)
        return self._schemes[sid]

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def score(
        self,
        patient: PatientInput,
        comorbidities: Optional[Comorbidities] = None,
        answers: Optional[Mapping[str, Any]] = None,
        scheme=None,
    ) -> ScoreResult:
        """Score one patient.

        ``comorbidities`` and ``answers`` default to the ones carried by
        ``patient``. ``scheme`` defaults to the active scheme.
        """
        selected = self.get_scheme(scheme)
        age = self.validate(patient)

        comorbidities = comorbidities if comorbidities is not None else patient.comorbidities
        raw_answers = answers if answers is not None else patient.answers

        facts = normalize(patient.height_feet, patient.height_inches, patient.weight_kg)
        parsed = parse_answers(selected, raw_answers, strict=self.strict_answers)
        ctx = ScoringContext(age=age, facts=facts, comorbidities=comorbidities or Comorbidities())

        raw, sections, resolved, contributions = self._evaluate(selected, ctx, parsed)
        composite = max(0.0, raw) if selected.floor_at_zero else raw
        classification = selected.thresholds.classify(composite)

        logger.debug(
            "Scored patient under %s: raw=%.2f composite=%.2f -> %s",
            selected.id.value, raw, composite, classification.value,
        )

        return ScoreResult(
            scheme_id=selected.id,
            composite_score=composite,
            classification=classification,
            raw_score=raw,
            section_a_score=sections.get("A", 0.0),
            section_b_score=sections.get("B", 0.0),
            height_meters=facts.height_meters,
            bmi=facts.bmi,
            answers=resolved,
            contributions=contributions,
        )

    def validate(self, patient: PatientInput) -> int:
        """Check the mandatory facts; returns the age as an int."""
        age = patient.age
        if age is None:
            raise InvalidPatientInputError("age", "is required")
        if isinstance(age, bool) or not isinstance(age, (int, float)):
            raise InvalidPatientInputError("age", f"must be a whole number, got {age!r}")
        if isinstance(age, float) and not age.is_integer():
            raise InvalidPatientInputError("age", f"must be a whole number, got {age!r}")
        age = int(age)
        if not self.age_min <= age <= self.age_max:
            raise InvalidPatientInputError(
                "age", f"must be between {self.age_min} and {self.age_max}, got {age}"
            )

        weight = patient.weight_kg
        if weight is None:
            raise InvalidPatientInputError("weight_kg", "is required")
        if isinstance(weight, bool) or not isinstance(weight, (int, float)) or not math.isfinite(weight):
            raise InvalidPatientInputError("weight_kg", f"must be a number, got {weight!r}")
        if weight <= self.weight_min_kg:
            raise InvalidPatientInputError("weight_kg", f"must be greater than {self.weight_min_kg}")

        return age

    # ------------------------------------------------------------------
    # Internal evaluation
    # ------------------------------------------------------------------

    def _evaluate(
        self,
        scheme: ScoringScheme,
        ctx: ScoringContext,
        answers: Dict[str, Enum],
    ) -> Tuple[float, Dict[str, float], Dict[str, Enum], Dict[str, float]]:
        """Apply a rule table. Returns (raw, per-section, resolved answers, contributions)."""
        total = 0.0
        sections: Dict[str, float] = {}
        resolved: Dict[str, Enum] = {}
        contributions: Dict[str, float] = {}

        for rule in scheme.fact_rules:
            points = float(rule.points) if rule.applies(ctx) else 0.0
            contributions[rule.id] = points
            sections[rule.section] = sections.get(rule.section, 0.0) + points
            total += points

        for question in scheme.questions:
            option = answers.get(question.id)
            if option is None and question.derive is not None:
                option = question.derive(ctx)
            if option is None:
                # unanswered: lowest-risk default
                points = 0.0
            else:
                resolved[question.id] = option
                points = float(question.points_for(option))
            contributions[question.id] = points
            sections[question.section] = sections.get(question.section, 0.0) + points
            total += points

        return total, sections, resolved, contributions

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.initialize()


_default_engine: Optional[ScoringEngine] = None


def get_engine() -> ScoringEngine:
    """Shared engine built from the global configuration."""
    global _default_engine
    if _default_engine is None:
        from ..config import config
        _default_engine = ScoringEngine(config.get_engine_config())
        _default_engine.initialize()
    return _default_engine


def score(
    patient: PatientInput,
    comorbidities: Optional[Comorbidities] = None,
    answers: Optional[Mapping[str, Any]] = None,
    scheme=None,
) -> ScoreResult:
    return get_engine().score(patient, comorbidities, answers, scheme)
