"""Data models for vitamin D risk scoring."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List, Mapping, Optional, Tuple, Type

from .errors import UnknownSchemeError

if TYPE_CHECKING:
    from .classifier import ThresholdTable


class SchemeId(Enum):
    SCHEME_A = "scheme_a"
    SCHEME_B = "scheme_b"
    SCHEME_C = "scheme_c"
    SCHEME_C_THREE_TIER = "scheme_c_three_tier"

    @classmethod
    def parse(cls, value) -> "SchemeId":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownSchemeError(value) from None


class RiskLevel(Enum):
    """Classification labels, valued as they are stored in ``risk_level``."""
    LOW = "Low Risk"
    MODERATE = "Moderate Risk"
    HIGH = "High Risk"
    ADEQUATE = "Adequate"
    INADEQUATE = "Inadequate"
    SUFFICIENT = "Sufficient"
    INSUFFICIENT = "Insufficient"
    DEFICIENT = "Deficient"


# ----------------------------------------------------------------------
# Option codes (closed set per question type)
# ----------------------------------------------------------------------

class YesNo(Enum):
    YES = "yes"
    NO = "no"


class TimeOutdoors(Enum):
    MORE_30 = "more_30"
    LESS_30 = "less_30"
    NEGLIGIBLE = "negligible"


class Clothing(Enum):
    SHORTS = "shorts"
    PARTIAL = "partial"
    FULL = "full"


class SkinTone(Enum):
    DARK = "dark"
    WHEATISH = "wheatish"
    FAIR = "fair"
    VERY_FAIR = "very_fair"


class AnimalFoodIntake(Enum):
    NO_INTAKE = "no_intake"
    OCCASIONAL = "occasional"
    REGULAR = "regular"


class SymptomFrequency(Enum):
    NO = "no"
    SOMETIMES = "sometimes"
    OFTEN = "often"


# ----------------------------------------------------------------------
# Patient facts
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class Comorbidities:
    diabetes: bool = False
    hypertension: bool = False
    hypothyroidism: bool = False
    hyperthyroidism: bool = False
    other: Optional[str] = None

    @property
    def any(self) -> bool:
        return (
            self.diabetes
            or self.hypertension
            or self.hypothyroidism
            or self.hyperthyroidism
            or bool(self.other and self.other.strip())
        )


@dataclass
class PatientInput:
    """Facts available when a patient is scored."""
    age: Optional[int]
    weight_kg: Optional[float]
    height_feet: Optional[int] = None
    height_inches: Optional[int] = None
    comorbidities: Comorbidities = field(default_factory=Comorbidities)
    answers: Dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class DerivedFacts:
    height_meters: float
    bmi: float  # 0.0 means unknown

    @property
    def bmi_known(self) -> bool:
        return self.bmi > 0


@dataclass(frozen=True)
class ScoringContext:
    """Everything a fact rule or derived answer may look at."""
    age: int
    facts: DerivedFacts
    comorbidities: Comorbidities


# ----------------------------------------------------------------------
# Rule tables
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class FactRule:
    """Fixed rule on patient facts (historical "Section A")."""
    id: str
    description: str
    applies: Callable[[ScoringContext], bool]
    points: float
    section: str = "A"


@dataclass(frozen=True)
class Question:
    """A single questionnaire item and its point table."""
    id: str
    role: str
    text: str
    option_type: Type[Enum]
    points: Mapping[Enum, float]
    section: str = "B"
    derive: Optional[Callable[[ScoringContext], Enum]] = None

    def points_for(self, option: Enum) -> float:
        return self.points.get(option, 0.0)


@dataclass(frozen=True)
class ScoringScheme:
    id: SchemeId
    title: str
    fact_rules: Tuple[FactRule, ...]
    questions: Tuple[Question, ...]
    thresholds: "ThresholdTable"
    floor_at_zero: bool = True
    superseded: bool = False

    def question(self, question_id: str) -> Optional[Question]:
        for q in self.questions:
            if q.id == question_id:
                return q
        return None

    @property
    def question_ids(self) -> List[str]:
        return [q.id for q in self.questions]

    @property
    def labels(self) -> List[RiskLevel]:
        return self.thresholds.labels


@dataclass
class ScoreResult:
    """Output of one scoring request."""
    scheme_id: SchemeId
    composite_score: float
    classification: RiskLevel
    raw_score: float
    section_a_score: float
    section_b_score: float
    height_meters: float
    bmi: float
    answers: Dict[str, Enum] = field(default_factory=dict)
    contributions: Dict[str, float] = field(default_factory=dict)
