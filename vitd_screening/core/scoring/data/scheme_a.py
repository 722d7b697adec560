"""
Scheme A: the first camp release.
Two fixed rules on patient facts ("Section A"); the questionnaire
("Section B") was not implemented yet and contributes nothing.
"""

from ..classifier import LOW_MODERATE_HIGH
from ..models import FactRule, SchemeId, ScoringContext, ScoringScheme


def _age_over_50(ctx: ScoringContext) -> bool:
    return ctx.age > 50


def _bmi_25_or_more(ctx: ScoringContext) -> bool:
    # BMI 0 means unknown height, never overweight
    return ctx.facts.bmi_known and ctx.facts.bmi >= 25


SECTION_A_RULES = (
    FactRule(
        id="age_over_50",
        description="Age above 50 years",
        applies=_age_over_50,
        points=1,
    ),
    FactRule(
        id="bmi_25_or_more",
        description="BMI of 25 or more",
        applies=_bmi_25_or_more,
        points=1,
    ),
)

SCHEME_A = ScoringScheme(
    id=SchemeId.SCHEME_A,
    title="Section A only (binary additive)",
    fact_rules=SECTION_A_RULES,
    questions=(),
    thresholds=LOW_MODERATE_HIGH,
    superseded=True,
)
