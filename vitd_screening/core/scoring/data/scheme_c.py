"""
Scheme C: the 18-item weighted questionnaire, current in the field.

Age and BMI are questions here rather than fixed rules. When the form
leaves them blank they are answered from the patient's facts, as is the
comorbidity item. Supplementation subtracts 5; the total is floored at 0.

The three-tier Sufficient/Insufficient/Deficient reading of the same table
was replaced by the Adequate/Inadequate cut and is kept for replay only.
"""

from ..classifier import ADEQUATE_INADEQUATE, SUFFICIENT_INSUFFICIENT_DEFICIENT
from ..models import (
    AnimalFoodIntake,
    Clothing,
    Question,
    SchemeId,
    ScoringContext,
    ScoringScheme,
    SkinTone,
    SymptomFrequency,
    TimeOutdoors,
    YesNo,
)

_SYMPTOM_POINTS = {
    SymptomFrequency.NO: 0,
    SymptomFrequency.SOMETIMES: 0.25,
    SymptomFrequency.OFTEN: 0.5,
}


def _yes_if(condition: bool) -> YesNo:
    return YesNo.YES if condition else YesNo.NO


def _derive_age_over_50(ctx: ScoringContext) -> YesNo:
    return _yes_if(ctx.age > 50)


def _derive_bmi_30_or_more(ctx: ScoringContext) -> YesNo:
    return _yes_if(ctx.facts.bmi_known and ctx.facts.bmi >= 30)


def _derive_comorbidity(ctx: ScoringContext) -> YesNo:
    return _yes_if(ctx.comorbidities.any)


def _yes_no(qid, role, text, yes_points=1, derive=None) -> Question:
    return Question(
        id=qid,
        role=role,
        text=text,
        option_type=YesNo,
        points={YesNo.YES: yes_points, YesNo.NO: 0},
        derive=derive,
    )


def _symptom(qid, role, text) -> Question:
    return Question(
        id=qid,
        role=role,
        text=text,
        option_type=SymptomFrequency,
        points=_SYMPTOM_POINTS,
    )


SCHEME_C_QUESTIONS = (
    _yes_no("q1", "age_over_50", "Is your age above 50 years?",
            yes_points=0.5, derive=_derive_age_over_50),
    _yes_no("q2", "bmi_30_or_more", "Is your BMI 30 or more?",
            derive=_derive_bmi_30_or_more),
    Question(
        id="q3",
        role="skin_tone",
        text="Skin Tone: Which best describes your natural skin tone?",
        option_type=SkinTone,
        points={
            SkinTone.DARK: 0,
            SkinTone.WHEATISH: 0.25,
            SkinTone.FAIR: 0.75,
            SkinTone.VERY_FAIR: 1,
        },
    ),
    Question(
        id="q4",
        role="clothing",
        text="Clothing Style: What is your typical style of clothing when outdoors?",
        option_type=Clothing,
        points={
            Clothing.SHORTS: 0,
            Clothing.PARTIAL: 1,
            Clothing.FULL: 3,
        },
    ),
    Question(
        id="q5",
        role="time_outdoors",
        text=(
            "Time Outdoors: On a typical day, how much time do you spend in the "
            "sun (between 11 AM - 3 PM) with your face, arms, and legs exposed?"
        ),
        option_type=TimeOutdoors,
        points={
            TimeOutdoors.MORE_30: 0,
            TimeOutdoors.LESS_30: 2,
            TimeOutdoors.NEGLIGIBLE: 3,
        },
    ),
    _yes_no("q6", "sunscreen",
            "Do you regularly apply sunscreen (SPF >15) on exposed skin before going out?"),
    _yes_no("q7", "pollution",
            "Do you live in a highly polluted urban area or a region with dense fog/smog?"),
    Question(
        id="q8",
        role="animal_food",
        text="How often do you eat animal-based foods (eggs, fish, meat)?",
        option_type=AnimalFoodIntake,
        points={
            AnimalFoodIntake.NO_INTAKE: 1,
            AnimalFoodIntake.OCCASIONAL: 0.5,
            AnimalFoodIntake.REGULAR: 0,
        },
    ),
    _yes_no("q9", "malabsorption",
            "Do you have liver disease, IBD, Celiac disease, or Cystic Fibrosis?"),
    _yes_no("q10", "long_term_medication",
            "Are you on long-term medication (Phenytoin, steroids, antifungals, antiretroviral)?"),
    _yes_no("q11", "osteoporosis",
            "Have you been diagnosed with osteoporosis or had a low-trauma fracture?"),
    _yes_no("q12", "comorbidity",
            "Do you have diabetes, thyroid disease, hypertension or another chronic condition?",
            derive=_derive_comorbidity),
    _symptom("q13", "bone_pain", "Do you experience bone or lower back pain?"),
    _symptom("q14", "muscle_weakness", "Do you experience muscle weakness or cramps?"),
    _symptom("q15", "fatigue", "Do you feel tired or fatigued without reason?"),
    _symptom("q16", "frequent_illness", "Do you fall ill frequently?"),
    _symptom("q17", "mood_concentration", "Do you have low mood or trouble concentrating?"),
    _yes_no("q18", "supplementation",
            "Are you taking, or have you taken in the last 3 months, Vitamin D or calcium supplements?",
            yes_points=-5),
)

SCHEME_C = ScoringScheme(
    id=SchemeId.SCHEME_C,
    title="18-item weighted questionnaire",
    fact_rules=(),
    questions=SCHEME_C_QUESTIONS,
    thresholds=ADEQUATE_INADEQUATE,
)

SCHEME_C_THREE_TIER = ScoringScheme(
    id=SchemeId.SCHEME_C_THREE_TIER,
    title="18-item weighted questionnaire (three-tier reading)",
    fact_rules=(),
    questions=SCHEME_C_QUESTIONS,
    thresholds=SUFFICIENT_INSUFFICIENT_DEFICIENT,
    superseded=True,
)
