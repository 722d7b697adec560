"""
Scheme B: the 12-item camp questionnaire.
Section A keeps the two fact rules of scheme A. Section B adds two tiered
exposure questions, ten yes/no risk items and a pigmentation tier.
"""

from ..classifier import LOW_MODERATE_HIGH
from ..models import (
    Clothing,
    Question,
    SchemeId,
    ScoringScheme,
    SkinTone,
    TimeOutdoors,
    YesNo,
)
from .scheme_a import SECTION_A_RULES


def _yes_no(qid: str, role: str, text: str) -> Question:
    return Question(
        id=qid,
        role=role,
        text=text,
        option_type=YesNo,
        points={YesNo.YES: 1, YesNo.NO: 0},
    )


SCHEME_B_QUESTIONS = (
    Question(
        id="q1",
        role="time_outdoors",
        text=(
            "Time Outdoors: On a typical day, how much time do you spend in the "
            "sun (between 11 AM - 3 PM) with your face, arms, and legs fully exposed?"
        ),
        option_type=TimeOutdoors,
        points={
            TimeOutdoors.MORE_30: 0,
            TimeOutdoors.LESS_30: 2,
            TimeOutdoors.NEGLIGIBLE: 3,
        },
    ),
    Question(
        id="q2",
        role="clothing",
        text="Clothing Style: What is your typical style of clothing when outdoors?",
        option_type=Clothing,
        points={
            Clothing.SHORTS: 0,
            Clothing.PARTIAL: 1,
            Clothing.FULL: 3,
        },
    ),
    _yes_no(
        "q3", "sunscreen",
        "Use of Sunscreen: Do you regularly apply sunscreen (SPF >15) on exposed skin before going out?",
    ),
    _yes_no(
        "q4", "pollution",
        "Location & Pollution: Do you live in a highly polluted urban area or a region with dense fog/smog?",
    ),
    _yes_no(
        "q5", "no_animal_food",
        "Animal-based foods: No intake (strict vegetarian/vegan; no eggs, no fish)?",
    ),
    _yes_no(
        "q6", "low_dairy",
        "Milk/Fortified Food: Do you consume less than 2 cups of dairy/dairy products per day?",
    ),
    _yes_no(
        "q7", "low_egg_fish",
        "Do you consume egg yolks or fatty fish less than once per week?",
    ),
    _yes_no(
        "q8", "darker_skin",
        "Skin Pigmentation: Do you have darker skin tone?",
    ),
    _yes_no(
        "q9", "malabsorption",
        "Malabsorption Conditions: Do you have liver disease, IBD, Celiac disease, or Cystic Fibrosis?",
    ),
    _yes_no(
        "q10", "long_term_medication",
        "Medications: Are you on long-term medication (Phenytoin, steroids, antifungals, antiretroviral)?",
    ),
    _yes_no(
        "q11", "osteoporosis",
        "Osteoporosis: Have you been diagnosed with osteoporosis or experienced a low-trauma fracture?",
    ),
    _yes_no(
        "q12", "symptoms",
        "Symptoms: Do you often experience bone/lower back pain, muscle weakness, or fatigue?",
    ),
    Question(
        id="q13",
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
)

SCHEME_B = ScoringScheme(
    id=SchemeId.SCHEME_B,
    title="12-item questionnaire (additive)",
    fact_rules=SECTION_A_RULES,
    questions=SCHEME_B_QUESTIONS,
    thresholds=LOW_MODERATE_HIGH,
    superseded=True,
)
