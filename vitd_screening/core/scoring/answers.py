"""
Input boundary for questionnaire answers.

Forms and stored rows carry loosely-typed strings ("option2", "Yes",
"Full coverage (e.g. Burqa, full-sleeve clothes)"). They are mapped onto the
closed option enums here so the evaluator never sees an invalid code.
"""

import logging
import re
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from .errors import InvalidAnswerError
from .models import (
    AnimalFoodIntake,
    Clothing,
    Question,
    ScoringScheme,
    SkinTone,
    SymptomFrequency,
    TimeOutdoors,
    YesNo,
)

logger = logging.getLogger(__name__)

_POSITIONAL = re.compile(r"^option_?(\d+)$")

OPTION_ALIASES: Dict[type, Dict[str, Enum]] = {
    YesNo: {
        "y": YesNo.YES,
        "true": YesNo.YES,
        "1": YesNo.YES,
        "n": YesNo.NO,
        "false": YesNo.NO,
        "0": YesNo.NO,
    },
    TimeOutdoors: {
        "more_than_30_minutes": TimeOutdoors.MORE_30,
        "more_than_30_min": TimeOutdoors.MORE_30,
        "gt_30min": TimeOutdoors.MORE_30,
        "gt_30_min": TimeOutdoors.MORE_30,
        "over_30": TimeOutdoors.MORE_30,
        "less_than_30_minutes": TimeOutdoors.LESS_30,
        "less_than_30_min": TimeOutdoors.LESS_30,
        "lt_30min": TimeOutdoors.LESS_30,
        "lt_30_min": TimeOutdoors.LESS_30,
        "under_30": TimeOutdoors.LESS_30,
        "none": TimeOutdoors.NEGLIGIBLE,
    },
    Clothing: {
        "shorts_t_shirts_skirts": Clothing.SHORTS,
        "minimal": Clothing.SHORTS,
        "partial_coverage": Clothing.PARTIAL,
        "full_coverage": Clothing.FULL,
    },
    SkinTone: {
        "darker": SkinTone.DARK,
        "wheat": SkinTone.WHEATISH,
        "veryfair": SkinTone.VERY_FAIR,
    },
    AnimalFoodIntake: {
        "none": AnimalFoodIntake.NO_INTAKE,
        "vegan": AnimalFoodIntake.NO_INTAKE,
        "strict_vegetarian": AnimalFoodIntake.NO_INTAKE,
        "sometimes": AnimalFoodIntake.OCCASIONAL,
        "daily": AnimalFoodIntake.REGULAR,
    },
    SymptomFrequency: {
        "never": SymptomFrequency.NO,
        "occasionally": SymptomFrequency.SOMETIMES,
        "frequently": SymptomFrequency.OFTEN,
    },
}


_PARENTHETICAL = re.compile(r"\s*\(.*\)\s*$")


def _normalize_key(text: str) -> str:
    # keep ">30min" and "<30min" apart
    text = text.replace(">", " gt ").replace("<", " lt ")
    return re.sub(r"[^a-z0-9]+", "_", text.strip().lower()).strip("_")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_option(question: Question, value: Any) -> Optional[Enum]:
    """Map one raw answer to the question's option enum; None if unanswered."""
    if _is_blank(value):
        return None

    option_type = question.option_type
    if isinstance(value, option_type):
        return value

    if isinstance(value, bool):
        if option_type is not YesNo:
            raise InvalidAnswerError(question.id, value, "yes/no given for a multi-choice question")
        return YesNo.YES if value else YesNo.NO

    if isinstance(value, Enum):
        value = value.value
    if not isinstance(value, (str, int)):
        raise InvalidAnswerError(question.id, value, "unsupported answer type")

    key = _normalize_key(str(value))
    members = list(option_type)

    for member in members:
        if key == member.value or key == member.name.lower():
            return member

    match = _POSITIONAL.match(key)
    if match:
        index = int(match.group(1))
        if 1 <= index <= len(members):
            return members[index - 1]
        raise InvalidAnswerError(question.id, value, f"option index out of range 1..{len(members)}")

    aliases = OPTION_ALIASES.get(option_type, {})
    alias = aliases.get(key)
    if alias is None:
        # form labels carry examples, e.g. "Full coverage (e.g. Burqa, ...)"
        alias = aliases.get(_normalize_key(_PARENTHETICAL.sub("", str(value))))
    if alias is not None:
        return alias

    raise InvalidAnswerError(question.id, value)


def parse_answers(
    scheme: ScoringScheme,
    raw: Optional[Mapping[str, Any]],
    strict: bool = True,
) -> Dict[str, Enum]:
    """Map a raw ``questionnaire_responses`` mapping onto the scheme's questions.

    Unanswered items are left out. Unknown question ids raise when
    ``strict``; otherwise they are logged and dropped.
    """
    parsed: Dict[str, Enum] = {}
    if not raw:
        return parsed

    for raw_id, value in raw.items():
        question_id = str(raw_id).strip().lower()
        question = scheme.question(question_id)
        if question is None:
            if strict:
                raise InvalidAnswerError(
                    question_id, value, f"not a question of {scheme.id.value}"
                )
            logger.warning("Ignoring unknown question %s for %s", question_id, scheme.id.value)
            continue

        option = parse_option(question, value)
        if option is not None:
            parsed[question_id] = option

    return parsed


def serialize_answers(answers: Mapping[str, Enum]) -> Dict[str, str]:
    """Canonical option codes, as stored in ``questionnaire_responses``."""
    return {qid: option.value for qid, option in answers.items()}
