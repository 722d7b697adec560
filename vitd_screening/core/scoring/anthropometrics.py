"""
Anthropometric normalization: feet/inches to meters, and BMI.
A height of zero is not an error; BMI is then reported as 0 (unknown).
"""

import math
from typing import Optional

from .errors import InvalidPatientInputError
from .models import DerivedFacts

METERS_PER_INCH = 0.0254


def height_to_meters(height_feet: Optional[int], height_inches: Optional[int]) -> float:
    feet = height_feet or 0
    inches = height_inches or 0
    if feet < 0:
        raise InvalidPatientInputError("height_feet", "must not be negative")
    if inches < 0:
        raise InvalidPatientInputError("height_inches", "must not be negative")

    total_inches = feet * 12 + inches
    if total_inches <= 0:
        return 0.0
    return total_inches * METERS_PER_INCH


def round_half_up(value: float, digits: int = 2) -> float:
    """Round like the camp forms did (half away from zero for positives)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def compute_bmi(weight_kg: Optional[float], height_meters: float) -> float:
    if not weight_kg or height_meters <= 0:
        return 0.0
    return round_half_up(weight_kg / (height_meters * height_meters))


def normalize(
    height_feet: Optional[int],
    height_inches: Optional[int],
    weight_kg: Optional[float],
) -> DerivedFacts:
    height_meters = height_to_meters(height_feet, height_inches)
    return DerivedFacts(
        height_meters=height_meters,
        bmi=compute_bmi(weight_kg, height_meters),
    )
