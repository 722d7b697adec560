"""
Risk classifier: maps a composite score onto a scheme's ordered label bands.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .models import RiskLevel, ScoringScheme


@dataclass(frozen=True)
class ThresholdBand:
    label: RiskLevel
    upper: Optional[float]  # None = open-ended top band
    inclusive: bool = True

    def contains(self, score: float) -> bool:
        if self.upper is None:
            return True
        if self.inclusive:
            return score <= self.upper
        return score < self.upper


@dataclass(frozen=True)
class ThresholdTable:
    """Ordered bands; the first band containing the score wins."""
    bands: Tuple[ThresholdBand, ...]

    def __post_init__(self):
        if not self.bands:
            raise ValueError("ThresholdTable needs at least one band")
        if self.bands[-1].upper is not None:
            raise ValueError("Last threshold band must be open-ended")
        uppers = [b.upper for b in self.bands[:-1]]
        if any(u is None for u in uppers) or uppers != sorted(uppers):
            raise ValueError("Threshold bands must be ordered by upper bound")

    @property
    def labels(self) -> List[RiskLevel]:
        return [b.label for b in self.bands]

    def classify(self, score: float) -> RiskLevel:
        for band in self.bands:
            if band.contains(score):
                return band.label
        # unreachable: the last band is open-ended
        return self.bands[-1].label


def classify(scheme: ScoringScheme, score: float) -> RiskLevel:
    return scheme.thresholds.classify(score)


LOW_MODERATE_HIGH = ThresholdTable((
    ThresholdBand(RiskLevel.LOW, 3),
    ThresholdBand(RiskLevel.MODERATE, 6),
    ThresholdBand(RiskLevel.HIGH, None),
))

ADEQUATE_INADEQUATE = ThresholdTable((
    ThresholdBand(RiskLevel.ADEQUATE, 5, inclusive=False),
    ThresholdBand(RiskLevel.INADEQUATE, None),
))

SUFFICIENT_INSUFFICIENT_DEFICIENT = ThresholdTable((
    ThresholdBand(RiskLevel.SUFFICIENT, 5, inclusive=False),
    ThresholdBand(RiskLevel.INSUFFICIENT, 7.75),
    ThresholdBand(RiskLevel.DEFICIENT, None),
))
