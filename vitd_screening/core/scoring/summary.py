"""Per-camp counting of classifications for the doctor summary."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Union

from .anthropometrics import round_half_up
from .models import RiskLevel, ScoreResult, ScoringScheme


@dataclass
class CampSummary:
    total: int
    counts: Dict[str, int] = field(default_factory=dict)
    percentages: Dict[str, int] = field(default_factory=dict)


def _label_of(item: Union[ScoreResult, RiskLevel, str]) -> str:
    if isinstance(item, ScoreResult):
        return item.classification.value
    if isinstance(item, RiskLevel):
        return item.value
    return str(item)


def count_by_classification(
    items: Iterable[Union[ScoreResult, RiskLevel, str]],
    scheme: Optional[ScoringScheme] = None,
) -> Dict[str, int]:
    """Count patients per label.

    Items may be results, labels or stored ``risk_level`` strings. With a
    scheme, every one of its labels is present (zero-filled) and listed
    first, in band order.
    """
    counts: Dict[str, int] = {}
    if scheme is not None:
        counts = {label.value: 0 for label in scheme.labels}
    for item in items:
        label = _label_of(item)
        counts[label] = counts.get(label, 0) + 1
    return counts


def adequacy_distribution(counts: Dict[str, int]) -> Dict[str, int]:
    """Whole-number percentage per label; an empty batch yields zeros."""
    total = sum(counts.values()) or 1
    return {label: int(round_half_up(n / total * 100, 0)) for label, n in counts.items()}


def summarize(
    items: Iterable[Union[ScoreResult, RiskLevel, str]],
    scheme: Optional[ScoringScheme] = None,
) -> CampSummary:
    counts = count_by_classification(items, scheme)
    return CampSummary(
        total=sum(counts.values()),
        counts=counts,
        percentages=adequacy_distribution(counts),
    )
