"""Tests for threshold tables."""

import pytest

from vitd_screening.core.scoring.classifier import (
    ADEQUATE_INADEQUATE,
    LOW_MODERATE_HIGH,
    SUFFICIENT_INSUFFICIENT_DEFICIENT,
    ThresholdBand,
    ThresholdTable,
)
from vitd_screening.core.scoring.models import RiskLevel


class TestLowModerateHigh:
    @pytest.mark.parametrize("score, expected", [
        (0, RiskLevel.LOW),
        (3, RiskLevel.LOW),
        (3.25, RiskLevel.MODERATE),
        (6, RiskLevel.MODERATE),
        (6.25, RiskLevel.HIGH),
        (19, RiskLevel.HIGH),
    ])
    def test_bands_inclusive_upper(self, score, expected):
        assert LOW_MODERATE_HIGH.classify(score) is expected


class TestAdequateInadequate:
    def test_strict_cut_at_five(self):
        assert ADEQUATE_INADEQUATE.classify(4.99) is RiskLevel.ADEQUATE
        assert ADEQUATE_INADEQUATE.classify(5.0) is RiskLevel.INADEQUATE

    def test_labels_in_order(self):
        assert ADEQUATE_INADEQUATE.labels == [RiskLevel.ADEQUATE, RiskLevel.INADEQUATE]


class TestThreeTier:
    def test_boundaries(self):
        assert SUFFICIENT_INSUFFICIENT_DEFICIENT.classify(4.75) is RiskLevel.SUFFICIENT
        assert SUFFICIENT_INSUFFICIENT_DEFICIENT.classify(5) is RiskLevel.INSUFFICIENT
        assert SUFFICIENT_INSUFFICIENT_DEFICIENT.classify(7.75) is RiskLevel.INSUFFICIENT
        assert SUFFICIENT_INSUFFICIENT_DEFICIENT.classify(8) is RiskLevel.DEFICIENT


class TestTableValidation:
    def test_last_band_must_be_open(self):
        with pytest.raises(ValueError):
            ThresholdTable((ThresholdBand(RiskLevel.LOW, 3),))

    def test_bands_must_be_ordered(self):
        with pytest.raises(ValueError):
            ThresholdTable((
                ThresholdBand(RiskLevel.LOW, 6),
                ThresholdBand(RiskLevel.MODERATE, 3),
                ThresholdBand(RiskLevel.HIGH, None),
            ))

    def test_empty_table(self):
        with pytest.raises(ValueError):
            ThresholdTable(())
