"""Tests for per-camp classification counts."""

from vitd_screening.core.scoring.models import PatientInput, RiskLevel
from vitd_screening.core.scoring.summary import (
    adequacy_distribution,
    count_by_classification,
    summarize,
)


class TestCounting:
    def test_counts_results(self, engine, high_risk_answers):
        scheme = engine.get_scheme()
        results = [
            engine.score(PatientInput(age=60, weight_kg=80), answers=high_risk_answers),
            engine.score(PatientInput(age=30, weight_kg=60)),
            engine.score(PatientInput(age=35, weight_kg=65)),
        ]
        assert count_by_classification(results, scheme) == {"Adequate": 2, "Inadequate": 1}

    def test_zero_filled_labels(self, engine):
        counts = count_by_classification(["High Risk"], engine.get_scheme("scheme_a"))
        assert counts == {"Low Risk": 0, "Moderate Risk": 0, "High Risk": 1}

    def test_accepts_enums_and_strings(self):
        counts = count_by_classification([RiskLevel.ADEQUATE, "Adequate", "Inadequate"])
        assert counts == {"Adequate": 2, "Inadequate": 1}

    def test_empty_batch(self, engine):
        assert count_by_classification([], engine.get_scheme()) == {"Adequate": 0, "Inadequate": 0}


class TestDistribution:
    def test_percentages_round_half_up(self):
        assert adequacy_distribution({"Adequate": 1, "Inadequate": 7}) == {
            "Adequate": 13,
            "Inadequate": 88,
        }

    def test_empty_batch_does_not_divide_by_zero(self):
        assert adequacy_distribution({"Adequate": 0, "Inadequate": 0}) == {
            "Adequate": 0,
            "Inadequate": 0,
        }

    def test_summarize(self, engine):
        summary = summarize(["Adequate", "Inadequate", "Inadequate", "Inadequate"], engine.get_scheme())
        assert summary.total == 4
        assert summary.counts == {"Adequate": 1, "Inadequate": 3}
        assert summary.percentages == {"Adequate": 25, "Inadequate": 75}
