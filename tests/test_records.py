"""Tests for the stored-row adapter and the camp audit."""

import json

import pytest

from vitd_screening.core.records import audit_rows, patient_from_row, result_to_row
from vitd_screening.core.scoring.errors import InvalidPatientInputError


@pytest.fixture
def row(high_risk_answers):
    return {
        "patient_number": 7,
        "initials": "S.R.",
        "age": 60,
        "gender": "Female",
        "height_feet": 5,
        "height_inches": 6,
        "weight_kg": 89.93,
        "diabetes": False,
        "hypertension": True,
        "hypothyroidism": False,
        "hyperthyroidism": False,
        "other_comorbidity": None,
        "questionnaire_responses": high_risk_answers,
    }


class TestPatientFromRow:
    def test_reads_columns(self, row):
        patient = patient_from_row(row)
        assert patient.age == 60
        assert patient.height_feet == 5
        assert patient.weight_kg == 89.93
        assert patient.comorbidities.hypertension is True
        assert patient.answers["q4"] == "full"

    def test_null_heights(self, row):
        row.update(height_feet=None, height_inches=None)
        patient = patient_from_row(row)
        assert patient.height_feet is None
        assert patient.height_inches is None

    def test_json_text_responses(self, row):
        row["questionnaire_responses"] = json.dumps({"q4": "partial"})
        assert patient_from_row(row).answers == {"q4": "partial"}

    def test_bad_json(self, row):
        row["questionnaire_responses"] = "{not json"
        with pytest.raises(InvalidPatientInputError):
            patient_from_row(row)

    def test_non_numeric_age(self, row):
        row["age"] = "sixty"
        with pytest.raises(InvalidPatientInputError) as exc:
            patient_from_row(row)
        assert exc.value.field == "age"

    def test_fractional_whole_number_fields_rejected(self, row):
        row["age"] = 50.9
        with pytest.raises(InvalidPatientInputError) as exc:
            patient_from_row(row)
        assert exc.value.field == "age"

        row["age"] = 60
        row["height_feet"] = 5.9
        with pytest.raises(InvalidPatientInputError) as exc:
            patient_from_row(row)
        assert exc.value.field == "height_feet"

    def test_integral_floats_accepted(self, row):
        row["age"] = 60.0
        row["height_feet"] = "5"
        patient = patient_from_row(row)
        assert patient.age == 60
        assert patient.height_feet == 5

    def test_missing_age_left_for_engine(self, engine, row):
        del row["age"]
        with pytest.raises(InvalidPatientInputError):
            engine.score(patient_from_row(row))


class TestResultToRow:
    def test_output_fields(self, engine, row):
        fields = result_to_row(engine.score(patient_from_row(row)))
        assert fields["bmi"] == 32.0
        assert fields["total_score"] == 12.75
        assert fields["risk_level"] == "Inadequate"
        assert fields["scoring_scheme"] == "scheme_c"
        assert fields["questionnaire_responses"]["q5"] == "negligible"

    def test_round_trip_reproduces_score(self, engine, row):
        row.update(result_to_row(engine.score(patient_from_row(row))))
        replay = engine.score(patient_from_row(row), scheme=row["scoring_scheme"])
        assert replay.composite_score == row["total_score"]
        assert replay.classification.value == row["risk_level"]


class TestAudit:
    def test_matching_rows(self, engine, row):
        row.update(result_to_row(engine.score(patient_from_row(row))))
        entries = audit_rows(engine, [row])
        assert len(entries) == 1
        assert entries[0].matches
        assert entries[0].patient_number == 7

    def test_replays_recorded_scheme(self, engine, row):
        row.update(result_to_row(engine.score(patient_from_row(row), scheme="scheme_c_three_tier")))
        entry = audit_rows(engine, [row])[0]
        assert entry.scheme == "scheme_c_three_tier"
        assert entry.recomputed_risk_level == "Deficient"
        assert entry.matches

    def test_tampered_score_flagged(self, engine, row):
        row.update(result_to_row(engine.score(patient_from_row(row))))
        row["total_score"] = 3
        assert audit_rows(engine, [row])[0].matches is False

    def test_legacy_row_uses_default_scheme(self, engine):
        legacy = {
            "patient_number": 1, "age": 61, "weight_kg": 70.26,
            "height_feet": 5, "height_inches": 6,
            "total_score": 2, "risk_level": "Low Risk",
        }
        entry = audit_rows(engine, [legacy], default_scheme="scheme_a")[0]
        assert entry.scheme == "scheme_a"
        assert entry.matches

    def test_bad_row_reported_not_raised(self, engine, row):
        row["scoring_scheme"] = "scheme_x"
        entry = audit_rows(engine, [row])[0]
        assert entry.error is not None
        assert entry.matches is False

    def test_non_numeric_stored_score(self, engine, row):
        row.update(result_to_row(engine.score(patient_from_row(row))))
        row["total_score"] = "n/a"
        entries = audit_rows(engine, [row])
        assert entries[0].error is None
        assert entries[0].matches is False
