"""
Main application entry point
Demonstrates how to score a small screening camp
"""

import logging

from vitd_screening.core.config import config
from vitd_screening.core.records import audit_rows, patient_from_row, result_to_row
from vitd_screening.core.scoring.engine import ScoringEngine
from vitd_screening.core.scoring.summary import summarize


# Rows as they come from the patients table
SAMPLE_ROWS = [
    {
        "patient_number": 1, "initials": "R.K.", "age": 62, "gender": "Female",
        "height_feet": 5, "height_inches": 2, "weight_kg": 78.0,
        "diabetes": True, "hypertension": False,
        "hypothyroidism": False, "hyperthyroidism": False,
        "questionnaire_responses": {
            "q3": "wheatish", "q4": "full", "q5": "negligible", "q6": "no",
            "q7": "yes", "q8": "occasional", "q13": "often", "q14": "sometimes",
            "q15": "often", "q16": "no", "q17": "sometimes", "q18": "no",
        },
    },
    {
        "patient_number": 2, "initials": "A.S.", "age": 34, "gender": "Male",
        "height_feet": 5, "height_inches": 10, "weight_kg": 70.5,
        "questionnaire_responses": {
            "q3": "dark", "q4": "shorts", "q5": "more_30", "q8": "regular",
            "q18": "yes",
        },
    },
    {
        "patient_number": 3, "initials": "M.P.", "age": 45, "gender": "Female",
        "weight_kg": 64.0,
        "questionnaire_responses": {"q4": "option2", "q5": "option2", "q6": "Yes"},
    },
]


def main():
    """Main application workflow"""
    logging.basicConfig(
        level=config.logging_config['level'],
        format=config.logging_config['format'],
    )

    print("="*60)
    print("Vitamin D Deficiency Risk Assessment - Camp Scoring")
    print("="*60)

    engine = ScoringEngine(config.get_engine_config())
    engine.initialize()
    scheme = engine.get_scheme()
    print(f"Active scheme: {scheme.id.value} ({scheme.title})")

    results = []
    for row in SAMPLE_ROWS:
        result = engine.score(patient_from_row(row))
        results.append(result)
        row.update(result_to_row(result))
        bmi = f"{result.bmi:.1f}" if result.bmi else "N/A"
        print(
            f"\nPatient #{row['patient_number']} ({row['initials']}): "
            f"BMI {bmi}, score {result.composite_score:g} -> {result.classification.value}"
        )

    summary = summarize(results, scheme)
    print("\n" + "="*60)
    print(f"Total Patients Screened: {summary.total}")
    for label, count in summary.counts.items():
        print(f"   • {label}: {count} ({summary.percentages[label]}%)")

    entries = audit_rows(engine, SAMPLE_ROWS)
    print(f"\nReplay check: {sum(e.matches for e in entries)}/{len(entries)} stored scores reproduced")
    print("="*60)


if __name__ == "__main__":
    main()
