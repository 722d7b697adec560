"""Rule tables for every scoring scheme the camps have used."""
