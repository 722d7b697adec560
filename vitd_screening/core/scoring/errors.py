"""Errors raised by the scoring engine."""


class ScoringError(ValueError):
    """Base class for all scoring failures."""


class InvalidPatientInputError(ScoringError):
    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Invalid patient input '{field}': {message}")


class InvalidAnswerError(ScoringError):
    def __init__(self, question_id: str, value, message: str = "unknown option code"):
        self.question_id = question_id
        self.value = value
        super().__init__(f"Invalid answer for {question_id} ({value!r}): {message}")


class UnknownSchemeError(ScoringError):
    def __init__(self, scheme_id):
        self.scheme_id = scheme_id
        super().__init__(f"Unknown scoring scheme: {scheme_id!r}")
