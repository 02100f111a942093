"""
Error kinds raised by the quiz core and translated at the service boundary.
"""


class QuizError(Exception):
    """Base class for recoverable quiz errors."""

    status_code: int = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ServiceUnavailable(QuizError):
    """Catalog or ledger was never initialized."""

    status_code = 500


class UnknownCategory(QuizError):
    status_code = 404


class NoQuestionsAvailable(QuizError):
    status_code = 404


class InvalidSubmission(QuizError):
    status_code = 400


class InvalidScore(QuizError):
    """A score outside [0, 100] reached the ledger."""

    status_code = 400


class CatalogLoadError(Exception):
    """Question file could not be loaded. Fatal at startup."""
