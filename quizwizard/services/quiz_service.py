"""
Quiz orchestration: category listing, question selection and submission grading.

Every public operation returns a ``ServiceResult``. Errors raised by the
catalog, scorer or ledger are recovered here and turned into a user-facing
message and a status code; nothing escapes to the transport layer.
"""
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from quizwizard.core.errors import (
    InvalidSubmission,
    NoQuestionsAvailable,
    QuizError,
    ServiceUnavailable,
    UnknownCategory,
)
from quizwizard.models.quiz import AnswerResponse, Question, SubmissionResult
from quizwizard.services.catalog import QuestionCatalog, build_ledger
from quizwizard.services.ledger import RANDOM_CATEGORY, ScoreLedger, normalize_category
from quizwizard.services.scoring import calculate_score
from quizwizard.services.shuffle import RANDOM_QUIZ_SIZE, Shuffler

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


@dataclass(frozen=True)
class ServiceResult:
    success: bool
    message: str
    status_code: int = 200
    data: Optional[Any] = None

    @classmethod
    def ok(cls, message: str, data: Any = None) -> "ServiceResult":
        return cls(True, message, 200, data)

    @classmethod
    def failure(cls, error: QuizError) -> "ServiceResult":
        return cls(False, error.message, error.status_code)


class QuizService:
    """Owns the catalog, the score ledger and the shuffler for one process."""

    def __init__(
        self,
        catalog: QuestionCatalog,
        ledger: Optional[ScoreLedger] = None,
        shuffler: Optional[Shuffler] = None,
        random_quiz_size: int = RANDOM_QUIZ_SIZE,
    ):
        self.catalog = catalog
        self.ledger = ledger if ledger is not None else build_ledger(catalog)
        self.shuffler = shuffler or Shuffler()
        self.random_quiz_size = random_quiz_size

    # ---------------------------------------------------------------- listing

    def list_categories(self) -> ServiceResult:
        try:
            categories = self._categories()
        except QuizError as e:
            return self._reject("list_categories", e)
        return ServiceResult.ok("Categories retrieved successfully.", categories)

    def _categories(self) -> List[str]:
        if len(self.catalog) == 0:
            raise ServiceUnavailable(UNEXPECTED_ERROR)
        categories = sorted(key[:1].upper() + key[1:] for key in self.catalog)
        categories.append("Random")
        return categories

    # -------------------------------------------------------------- questions

    def get_questions(self, category: str = "") -> ServiceResult:
        category = normalize_category(category) or RANDOM_CATEGORY
        try:
            questions = self._select_questions(category)
        except QuizError as e:
            return self._reject("get_questions", e)
        message = f"Questions successfully retrieved from the {category} category."
        return ServiceResult.ok(message, questions)

    def _select_questions(self, category: str) -> List[Question]:
        if len(self.catalog) == 0:
            raise ServiceUnavailable(UNEXPECTED_ERROR)
        if category != RANDOM_CATEGORY and category not in self.catalog:
            raise UnknownCategory(f"{category} is not a valid category.")

        if category == RANDOM_CATEGORY:
            questions = self.shuffler.randomise(self.catalog, self.random_quiz_size)
        else:
            questions = self.shuffler.shuffled_copy(self.catalog[category])

        if not questions:
            raise NoQuestionsAvailable(
                f"Currently there are no questions available for the {category} category. "
                "Please choose a different category or try again later."
            )
        return questions

    # ------------------------------------------------------------- submission

    def submit_answers(self, category: str, responses: Sequence[AnswerResponse]) -> ServiceResult:
        try:
            result = self._grade(category, responses)
        except QuizError as e:
            return self._reject("submit_answers", e)
        return ServiceResult.ok("Submission processed successfully.", result)

    def _grade(self, category: str, responses: Sequence[AnswerResponse]) -> SubmissionResult:
        if len(self.ledger) == 0:
            raise ServiceUnavailable(UNEXPECTED_ERROR)
        if not responses:
            raise InvalidSubmission("No answers were submitted.")

        category = normalize_category(category)
        if not category:
            raise InvalidSubmission("A category must be provided.")
        if category not in self.ledger:
            raise UnknownCategory(f"{category} is not a valid category.")

        try:
            score_string, score_percentage = calculate_score(responses)
            # Compared against the history as it stood before this submission.
            comparison, prior_count = self.ledger.compare_and_append(category, score_percentage)
        except QuizError as e:
            raise type(e)(f"Failed to process submission: {e.message}", 400) from e

        logger.info(f"Scored submission for {category}: {score_string} ({prior_count} prior scores)")
        return SubmissionResult(
            score_string=score_string,
            score_percentage=score_percentage,
            comparison=comparison_message(category, comparison, prior_count),
        )

    def _reject(self, operation: str, error: QuizError) -> ServiceResult:
        if error.status_code >= 500:
            logger.error(f"{operation} failed: {error.message}")
        else:
            logger.warning(f"{operation} rejected: {error.message}")
        return ServiceResult.failure(error)


def comparison_message(category: str, comparison: float, prior_count: int) -> str:
    """User-facing comparison text.

    With at most one earlier score there is no meaningful crowd to compare
    against, so the quizzer is told they are first instead.
    """
    if prior_count <= 1:
        return f"You are the first quizzer for the {category} category."
    return f"Your score for the {category} category was better than {comparison:.0f}% of all quizzers."
