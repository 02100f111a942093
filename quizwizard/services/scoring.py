from typing import Sequence, Tuple

from quizwizard.core.errors import InvalidSubmission
from quizwizard.models.quiz import AnswerResponse


def calculate_score(responses: Sequence[AnswerResponse]) -> Tuple[str, float]:
    """Grade a submission into a ``"correct/total"`` string and a percentage.

    An answer is correct only when it equals the question's correct index;
    out-of-range or negative answers are just wrong.
    """
    if not responses:
        raise InvalidSubmission("no answers were submitted")

    score = 0
    for response in responses:
        if response.question is None:
            raise InvalidSubmission("one or more answers were invalid")
        if response.answer == response.question.correct_answer_index:
            score += 1

    total = len(responses)
    return f"{score}/{total}", score / total * 100
