"""
Wire and domain models for questions, submissions and results.

Field names on the wire are fixed camelCase; Python attributes stay
snake_case and the aliases carry the wire names.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Question(WireModel):
    """A quiz question. Immutable once loaded."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int
    category: str
    question: str
    answers: tuple[str, ...]
    correct_answer_index: int = Field(alias="correctAnswerIndex")


class AnswerResponse(WireModel):
    question: Optional[Question] = None
    answer: int


class QuizSubmission(WireModel):
    category: Optional[str] = ""
    question_responses: List[AnswerResponse] = Field(default_factory=list, alias="questionResponses")


class SubmissionResult(WireModel):
    score_string: str = Field(alias="scoreString")
    score_percentage: float = Field(alias="scorePercentage")
    comparison: str


class Envelope(BaseModel):
    """Payload returned by every API endpoint."""

    success: bool
    message: str
    data: Optional[Any] = None
