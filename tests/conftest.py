import random

import pytest
from fastapi.testclient import TestClient

from quizwizard.core.config import Settings
from quizwizard.main import create_app
from quizwizard.models.quiz import AnswerResponse, Question
from quizwizard.services.catalog import QuestionCatalog
from quizwizard.services.quiz_service import QuizService
from quizwizard.services.shuffle import Shuffler


def make_question(qid: int, category: str, correct: int = 0, n_answers: int = 4) -> Question:
    return Question(
        id=qid,
        category=category,
        question=f"{category} question {qid}?",
        answers=[f"answer {i}" for i in range(n_answers)],
        correctAnswerIndex=correct,
    )


def answer(question: Question, correct: bool = True) -> AnswerResponse:
    idx = question.correct_answer_index if correct else question.correct_answer_index + 1
    return AnswerResponse(question=question, answer=idx)


@pytest.fixture
def science_question():
    return make_question(1, "science", correct=1)


@pytest.fixture
def math_question():
    return make_question(2, "math", correct=2)


@pytest.fixture
def small_catalog(science_question, math_question):
    return QuestionCatalog({"science": [science_question], "math": [math_question]})


@pytest.fixture
def large_catalog():
    return QuestionCatalog({
        "science": [make_question(i, "science") for i in range(1, 5)],
        "math": [make_question(i, "math") for i in range(5, 9)],
        "history": [make_question(i, "history") for i in range(9, 12)],
    })


@pytest.fixture
def seeded_shuffler():
    return Shuffler(random.Random(1234))


@pytest.fixture
def service(small_catalog, seeded_shuffler):
    return QuizService(small_catalog, shuffler=seeded_shuffler)


@pytest.fixture
def test_settings():
    return Settings(ENVIRONMENT="testing", SHUFFLE_SEED=7)


@pytest.fixture
def client(service, test_settings):
    app = create_app(test_settings, service=service)
    with TestClient(app) as c:
        yield c
