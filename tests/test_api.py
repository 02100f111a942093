import json

import pytest
from fastapi.testclient import TestClient

from quizwizard.core.config import Settings
from quizwizard.core.errors import CatalogLoadError
from quizwizard.main import create_app


def question_payload(qid=1, category="science", correct=1):
    return {
        "id": qid,
        "category": category,
        "question": "Q?",
        "answers": ["a", "b", "c"],
        "correctAnswerIndex": correct,
    }


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_get_categories(client):
    resp = client.get("/categories")
    assert resp.status_code == 200
    assert resp.json() == {
        "success": True,
        "message": "Categories retrieved successfully.",
        "data": ["Math", "Science", "Random"],
    }


def test_get_questions_wire_format(client):
    resp = client.get("/questions", params={"category": "Science"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["data"] == [{
        "id": 1,
        "category": "science",
        "question": "science question 1?",
        "answers": ["answer 0", "answer 1", "answer 2", "answer 3"],
        "correctAnswerIndex": 1,
    }]


def test_get_questions_unknown_category(client):
    resp = client.get("/questions", params={"category": "HISTORY "})
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "history is not a valid category."}


def test_get_questions_without_category(client):
    resp = client.get("/questions")
    assert resp.status_code == 200
    assert len(resp.json()["data"]) == 2


def test_submit(client):
    payload = {
        "category": "science",
        "questionResponses": [
            {"question": question_payload(), "answer": 1},
            {"question": question_payload(), "answer": 1},
        ],
    }
    resp = client.post("/submit", json=payload)
    assert resp.status_code == 200
    assert resp.json() == {
        "success": True,
        "message": "Submission processed successfully.",
        "data": {
            "scoreString": "2/2",
            "scorePercentage": 100.0,
            "comparison": "You are the first quizzer for the science category.",
        },
    }


def test_submit_with_null_question(client):
    payload = {"category": "math", "questionResponses": [{"question": None, "answer": 0}]}
    resp = client.post("/submit", json=payload)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Failed to process submission: one or more answers were invalid"


def test_submit_empty(client):
    resp = client.post("/submit", json={"category": "math", "questionResponses": []})
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "No answers were submitted."}


def test_submit_unknown_category(client):
    payload = {"category": "art", "questionResponses": [{"question": question_payload(), "answer": 0}]}
    resp = client.post("/submit", json=payload)
    assert resp.status_code == 404


@pytest.mark.parametrize("body", ["not json", '{"category": "math", "questionResponses": "nope"}'])
def test_submit_malformed(client, body):
    resp = client.post("/submit", content=body, headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Invalid request format."}


def test_startup_loads_catalog(tmp_path):
    path = tmp_path / "questions.json"
    path.write_text('{"art": [{"id": 1, "category": "art", "question": "Q?", "answers": ["a"], "correctAnswerIndex": 0}]}')
    app = create_app(Settings(QUESTIONS_FILE=str(path), SHUFFLE_SEED=1))
    with TestClient(app) as c:
        assert c.get("/categories").json()["data"] == ["Art", "Random"]


def test_startup_fails_without_catalog(tmp_path):
    app = create_app(Settings(QUESTIONS_FILE=str(tmp_path / "missing.json")))
    with pytest.raises(CatalogLoadError):
        with TestClient(app):
            pass


def test_submit_with_null_category(client):
    payload = {"category": None, "questionResponses": [{"question": question_payload(), "answer": 1}]}
    resp = client.post("/submit", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "A category must be provided."}


def test_envelope_omits_missing_data():
    from quizwizard.api.quizzes import envelope
    from quizwizard.services.quiz_service import ServiceResult

    resp = envelope(ServiceResult(False, "nope", 404))
    assert resp.status_code == 404
    assert json.loads(resp.body) == {"success": False, "message": "nope"}

    resp = envelope(ServiceResult.ok("fine", ["Math", "Random"]))
    assert json.loads(resp.body) == {"success": True, "message": "fine", "data": ["Math", "Random"]}
