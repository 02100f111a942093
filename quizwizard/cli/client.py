"""HTTP client for the QuizWizard API."""
from typing import Any, List, Optional

import httpx

from quizwizard.models.quiz import Question, QuizSubmission, SubmissionResult


class ClientError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class QuizClient:
    def __init__(self, base_url: str, client: Optional[httpx.Client] = None, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.http = client or httpx.Client(timeout=timeout)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "QuizClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def fetch_categories(self) -> List[str]:
        data = self._request("GET", "/categories", "categories")
        return list(data or [])

    def fetch_questions(self, category: str) -> List[Question]:
        params = {"category": category.strip().lower()}
        data = self._request("GET", "/questions", "fetch questions", params=params)
        return [Question.model_validate(q) for q in data or []]

    def submit_quiz(self, submission: QuizSubmission) -> SubmissionResult:
        body = submission.model_dump(mode="json", by_alias=True)
        data = self._request("POST", "/submit", "post submission", json=body)
        if data is None:
            raise ClientError("post submission response contained no results")
        return SubmissionResult.model_validate(data)

    def _request(self, method: str, path: str, label: str, **kwargs) -> Any:
        """Send a request and unwrap the ``{success, message, data}`` envelope."""
        try:
            resp = self.http.request(method, self.base_url + path, **kwargs)
        except httpx.HTTPError as e:
            raise ClientError(f"error making {label} request: {e}") from e

        try:
            payload = resp.json()
        except ValueError as e:
            raise ClientError(f"error unmarshaling {label} response: {e}", resp.status_code) from e

        if not isinstance(payload, dict) or not payload.get("success"):
            message = payload.get("message", "") if isinstance(payload, dict) else ""
            raise ClientError(f"error within {label} response: {message}", resp.status_code)
        return payload.get("data")
