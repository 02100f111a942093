from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from quizwizard.models.quiz import Envelope, QuizSubmission
from quizwizard.services.quiz_service import QuizService, ServiceResult

router = APIRouter()


def get_quiz_service(request: Request) -> QuizService:
    return request.app.state.quiz_service


def envelope(result: ServiceResult) -> JSONResponse:
    """Wrap a service result in the ``{success, message, data}`` envelope."""
    body = Envelope(
        success=result.success,
        message=result.message,
        data=jsonable_encoder(result.data, by_alias=True),
    )
    return JSONResponse(status_code=result.status_code, content=body.model_dump(exclude_none=True))


@router.get("/categories")
def get_categories(service: QuizService = Depends(get_quiz_service)):
    return envelope(service.list_categories())


@router.get("/questions")
def get_questions(category: str = "", service: QuizService = Depends(get_quiz_service)):
    return envelope(service.get_questions(category))


@router.post("/submit")
def submit_answers(payload: QuizSubmission, service: QuizService = Depends(get_quiz_service)):
    return envelope(service.submit_answers(payload.category, payload.question_responses))
