from fastapi import APIRouter, HTTPException, Depends, Request, status
from typing import Annotated
from ....domain.errors import NotFoundError, QuizServiceError
from ....domain.model import Option
from ....schemas.quiz_schemas import (
    ErrorOut,
    QuestionCreateIn,
    QuestionOut,
    QuizCreateIn,
    QuizOut,
    ScoreOut,
    SubmitIn,
)
from ....services.quiz_service import QuizService
from ....services.typing import option_to_dict

router = APIRouter(prefix="/quizzes", tags=["quizzes"])

# One service per app, created in create_app()

def get_service(request: Request) -> QuizService:
    return request.app.state.quiz_service

ServiceDep = Annotated[QuizService, Depends(get_service)]

_errors = {400: {"model": ErrorOut}}

@router.post("", response_model=QuizOut, status_code=status.HTTP_201_CREATED, responses=_errors)
async def create_quiz(payload: QuizCreateIn, svc: ServiceDep):
    quiz = svc.create_quiz(payload.title)
    return {"id": quiz.id, "title": quiz.title}

@router.get("", response_model=list[QuizOut])
async def list_quizzes(svc: ServiceDep):
    return svc.list_quizzes()

@router.post(
    "/{quiz_id}/questions",
    response_model=QuestionOut,
    status_code=status.HTTP_201_CREATED,
    responses=_errors,
)
async def add_question(quiz_id: str, payload: QuestionCreateIn, svc: ServiceDep):
    # unknown quiz is a 400 here, unlike GET
    try:
        question = svc.add_question(
            quiz_id,
            payload.text,
            [Option(**o.model_dump()) for o in payload.options],
            payload.correctOptionId,
        )
    except QuizServiceError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    return {
        "id": question.id,
        "text": question.text,
        "options": [option_to_dict(o) for o in question.options],
    }

@router.get(
    "/{quiz_id}/questions",
    response_model=list[QuestionOut],
    responses={404: {"model": ErrorOut}},
)
async def get_questions(quiz_id: str, svc: ServiceDep):
    try:
        return svc.get_questions(quiz_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)

@router.post("/{quiz_id}/submit", response_model=ScoreOut, responses=_errors)
async def submit_answers(quiz_id: str, payload: SubmitIn, svc: ServiceDep):
    try:
        return svc.submit_answers(quiz_id, payload.answers)
    except QuizServiceError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
