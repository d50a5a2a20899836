from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse
from typing import Annotated
from ...domain.errors import NotEnoughQuestionsError, QuizNotFoundError, StorageError
from ...schemas.question_schemas import QuestionPublicOut
from ...schemas.quiz_schemas import QuizResponseIn
from .deps import QuizServiceDep

router = APIRouter(prefix="/quiz", tags=["quizzes"])

@router.post("/create")
def create_quiz(
    request: Request,
    category: Annotated[str, Query(min_length=1)],
    num_q: Annotated[int, Query(alias="numQ", ge=1)],
    title: Annotated[str, Query(min_length=1)],
    svc: QuizServiceDep,
):
    try:
        created = svc.create_quiz(category, num_q, title)
    except (StorageError, NotEnoughQuestionsError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content="cannot create quiz")
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content="success",
        headers={
            "Location": str(request.url_for("get_quiz_questions", quiz_id=created.id)),
            # may be lower than numQ when the category is small
            "X-Question-Count": str(created.question_count),
        },
    )

@router.get("/get/{quiz_id}", response_model=list[QuestionPublicOut])
def get_quiz_questions(quiz_id: int, svc: QuizServiceDep):
    try:
        return svc.get_quiz_questions(quiz_id)
    except QuizNotFoundError:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=[])
    except StorageError:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=[])

@router.post("/submit/{quiz_id}", response_model=int)
def submit(quiz_id: int, responses: list[QuizResponseIn], svc: QuizServiceDep):
    try:
        return svc.calculate_result(quiz_id, [r.response for r in responses])
    except (QuizNotFoundError, StorageError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=0)
