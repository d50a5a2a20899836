from fastapi import APIRouter, Response, status
from fastapi.responses import JSONResponse
from ...domain.errors import StorageError
from ...schemas.question_schemas import QuestionIn, QuestionOut
from .deps import QuestionServiceDep

router = APIRouter(prefix="/question", tags=["questions"])

@router.get("/allQuestions", response_model=list[QuestionOut])
def get_all_questions(svc: QuestionServiceDep):
    try:
        return svc.list_questions()
    except StorageError:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=[])

@router.get("/category/{category}", response_model=list[QuestionOut])
def get_questions_by_category(category: str, svc: QuestionServiceDep):
    try:
        return svc.list_by_category(category)
    except StorageError:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=[])

def _save(payload: QuestionIn, svc) -> JSONResponse:
    try:
        svc.save(payload.model_dump())
    except StorageError:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content="cannot save question")
    return JSONResponse(status_code=status.HTTP_201_CREATED, content="success")

@router.post("/add", status_code=status.HTTP_201_CREATED)
def add_question(payload: QuestionIn, svc: QuestionServiceDep):
    return _save(payload, svc)

@router.put("/update", status_code=status.HTTP_201_CREATED)
def update_question(payload: QuestionIn, svc: QuestionServiceDep):
    return _save(payload, svc)

@router.delete("/delete/{question_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_question(question_id: int, svc: QuestionServiceDep):
    try:
        svc.delete(question_id)
    except StorageError:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content="cannot delete question")
    # 204 must not carry a body
    return Response(status_code=status.HTTP_204_NO_CONTENT)
