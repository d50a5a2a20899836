from typing import Annotated
from fastapi import Depends
from supabase import Client

from ...core.supabase_client import get_supabase
from ...repositories.question_repository import QuestionRepository
from ...repositories.quiz_repository import QuizRepository
from ...services.question_service import QuestionService
from ...services.quiz_service import QuizService

ClientDep = Annotated[Client, Depends(get_supabase)]

def get_question_service(client: ClientDep) -> QuestionService:
    return QuestionService(QuestionRepository(client))

def get_quiz_service(client: ClientDep) -> QuizService:
    questions = QuestionRepository(client)
    return QuizService(QuizRepository(client, questions), questions)

QuestionServiceDep = Annotated[QuestionService, Depends(get_question_service)]
QuizServiceDep = Annotated[QuizService, Depends(get_quiz_service)]
