from ..domain.model import Question
from ..repositories.question_repository import QuestionRepository

def question_to_dict(q: Question) -> dict:
    return {
        "id": q.id,
        "questionTitle": q.question_title,
        "category": q.category,
        "option1": q.option1,
        "option2": q.option2,
        "option3": q.option3,
        "option4": q.option4,
        "rightAnswer": q.right_answer,
        "difficultyLevel": q.difficulty_level,
    }

def question_from_dict(d: dict) -> Question:
    return Question(
        id=d.get("id"),
        question_title=d["questionTitle"],
        category=d["category"],
        option1=d["option1"],
        option2=d["option2"],
        option3=d["option3"],
        option4=d["option4"],
        right_answer=d["rightAnswer"],
        difficulty_level=d.get("difficultyLevel"),
    )

class QuestionService:
    """Admin CRUD over the question bank. Storage failures surface as StorageError."""

    def __init__(self, repo: QuestionRepository) -> None:
        self.repo = repo

    def list_questions(self) -> list[dict]:
        return [question_to_dict(Question.from_row(r)) for r in self.repo.list_questions()]

    def list_by_category(self, category: str) -> list[dict]:
        return [question_to_dict(Question.from_row(r)) for r in self.repo.list_by_category(category)]

    def save(self, payload: dict) -> dict:
        stored = self.repo.save(question_from_dict(payload).to_row())
        return question_to_dict(Question.from_row(stored))

    def delete(self, question_id: int) -> None:
        # unknown ids are a no-op, same as the store's DELETE ... WHERE
        self.repo.delete(question_id)
