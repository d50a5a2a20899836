import logging
from dataclasses import dataclass
from typing import List, Sequence

from ..domain.errors import NotEnoughQuestionsError, QuizNotFoundError
from ..domain.model import Question, Quiz
from ..repositories.question_repository import QuestionRepository
from ..repositories.quiz_repository import QuizRepository

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class CreatedQuiz:
    id: int
    requested: int
    question_count: int

    @property
    def short(self) -> bool:
        return self.question_count < self.requested

class QuizService:
    def __init__(self, quiz_repo: QuizRepository, question_repo: QuestionRepository) -> None:
        self.quiz_repo = quiz_repo
        self.question_repo = question_repo

    def create_quiz(self, category: str, count: int, title: str) -> CreatedQuiz:
        """Samples up to ``count`` distinct questions of ``category`` into a new quiz.

        A category smaller than ``count`` still yields a quiz with every
        question it has; an empty category raises NotEnoughQuestionsError.
        """
        rows = self.question_repo.find_random_by_category(category, count)
        if not rows:
            raise NotEnoughQuestionsError(category, count, 0)

        quiz_id = self.quiz_repo.create_quiz(title, [r["id"] for r in rows])
        created = CreatedQuiz(id=quiz_id, requested=count, question_count=len(rows))
        if created.short:
            logger.warning(
                "quiz %s: category %r has only %d of %d requested questions",
                quiz_id, category, created.question_count, count,
            )
        else:
            logger.info("quiz %s created from category %r with %d questions", quiz_id, category, count)
        return created

    def get_quiz(self, quiz_id: int) -> Quiz:
        res = self.quiz_repo.get_quiz_with_questions(quiz_id)
        if not res:
            raise QuizNotFoundError(quiz_id)
        quiz, questions = res
        return Quiz(
            id=quiz["id"],
            title=quiz["title"],
            questions=[Question.from_row(q) for q in questions],
        )

    def get_quiz_questions(self, quiz_id: int) -> List[dict]:
        """Quiz questions in quiz order, without right answers or difficulty."""
        return [
            {
                "id": q.id,
                "questionTitle": q.question_title,
                "option1": q.option1,
                "option2": q.option2,
                "option3": q.option3,
                "option4": q.option4,
            }
            for q in self.get_quiz(quiz_id).questions
        ]

    def calculate_result(self, quiz_id: int, responses: Sequence[str]) -> int:
        quiz = self.get_quiz(quiz_id)
        if len(responses) > len(quiz.questions):
            logger.debug(
                "quiz %s: ignoring %d responses past the last question",
                quiz_id, len(responses) - len(quiz.questions),
            )
        score = quiz.score(responses)
        logger.info("quiz %s scored %d/%d", quiz_id, score, len(quiz.questions))
        return score
