import logging
from typing import List, Optional, Sequence, Tuple
from supabase import Client

from .base import execute
from .question_repository import QuestionRepository
from ..domain.errors import StorageError

logger = logging.getLogger(__name__)


class QuizRepository:
    def __init__(self, client: Client, questions: Optional[QuestionRepository] = None) -> None:
        self.client = client
        self.questions = questions or QuestionRepository(client)

    def get_quiz_with_questions(self, quiz_id: int) -> Optional[Tuple[dict, List[dict]]]:
        """Returns the quiz row and its question rows in quiz order, or None."""
        quiz_rows = execute(
            self.client.table("quizzes").select("*").eq("id", quiz_id).limit(1),
            f"load quiz {quiz_id}",
        )
        if not quiz_rows:
            return None

        links = execute(
            self.client.table("quiz_questions")
            .select("question_id,position")
            .eq("quiz_id", quiz_id)
            .order("position", desc=False),
            f"load questions of quiz {quiz_id}",
        )
        ids = [link["question_id"] for link in links]
        by_id = {row["id"]: row for row in self.questions.find_by_ids(ids)}
        # FK from quiz_questions keeps every linked question alive
        return quiz_rows[0], [by_id[qid] for qid in ids if qid in by_id]

    def create_quiz(self, title: str, question_ids: Sequence[int]) -> int:
        """Inserts the quiz, then its ordered links; a failed link insert removes the quiz again."""
        quiz_ins = execute(self.client.table("quizzes").insert({"title": title}), "create quiz")
        if not quiz_ins or "id" not in quiz_ins[0]:
            raise StorageError("cannot create quiz: insert returned no id")

        quiz_id = quiz_ins[0]["id"]

        rows = [
            {"quiz_id": quiz_id, "question_id": qid, "position": idx}
            for idx, qid in enumerate(question_ids)
        ]
        if rows:
            try:
                execute(self.client.table("quiz_questions").insert(rows), f"link questions to quiz {quiz_id}")
            except StorageError:
                logger.warning("removing quiz %s after its questions could not be linked", quiz_id)
                execute(self.client.table("quizzes").delete().eq("id", quiz_id), f"remove quiz {quiz_id}")
                raise

        return quiz_id
