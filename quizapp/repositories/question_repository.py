import random
from typing import List, Optional, Sequence
from supabase import Client

from .base import execute

TABLE = "questions"


class QuestionRepository:
    def __init__(self, client: Client, rng: Optional[random.Random] = None) -> None:
        self.client = client
        self.rng = rng or random.Random()

    def list_questions(self) -> List[dict]:
        return execute(
            self.client.table(TABLE).select("*").order("id"),
            "list questions",
        )

    def list_by_category(self, category: str) -> List[dict]:
        return execute(
            self.client.table(TABLE).select("*").eq("category", category).order("id"),
            f"list questions of category {category!r}",
        )

    def find_by_ids(self, ids: Sequence[int]) -> List[dict]:
        if not ids:
            return []
        return execute(
            self.client.table(TABLE).select("*").in_("id", list(ids)),
            "load questions by id",
        )

    def find_random_by_category(self, category: str, count: int) -> List[dict]:
        """Returns up to ``count`` distinct questions of ``category`` in random order.

        PostgREST has no ORDER BY random(), so the whole category is fetched
        and sampled here. Fewer rows come back when the category is smaller.
        """
        rows = self.list_by_category(category)
        return self.rng.sample(rows, min(count, len(rows)))

    def save(self, row: dict) -> dict:
        """Updates the row with the given id; inserts when there is no id or no such row.

        Inserts never carry the caller's id so the identity sequence stays ahead of every row.
        """
        question_id = row.get("id")
        fields = {k: v for k, v in row.items() if k != "id"}
        data = []
        if question_id is not None:
            data = execute(
                self.client.table(TABLE).update(fields).eq("id", question_id),
                f"update question {question_id}",
            )
        if not data:
            data = execute(self.client.table(TABLE).insert(fields), "save question")
        if not data:
            return fields
        return data[0]

    def delete(self, question_id: int) -> None:
        execute(
            self.client.table(TABLE).delete().eq("id", question_id),
            f"delete question {question_id}",
        )
