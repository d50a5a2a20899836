from dataclasses import dataclass
from typing import List, Optional, Sequence

@dataclass(frozen=True)
class Question:
    id: Optional[int]
    question_title: str
    category: str
    option1: str
    option2: str
    option3: str
    option4: str
    right_answer: str
    difficulty_level: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict) -> "Question":
        return cls(
            id=row.get("id"),
            question_title=row["question_title"],
            category=row["category"],
            option1=row["option1"],
            option2=row["option2"],
            option3=row["option3"],
            option4=row["option4"],
            right_answer=row["right_answer"],
            difficulty_level=row.get("difficulty_level"),
        )

    def to_row(self) -> dict:
        row = {
            "question_title": self.question_title,
            "category": self.category,
            "option1": self.option1,
            "option2": self.option2,
            "option3": self.option3,
            "option4": self.option4,
            "right_answer": self.right_answer,
            "difficulty_level": self.difficulty_level,
        }
        if self.id is not None:
            row["id"] = self.id
        return row

@dataclass(frozen=True)
class Quiz:
    id: int
    title: str
    questions: List[Question]

    def score(self, responses: Sequence[str]) -> int:
        """Counts responses equal to the right answer of the question at the same index.

        Responses past the last question are ignored.
        """
        return sum(
            1
            for question, response in zip(self.questions, responses)
            if response == question.right_answer
        )
