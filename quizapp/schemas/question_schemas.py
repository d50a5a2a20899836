from typing import Optional
from pydantic import BaseModel, Field

class QuestionIn(BaseModel):
    id: Optional[int] = None  # present on update, absent on add
    questionTitle: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    option1: str
    option2: str
    option3: str
    option4: str
    rightAnswer: str = Field(..., min_length=1)
    difficultyLevel: Optional[str] = None

class QuestionOut(BaseModel):
    id: int
    questionTitle: str
    category: str
    option1: str
    option2: str
    option3: str
    option4: str
    rightAnswer: str
    difficultyLevel: Optional[str] = None

class QuestionPublicOut(BaseModel):
    """What a quiz-taker sees: no right answer, no difficulty."""
    id: int
    questionTitle: str
    option1: str
    option2: str
    option3: str
    option4: str
