from typing import Optional
from pydantic import BaseModel

class QuizResponseIn(BaseModel):
    # question id echoed by the client; matching is by position only
    id: Optional[int] = None
    response: str
