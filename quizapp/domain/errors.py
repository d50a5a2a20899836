class QuizAppError(Exception):
    """Base class for errors the routers translate into responses."""


class StorageError(QuizAppError):
    """The store rejected or failed a query."""


class QuizNotFoundError(QuizAppError):
    def __init__(self, quiz_id: int) -> None:
        super().__init__(f"quiz {quiz_id} not found")
        self.quiz_id = quiz_id


class NotEnoughQuestionsError(QuizAppError):
    def __init__(self, category: str, requested: int, available: int) -> None:
        super().__init__(
            f"category {category!r} has {available} questions, {requested} requested"
        )
        self.category = category
        self.requested = requested
        self.available = available
