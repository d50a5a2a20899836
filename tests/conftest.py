import os
from types import SimpleNamespace

import pytest

# Settings() is built at import time and needs these
os.environ.setdefault("SUPABASE_URL", "https://example.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")

from fastapi.testclient import TestClient

from quizapp.core.supabase_client import get_supabase
from quizapp.main import app

IDENTITY_TABLES = {"questions", "quizzes"}
# (table, column, referenced table); quiz_questions.quiz_id cascades so it is not listed
FOREIGN_KEYS = [("quiz_questions", "question_id", "questions")]


class FakeQuery:
    """The subset of the PostgREST query builder the repositories use."""

    def __init__(self, db: "FakeSupabase", table: str) -> None:
        self.db = db
        self.table = table
        self.op = "select"
        self.columns = "*"
        self.payload = None
        self.filters = []
        self.order_by = None
        self.limit_n = None

    def select(self, columns: str = "*"):
        self.op, self.columns = "select", columns
        return self

    def insert(self, rows):
        self.op, self.payload = "insert", rows
        return self

    def update(self, values):
        self.op, self.payload = "update", values
        return self

    def delete(self):
        self.op = "delete"
        return self

    def eq(self, column, value):
        self.filters.append(lambda r: r.get(column) == value)
        return self

    def in_(self, column, values):
        values = list(values)
        self.filters.append(lambda r: r.get(column) in values)
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def limit(self, n):
        self.limit_n = n
        return self

    def execute(self):
        if self.table in self.db.failing:
            raise RuntimeError(f"connection to {self.table} lost")
        rows = self.db.tables.setdefault(self.table, [])
        data = getattr(self, f"_{self.op}")(rows)
        return SimpleNamespace(data=data)

    def _matches(self, row):
        return all(f(row) for f in self.filters)

    def _select(self, rows):
        out = [r for r in rows if self._matches(r)]
        if self.order_by:
            column, desc = self.order_by
            out.sort(key=lambda r: r[column], reverse=desc)
        if self.limit_n is not None:
            out = out[: self.limit_n]
        if self.columns != "*":
            names = [c.strip() for c in self.columns.split(",")]
            out = [{n: r.get(n) for n in names} for r in out]
        return [dict(r) for r in out]

    def _new_rows(self):
        payload = self.payload if isinstance(self.payload, list) else [self.payload]
        new = []
        for row in payload:
            row = dict(row)
            if self.table in IDENTITY_TABLES and row.get("id") is None:
                row["id"] = self.db.next_id(self.table)
            new.append(row)
        return new

    def _insert(self, rows):
        new = self._new_rows()
        rows.extend(new)
        return [dict(r) for r in new]

    def _update(self, rows):
        changed = []
        for row in rows:
            if self._matches(row):
                row.update(self.payload)
                changed.append(dict(row))
        return changed

    def _delete(self, rows):
        gone = [r for r in rows if self._matches(r)]
        for table, column, target in FOREIGN_KEYS:
            if target != self.table:
                continue
            referenced = {r["id"] for r in gone}
            if any(r[column] in referenced for r in self.db.tables.get(table, [])):
                raise RuntimeError(f"delete on {self.table} violates foreign key from {table}")
        rows[:] = [r for r in rows if not self._matches(r)]
        return gone


class FakeSupabase:
    def __init__(self) -> None:
        self.tables: dict[str, list[dict]] = {}
        self.failing: set[str] = set()
        self._ids: dict[str, int] = {}

    def next_id(self, table: str) -> int:
        self._ids[table] = max(
            [self._ids.get(table, 0)] + [r["id"] for r in self.tables.get(table, [])]
        ) + 1
        return self._ids[table]

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def fail(self, *tables: str) -> None:
        self.failing.update(tables)


@pytest.fixture
def db():
    return FakeSupabase()


@pytest.fixture
def client(db):
    app.dependency_overrides[get_supabase] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def add_question(db):
    """Inserts a question row straight into the store and returns it."""

    def _add(category="science", right_answer="A", title=None, difficulty="easy"):
        row = {
            "id": db.next_id("questions"),
            "question_title": title or f"{category} question",
            "category": category,
            "option1": "A",
            "option2": "B",
            "option3": "C",
            "option4": "D",
            "right_answer": right_answer,
            "difficulty_level": difficulty,
        }
        db.tables.setdefault("questions", []).append(row)
        return row

    return _add


@pytest.fixture
def make_quiz(db):
    """Stores a quiz over the given question rows, in the given order."""

    def _make(questions, title="Quiz"):
        quiz_id = db.next_id("quizzes")
        db.tables.setdefault("quizzes", []).append({"id": quiz_id, "title": title})
        links = db.tables.setdefault("quiz_questions", [])
        for position, q in enumerate(questions):
            links.append({"quiz_id": quiz_id, "question_id": q["id"], "position": position})
        return quiz_id

    return _make
