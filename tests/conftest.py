"""
Shared fixtures: an in-memory SQLite database with foreign keys enabled, plus
scripted stand-ins for the console prompter and renderer.
"""

from datetime import date

import pytest
from sqlalchemy.pool import StaticPool

from habit_logger import crud
from habit_logger.db import init_db, make_engine, make_session_factory
from habit_logger.service import HabitLogger
from habit_logger.storage import Storage


class ScriptedPrompter:
    """Answers prompts from a fixed list and remembers what was asked."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.calls = []

    def _next(self, kind, message):
        self.calls.append((kind, message))
        if not self.answers:
            raise AssertionError(f"Unexpected {kind} prompt: {message!r}")
        return self.answers.pop(0)

    def ask_int(self, message):
        return self._next("int", message)

    def ask_text(self, message):
        return self._next("text", message)

    def ask_date(self, message):
        return self._next("date", message)

    def ask_month(self, message="Enter the month (1-12)"):
        return self._next("month", message)

    def ask_year(self, message="Enter the year (yyyy)"):
        return self._next("year", message)

    def confirm(self, message):
        return self._next("confirm", message)

    def choose(self, title, options):
        return self._next("choose", title)


class RecordingRenderer:
    def __init__(self):
        self.messages = []
        self.habits = []
        self.records = []
        self.reports = []

    def message(self, text):
        self.messages.append(text)

    def render_habits(self, habits):
        self.habits.append(list(habits))

    def render_records(self, rows):
        self.records.append(list(rows))

    def render_report(self, rows, summary):
        self.reports.append((list(rows), summary))


# ===== DATABASE SETUP =====

@pytest.fixture
def engine():
    """In-memory SQLite engine shared by every connection of one test"""
    engine = make_engine("sqlite:///:memory:", poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def storage(engine):
    return Storage(engine)


# ===== DATA =====

@pytest.fixture
def habit(session_factory):
    with session_factory() as db:
        return crud.add_habit(db, "Walking", "Steps")


@pytest.fixture
def other_habit(session_factory):
    with session_factory() as db:
        return crud.add_habit(db, "Reading", "Pages")


@pytest.fixture
def records(session_factory, habit, other_habit):
    rows = [
        (habit.id, date(2024, 3, 10), 7),
        (habit.id, date(2024, 1, 15), 10),
        (habit.id, date(2024, 2, 1), 5),
        (habit.id, date(2023, 12, 31), 3),
        (other_habit.id, date(2024, 1, 20), 99),
    ]
    created = []
    for habit_id, record_date, quantity in rows:
        with session_factory() as db:
            created.append(crud.add_record(db, habit_id, record_date, quantity))
    return created


# ===== SERVICE =====

@pytest.fixture
def prompter():
    return ScriptedPrompter()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def service(storage, session_factory, prompter, renderer):
    return HabitLogger(storage=storage, session_factory=session_factory, prompter=prompter, renderer=renderer)
