# tests/conftest.py

import builtins

import pytest
import structlog

from core.config import get_settings
from models.assignment import Assignment
from models.classroom import Classroom
from models.classroom_manager import ClassroomManager
from models.student import Student


@pytest.fixture(autouse=True)
def reset_logging_and_settings():
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()


@pytest.fixture
def sample_manager():
    return ClassroomManager()


@pytest.fixture
def sample_classroom():
    return Classroom("Math101")


@pytest.fixture
def populated_manager():
    manager = ClassroomManager()
    manager.add_classroom("Math101")
    classroom = manager.get_classroom("Math101")
    classroom.add_student(Student("S1", "Ann"))
    classroom.add_assignment(Assignment("A1", "HW1", "2025-10-10"))
    return manager


@pytest.fixture
def sample_student():
    return Student("S1", "Ann")


@pytest.fixture
def sample_assignment():
    return Assignment(id="A1", title="HW1", due_date="2025-10-10")


@pytest.fixture
def feed_input(monkeypatch):
    """
    Replaces `input()` with a queue of canned responses, one per prompt.
    """

    def _feed(*responses):
        queue = iter(responses)
        monkeypatch.setattr(builtins, "input", lambda _prompt="": next(queue))

    return _feed
