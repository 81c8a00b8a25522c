# tests/test_classroom_manager.py

from structlog.testing import capture_logs

from models.assignment import Assignment
from models.classroom_manager import ClassroomManager
from models.student import Student

# --- classroom creation ---


def test_add_classroom(sample_manager):
    assert sample_manager.add_classroom("Math101")

    classroom = sample_manager.get_classroom("Math101")
    assert classroom is not None
    assert classroom.name == "Math101"
    assert classroom.list_students() == []
    assert classroom.list_assignments() == []


def test_add_duplicate_classroom(sample_manager):
    assert sample_manager.add_classroom("Math101")
    original = sample_manager.get_classroom("Math101")

    assert not sample_manager.add_classroom("Math101")

    assert sample_manager.classroom_count == 1
    assert sample_manager.get_classroom("Math101") is original


def test_duplicate_add_leaves_count_unchanged(sample_manager):
    names = ["Math101", "Phys101", "Math101", "Chem101", "Phys101"]

    for name in names:
        before = len(sample_manager.list_classrooms())
        added = sample_manager.add_classroom(name)
        after = len(sample_manager.list_classrooms())

        assert after == before + (1 if added else 0)

    assert sample_manager.classroom_count == 3


def test_add_duplicate_classroom_keeps_existing_records(populated_manager):
    assert not populated_manager.add_classroom("Math101")

    classroom = populated_manager.get_classroom("Math101")
    assert classroom.get_student("S1") is not None
    assert classroom.get_assignment("A1") is not None


def test_add_classroom_logs(sample_manager):
    with capture_logs() as logs:
        sample_manager.add_classroom("Math101")
        sample_manager.add_classroom("Math101")

    assert logs == [
        {"event": "classroom_created", "log_level": "info", "classroom": "Math101"},
        {
            "event": "classroom_already_exists",
            "log_level": "warning",
            "classroom": "Math101",
        },
    ]


# --- classroom lookup ---


def test_get_missing_classroom(sample_manager):
    assert sample_manager.get_classroom("NoSuchRoom") is None
    assert not sample_manager.has_classroom("NoSuchRoom")


def test_list_classrooms_empty(sample_manager):
    assert sample_manager.list_classrooms() == []
    assert sample_manager.classroom_count == 0


def test_list_classrooms_in_creation_order(sample_manager):
    for name in ["Phys101", "Art200", "Math101"]:
        sample_manager.add_classroom(name)

    assert [c.name for c in sample_manager.list_classrooms()] == [
        "Phys101",
        "Art200",
        "Math101",
    ]


def test_managers_are_isolated():
    first = ClassroomManager()
    second = ClassroomManager()

    first.add_classroom("Math101")

    assert second.get_classroom("Math101") is None
    assert second.add_classroom("Math101")


# --- classroom removal ---


def test_remove_classroom(sample_manager):
    sample_manager.add_classroom("Math101")

    assert sample_manager.remove_classroom("Math101")
    assert sample_manager.get_classroom("Math101") is None
    assert sample_manager.classroom_count == 0


def test_remove_missing_classroom(sample_manager):
    sample_manager.add_classroom("Math101")

    assert not sample_manager.remove_classroom("NoSuchRoom")
    assert sample_manager.classroom_count == 1


def test_remove_classroom_twice(sample_manager):
    sample_manager.add_classroom("Math101")

    assert sample_manager.remove_classroom("Math101")
    assert not sample_manager.remove_classroom("Math101")


def test_remove_classroom_cascades(populated_manager):
    classroom = populated_manager.get_classroom("Math101")

    assert populated_manager.remove_classroom("Math101")

    assert populated_manager.get_classroom("Math101") is None
    assert populated_manager.list_classrooms() == []
    assert classroom.get_student("S1") is None
    assert classroom.get_assignment("A1") is None


def test_recreated_classroom_starts_empty(populated_manager):
    populated_manager.remove_classroom("Math101")
    populated_manager.add_classroom("Math101")

    classroom = populated_manager.get_classroom("Math101")
    assert classroom.list_students() == []
    assert classroom.list_assignments() == []
    assert classroom.add_student(Student("S1", "Bob"))


def test_remove_one_classroom_leaves_others(populated_manager):
    populated_manager.add_classroom("Phys101")
    physics = populated_manager.get_classroom("Phys101")
    physics.add_student(Student("S1", "Ann"))
    physics.add_assignment(Assignment("A1", "Lab", "2025-12-01"))

    populated_manager.remove_classroom("Math101")

    assert populated_manager.get_classroom("Phys101") is physics
    assert physics.get_student("S1") is not None
    assert physics.get_assignment("A1") is not None


def test_remove_classroom_logs(sample_manager):
    sample_manager.add_classroom("Math101")

    with capture_logs() as logs:
        sample_manager.remove_classroom("Math101")
        sample_manager.remove_classroom("Math101")

    assert [(log["event"], log["log_level"]) for log in logs] == [
        ("classroom_removed", "info"),
        ("classroom_not_found", "warning"),
    ]


# --- scenarios ---


def test_scenario_student_enrollment(sample_manager):
    sample_manager.add_classroom("Math101")
    classroom = sample_manager.get_classroom("Math101")

    assert classroom.add_student(Student("S1", "Ann"))
    assert not classroom.add_student(Student("S1", "Bob"))

    assert [(s.id, s.name) for s in classroom.list_students()] == [("S1", "Ann")]


def test_scenario_assignment_submission(sample_manager):
    sample_manager.add_classroom("Math101")
    classroom = sample_manager.get_classroom("Math101")

    assert classroom.add_assignment(Assignment("A1", "HW1", "2025-10-10"))
    assert not classroom.get_assignment("A1").is_submitted

    classroom.get_assignment("A1").submit()

    assert classroom.get_assignment("A1").is_submitted
