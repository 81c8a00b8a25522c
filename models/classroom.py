# models/classroom.py

"""
The Classroom model is a named aggregate of enrolled Students and scheduled Assignments.

Students and Assignments are stored in dictionaries keyed by their IDs. Dictionaries preserve
insertion order, so a single structure provides both the uniqueness check and first-added-first-listed
iteration. IDs are unique within one Classroom only; two Classrooms may each hold a student "S1".

A Classroom holds no reference to the `ClassroomManager` that owns it.
"""

from __future__ import annotations

from core.logging_setup import get_logger
from models.assignment import Assignment
from models.student import Student
from models.types import RecordType

logger = get_logger(__name__)


class Classroom:

    def __init__(self, name: str):
        self._name: str = name
        self._students: dict[str, Student] = {}
        self._assignments: dict[str, Assignment] = {}

    # === properties ===

    @property
    def name(self) -> str:
        return self._name

    @property
    def student_count(self) -> int:
        return len(self._students)

    @property
    def assignment_count(self) -> int:
        return len(self._assignments)

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Classroom({self._name}, students={len(self._students)}, assignments={len(self._assignments)})"

    def __str__(self) -> str:
        return self._name

    # === data accessors ===

    def get_student(self, id: str) -> Student | None:
        return self._students.get(id)

    def get_assignment(self, id: str) -> Assignment | None:
        return self._assignments.get(id)

    def list_students(self) -> list[Student]:
        return list(self._students.values())

    def list_assignments(self) -> list[Assignment]:
        return list(self._assignments.values())

    # === data manipulators ===

    def _add_record(
        self, record: RecordType, dictionary: dict[str, RecordType]
    ) -> bool:
        """
        Adds a record to one of the classroom's dictionaries unless its ID is already taken.

        Args:
            record (RecordType): The `Student` or `Assignment` to add.
            dictionary (dict[str, RecordType]): The dictionary in which to store the record.

        Returns:
            True if the record was added, False if a record with the same ID already exists.

        Notes:
            - A rejected record leaves the dictionary untouched.
        """
        if record.id in dictionary:
            return False

        dictionary[record.id] = record
        return True

    def add_student(self, student: Student) -> bool:
        added = self._add_record(student, self._students)

        if added:
            logger.debug(
                "student_enrolled", classroom=self._name, student_id=student.id
            )
        else:
            logger.debug(
                "student_already_enrolled", classroom=self._name, student_id=student.id
            )

        return added

    def add_assignment(self, assignment: Assignment) -> bool:
        added = self._add_record(assignment, self._assignments)

        if added:
            logger.debug(
                "assignment_scheduled",
                classroom=self._name,
                assignment_id=assignment.id,
            )
        else:
            logger.debug(
                "assignment_already_scheduled",
                classroom=self._name,
                assignment_id=assignment.id,
            )

        return added

    def clear(self) -> None:
        """
        Drops every student and assignment owned by this classroom.
        """
        self._students.clear()
        self._assignments.clear()
