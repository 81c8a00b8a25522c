# cli/classroom_menu.py

"""
Menu actions for the Virtual Classroom Manager CLI.

Each action maps one menu choice to one `ClassroomManager` or `Classroom` operation:
- Adding, listing, and removing classrooms
- Enrolling and listing students
- Scheduling, submitting, and listing assignments

Every action takes the active `ClassroomManager`, prompts for what it needs, and prints the outcome.
Empty input, duplicate IDs, and failed lookups are reported as messages and never raised.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
from cli.menu_helpers import MenuSignal
from models.assignment import Assignment
from models.classroom import Classroom
from models.classroom_manager import ClassroomManager
from models.student import Student

# === classroom actions ===


def add_classroom(manager: ClassroomManager) -> None:
    name = helpers.prompt_required_input("Enter classroom name:", "name")

    if name is MenuSignal.CANCEL:
        return
    name = cast(str, name)

    if manager.add_classroom(name):
        print(f"\nClassroom [{name}] has been created.")
    else:
        print("\nClassroom already exists.")


def list_classrooms(manager: ClassroomManager) -> None:
    helpers.display_results(
        manager.list_classrooms(),
        "Classrooms:",
        "No classrooms available.",
        model_formatters.format_classroom_oneline,
    )


def remove_classroom(manager: ClassroomManager) -> None:
    """
    Prompts for a classroom name and removes that classroom with all of its students and assignments.
    """
    name = helpers.prompt_required_input("Enter classroom name to remove:", "name")

    if name is MenuSignal.CANCEL:
        return
    name = cast(str, name)

    if manager.remove_classroom(name):
        print("\nClassroom removed.")
    else:
        helpers.display_not_found("Classroom")


def find_classroom(manager: ClassroomManager) -> Classroom | MenuSignal:
    """
    Prompts for a classroom name and looks it up in the registry.

    Args:
        manager (ClassroomManager): The active `ClassroomManager`.

    Returns:
        - The matching `Classroom`.
        - `MenuSignal.CANCEL` if the input is empty or no classroom has that name.

    Notes:
        - The "not found" message is printed here so callers can simply return on cancel.
    """
    name = helpers.prompt_required_input("Enter classroom name:", "classroom name")

    if name is MenuSignal.CANCEL:
        return MenuSignal.CANCEL
    name = cast(str, name)

    classroom = manager.get_classroom(name)

    if classroom is None:
        helpers.display_not_found("Classroom")
        return MenuSignal.CANCEL

    return classroom


# === student actions ===


def add_student(manager: ClassroomManager) -> None:
    classroom = find_classroom(manager)

    if classroom is MenuSignal.CANCEL:
        return
    classroom = cast(Classroom, classroom)

    student_id = helpers.prompt_required_input("Enter student ID:", "student ID")

    if student_id is MenuSignal.CANCEL:
        return
    student_id = cast(str, student_id)

    student_name = helpers.prompt_required_input("Enter student name:", "student name")

    if student_name is MenuSignal.CANCEL:
        return
    student_name = cast(str, student_name)

    if classroom.add_student(Student(student_id, student_name)):
        print(f"\nStudent [{student_id}] enrolled in {classroom.name}")
    else:
        print("\nStudent ID already exists in this class.")


def list_students(manager: ClassroomManager) -> None:
    classroom = find_classroom(manager)

    if classroom is MenuSignal.CANCEL:
        return
    classroom = cast(Classroom, classroom)

    helpers.display_results(
        classroom.list_students(),
        f"Students in {classroom.name}:",
        "No students enrolled.",
        model_formatters.format_student_oneline,
    )


# === assignment actions ===


def schedule_assignment(manager: ClassroomManager) -> None:
    classroom = find_classroom(manager)

    if classroom is MenuSignal.CANCEL:
        return
    classroom = cast(Classroom, classroom)

    assignment_id = helpers.prompt_required_input(
        "Enter assignment ID:", "assignment ID"
    )

    if assignment_id is MenuSignal.CANCEL:
        return
    assignment_id = cast(str, assignment_id)

    title = helpers.prompt_required_input("Enter assignment title:", "title")

    if title is MenuSignal.CANCEL:
        return
    title = cast(str, title)

    due_date = helpers.prompt_required_input(
        "Enter due date (e.g. 2025-10-10):", "due date"
    )

    if due_date is MenuSignal.CANCEL:
        return
    due_date = cast(str, due_date)

    if classroom.add_assignment(Assignment(assignment_id, title, due_date)):
        print(f"\nAssignment scheduled for {classroom.name}")
    else:
        print("\nAssignment ID already exists.")


def submit_assignment(manager: ClassroomManager) -> None:
    """
    Prompts for a classroom, an enrolled student, and an assignment, then marks the assignment submitted.

    Notes:
        - The student must be enrolled in the classroom before the assignment is looked up.
        - Submitting an already submitted assignment succeeds again without error.
    """
    classroom = find_classroom(manager)

    if classroom is MenuSignal.CANCEL:
        return
    classroom = cast(Classroom, classroom)

    student_id = helpers.prompt_required_input("Enter student ID:", "student ID")

    if student_id is MenuSignal.CANCEL:
        return
    student_id = cast(str, student_id)

    if classroom.get_student(student_id) is None:
        helpers.display_not_found("Student")
        return

    assignment_id = helpers.prompt_required_input(
        "Enter assignment ID:", "assignment ID"
    )

    if assignment_id is MenuSignal.CANCEL:
        return
    assignment_id = cast(str, assignment_id)

    assignment = classroom.get_assignment(assignment_id)

    if assignment is None:
        helpers.display_not_found("Assignment")
        return

    assignment.submit()

    print(f"\nAssignment submitted by Student [{student_id}] in [{classroom.name}]")


def list_assignments(manager: ClassroomManager) -> None:
    classroom = find_classroom(manager)

    if classroom is MenuSignal.CANCEL:
        return
    classroom = cast(Classroom, classroom)

    helpers.display_results(
        classroom.list_assignments(),
        f"Assignments in {classroom.name}:",
        "No assignments scheduled.",
        model_formatters.format_assignment_oneline,
    )
