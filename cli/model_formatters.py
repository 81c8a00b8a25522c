# cli/model_formatters.py

# anything that renders domain objects for the console
from models.assignment import Assignment
from models.classroom import Classroom
from models.student import Student

# === classroom formatters ===


def format_classroom_oneline(classroom: Classroom) -> str:
    return classroom.name


# === student formatters ===


def format_student_oneline(student: Student) -> str:
    return str(student)


# === assignment formatters ===


def format_assignment_oneline(assignment: Assignment) -> str:
    return str(assignment)
