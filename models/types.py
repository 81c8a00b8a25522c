# models/types.py

"""
Holds TypeVar definition for simplifying type checks.
"""

from typing import TypeVar

from .assignment import Assignment
from .student import Student

RecordType = TypeVar("RecordType", Assignment, Student)
