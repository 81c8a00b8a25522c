# models/student.py

"""
Represents a student enrolled in a classroom.

A Student is a value entity: its ID and name are fixed at construction and exposed
through read-only properties. Uniqueness of the ID is enforced by the owning `Classroom`.
"""

from __future__ import annotations


class Student:

    def __init__(self, id: str, name: str):
        self._id: str = id
        self._name: str = name

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Student({self._id}, {self._name})"

    def __str__(self) -> str:
        return f"{self._id} - {self._name}"
