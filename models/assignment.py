# models/assignment.py

"""
The Assignment model represents a unit of classroom work scheduled with a due date.

An Assignment starts out pending and moves to submitted through `submit()`.
The transition is one-way: there is no way to un-submit an assignment.
"""

from __future__ import annotations


class Assignment:

    def __init__(
        self,
        id: str,
        title: str,
        due_date: str,
    ):
        self._id = id
        self._title = title
        # free-form text, e.g. "2025-10-10"
        self._due_date = due_date
        self._is_submitted = False

    @property
    def id(self) -> str:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def due_date(self) -> str:
        return self._due_date

    @property
    def is_submitted(self) -> bool:
        return self._is_submitted

    @property
    def status(self) -> str:
        return "[Submitted]" if self._is_submitted else "[Pending]"

    def submit(self) -> None:
        """
        Marks the assignment as submitted.

        Notes:
            - Calling this on an already submitted assignment has no further effect.
        """
        self._is_submitted = True

    def __repr__(self) -> str:
        return f"Assignment({self._id}, {self._title}, {self._due_date}, {self._is_submitted})"

    def __str__(self) -> str:
        return f"{self._id} - {self._title} (Due: {self._due_date}) {self.status}"
