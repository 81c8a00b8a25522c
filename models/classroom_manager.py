# models/classroom_manager.py

"""
The ClassroomManager is the registry of every Classroom in the running program.

Classrooms are stored in a dictionary keyed by name, so names are unique across the whole
registry and classrooms are listed in creation order. Ownership is strictly top-down:
ClassroomManager -> Classroom -> Student / Assignment.

The manager is constructed explicitly. The CLI builds one instance at startup and hands it to
every menu action; tests build an isolated instance per test case.

Duplicate names and missing names are ordinary outcomes. They are reported through boolean
results and `None` lookups and never raise.
"""

from __future__ import annotations

from core.logging_setup import get_logger
from models.classroom import Classroom

logger = get_logger(__name__)


class ClassroomManager:

    def __init__(self):
        self._classrooms: dict[str, Classroom] = {}

    # === properties ===

    @property
    def classroom_count(self) -> int:
        return len(self._classrooms)

    # === data accessors ===

    def has_classroom(self, name: str) -> bool:
        return name in self._classrooms

    def get_classroom(self, name: str) -> Classroom | None:
        return self._classrooms.get(name)

    def list_classrooms(self) -> list[Classroom]:
        return list(self._classrooms.values())

    # === data manipulators ===

    def add_classroom(self, name: str) -> bool:
        """
        Creates a new, empty `Classroom` under the given name.

        Args:
            name (str): The classroom name. Emptiness is checked by the caller.

        Returns:
            True if the classroom was created, False if the name is already taken.

        Notes:
            - A rejected name leaves the registry untouched.
        """
        if name in self._classrooms:
            logger.warning("classroom_already_exists", classroom=name)
            return False

        self._classrooms[name] = Classroom(name)
        logger.info("classroom_created", classroom=name)
        return True

    def remove_classroom(self, name: str) -> bool:
        """
        Removes a `Classroom` along with all of its students and assignments.

        Args:
            name (str): The classroom name.

        Returns:
            True if the classroom was removed, False if no classroom has that name.
        """
        classroom = self._classrooms.pop(name, None)

        if classroom is None:
            logger.warning("classroom_not_found", classroom=name)
            return False

        classroom.clear()
        logger.info("classroom_removed", classroom=name)
        return True
