# cli/main.py

"""
Main Menu for the Virtual Classroom Manager CLI.

Builds the single `ClassroomManager` for the session and dispatches menu choices to the
actions in `cli.classroom_menu` until the user chooses to exit.
"""

import cli.classroom_menu as classroom_menu
import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from core.config import get_settings
from core.logging_setup import get_logger, setup_logging
from models.classroom_manager import ClassroomManager

logger = get_logger(__name__)


def run_cli(manager: ClassroomManager) -> None:
    """
    Top-level loop with dispatch for the Main menu.

    Args:
        manager (ClassroomManager): The registry shared by every menu action for this session.

    Raises:
        RuntimeError: If the menu response is unrecognized.

    Notes:
        - Unexpected exceptions raised by a menu action are logged and printed, and the loop continues.
        - Choosing "0" is the only way to leave the loop.
    """
    title = formatters.format_banner_text("Virtual Classroom Manager")
    options = [
        ("Add Classroom", classroom_menu.add_classroom),
        ("List Classrooms", classroom_menu.list_classrooms),
        ("Remove Classroom", classroom_menu.remove_classroom),
        ("Add Student to Classroom", classroom_menu.add_student),
        ("List Students in Classroom", classroom_menu.list_students),
        ("Schedule Assignment for Classroom", classroom_menu.schedule_assignment),
        ("Submit Assignment", classroom_menu.submit_assignment),
        ("List Assignments in Classroom", classroom_menu.list_assignments),
    ]
    zero_option = "Exit"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            try:
                menu_response(manager)

            except Exception as e:
                logger.exception("menu_action_failed", action=menu_response.__name__)
                helpers.display_unexpected_error(e)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    print("\nExiting... Bye!")


def main() -> None:
    setup_logging(get_settings())
    run_cli(ClassroomManager())


if __name__ == "__main__":
    main()
