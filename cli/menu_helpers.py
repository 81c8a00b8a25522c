# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Virtual Classroom Manager.

This module provides utilities for:
- Displaying the numbered menu and resolving a choice to an action
- Prompting for user input and rejecting empty values
- Displaying result lists and standard "not found" feedback

These functions are shared by all menu actions to keep prompts and messages consistent.
"""

from enum import Enum
from typing import Any, Callable, Iterable

import core.formatters as formatters


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Exit",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the exit option. Defaults to "Exit".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Any input other than "0" or a listed option number prints an invalid choice message and re-displays the menu.
        - User input is matched by menu number, not by label.
    """
    actions = {str(i): action for i, (_, action) in enumerate(options, 1)}

    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}) {label}")

        print(f"0) {zero_option}")

        choice = prompt_user_input("Choice:")

        if choice == "0":
            return MenuSignal.EXIT

        if choice in actions:
            return actions[choice]

        print("Invalid choice. Please try again.")


def display_results(
    results: Iterable[Any],
    heading: str,
    empty_message: str,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a heading followed by one bulleted line per result, or a message if there are none.

    Args:
        results (Iterable[Any]): The results to display, in display order.
        heading (str): Printed above the list when there is at least one result.
        empty_message (str): Printed instead of the list when there are no results.
        formatter (Callable[[Any], str], optional): Converts each result to a display string. Defaults to str().
    """
    results = list(results)

    if not results:
        print(f"\n{empty_message}")
        return

    print(f"\n{heading}")
    print(formatters.format_bulleted_list(results, formatter))


# === prompt user input methods ===


# Prompt Helpers
#
# Conventions:
# - `prompt_user_input()` is the base function, used by all others to standardize the UI format.
#   Leading and trailing whitespace is always stripped.
# - `prompt_required_input()` returns `MenuSignal.CANCEL` on blank input after telling the user
#   which field was empty. Callers return to the main menu without touching the registry.


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_required_input(prompt: str, field_name: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)

    if response == "":
        print(f"\n{formatters.format_field_label(field_name)} cannot be empty.")
        return MenuSignal.CANCEL

    return response


# === often used messages ===


def display_not_found(record_label: str) -> None:
    print(f"\n{record_label} not found.")


def display_unexpected_error(error: Exception) -> None:
    print(f"\nError: {error}")
