"""Input collaborators that re-prompt until they get a valid answer."""

from typing import Callable, Sequence

from core.game.actions import Action

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]


def _read_int(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def prompt_action(
    actions: Sequence[Action],
    input_func: InputFunc = input,
    output: OutputFunc = print,
) -> Action:
    """
    Show a numbered menu and return the chosen action.

    Non-numeric or out-of-range answers print an error and ask again.
    """
    if not actions:
        raise ValueError("No actions to choose from")

    menu = "\n".join(f"({number}) {action}" for number, action in enumerate(actions, 1))
    while True:
        output(menu + "\n")
        choice = _read_int(input_func("Enter an option number: "))
        if choice is not None and 1 <= choice <= len(actions):
            return actions[choice - 1]
        output("> ERROR: Invalid option. Please try again.\n")


def prompt_num_hands(
    low: int,
    high: int,
    input_func: InputFunc = input,
    output: OutputFunc = print,
) -> int:
    """Ask for the number of hands to start with until it is within bounds."""
    while True:
        count = _read_int(
            input_func(f"Enter the number of hands to start with ({low} to {high}): ")
        )
        if count is not None and low <= count <= high:
            return count
        output("> ERROR: Invalid number of hands. Please try again.\n")
