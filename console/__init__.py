"""Console front end: renders hands and prompts the player."""

from console.prompts import prompt_action, prompt_num_hands
from console.render import ConsoleRenderer, hand_lines, render_table

__all__ = [
    "ConsoleRenderer",
    "hand_lines",
    "render_table",
    "prompt_action",
    "prompt_num_hands",
]
