"""Tests for the console input collaborators."""

import pytest

from console.prompts import prompt_action, prompt_num_hands
from core.game.actions import Action


def answers(*values: str):
    queue = list(values)
    return lambda prompt: queue.pop(0)


class TestPromptAction:
    """Tests for the numbered action menu."""

    def test_returns_chosen_action(self):
        out = []
        actions = [Action.HIT, Action.STAND, Action.DOUBLE_DOWN]
        assert prompt_action(actions, answers("3"), out.append) == Action.DOUBLE_DOWN
        assert out[0] == "(1) hit\n(2) stand\n(3) double down\n"

    def test_reprompts_on_bad_input(self):
        out = []
        actions = [Action.HIT, Action.STAND]
        choice = prompt_action(actions, answers("x", "0", "3", " 2 "), out.append)
        assert choice == Action.STAND
        errors = [line for line in out if line.startswith("> ERROR")]
        assert len(errors) == 3

    def test_no_actions(self):
        with pytest.raises(ValueError):
            prompt_action([], answers(), print)


class TestPromptNumHands:
    """Tests for the hand-count prompt."""

    def test_in_range(self):
        assert prompt_num_hands(1, 7, answers("4"), print) == 4

    def test_reprompts_until_in_range(self):
        out = []
        assert prompt_num_hands(1, 7, answers("8", "", "-1", "seven", "7"), out.append) == 7
        assert len(out) == 4
