"""Game engine and state management."""

from core.game.actions import Action, apply_action, legal_actions
from core.game.debugger import Cheat, GameDebugger
from core.game.events import GameEvent, EventType
from core.game.outcome import Outcome, resolve_outcome
from core.game.state import GameState
from core.game.engine import NO_ACTIVE_HAND, BlackjackGame

__all__ = [
    "Action",
    "apply_action",
    "legal_actions",
    "Cheat",
    "GameDebugger",
    "GameEvent",
    "EventType",
    "Outcome",
    "resolve_outcome",
    "GameState",
    "BlackjackGame",
    "NO_ACTIVE_HAND",
]
