"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Deck, Face, Suit
from core.exceptions import BlackjackError, DeckEmptyError, InvariantViolation
from core.hand import Hand, HandState, HandStatus

__all__ = [
    "Card",
    "Deck",
    "Face",
    "Suit",
    "Hand",
    "HandState",
    "HandStatus",
    "BlackjackError",
    "DeckEmptyError",
    "InvariantViolation",
]
