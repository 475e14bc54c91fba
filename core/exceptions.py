"""Exceptions raised by the blackjack engine."""


class BlackjackError(Exception):
    """Base class for engine errors."""


class DeckEmptyError(BlackjackError):
    """Raised when more cards are requested than remain in the deck."""

    def __init__(self, requested: int, remaining: int) -> None:
        self.requested = requested
        self.remaining = remaining
        super().__init__(
            f"Cannot draw {requested} card(s): only {remaining} left in the deck"
        )


class InvariantViolation(BlackjackError):
    """Raised when the engine reaches a state that should be impossible."""
