"""Per-hand outcome determination once the dealer has played."""

from enum import Enum, auto
from typing import Protocol

from core.hand import Hand


class Outcome(Enum):
    """Result of a finished player hand against the dealer."""

    WIN = auto()
    LOSE = auto()
    PUSH = auto()
    SURRENDERED = auto()

    def __str__(self) -> str:
        return self.name.title()


class OutcomeResolver(Protocol):
    """
    Extension point for outcome rules.

    Receives a finished player hand and the resolved dealer hand. Payout and
    scoring are left to implementations; the engine only records outcomes.
    """

    def __call__(self, hand: Hand, dealer_hand: Hand) -> Outcome: ...


def resolve_outcome(hand: Hand, dealer_hand: Hand) -> Outcome:
    """
    Default outcome rules.

    Returns:
        SURRENDERED for a surrendered hand, LOSE for a busted hand, WIN when
        the dealer busts, otherwise a comparison where a Blackjack beats any
        other 21.
    """
    if hand.is_surrendered:
        return Outcome.SURRENDERED

    # Player busts always loses, even if the dealer busts too
    if hand.value > 21:
        return Outcome.LOSE

    if dealer_hand.value > 21:
        return Outcome.WIN

    if hand.is_blackjack and dealer_hand.is_blackjack:
        return Outcome.PUSH
    if hand.is_blackjack:
        return Outcome.WIN
    if dealer_hand.is_blackjack:
        return Outcome.LOSE

    if hand.value > dealer_hand.value:
        return Outcome.WIN
    if dealer_hand.value > hand.value:
        return Outcome.LOSE
    return Outcome.PUSH
