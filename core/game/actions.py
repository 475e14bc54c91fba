"""Player actions: legality rules and state transitions."""

import logging
from enum import Enum
from typing import Callable

from core.cards import Deck
from core.exceptions import InvariantViolation
from core.hand import Hand, HandStatus

logger = logging.getLogger(__name__)

# Hard cap on concurrent player hands
MAX_HANDS = 7


class Action(Enum):
    """Player decisions, valued by their menu label."""

    HIT = "hit"
    STAND = "stand"
    DOUBLE_DOWN = "double down"
    SPLIT = "split"
    SURRENDER = "surrender"

    def __str__(self) -> str:
        return self.value


def legal_actions(hand: Hand, num_hands: int, max_hands: int = MAX_HANDS) -> list[Action]:
    """
    Compute the ordered list of actions allowed for a playable hand.

    Args:
        hand: The hand being played
        num_hands: Number of player hands currently in play
        max_hands: Maximum number of concurrent player hands

    Returns:
        Legal actions in menu order
    """
    if not hand.can_be_played():
        return []

    actions: list[Action] = []

    # A split Ace takes no further cards
    if not hand.is_split_ace:
        actions.append(Action.HIT)

    actions.append(Action.STAND)

    if len(hand) == 2:
        actions.append(Action.DOUBLE_DOWN)

        if hand.is_pair and num_hands < max_hands:
            actions.append(Action.SPLIT)

        # No surrender after a split
        if hand.status != HandStatus.SPLIT:
            actions.append(Action.SURRENDER)

    return actions


Transition = Callable[[list[Hand], int, Deck, int], None]


def _hit(hands: list[Hand], index: int, deck: Deck, turn: int) -> None:
    hand = hands[index]
    hand.add_cards(deck.draw(1))
    hand.update_status(turn)


def _stand(hands: list[Hand], index: int, deck: Deck, turn: int) -> None:
    hands[index].update_status(turn, HandStatus.STAND)


def _double_down(hands: list[Hand], index: int, deck: Deck, turn: int) -> None:
    hand = hands[index]
    hand.add_cards(deck.draw(1))
    hand.update_status(turn, HandStatus.DOUBLE_DOWN)


def _split(hands: list[Hand], index: int, deck: Deck, turn: int) -> None:
    hand = hands[index]
    if len(hand) != 2:
        raise InvariantViolation(f"Cannot split a hand of {len(hand)} cards")

    first, second = deck.draw(2)
    new_hand = Hand(cards=[hand.cards.pop()])
    hands.append(new_hand)

    hand.add_card(first)
    new_hand.add_card(second)

    hand.update_status(turn, HandStatus.SPLIT)
    new_hand.update_status(turn, HandStatus.SPLIT)


def _surrender(hands: list[Hand], index: int, deck: Deck, turn: int) -> None:
    hands[index].update_status(turn, HandStatus.SURRENDER)


TRANSITIONS: dict[Action, Transition] = {
    Action.HIT: _hit,
    Action.STAND: _stand,
    Action.DOUBLE_DOWN: _double_down,
    Action.SPLIT: _split,
    Action.SURRENDER: _surrender,
}


def apply_action(
    action: Action,
    hands: list[Hand],
    index: int,
    deck: Deck,
    turn: int,
) -> HandStatus | None:
    """
    Apply an action to the hand at ``index``.

    May draw from the deck and, for a split, append a new hand to ``hands``.

    Returns:
        The new status of the played hand

    Raises:
        InvariantViolation: if the action has no transition
        DeckEmptyError: if the deck runs out
    """
    try:
        transition = TRANSITIONS[action]
    except (KeyError, TypeError):
        raise InvariantViolation(f"Action does not match any transition: {action!r}") from None

    transition(hands, index, deck, turn)
    hand = hands[index]
    logger.debug("Hand %d: %s -> %s", index, action.name, hand)
    return hand.status
