"""Hand evaluation and status bookkeeping for blackjack."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

from core.cards import Card


class HandStatus(Enum):
    """
    Statuses a hand may take.

    Values are six-character shorthand tokens used for console alignment.
    """

    STAND = "[STND]"
    DOUBLE_DOWN = "[DBLD]"
    SURRENDER = "[SURR]"
    BUST = "[BUST]"
    TWENTY_ONE = "[ 21 ]"
    BLACKJACK = "[ BJ ]"
    SPLIT = "-SPLT-"

    def __str__(self) -> str:
        return self.value


# Turn value used when a status is set outside the counted turn loop
NO_TURN = -1


@dataclass(frozen=True, slots=True)
class HandState:
    """
    Status of a hand as a single tagged value.

    ``kind`` is None while the hand is unset (still playable). ``declared_turn``
    is only meaningful for SPLIT, where it records the turn of the split.
    """

    kind: HandStatus | None = None
    declared_turn: int = NO_TURN

    @classmethod
    def unset(cls) -> "HandState":
        return cls()

    @classmethod
    def split(cls, declared_turn: int) -> "HandState":
        return cls(HandStatus.SPLIT, declared_turn)

    @classmethod
    def terminal(cls, kind: HandStatus) -> "HandState":
        if kind == HandStatus.SPLIT:
            raise ValueError("SPLIT is not a terminal status")
        return cls(kind)

    @classmethod
    def of(cls, kind: HandStatus | None, turn: int = NO_TURN) -> "HandState":
        """Build the state for an arbitrary status."""
        if kind is None:
            return cls.unset()
        if kind == HandStatus.SPLIT:
            return cls.split(turn)
        return cls.terminal(kind)

    @property
    def is_split(self) -> bool:
        return self.kind == HandStatus.SPLIT

    @property
    def is_playable(self) -> bool:
        return self.kind is None or self.kind == HandStatus.SPLIT


@dataclass
class Hand:
    """A blackjack hand with value calculation and status."""

    cards: list[Card] = field(default_factory=list)
    state: HandState = field(default_factory=HandState.unset)

    def add_cards(self, cards: Iterable[Card]) -> None:
        """Append cards to the hand. Status is not recomputed."""
        self.cards.extend(cards)

    def add_card(self, card: Card) -> None:
        """Append a single card to the hand."""
        self.cards.append(card)

    @property
    def status(self) -> HandStatus | None:
        """Current status, or None if unset."""
        return self.state.kind

    @property
    def value(self) -> int:
        """
        Calculate the hand value.

        Returns the highest value that doesn't bust, or the lowest bust value.
        """
        total = 0
        aces = 0

        for card in self.cards:
            if card.is_ace:
                aces += 1
            total += card.value

        # Reduce aces from 11 to 1 as needed
        while total > 21 and aces > 0:
            total -= 10
            aces -= 1

        return total

    def update_status(self, turn: int, new_status: HandStatus | None = None) -> HandStatus | None:
        """
        Recompute the status of this hand for the given turn.

        With ``new_status`` the status is set unconditionally first, then the
        automatic recompute runs so an immediate bust or 21 is caught.

        The automatic recompute only runs while the hand is unset, SPLIT or
        DOUBLE_DOWN; any other status is final.

        Returns:
            The resulting status
        """
        if new_status is not None:
            self.state = HandState.of(new_status, turn)

        if not (self.state.is_playable or self.state.kind == HandStatus.DOUBLE_DOWN):
            return self.status

        hand_value = self.value
        if hand_value == 21:
            if len(self.cards) == 2:
                # A ten paired with a split Ace is a 21, not a Blackjack
                if self.state.is_split and any(card.is_ace for card in self.cards):
                    self.state = HandState.terminal(HandStatus.TWENTY_ONE)
                else:
                    self.state = HandState.terminal(HandStatus.BLACKJACK)
            else:
                self.state = HandState.terminal(HandStatus.TWENTY_ONE)
        elif hand_value > 21:
            self.state = HandState.terminal(HandStatus.BUST)
        elif self.state.is_split and self.state.declared_turn != turn:
            self.state = HandState.unset()

        return self.status

    def can_be_played(self) -> bool:
        """Check if the hand can still take decisions."""
        return self.state.is_playable

    @property
    def is_pair(self) -> bool:
        """Check if the hand is exactly two cards of equal point value."""
        return len(self.cards) == 2 and self.cards[0].value == self.cards[1].value

    @property
    def is_split_ace(self) -> bool:
        """Check if this is a just-split hand carrying an Ace."""
        return (
            self.state.is_split
            and len(self.cards) == 2
            and self.cards[0].is_ace
        )

    @property
    def is_busted(self) -> bool:
        return self.status == HandStatus.BUST

    @property
    def is_blackjack(self) -> bool:
        return self.status == HandStatus.BLACKJACK

    @property
    def is_surrendered(self) -> bool:
        return self.status == HandStatus.SURRENDER

    @property
    def footer(self) -> str:
        """Six-character status/value token shown under the hand."""
        if self.status is None:
            return f"   {self.value:>2} "
        if self.status == HandStatus.SPLIT:
            return f" * {self.value:>2} "
        return str(self.status)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        status_str = self.status.name if self.status else "PLAYING"
        return f"{cards_str} ({self.value}, {status_str})"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value}, status={self.status})"
