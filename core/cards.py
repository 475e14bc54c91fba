"""Card and Deck classes - immutable cards drawn from a single 52-card deck."""

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterable, Iterator

from core.exceptions import DeckEmptyError


class Suit(Enum):
    """Card suits, in deck enumeration order."""

    SPADES = "♠"
    CLUBS = "♣"
    HEARTS = "♥"
    DIAMONDS = "♦"

    def __str__(self) -> str:
        return self.value


class Face(Enum):
    """Card faces (ranks) with blackjack values."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if self == Face.ACE:
            return "A"
        if self.value <= 10:
            return str(self.value)
        return {
            Face.JACK: "J",
            Face.QUEEN: "Q",
            Face.KING: "K",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self == Face.ACE:
            return 11
        return min(self.value, 10)

    @property
    def is_ace(self) -> bool:
        """Check if this face is an Ace."""
        return self == Face.ACE

    @property
    def token(self) -> str:
        """Two-character display token, right aligned."""
        return f"{self!s:>2}"


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    face: Face
    suit: Suit

    def __str__(self) -> str:
        return f"{self.face}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.face.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.face.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.face.is_ace

    @property
    def is_ten_value(self) -> bool:
        """Check if this card has a value of 10."""
        return self.value == 10

    @property
    def token(self) -> str:
        """Four-character display token, e.g. '♠  A' or '♥ 10'."""
        return f"{self.suit} {self.face.token}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh', '10d'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        face = parse_face(s[:-1])
        suit_str = s[-1]

        suit_map = {
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
        }
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(face, suit_map[suit_str])


def parse_face(s: str) -> Face:
    """Parse a face from a string like 'A', '10', 'T' or 'king'."""
    s = s.strip().upper()
    face_map = {str(face): face for face in Face}
    face_map["T"] = Face.TEN
    if s in face_map:
        return face_map[s]
    try:
        return Face[s]
    except KeyError:
        raise ValueError(f"Invalid face: {s}") from None


class Deck:
    """
    A standard 52-card deck used as a draw-once stack.

    Cards before the cursor have been drawn and are never returned again.
    The deck is never replenished or reshuffled back to full.
    """

    SIZE = 52

    def __init__(self, rng: Random | None = None) -> None:
        """Initialize a new deck in suit-major, face-minor order."""
        self._rng = rng or Random()
        self._cards: list[Card] = [Card(face, suit) for suit in Suit for face in Face]
        self._top = 0

    def shuffle(self) -> None:
        """
        Shuffle all 52 slots in place with Fisher-Yates.

        The cursor is left untouched.
        """
        for i in range(len(self._cards) - 1, 0, -1):
            j = self._rng.randint(0, i)
            self._cards[i], self._cards[j] = self._cards[j], self._cards[i]

    def draw(self, n: int = 1) -> list[Card]:
        """
        Draw the next n cards from the top of the deck.

        Raises:
            DeckEmptyError: if fewer than n cards remain
        """
        if n < 0:
            raise ValueError("Cannot draw a negative number of cards")
        if n > self.cards_remaining:
            raise DeckEmptyError(n, self.cards_remaining)

        drawn = self._cards[self._top:self._top + n]
        self._top += n
        return drawn

    def force_faces(self, faces: Iterable[Face]) -> None:
        """Replace the faces of the cards at the top of the deck (debug only)."""
        for offset, face in enumerate(faces):
            index = self._top + offset
            if index >= len(self._cards):
                raise DeckEmptyError(offset + 1, self.cards_remaining)
            self._cards[index] = Card(face, self._cards[index].suit)

    def force_all_faces(self, face: Face) -> None:
        """Replace the face of every undrawn card (debug only)."""
        self.force_faces([face] * self.cards_remaining)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards) - self._top

    @property
    def cards_drawn(self) -> int:
        """Return the number of cards drawn so far."""
        return self._top

    def __len__(self) -> int:
        return self.cards_remaining

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards[self._top:])
