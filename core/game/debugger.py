"""Debug overrides used to seed deterministic game scenarios."""

from dataclasses import dataclass
from enum import Enum, auto

from core.cards import Face
from core.hand import HandStatus


class Cheat(Enum):
    """Cheats that make the game deviate from standard blackjack."""

    # Every undrawn card becomes an Ace (forced faces still take precedence)
    ALL_ACES = auto()


@dataclass(frozen=True)
class GameDebugger:
    """
    Immutable bundle of initialization-time overrides.

    Attributes:
        num_cards_per_hand: Card count of each initial player hand. When set,
            normal dealing and the hand-count prompt are skipped entirely.
        statuses_for_each_hand: Statuses preset on the initial hands, applied
            from the first hand onwards. May be shorter than the hand list.
        cheats: Enabled cheats
        deck_card_faces: Faces forced onto the cards at the top of the deck
    """

    num_cards_per_hand: tuple[int, ...] | None = None
    statuses_for_each_hand: tuple[HandStatus | None, ...] = ()
    cheats: tuple[Cheat, ...] = ()
    deck_card_faces: tuple[Face, ...] = ()

    def __post_init__(self) -> None:
        """Validate override combinations."""
        if self.num_cards_per_hand is not None:
            if not self.num_cards_per_hand:
                raise ValueError("num_cards_per_hand must name at least one hand")
            if any(n < 1 for n in self.num_cards_per_hand):
                raise ValueError("each preset hand needs at least one card")
        if self.statuses_for_each_hand and self.num_cards_per_hand is None:
            raise ValueError("statuses_for_each_hand requires num_cards_per_hand")

    @property
    def presets_hands(self) -> bool:
        """Check if the initial hands bypass normal dealing."""
        return self.num_cards_per_hand is not None

    @property
    def is_active(self) -> bool:
        """Check if any override is set."""
        return bool(
            self.num_cards_per_hand is not None
            or self.statuses_for_each_hand
            or self.cheats
            or self.deck_card_faces
        )

    def has_cheat(self, cheat: Cheat) -> bool:
        return cheat in self.cheats
