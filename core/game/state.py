"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Game state machine states.

    Flow: INITIALIZING → PLAYER_TURNS → DEALER_RESOLUTION → FINISHED
    """

    # Deck built and shuffled, hands being dealt
    INITIALIZING = auto()

    # Turn loop over the player hands
    PLAYER_TURNS = auto()

    # Dealer draws to 17
    DEALER_RESOLUTION = auto()

    # Outcomes determined
    FINISHED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

