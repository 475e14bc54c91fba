"""Blackjack game engine with state machine."""

import logging
from random import Random
from typing import Callable, Sequence

from transitions import Machine

from config import GameConfig, config
from core.cards import Card, Deck, Face
from core.exceptions import InvariantViolation
from core.hand import NO_TURN, Hand, HandState, HandStatus
from core.game.actions import Action, apply_action, legal_actions
from core.game.debugger import Cheat, GameDebugger
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.outcome import Outcome, OutcomeResolver, resolve_outcome
from core.game.state import GameState

logger = logging.getLogger(__name__)

# Collaborators supplied by whatever presents the game
ActionChooser = Callable[[Sequence[Action]], Action]
HandCountChooser = Callable[[int, int], int]
Renderer = Callable[[Sequence[Hand], int, Hand | None], None]

# Active-hand index passed to the renderer when no hand is being played
NO_ACTIVE_HAND = -1

_ACTION_EVENTS = {
    Action.HIT: EventType.PLAYER_HIT,
    Action.STAND: EventType.PLAYER_STAND,
    Action.DOUBLE_DOWN: EventType.PLAYER_DOUBLE,
    Action.SPLIT: EventType.PLAYER_SPLIT,
    Action.SURRENDER: EventType.PLAYER_SURRENDER,
}


class BlackjackGame:
    """
    A single game of blackjack using a state machine.

    The game owns the deck, the player hands and the dealer hand. Input and
    display are delegated to collaborators passed to ``start``; the engine
    itself never touches the console.

    Each turn is one sweep over the player hands. Hands created by a split
    during a sweep are first played in the following sweep.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "hands_dealt", "source": "initializing", "dest": "player_turns"},
        {"trigger": "players_done", "source": "player_turns", "dest": "dealer_resolution"},
        {"trigger": "dealer_done", "source": "dealer_resolution", "dest": "finished"},
    ]

    def __init__(
        self,
        debugger: GameDebugger | None = None,
        rules: GameConfig | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a new game and shuffle its deck.

        Args:
            debugger: Initialization-time overrides for test scenarios
            rules: House rules (uses the configured defaults if not provided)
            rng: Random number generator for reproducible games
        """
        self.rules = rules or config.game
        self.debugger = debugger or GameDebugger()
        self.events = EventEmitter()

        self.deck = Deck(rng=rng)
        self.deck.shuffle()
        self.events.emit_new(
            EventType.DECK_SHUFFLED,
            cards_remaining=self.deck.cards_remaining,
        )

        self.player_hands: list[Hand] = []
        self.dealer_hand = Hand()
        self.current_hand_index = 0
        self.current_turn = 0
        self.outcomes: list[Outcome] = []

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="initializing",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    @property
    def has_playable_hands(self) -> bool:
        """Check if any player hand can still take a decision."""
        return any(hand.can_be_played() for hand in self.player_hands)

    def start(
        self,
        choose_action: ActionChooser,
        choose_num_hands: HandCountChooser,
        render: Renderer | None = None,
        resolver: OutcomeResolver = resolve_outcome,
    ) -> list[Outcome]:
        """
        Play the whole game.

        Args:
            choose_action: Returns one element of the legal action list
            choose_num_hands: Returns a hand count within the given bounds
            render: Receives the player hands, the active hand index and the
                dealer hand (None while the player is deciding); the index is
                NO_ACTIVE_HAND for the final table
            resolver: Decides the outcome of each player hand

        Returns:
            One outcome per player hand, in hand order

        Raises:
            DeckEmptyError: if the deck runs out
            InvariantViolation: if a collaborator breaks its contract or the
                game was already started
        """
        if self.state != GameState.INITIALIZING:
            raise InvariantViolation(f"Game cannot be started from state {self.state}")

        self.events.emit_new(EventType.GAME_STARTED, debug=self.debugger.is_active)
        self._initialize(choose_num_hands)
        self.hands_dealt()

        self._play_turns(choose_action, render)
        self.players_done()

        self._play_dealer()
        self.dealer_done()

        self.outcomes = self._resolve(resolver)
        if render is not None:
            render(self.player_hands, NO_ACTIVE_HAND, self.dealer_hand)

        self.events.emit_new(
            EventType.GAME_ENDED,
            outcomes=[outcome.name for outcome in self.outcomes],
        )
        logger.info("Game finished after %d turn(s)", self.current_turn)
        return self.outcomes

    def _initialize(self, choose_num_hands: HandCountChooser) -> None:
        """Apply debug overrides, then deal the player and dealer hands."""
        debugger = self.debugger

        if debugger.has_cheat(Cheat.ALL_ACES):
            self.deck.force_all_faces(Face.ACE)
        if debugger.deck_card_faces:
            self.deck.force_faces(debugger.deck_card_faces)

        if debugger.presets_hands:
            self._initialize_preset_hands()
        else:
            low, high = self.rules.min_hands, self.rules.max_hands
            num_hands = choose_num_hands(low, high)
            if not low <= num_hands <= high:
                raise InvariantViolation(
                    f"Hand count {num_hands} is outside {low}..{high}"
                )
            for _ in range(num_hands):
                hand = Hand()
                self.player_hands.append(hand)
                self._deal(hand, self.rules.initial_cards)

        self._deal(self.dealer_hand, self.rules.initial_cards, owner="dealer")

        self.events.emit_new(
            EventType.HANDS_DEALT,
            num_hands=len(self.player_hands),
            cards_remaining=self.deck.cards_remaining,
        )
        logger.info("Dealt %d player hand(s)", len(self.player_hands))

        # Catch natural blackjacks before the first turn
        for index, hand in enumerate(self.player_hands):
            if hand.update_status(0) == HandStatus.BLACKJACK:
                self.events.emit_new(EventType.PLAYER_BLACKJACK, hand_index=index)

    def _initialize_preset_hands(self) -> None:
        statuses = self.debugger.statuses_for_each_hand
        for index, num_cards in enumerate(self.debugger.num_cards_per_hand or ()):
            hand = Hand()
            self.player_hands.append(hand)
            self._deal(hand, num_cards)
            if index < len(statuses) and statuses[index] is not None:
                # Preset statuses predate the first turn
                hand.state = HandState.of(statuses[index], NO_TURN)
        logger.debug("Preset hands: %s", self.player_hands)

    def _deal(self, hand: Hand, n: int, owner: str = "player") -> list[Card]:
        """Draw n cards into a hand."""
        cards = self.deck.draw(n)
        hand.add_cards(cards)
        for card in cards:
            self.events.emit_new(EventType.CARD_DEALT, card=str(card), hand=owner)
        return cards

    def _play_turns(self, choose_action: ActionChooser, render: Renderer | None) -> None:
        """Run sweeps over the player hands until none can be played."""
        self.current_turn = 0

        while self.has_playable_hands:
            self.events.emit_new(EventType.TURN_STARTED, turn=self.current_turn)
            logger.debug("Turn %d", self.current_turn)

            # Hands appended by a split wait for the next sweep
            for index in range(len(self.player_hands)):
                if self.player_hands[index].can_be_played():
                    self.current_hand_index = index
                    self._play_hand(index, choose_action, render)

            self.current_turn += 1

    def _play_hand(
        self,
        index: int,
        choose_action: ActionChooser,
        render: Renderer | None,
    ) -> None:
        hand = self.player_hands[index]
        if render is not None:
            render(self.player_hands, index, None)

        actions = legal_actions(hand, len(self.player_hands), self.rules.max_hands)
        action = choose_action(actions)
        if action not in actions:
            raise InvariantViolation(
                f"Chosen action {action!r} is not one of {[a.name for a in actions]}"
            )

        status = apply_action(action, self.player_hands, index, self.deck, self.current_turn)

        self.events.emit_new(
            EventType.ACTION_APPLIED,
            action=action.name,
            hand_index=index,
            turn=self.current_turn,
        )
        self.events.emit_new(
            _ACTION_EVENTS[action],
            hand_index=index,
            hand_value=hand.value,
            status=status.name if status else None,
        )
        if status == HandStatus.BUST:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_index=index)

    def _play_dealer(self) -> None:
        """Dealer draws until reaching the standing total."""
        while self.dealer_hand.value < self.rules.dealer_stands_on:
            self._deal(self.dealer_hand, 1, owner="dealer")
            self.events.emit_new(EventType.DEALER_HITS, hand_value=self.dealer_hand.value)

        # Dealer play is outside the counted turns
        self.dealer_hand.update_status(NO_TURN)

        if self.dealer_hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer_hand.value)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer_hand.value)
        logger.info("Dealer finished on %d", self.dealer_hand.value)

    def _resolve(self, resolver: OutcomeResolver) -> list[Outcome]:
        """Determine the outcome of every player hand."""
        outcomes = []
        for index, hand in enumerate(self.player_hands):
            outcome = resolver(hand, self.dealer_hand)
            outcomes.append(outcome)
            self.events.emit_new(
                EventType.HAND_RESOLVED,
                hand_index=index,
                outcome=outcome.name,
                hand_value=hand.value,
                dealer_value=self.dealer_hand.value,
            )
        return outcomes
