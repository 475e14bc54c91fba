"""Pytest fixtures for blackjack engine tests."""

from random import Random

import pytest
from hypothesis import strategies as st

from core.cards import Card, Deck, Face, Suit
from core.hand import Hand, HandState
from core.game import Action, BlackjackGame, GameDebugger


def make_hand(*faces: Face, state: HandState | None = None) -> Hand:
    """Build a hand from faces, cycling through suits."""
    suits = list(Suit)
    hand = Hand(cards=[Card(face, suits[i % 4]) for i, face in enumerate(faces)])
    if state is not None:
        hand.state = state
    return hand


def scripted(*actions: Action):
    """Action chooser returning the given actions in order, then STAND."""
    queue = list(actions)

    def choose(legal):
        return queue.pop(0) if queue else Action.STAND

    return choose


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def fresh_deck(rng):
    """An unshuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def empty_hand():
    """An empty player hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return make_hand(Face.ACE, Face.KING)


@pytest.fixture
def pair_8s_hand():
    """A pair of 8s hand."""
    return make_hand(Face.EIGHT, Face.EIGHT)


@pytest.fixture
def bust_hand():
    """A busted hand (K-Q-5)."""
    return make_hand(Face.KING, Face.QUEEN, Face.FIVE)


@pytest.fixture
def make_game(rng):
    """Factory for games with debug overrides."""

    def factory(**overrides) -> BlackjackGame:
        return BlackjackGame(debugger=GameDebugger(**overrides), rng=rng)

    return factory


@st.composite
def card_strategy(draw):
    """Generate a random card."""
    face = draw(st.sampled_from(list(Face)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(face, suit)


@st.composite
def hand_strategy(draw, min_cards=1, max_cards=11):
    """Generate a random hand."""
    cards = draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards))
    return Hand(cards=cards)
