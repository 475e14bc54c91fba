"""Tests for Card and Deck classes."""

from collections import Counter
from random import Random

import pytest
from hypothesis import given, strategies as st

from core.cards import Card, Deck, Face, Suit, parse_face
from core.exceptions import DeckEmptyError


class TestCard:
    """Tests for the Card class."""

    def test_card_creation(self):
        """Test creating a card."""
        card = Card(Face.ACE, Suit.SPADES)
        assert card.face == Face.ACE
        assert card.suit == Suit.SPADES

    def test_card_immutability(self):
        """Test that cards are immutable."""
        card = Card(Face.ACE, Suit.SPADES)
        with pytest.raises(AttributeError):
            card.face = Face.KING

    def test_card_value(self):
        """Test card blackjack values."""
        assert Card(Face.TWO, Suit.HEARTS).value == 2
        assert Card(Face.NINE, Suit.HEARTS).value == 9
        assert Card(Face.TEN, Suit.HEARTS).value == 10
        assert Card(Face.JACK, Suit.HEARTS).value == 10
        assert Card(Face.QUEEN, Suit.HEARTS).value == 10
        assert Card(Face.KING, Suit.HEARTS).value == 10
        assert Card(Face.ACE, Suit.HEARTS).value == 11

    def test_card_is_ace(self):
        """Test ace detection."""
        assert Card(Face.ACE, Suit.SPADES).is_ace
        assert not Card(Face.KING, Suit.SPADES).is_ace

    def test_card_is_ten_value(self):
        """Test ten-value detection."""
        for face in (Face.TEN, Face.JACK, Face.QUEEN, Face.KING):
            assert Card(face, Suit.CLUBS).is_ten_value
        assert not Card(Face.NINE, Suit.CLUBS).is_ten_value
        assert not Card(Face.ACE, Suit.CLUBS).is_ten_value

    def test_card_token(self):
        """Test four-character display tokens."""
        assert Card(Face.ACE, Suit.SPADES).token == "♠  A"
        assert Card(Face.TEN, Suit.HEARTS).token == "♥ 10"
        assert Card(Face.QUEEN, Suit.DIAMONDS).token == "♦  Q"
        assert all(len(Card(face, Suit.CLUBS).token) == 4 for face in Face)

    def test_card_from_string(self):
        """Test creating cards from strings."""
        assert Card.from_string("AS") == Card(Face.ACE, Suit.SPADES)
        assert Card.from_string("2H") == Card(Face.TWO, Suit.HEARTS)
        assert Card.from_string("10D") == Card(Face.TEN, Suit.DIAMONDS)
        assert Card.from_string("Kc") == Card(Face.KING, Suit.CLUBS)
        assert Card.from_string("A♠") == Card(Face.ACE, Suit.SPADES)

    def test_card_from_string_invalid(self):
        """Test invalid card strings are rejected."""
        with pytest.raises(ValueError):
            Card.from_string("Z")
        with pytest.raises(ValueError):
            Card.from_string("1S")
        with pytest.raises(ValueError):
            Card.from_string("AX")

    def test_parse_face(self):
        """Test parsing faces by symbol or name."""
        assert parse_face("a") == Face.ACE
        assert parse_face("T") == Face.TEN
        assert parse_face("king") == Face.KING
        with pytest.raises(ValueError):
            parse_face("11")

    def test_card_hash(self):
        """Test that cards can be used in sets/dicts."""
        cards = {Card(Face.ACE, Suit.SPADES), Card(Face.ACE, Suit.SPADES)}
        assert len(cards) == 1


class TestDeck:
    """Tests for the Deck class."""

    def test_new_deck_has_52_unique_cards(self, fresh_deck):
        """Test a fresh deck holds every face and suit once."""
        cards = list(fresh_deck)
        assert len(cards) == 52
        assert len(set(cards)) == 52

    def test_new_deck_is_suit_major(self, fresh_deck):
        """Test the fresh deck enumerates faces within each suit."""
        cards = list(fresh_deck)
        assert cards[0] == Card(Face.ACE, Suit.SPADES)
        assert cards[12] == Card(Face.KING, Suit.SPADES)
        assert cards[13] == Card(Face.ACE, Suit.CLUBS)
        assert cards[51] == Card(Face.KING, Suit.DIAMONDS)
        expected = [Card(face, suit) for suit in Suit for face in Face]
        assert cards == expected

    def test_shuffle_preserves_cards(self, fresh_deck):
        """Test shuffling reorders without adding or losing cards."""
        before = Counter(fresh_deck)
        fresh_deck.shuffle()
        after = list(fresh_deck)
        assert Counter(after) == before
        assert after != [Card(face, suit) for suit in Suit for face in Face]

    def test_shuffle_does_not_move_cursor(self, fresh_deck):
        """Test shuffling leaves drawn cards drawn."""
        fresh_deck.draw(5)
        fresh_deck.shuffle()
        assert fresh_deck.cards_drawn == 5
        assert fresh_deck.cards_remaining == 47

    def test_shuffle_is_reproducible(self):
        """Test equal seeds produce equal orders."""
        deck1 = Deck(rng=Random(7))
        deck2 = Deck(rng=Random(7))
        deck1.shuffle()
        deck2.shuffle()
        assert list(deck1) == list(deck2)

    def test_draw_takes_from_top(self, fresh_deck):
        """Test draw returns cards in order from the cursor."""
        first = fresh_deck.draw(2)
        assert first == [Card(Face.ACE, Suit.SPADES), Card(Face.TWO, Suit.SPADES)]
        assert fresh_deck.draw() == [Card(Face.THREE, Suit.SPADES)]
        assert len(fresh_deck) == 49

    def test_draw_all_cards(self, deck):
        """Test every card of the deck can be drawn."""
        cards = deck.draw(52)
        assert len(set(cards)) == 52
        assert deck.cards_remaining == 0

    def test_draw_from_empty_deck(self, deck):
        """Test drawing from an exhausted deck raises."""
        deck.draw(52)
        with pytest.raises(DeckEmptyError):
            deck.draw()

    def test_overdraw_leaves_cursor(self, deck):
        """Test a failed draw does not consume cards."""
        deck.draw(50)
        with pytest.raises(DeckEmptyError) as exc_info:
            deck.draw(3)
        assert exc_info.value.requested == 3
        assert exc_info.value.remaining == 2
        assert len(deck.draw(2)) == 2

    def test_force_faces(self, fresh_deck):
        """Test forcing faces at the top of the deck keeps suits."""
        fresh_deck.force_faces([Face.KING, Face.KING])
        assert fresh_deck.draw(3) == [
            Card(Face.KING, Suit.SPADES),
            Card(Face.KING, Suit.SPADES),
            Card(Face.THREE, Suit.SPADES),
        ]

    def test_force_all_faces(self, deck):
        """Test forcing every undrawn card to Ace."""
        deck.draw(2)
        deck.force_all_faces(Face.ACE)
        assert all(card.is_ace for card in deck)
        assert len(deck) == 50

    @given(st.integers(min_value=0, max_value=52), st.integers())
    def test_draws_never_repeat(self, n, seed):
        """Test drawing N then the rest never repeats a card."""
        deck = Deck(rng=Random(seed))
        deck.shuffle()
        cards = deck.draw(n) + deck.draw(52 - n)
        assert len(set(cards)) == 52
