"""Pytest fixtures for the game core tests."""

import pytest
from random import Random

from parlor.board import GridBoard, Mark
from parlor.cards import Deck
from parlor.hand import Hand
from parlor.strategy import DealerPolicy, OpponentStrategy

from helpers import StackedDeck, cards, hand_of


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A full deck."""
    return Deck(rng=rng)


@pytest.fixture
def stacked_deck():
    """Factory for a deck_factory that deals the given cards in order."""

    def factory(*specs: str):
        return lambda _rng: StackedDeck(cards(*specs))

    return factory


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def twenty_one_hand():
    """A ten and an Ace worth 11."""
    return hand_of("KH", "AS:11")


@pytest.fixture
def bust_hand():
    """Three ten-value cards."""
    return hand_of("10S", "JH", "KC")


@pytest.fixture
def board():
    """An empty board."""
    return GridBoard()


@pytest.fixture
def strategy(rng):
    """Opponent strategy with a seeded fallback."""
    return OpponentStrategy(rng=rng)


@pytest.fixture
def dealer_policy():
    """The dealer's stay-on-17 policy."""
    return DealerPolicy()


@pytest.fixture
def marks():
    """(computer mark, human mark)."""
    return Mark.O, Mark.X
