"""Card and deck builders shared by the tests."""

from random import Random

from parlor.cards import Card, Deck
from parlor.errors import EmptyDeckError
from parlor.hand import Hand


class StackedDeck(Deck):
    """Deck that deals a fixed sequence of cards, first card first."""

    def __init__(self, cards: list[Card]) -> None:
        self._script = list(cards)
        super().__init__(rng=Random(0))

    def reset(self) -> None:
        self._cards = list(reversed(self._script))

    def draw(self) -> Card:
        if not self._cards:
            raise EmptyDeckError("Stacked deck exhausted")
        return self._cards.pop()


def cards(*specs: str) -> list[Card]:
    """Build cards from strings; Aces count 11 unless written as e.g. 'AS:1'."""
    result = []
    for spec in specs:
        text, _, ace_value = spec.partition(":")
        result.append(Card.from_string(text, ace_value=int(ace_value or 11)))
    return result


def hand_of(*specs: str) -> Hand:
    """Build a hand from card strings."""
    return Hand(cards=cards(*specs))
