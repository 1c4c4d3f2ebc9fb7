"""Hand scoring and round outcome for twenty-one."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator

from parlor.cards import Card

BUST_LIMIT = 21


class Outcome(Enum):
    """Result of a finished twenty-one round."""

    PLAYER_WINS = auto()
    DEALER_WINS = auto()
    TIE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass
class Hand:
    """A twenty-one hand whose total is the plain sum of its card values."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def total(self) -> int:
        """Sum of the card values. Ace values were fixed when dealt."""
        return sum(card.value for card in self.cards)

    @property
    def is_bust(self) -> bool:
        """Check if the hand has gone over 21."""
        return self.total > BUST_LIMIT

    @property
    def first_card(self) -> Card | None:
        """Return the face-up card, if any has been dealt."""
        return self.cards[0] if self.cards else None

    @property
    def hidden_count(self) -> int:
        """Number of cards kept face down in a partial reveal."""
        return max(len(self.cards) - 1, 0)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = "(BUST)" if self.is_bust else f"({self.total})"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, total={self.total})"


def resolve_outcome(player_hand: Hand, dealer_hand: Hand) -> Outcome:
    """
    Decide the winner of a finished round.

    A bust player loses even when the dealer has also gone bust.

    Returns:
        PLAYER_WINS, DEALER_WINS or TIE
    """
    if player_hand.is_bust:
        return Outcome.DEALER_WINS

    if dealer_hand.is_bust:
        return Outcome.PLAYER_WINS

    if player_hand.total > dealer_hand.total:
        return Outcome.PLAYER_WINS
    if dealer_hand.total > player_hand.total:
        return Outcome.DEALER_WINS
    return Outcome.TIE
