"""Participants of both games."""

from dataclasses import dataclass, field
from random import Random

from parlor.board import Mark
from parlor.cards import Card
from parlor.hand import Hand

OPPONENT_NAMES = ("R2D2", "Hal", "Chappie", "Sonny", "Number 5")


def pick_opponent_name(rng: Random | None = None) -> str:
    """Pick a name for the computer-controlled participant."""
    return (rng or Random()).choice(OPPONENT_NAMES)


@dataclass
class GridPlayer:
    """A tic-tac-toe participant and their match score."""

    name: str
    mark: Mark
    score: int = 0


@dataclass
class CardPlayer:
    """A twenty-one participant owning one hand."""

    name: str
    hand: Hand = field(default_factory=Hand)

    def new_hand(self) -> Hand:
        """Replace the hand with an empty one for a new round."""
        self.hand = Hand()
        return self.hand


@dataclass
class Dealer(CardPlayer):
    """The house. Shows only its first card until the round is resolved."""

    def partial_view(self) -> tuple[Card | None, int]:
        """
        Return what the player may see of the dealer's hand.

        Returns:
            (face-up card, number of face-down cards)
        """
        return self.hand.first_card, self.hand.hidden_count
