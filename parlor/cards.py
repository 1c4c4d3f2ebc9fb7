"""Card and Deck classes for twenty-one."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import TYPE_CHECKING, Iterator

from parlor.errors import EmptyDeckError

if TYPE_CHECKING:
    from parlor.hand import Hand

logger = logging.getLogger(__name__)

ACE_VALUES = (1, 11)


class Suit(Enum):
    """Card suits."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks, ordered low to high."""

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
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @property
    def is_face(self) -> bool:
        """Check if this rank is a Jack, Queen or King."""
        return self in (Rank.JACK, Rank.QUEEN, Rank.KING)

    @property
    def fixed_value(self) -> int | None:
        """
        Return the point value for ranks whose value never varies.

        Numeric ranks count their number and face cards count 10. Aces have
        no fixed value and return None.
        """
        if self.is_ace:
            return None
        if self.is_face:
            return 10
        return self.value


@dataclass(frozen=True, slots=True)
class Card:
    """
    Immutable playing card with its point value settled at creation.

    An Ace is worth either 1 or 11. The choice is made once, when the card
    object is built, and is not revisited when the hand changes.
    """

    rank: Rank
    suit: Suit
    value: int

    def __post_init__(self) -> None:
        """Reject values that do not belong to the rank."""
        if self.rank.is_ace:
            if self.value not in ACE_VALUES:
                raise ValueError(f"Ace must be worth 1 or 11, got {self.value}")
        elif self.value != self.rank.fixed_value:
            raise ValueError(
                f"{self.rank.name} must be worth {self.rank.fixed_value}, got {self.value}"
            )

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name}, value={self.value})"

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def create(cls, rank: Rank, suit: Suit, rng: Random | None = None) -> "Card":
        """
        Build a card, picking the Ace value uniformly from 1 and 11.

        Args:
            rank: Card rank
            suit: Card suit
            rng: Random number generator used for the Ace value

        Returns:
            The new card
        """
        if rank.is_ace:
            value = (rng or Random()).choice(ACE_VALUES)
        else:
            value = rank.fixed_value
        return cls(rank, suit, value)

    @classmethod
    def from_string(cls, s: str, ace_value: int = 11) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {str(rank): rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        rank = rank_map[rank_str]
        value = ace_value if rank.is_ace else rank.fixed_value
        return cls(rank, suit_map[suit_str], value)


class Deck:
    """
    A standard 52-card deck dealt by random selection.

    Cards are not kept in a shuffled order. Each draw picks one of the
    remaining cards uniformly at random and removes it, so no card can be
    dealt twice.
    """

    SIZE = 52

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize a full deck.

        Args:
            rng: Random number generator for Ace values and draws
        """
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Rebuild all 52 cards, drawing fresh Ace values."""
        self._cards = [
            Card.create(rank, suit, self._rng) for suit in Suit for rank in Rank
        ]

    def draw(self) -> Card:
        """
        Remove and return a uniformly random remaining card.

        Raises:
            EmptyDeckError: If every card has been drawn
        """
        if not self._cards:
            raise EmptyDeckError("Cannot draw from empty deck")
        card = self._cards.pop(self._rng.randrange(len(self._cards)))
        logger.debug("Drew %r, %d cards remaining", card, len(self._cards))
        return card

    def deal(self, hand: "Hand", count: int = 1) -> list[Card]:
        """
        Draw cards straight into a hand.

        Args:
            hand: Receiving hand, which owns the cards from now on
            count: Number of cards to deal

        Returns:
            The dealt cards in dealing order
        """
        dealt = []
        for _ in range(count):
            card = self.draw()
            hand.add_card(card)
            dealt.append(card)
        return dealt

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def remaining_count(self) -> int:
        """Return the number of cards not yet drawn."""
        return len(self._cards)
