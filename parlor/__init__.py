"""Game cores for tic-tac-toe and twenty-one - 100% UI-agnostic."""

from parlor.board import GridBoard, LINES, Mark
from parlor.cards import Card, Deck, Rank, Suit
from parlor.errors import EmptyDeckError, PreconditionViolation
from parlor.hand import Hand, Outcome, resolve_outcome

__all__ = [
    "GridBoard",
    "LINES",
    "Mark",
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "EmptyDeckError",
    "PreconditionViolation",
    "Hand",
    "Outcome",
    "resolve_outcome",
]
