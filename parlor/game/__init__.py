"""Round and match engines for both games."""

from parlor.game.events import EventEmitter, EventType, GameEvent
from parlor.game.state import MatchState, RoundState
from parlor.game.tic_tac_toe import GRAND_WINNER_SCORE, TicTacToeMatch
from parlor.game.twenty_one import TwentyOneGame

__all__ = [
    "EventEmitter",
    "EventType",
    "GameEvent",
    "MatchState",
    "RoundState",
    "GRAND_WINNER_SCORE",
    "TicTacToeMatch",
    "TwentyOneGame",
]
