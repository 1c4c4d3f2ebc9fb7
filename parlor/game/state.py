"""State machine states for both games."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Twenty-one round states.

    Flow: WAITING → PLAYER_TURN → DEALER_TURN → ROUND_COMPLETE → PLAYER_TURN ...
    A player bust goes straight from PLAYER_TURN to ROUND_COMPLETE.
    """

    # Before the first deal
    WAITING = auto()

    # Player hits or stays
    PLAYER_TURN = auto()

    # Dealer policy applies
    DEALER_TURN = auto()

    # Outcome known, ready for the next deal
    ROUND_COMPLETE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class MatchState(Enum):
    """
    Tic-tac-toe match states.

    Turns alternate between HUMAN_TURN and COMPUTER_TURN until the board has
    a winner or is full, then ROUND_OVER. A grand winner ends the match.
    """

    HUMAN_TURN = auto()
    COMPUTER_TURN = auto()
    ROUND_OVER = auto()
    MATCH_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()
