"""Tic-tac-toe match engine with state machine."""

import logging
from random import Random
from typing import Callable

from transitions import Machine

from config import config
from parlor.board import GridBoard, Mark
from parlor.errors import InvalidMarkError
from parlor.game.events import EventEmitter, EventType, GameEvent
from parlor.game.state import MatchState
from parlor.participants import GridPlayer, pick_opponent_name
from parlor.strategy.opponent import Move, OpponentStrategy

logger = logging.getLogger(__name__)

# First player to win this many rounds takes the match.
GRAND_WINNER_SCORE = 5


class TicTacToeMatch:
    """
    A human against the heuristic opponent, played until one reaches
    GRAND_WINNER_SCORE round wins.

    Each round is played on a freshly built board. Whoever moved first in the
    match moves first in every round of it.
    """

    # State machine states
    STATES = [s.name.lower() for s in MatchState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "pass_to_computer", "source": "human_turn", "dest": "computer_turn"},
        {"trigger": "pass_to_human", "source": "computer_turn", "dest": "human_turn"},
        {"trigger": "finish_round", "source": ["human_turn", "computer_turn"], "dest": "round_over"},
        {"trigger": "finish_match", "source": "round_over", "dest": "match_over"},
        {"trigger": "open_human_turn", "source": ["round_over", "match_over"], "dest": "human_turn"},
        {"trigger": "open_computer_turn", "source": ["round_over", "match_over"], "dest": "computer_turn"},
    ]

    def __init__(
        self,
        human_name: str,
        human_mark: Mark,
        human_first: bool = True,
        rng: Random | None = None,
        opponent_name: str | None = None,
    ) -> None:
        """
        Initialize a match and its first round.

        Args:
            human_name: Name of the human player
            human_mark: X or O; the computer takes the other one
            human_first: Whether the human opens every round
            rng: Random number generator for reproducible matches
            opponent_name: Computer's name; picked at random when omitted

        Raises:
            InvalidMarkError: If human_mark is not X or O
        """
        if not human_mark.is_player_mark:
            raise InvalidMarkError(f"Human must play X or O, got {human_mark!r}")

        self._rng = rng or config.random.make_rng()
        self.strategy = OpponentStrategy(rng=self._rng)
        self.human = GridPlayer(human_name, human_mark)
        self.computer = GridPlayer(
            opponent_name or pick_opponent_name(self._rng), human_mark.other
        )
        self.human_first = human_first
        self.board = GridBoard()
        self.round_winner: Mark | None = None
        self.rounds_played = 1
        self.events = EventEmitter()

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="human_turn" if human_first else "computer_turn",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

        logger.info(
            "Match started: %s (%s) vs %s (%s)",
            self.human.name,
            self.human.mark,
            self.computer.name,
            self.computer.mark,
        )
        self.events.emit_new(
            EventType.MATCH_STARTED,
            human=self.human.name,
            computer=self.computer.name,
            human_mark=str(self.human.mark),
        )
        self.events.emit_new(EventType.ROUND_STARTED, round=self.rounds_played)

    @property
    def state(self) -> MatchState:
        """Get current match state as enum."""
        return MatchState[self._machine_state.upper()]  # type: ignore

    @property
    def current_mark(self) -> Mark | None:
        """Mark of the player to move, or None between rounds."""
        if self.state == MatchState.HUMAN_TURN:
            return self.human.mark
        if self.state == MatchState.COMPUTER_TURN:
            return self.computer.mark
        return None

    @property
    def grand_winner(self) -> GridPlayer | None:
        """The player who has reached GRAND_WINNER_SCORE, if any."""
        for player in (self.human, self.computer):
            if player.score >= GRAND_WINNER_SCORE:
                return player
        return None

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to match events."""
        self.events.subscribe(handler, event_type)

    def _reject(self, message: str) -> None:
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=message,
            state=self.state.name,
        )

    def human_move(self, cell: int) -> bool:
        """
        Mark a cell for the human.

        Args:
            cell: One of board.unmarked_cells()

        Returns:
            True if the move was made
        """
        if self.state != MatchState.HUMAN_TURN:
            self._reject("Not the human's turn")
            return False
        if cell not in self.board.unmarked_cells():
            self._reject(f"Cell {cell} is not available")
            return False

        self.board.occupy(cell, self.human.mark)
        self.events.emit_new(
            EventType.CELL_MARKED,
            cell=cell,
            mark=str(self.human.mark),
            player=self.human.name,
        )
        logger.debug("%s marks %d", self.human.name, cell)

        if not self._end_round_if_over():
            self.pass_to_computer()
        return True

    def computer_move(self) -> Move | None:
        """
        Let the opponent strategy pick and mark a cell.

        Returns:
            The move made, or None when it is not the computer's turn
        """
        if self.state != MatchState.COMPUTER_TURN:
            self._reject("Not the computer's turn")
            return None

        move = self.strategy.choose(self.board, self.computer.mark, self.human.mark)
        self.board.occupy(move.cell, self.computer.mark)
        self.events.emit_new(
            EventType.OPPONENT_MOVED,
            cell=move.cell,
            kind=move.kind.name,
            mark=str(self.computer.mark),
            player=self.computer.name,
        )
        logger.debug("%s marks %d (%s)", self.computer.name, move.cell, move.kind)

        if not self._end_round_if_over():
            self.pass_to_human()
        return move

    def _player_for(self, mark: Mark) -> GridPlayer:
        return self.human if mark is self.human.mark else self.computer

    def _end_round_if_over(self) -> bool:
        """Score a finished round. Returns False while the round goes on."""
        if not self.board.is_terminal:
            return False

        self.round_winner = self.board.winner
        self.finish_round()

        winner = None
        if self.round_winner is not None:
            winner = self._player_for(self.round_winner)
            winner.score += 1
            self.events.emit_new(
                EventType.SCORE_CHANGED,
                human=self.human.score,
                computer=self.computer.score,
            )

        self.events.emit_new(
            EventType.ROUND_ENDED,
            round=self.rounds_played,
            winner=winner.name if winner else None,
        )
        logger.info(
            "Round %d: %s (%d-%d)",
            self.rounds_played,
            f"{winner.name} won" if winner else "tie",
            self.human.score,
            self.computer.score,
        )

        grand_winner = self.grand_winner
        if grand_winner is not None:
            self.finish_match()
            self.events.emit_new(EventType.MATCH_ENDED, winner=grand_winner.name)
            logger.info("Match won by %s", grand_winner.name)
        return True

    def _open_first_turn(self) -> None:
        if self.human_first:
            self.open_human_turn()
        else:
            self.open_computer_turn()

    def next_round(self) -> bool:
        """
        Start the next round of the match on a fresh board.

        Returns:
            True if a round was started
        """
        if self.state != MatchState.ROUND_OVER:
            self._reject("Round is not over")
            return False

        self.board = GridBoard()
        self.round_winner = None
        self.rounds_played += 1
        self._open_first_turn()
        self.events.emit_new(EventType.ROUND_STARTED, round=self.rounds_played)
        return True

    def new_match(
        self,
        human_mark: Mark | None = None,
        human_first: bool | None = None,
    ) -> bool:
        """
        Reset scores and start over, optionally with new choices.

        Args:
            human_mark: New mark for the human; the computer takes the other
            human_first: New choice of who opens each round

        Returns:
            True if a new match was started
        """
        if self.state not in (MatchState.ROUND_OVER, MatchState.MATCH_OVER):
            self._reject("Match is still being played")
            return False
        if human_mark is not None:
            if not human_mark.is_player_mark:
                raise InvalidMarkError(f"Human must play X or O, got {human_mark!r}")
            self.human.mark = human_mark
            self.computer.mark = human_mark.other
        if human_first is not None:
            self.human_first = human_first

        self.human.score = 0
        self.computer.score = 0
        self.board = GridBoard()
        self.round_winner = None
        self.rounds_played = 1
        self._open_first_turn()

        logger.info("New match: %s plays %s", self.human.name, self.human.mark)
        self.events.emit_new(
            EventType.MATCH_STARTED,
            human=self.human.name,
            computer=self.computer.name,
            human_mark=str(self.human.mark),
        )
        self.events.emit_new(EventType.ROUND_STARTED, round=self.rounds_played)
        return True
