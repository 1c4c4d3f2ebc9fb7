"""Heuristic tic-tac-toe opponent."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Callable

from parlor.board import CENTER, GridBoard, Mark, check_distinct_marks
from parlor.errors import BoardFullError


class MoveKind(Enum):
    """Which rule produced the opponent's move."""

    WIN = auto()
    BLOCK = auto()
    CENTER = auto()
    RANDOM = auto()

    def __str__(self) -> str:
        return self.name.title()


@dataclass(frozen=True)
class Move:
    """A chosen cell tagged with the rule that chose it."""

    cell: int
    kind: MoveKind


# A rule looks at (board, own mark, human mark) and proposes a cell or passes.
Rule = Callable[[GridBoard, Mark, Mark], int | None]


class OpponentStrategy:
    """
    Four-tier move picker for the computer player.

    Rules are tried top-down and the first one that proposes a cell wins:
    take a winning cell, block the human's winning cell, take the center,
    otherwise pick any empty cell at random. It looks only one move ahead
    and will walk into forks.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize the strategy.

        Args:
            rng: Random number generator for the fallback move
        """
        self._rng = rng or Random()
        self.rules: tuple[tuple[MoveKind, Rule], ...] = (
            (MoveKind.WIN, self._winning_cell),
            (MoveKind.BLOCK, self._blocking_cell),
            (MoveKind.CENTER, self._center_cell),
            (MoveKind.RANDOM, self._random_cell),
        )

    def choose(self, board: GridBoard, own_mark: Mark, human_mark: Mark) -> Move:
        """
        Pick the opponent's next cell without changing the board.

        Args:
            board: Current board
            own_mark: Mark held by the computer
            human_mark: Mark held by the human

        Returns:
            The chosen move

        Raises:
            InvalidMarkError: If the marks are not distinct player symbols
            BoardFullError: If no empty cell remains
        """
        check_distinct_marks(own_mark, human_mark)
        if board.is_full:
            raise BoardFullError("No empty cell left to move into")

        for kind, rule in self.rules:
            cell = rule(board, own_mark, human_mark)
            if cell is not None:
                return Move(cell, kind)

        raise BoardFullError("No rule produced a move")  # unreachable while a cell is empty

    @staticmethod
    def _winning_cell(board: GridBoard, own_mark: Mark, human_mark: Mark) -> int | None:
        return board.completing_cell_for(own_mark)

    @staticmethod
    def _blocking_cell(board: GridBoard, own_mark: Mark, human_mark: Mark) -> int | None:
        return board.completing_cell_for(human_mark)

    @staticmethod
    def _center_cell(board: GridBoard, own_mark: Mark, human_mark: Mark) -> int | None:
        return CENTER if board.is_center_empty else None

    def _random_cell(self, board: GridBoard, own_mark: Mark, human_mark: Mark) -> int | None:
        unmarked = board.unmarked_cells()
        return self._rng.choice(unmarked) if unmarked else None
