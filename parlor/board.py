"""Tic-tac-toe board and line detection."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from parlor.errors import CellOccupiedError, InvalidCellError, InvalidMarkError

CELL_IDS = tuple(range(1, 10))
CENTER = 5

# Scan order matters: rows, then columns, then diagonals.
LINES: tuple[tuple[int, int, int], ...] = (
    (1, 2, 3), (4, 5, 6), (7, 8, 9),
    (1, 4, 7), (2, 5, 8), (3, 6, 9),
    (1, 5, 9), (3, 5, 7),
)


class Mark(Enum):
    """Contents of a cell: empty or one of the two player symbols."""

    EMPTY = " "
    X = "X"
    O = "O"

    def __str__(self) -> str:
        return self.value

    @property
    def is_player_mark(self) -> bool:
        """Check if this is a symbol a player can hold."""
        return self is not Mark.EMPTY

    @property
    def other(self) -> "Mark":
        """Return the opposing player symbol."""
        if self is Mark.X:
            return Mark.O
        if self is Mark.O:
            return Mark.X
        raise InvalidMarkError("EMPTY has no opposing mark")

    @classmethod
    def from_string(cls, s: str) -> "Mark":
        """Parse a player's choice of symbol ('x', 'O', ...)."""
        s = s.strip().upper()
        if s not in ("X", "O"):
            raise InvalidMarkError(f"Invalid mark: {s!r}")
        return cls(s)


def check_distinct_marks(first: Mark, second: Mark) -> None:
    """Raise unless both marks are player symbols and differ."""
    if not (first.is_player_mark and second.is_player_mark):
        raise InvalidMarkError(f"Players must hold X or O, got {first} and {second}")
    if first is second:
        raise InvalidMarkError(f"Both players hold {first}")


@dataclass
class Cell:
    """One square of the grid."""

    id: int
    mark: Mark = Mark.EMPTY

    @property
    def is_empty(self) -> bool:
        return self.mark is Mark.EMPTY


class GridBoard:
    """
    3x3 grid with cells numbered 1-9, left to right and top to bottom.

    Marks are only ever added; a marked cell stays marked until reset().
    """

    def __init__(self) -> None:
        """Initialize an empty board."""
        self._cells: dict[int, Cell] = {}
        self.reset()

    def reset(self) -> None:
        """Empty all nine cells."""
        self._cells = {cell_id: Cell(cell_id) for cell_id in CELL_IDS}

    @classmethod
    def from_string(cls, layout: str) -> "GridBoard":
        """
        Build a board from a layout like 'XO./.X./..O'.

        Cells are read in id order. 'X' and 'O' are marks, '.' or '_' is an
        empty cell; whitespace, '/' and '|' are ignored.
        """
        symbols = [ch for ch in layout.upper() if not ch.isspace() and ch not in "/|"]
        if len(symbols) != len(CELL_IDS):
            raise ValueError(f"Layout must describe 9 cells, got {len(symbols)}")

        board = cls()
        for cell_id, symbol in zip(CELL_IDS, symbols):
            if symbol in "._":
                continue
            board.occupy(cell_id, Mark.from_string(symbol))
        return board

    def _cell(self, cell_id: int) -> Cell:
        try:
            return self._cells[cell_id]
        except KeyError:
            raise InvalidCellError(f"No cell {cell_id!r} on the board") from None

    def __getitem__(self, cell_id: int) -> Mark:
        return self._cell(cell_id).mark

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells.values())

    def occupy(self, cell_id: int, mark: Mark) -> None:
        """
        Place a mark in an empty cell.

        Args:
            cell_id: Cell number, 1-9
            mark: X or O

        Raises:
            InvalidCellError: If the cell does not exist
            InvalidMarkError: If mark is EMPTY
            CellOccupiedError: If the cell is already marked
        """
        cell = self._cell(cell_id)
        if not mark.is_player_mark:
            raise InvalidMarkError("Cannot occupy a cell with EMPTY")
        if not cell.is_empty:
            raise CellOccupiedError(f"Cell {cell_id} already holds {cell.mark}")
        cell.mark = mark

    def unmarked_cells(self) -> list[int]:
        """Return the ids of empty cells in ascending order."""
        return [cell.id for cell in self._cells.values() if cell.is_empty]

    def occupied_cells(self) -> list[int]:
        """Return the ids of marked cells in ascending order."""
        return [cell.id for cell in self._cells.values() if not cell.is_empty]

    @property
    def is_full(self) -> bool:
        """Check if no empty cell remains."""
        return not self.unmarked_cells()

    @property
    def is_center_empty(self) -> bool:
        return self._cells[CENTER].is_empty

    def _line_marks(self, line: tuple[int, int, int]) -> list[Mark]:
        return [self._cells[cell_id].mark for cell_id in line]

    @property
    def winner(self) -> Mark | None:
        """
        Return the mark filling a complete line, or None.

        Lines are scanned in LINES order and the first complete one decides.
        """
        for line in LINES:
            marks = self._line_marks(line)
            if marks[0].is_player_mark and marks.count(marks[0]) == 3:
                return marks[0]
        return None

    @property
    def is_terminal(self) -> bool:
        """Check if the round is over: a line is complete or no cell is left."""
        return self.winner is not None or self.is_full

    def _is_two_in_a_row(self, line: tuple[int, int, int], mark: Mark) -> bool:
        marks = self._line_marks(line)
        return marks.count(mark) == 2 and marks.count(Mark.EMPTY) == 1

    def has_two_in_a_row_for(self, mark: Mark) -> bool:
        """Check if any line holds two of mark and one empty cell."""
        return any(self._is_two_in_a_row(line, mark) for line in LINES)

    def completing_cell_for(self, mark: Mark) -> int | None:
        """
        Return the cell that would complete a line for mark.

        Returns:
            The empty cell of the first two-in-a-row line in LINES order,
            or None if there is no such line
        """
        if not mark.is_player_mark:
            return None
        for line in LINES:
            if self._is_two_in_a_row(line, mark):
                return next(cell_id for cell_id in line if self._cells[cell_id].is_empty)
        return None

    def rows(self) -> list[list[Mark]]:
        """Return the marks row by row, for rendering."""
        return [self._line_marks(line) for line in LINES[:3]]

    def __str__(self) -> str:
        return "\n-+-+-\n".join("|".join(str(mark) for mark in row) for row in self.rows())

    def __repr__(self) -> str:
        marks = "".join(str(self[cell_id]) for cell_id in CELL_IDS)
        return f"GridBoard({marks!r})"
