"""Tests for the tic-tac-toe board."""

import pytest
from hypothesis import given, strategies as st

from parlor.board import CELL_IDS, LINES, GridBoard, Mark, check_distinct_marks
from parlor.errors import CellOccupiedError, InvalidCellError, InvalidMarkError


@st.composite
def board_strategy(draw):
    """Generate an arbitrary filling of the grid (not necessarily reachable)."""
    marks = draw(st.lists(st.sampled_from(list(Mark)), min_size=9, max_size=9))
    board = GridBoard()
    for cell_id, mark in zip(CELL_IDS, marks):
        if mark is not Mark.EMPTY:
            board.occupy(cell_id, mark)
    return board


def complete_lines(board: GridBoard) -> list[tuple[tuple[int, int, int], Mark]]:
    return [
        (line, board[line[0]])
        for line in LINES
        if board[line[0]] is not Mark.EMPTY and board[line[0]] == board[line[1]] == board[line[2]]
    ]


class TestMark:
    """Tests for the Mark enum."""

    def test_other(self):
        """Test each player mark knows its opponent."""
        assert Mark.X.other is Mark.O
        assert Mark.O.other is Mark.X

    def test_empty_has_no_other(self):
        """Test EMPTY has no opposing mark."""
        with pytest.raises(InvalidMarkError):
            Mark.EMPTY.other

    def test_from_string(self):
        """Test parsing a player's symbol choice."""
        assert Mark.from_string("x") is Mark.X
        assert Mark.from_string(" O ") is Mark.O
        with pytest.raises(InvalidMarkError):
            Mark.from_string("Z")
        with pytest.raises(InvalidMarkError):
            Mark.from_string(" ")

    def test_distinct_marks(self):
        """Test the two players must hold different symbols."""
        check_distinct_marks(Mark.X, Mark.O)
        with pytest.raises(InvalidMarkError):
            check_distinct_marks(Mark.X, Mark.X)
        with pytest.raises(InvalidMarkError):
            check_distinct_marks(Mark.EMPTY, Mark.O)


class TestGridBoard:
    """Tests for the GridBoard class."""

    def test_new_board_is_empty(self, board):
        """Test a new board has nine empty cells."""
        assert board.unmarked_cells() == list(CELL_IDS)
        assert board.occupied_cells() == []
        assert not board.is_full
        assert board.winner is None

    def test_lines_constant(self):
        """Test the eight lines: rows, then columns, then diagonals."""
        assert len(LINES) == 8
        assert LINES[:3] == ((1, 2, 3), (4, 5, 6), (7, 8, 9))
        assert LINES[3:6] == ((1, 4, 7), (2, 5, 8), (3, 6, 9))
        assert LINES[6:] == ((1, 5, 9), (3, 5, 7))

    def test_occupy(self, board):
        """Test marking a cell."""
        board.occupy(5, Mark.X)
        assert board[5] is Mark.X
        assert 5 not in board.unmarked_cells()

    def test_occupy_marked_cell_raises(self, board):
        """Test that a mark cannot be overwritten."""
        board.occupy(5, Mark.X)
        with pytest.raises(CellOccupiedError):
            board.occupy(5, Mark.O)
        assert board[5] is Mark.X

    def test_occupy_invalid_cell_raises(self, board):
        """Test that cells outside 1-9 do not exist."""
        for cell in (0, 10, -1):
            with pytest.raises(InvalidCellError):
                board.occupy(cell, Mark.X)

    def test_occupy_with_empty_raises(self, board):
        """Test that EMPTY is not a mark to place."""
        with pytest.raises(InvalidMarkError):
            board.occupy(1, Mark.EMPTY)

    def test_unmarked_cells_ascending(self):
        """Test unmarked cells come back in ascending order."""
        board = GridBoard.from_string("X.O/.X./O..")
        assert board.unmarked_cells() == [2, 4, 6, 8, 9]

    def test_completing_cell_scenario(self):
        """Test X at 1 and 2 with 3 empty completes at 3."""
        board = GridBoard()
        board.occupy(1, Mark.X)
        board.occupy(2, Mark.X)
        assert board.completing_cell_for(Mark.X) == 3
        assert board.has_two_in_a_row_for(Mark.X)

    def test_full_board_without_line(self):
        """Test a drawn board: full and no winner."""
        board = GridBoard.from_string("XOX/XOO/OXX")
        assert board.is_full
        assert board.winner is None
        assert board.is_terminal

    @pytest.mark.parametrize("line", LINES)
    def test_every_line_wins(self, line):
        """Test each of the eight lines is a win."""
        board = GridBoard()
        for cell in line:
            board.occupy(cell, Mark.O)
        assert board.winner is Mark.O
        assert board.is_terminal

    def test_winner_scan_order(self):
        """Test that with two complete lines the first in scan order decides."""
        board = GridBoard.from_string("OOO/XXX/...")
        assert board.winner is Mark.O

    def test_two_marks_and_opponent_not_threat(self):
        """Test a line blocked by the opponent is not two-in-a-row."""
        board = GridBoard.from_string("XXO/.../...")
        assert not board.has_two_in_a_row_for(Mark.X)
        assert board.completing_cell_for(Mark.X) is None

    def test_completing_cell_first_line_wins(self):
        """Test that the first threatening line in scan order is returned."""
        # X threatens row 1-2-3 (at 3) and column 1-4-7 (at 7)
        board = GridBoard.from_string("XX./X../...")
        assert board.completing_cell_for(Mark.X) == 3

    def test_completing_cell_column_and_diagonal(self):
        """Test column and diagonal threats are found."""
        assert GridBoard.from_string(".O./.O./...").completing_cell_for(Mark.O) == 8
        assert GridBoard.from_string("..X/.X./...").completing_cell_for(Mark.X) == 7

    def test_completing_cell_for_empty(self, board):
        """Test EMPTY never has a completing cell."""
        assert board.completing_cell_for(Mark.EMPTY) is None

    def test_reset(self):
        """Test reset empties every cell."""
        board = GridBoard.from_string("XOX/XOO/OXX")
        board.reset()
        assert board.unmarked_cells() == list(CELL_IDS)
        assert board.winner is None

    def test_from_string_invalid(self):
        """Test malformed layouts are rejected."""
        with pytest.raises(ValueError):
            GridBoard.from_string("XO")
        with pytest.raises(InvalidMarkError):
            GridBoard.from_string("XOZ/.../...")

    def test_str(self):
        """Test text rendering rows."""
        board = GridBoard.from_string("X../.O./..X")
        assert str(board).splitlines()[0] == "X| | "
        assert board.rows()[1] == [Mark.EMPTY, Mark.O, Mark.EMPTY]

    @given(board_strategy())
    def test_winner_only_with_complete_line(self, board):
        """Test winner is a mark exactly when some line is filled by it."""
        lines = complete_lines(board)
        if lines:
            assert board.winner is lines[0][1]
        else:
            assert board.winner is None

    @given(board_strategy())
    def test_cells_partition(self, board):
        """Test unmarked and occupied cells cover 1-9 exactly once."""
        unmarked = board.unmarked_cells()
        occupied = board.occupied_cells()
        assert sorted(unmarked + occupied) == list(CELL_IDS)
        assert board.is_full == (not unmarked)

    @given(board_strategy(), st.sampled_from([Mark.X, Mark.O]))
    def test_completing_cell_matches_threats(self, board, mark):
        """Test completing cell is None iff no line has two of mark and an empty."""
        threats = [
            line
            for line in LINES
            if [board[c] for c in line].count(mark) == 2
            and [board[c] for c in line].count(Mark.EMPTY) == 1
        ]
        cell = board.completing_cell_for(mark)
        assert board.has_two_in_a_row_for(mark) == bool(threats)
        if not threats:
            assert cell is None
        else:
            assert cell in threats[0]
            assert board[cell] is Mark.EMPTY
