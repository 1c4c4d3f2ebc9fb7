"""Caller-defect errors raised by the game cores."""


class PreconditionViolation(Exception):
    """An operation was requested in a state that does not allow it."""

    pass


class InvalidCellError(PreconditionViolation, ValueError):
    """Cell id outside the 1-9 grid."""

    pass


class CellOccupiedError(PreconditionViolation, ValueError):
    """Cell already holds a mark."""

    pass


class InvalidMarkError(PreconditionViolation, ValueError):
    """Mark is not a player symbol, or both players hold the same one."""

    pass


class BoardFullError(PreconditionViolation):
    """No unmarked cell is left to move into."""

    pass


class EmptyDeckError(PreconditionViolation, IndexError):
    """Draw requested from a deck with no cards left."""

    pass
