"""Decision procedures for the computer-controlled participants."""

from parlor.strategy.dealer import DealerDecision, DealerPolicy, STAY_THRESHOLD
from parlor.strategy.opponent import Move, MoveKind, OpponentStrategy

__all__ = [
    "DealerDecision",
    "DealerPolicy",
    "STAY_THRESHOLD",
    "Move",
    "MoveKind",
    "OpponentStrategy",
]
