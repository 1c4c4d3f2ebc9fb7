"""Fixed dealer policy for twenty-one."""

from enum import Enum, auto

from parlor.hand import Hand

STAY_THRESHOLD = 17


class DealerDecision(Enum):
    """Dealer's choice on each turn."""

    HIT = auto()
    STAY = auto()

    def __str__(self) -> str:
        return self.name.lower()


class DealerPolicy:
    """Dealer stays on 17 or more and hits below."""

    threshold = STAY_THRESHOLD

    def decide(self, hand: Hand) -> DealerDecision:
        """
        Decide the dealer's next action from its hand alone.

        Args:
            hand: Dealer's current hand

        Returns:
            STAY when the total has reached the threshold, otherwise HIT
        """
        if hand.total >= self.threshold:
            return DealerDecision.STAY
        return DealerDecision.HIT

    def should_hit(self, hand: Hand) -> bool:
        """Check if the dealer draws another card."""
        return not hand.is_bust and self.decide(hand) is DealerDecision.HIT
