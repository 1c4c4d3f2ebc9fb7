"""Twenty-one round engine with state machine."""

import logging
from random import Random
from typing import Callable

from transitions import Machine

from config import config
from parlor.cards import Card, Deck
from parlor.game.events import EventEmitter, EventType, GameEvent
from parlor.game.state import RoundState
from parlor.hand import Outcome, resolve_outcome
from parlor.participants import CardPlayer, Dealer, pick_opponent_name
from parlor.strategy.dealer import DealerDecision, DealerPolicy

logger = logging.getLogger(__name__)

INITIAL_CARDS = 2

OUTCOME_EVENTS = {
    Outcome.PLAYER_WINS: EventType.PLAYER_WINS,
    Outcome.DEALER_WINS: EventType.DEALER_WINS,
    Outcome.TIE: EventType.TIE,
}


class TwentyOneGame:
    """
    Twenty-one against a dealer that stays on 17.

    Each round gets a brand new deck and empty hands. The engine is UI-agnostic:
    callers drive it with start_round/hit/stay/dealer_step and read results
    from return values and events.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "deal", "source": ["waiting", "round_complete"], "dest": "player_turn"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "player_busts", "source": "player_turn", "dest": "round_complete"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "round_complete"},
    ]

    def __init__(
        self,
        player_name: str,
        rng: Random | None = None,
        dealer_name: str | None = None,
        deck_factory: Callable[[Random], Deck] | None = None,
    ) -> None:
        """
        Initialize a new game.

        Args:
            player_name: Name of the human player
            rng: Random number generator for reproducible games
            dealer_name: Dealer's name; picked at random when omitted
            deck_factory: Builds the deck for each round from the game's rng
        """
        self._rng = rng or config.random.make_rng()
        self._deck_factory = deck_factory or (lambda r: Deck(rng=r))

        self.player = CardPlayer(player_name)
        self.dealer = Dealer(dealer_name or pick_opponent_name(self._rng))
        self.policy = DealerPolicy()
        self.deck: Deck | None = None
        self.outcome: Outcome | None = None
        self.rounds_played = 0
        self.events = EventEmitter()

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="waiting",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def _reject(self, action: str) -> None:
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=f"Cannot {action} in current state",
            state=self.state.name,
        )

    def start_round(self) -> bool:
        """
        Build a fresh deck, clear both hands and deal two cards each.

        Returns:
            True if a round was started
        """
        if self.state not in (RoundState.WAITING, RoundState.ROUND_COMPLETE):
            self._reject("start a round")
            return False

        self.deck = self._deck_factory(self._rng)
        self.player.new_hand()
        self.dealer.new_hand()
        self.outcome = None
        self.rounds_played += 1
        self.deal()  # Trigger state transition

        # Player gets both cards first, then the dealer
        for _ in range(INITIAL_CARDS):
            self._deal_card_to(self.player)
        for i in range(INITIAL_CARDS):
            self._deal_card_to(self.dealer, face_up=i == 0)

        logger.info("Round %d started for %s", self.rounds_played, self.player.name)
        self.events.emit_new(
            EventType.ROUND_STARTED,
            round=self.rounds_played,
            player_total=self.player.hand.total,
        )

        if self.player.hand.is_bust:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_total=self.player.hand.total)
            self.player_busts()
            self._resolve_round()

        return True

    def _deal_card_to(self, participant: CardPlayer, face_up: bool = True) -> Card:
        """Deal a card to a participant's hand."""
        if self.deck is None:
            raise RuntimeError("No deck before the first round")
        card = self.deck.draw()
        participant.hand.add_card(card)
        is_dealer = participant is self.dealer
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            hand="dealer" if is_dealer else "player",
            hand_total=participant.hand.total if not is_dealer else None,
        )
        return card

    def hit(self) -> bool:
        """Player takes another card."""
        if self.state != RoundState.PLAYER_TURN:
            self._reject("hit")
            return False

        hand = self.player.hand
        self._deal_card_to(self.player)
        self.events.emit_new(EventType.PLAYER_HIT, hand_total=hand.total)
        logger.debug("%s hits to %d", self.player.name, hand.total)

        if hand.is_bust:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_total=hand.total)
            self.player_busts()
            self._resolve_round()

        return True

    def stay(self) -> bool:
        """Player keeps the current hand and hands over to the dealer."""
        if self.state != RoundState.PLAYER_TURN:
            self._reject("stay")
            return False

        self.events.emit_new(EventType.PLAYER_STAYS, hand_total=self.player.hand.total)
        self.player_done()
        self.events.emit_new(
            EventType.DEALER_REVEALS,
            cards=[str(card) for card in self.dealer.hand],
            hand_total=self.dealer.hand.total,
        )
        return True

    def dealer_step(self) -> DealerDecision | None:
        """
        Apply the dealer policy once.

        A HIT draws one card; a bust or a STAY ends the round.

        Returns:
            The dealer's decision, or None outside the dealer's turn
        """
        if self.state != RoundState.DEALER_TURN:
            self._reject("play the dealer")
            return None

        hand = self.dealer.hand
        decision = self.policy.decide(hand)

        if decision is DealerDecision.HIT:
            self._deal_card_to(self.dealer)
            self.events.emit_new(EventType.DEALER_HITS, hand_total=hand.total)
            logger.debug("%s hits to %d", self.dealer.name, hand.total)
            if not hand.is_bust:
                return decision

        if hand.is_bust:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_total=hand.total)
        else:
            self.events.emit_new(EventType.DEALER_STAYS, hand_total=hand.total)

        self.dealer_done()
        self._resolve_round()
        return decision

    def play_dealer(self) -> Outcome | None:
        """
        Run the dealer's turn to completion.

        Returns:
            The round outcome, or None outside the dealer's turn
        """
        if self.state != RoundState.DEALER_TURN:
            self._reject("play the dealer")
            return None

        while self.state == RoundState.DEALER_TURN:
            self.dealer_step()
        return self.outcome

    def _resolve_round(self) -> None:
        """Compare the final hands and announce the result."""
        self.outcome = resolve_outcome(self.player.hand, self.dealer.hand)
        player_total = self.player.hand.total
        dealer_total = self.dealer.hand.total

        self.events.emit_new(
            OUTCOME_EVENTS[self.outcome],
            player_total=player_total,
            dealer_total=dealer_total,
        )
        self.events.emit_new(EventType.ROUND_ENDED, outcome=self.outcome.name)
        logger.info(
            "Round %d: %s (player %d, dealer %d)",
            self.rounds_played,
            self.outcome,
            player_total,
            dealer_total,
        )

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.state == RoundState.PLAYER_TURN and not self.player.hand.is_bust

    @property
    def can_stay(self) -> bool:
        """Check if staying is allowed."""
        return self.state == RoundState.PLAYER_TURN
