"""Tests for game participants."""

from random import Random

from parlor.board import Mark
from parlor.participants import OPPONENT_NAMES, CardPlayer, Dealer, GridPlayer, pick_opponent_name

from helpers import cards


class TestParticipants:
    """Tests for players and the dealer."""

    def test_opponent_name_from_roster(self):
        """Test computer names come from the fixed roster."""
        names = {pick_opponent_name(Random(seed)) for seed in range(50)}
        assert names <= set(OPPONENT_NAMES)
        assert len(names) > 1

    def test_grid_player_starts_at_zero(self):
        """Test a new grid player has no round wins."""
        player = GridPlayer("Ada", Mark.X)
        assert player.score == 0
        assert player.mark is Mark.X

    def test_new_hand_replaces_hand(self):
        """Test each round gets a new empty hand object."""
        player = CardPlayer("Ada")
        old = player.hand
        old.add_card(cards("5S")[0])

        new = player.new_hand()

        assert new is player.hand
        assert new is not old
        assert len(new) == 0
        assert len(old) == 1

    def test_dealer_partial_view(self):
        """Test the dealer reveals one card and counts the rest."""
        dealer = Dealer("Hal")
        for card in cards("KS", "7H", "2C"):
            dealer.hand.add_card(card)

        first, hidden = dealer.partial_view()

        assert str(first) == "K♠"
        assert hidden == 2

    def test_dealer_partial_view_empty(self):
        """Test the view before any deal."""
        assert Dealer("Hal").partial_view() == (None, 0)
