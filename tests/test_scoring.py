"""Unit tests for point awards and totals."""

import pytest

from sweepstake.scoring import ScoringAggregator

from conftest import build_game


@pytest.fixture
def scoring(game):
    # p1: s1, s2   p2: s3   p3: s4, s5   p4: nothing
    game.sweepstake_players[0].assigned_team_member_ids = ['s1', 's2']
    game.sweepstake_players[1].assigned_team_member_ids = ['s3']
    game.sweepstake_players[2].assigned_team_member_ids = ['s4', 's5']
    return ScoringAggregator(game)


class TestAwardPoints:
    """Tests for awarding points."""

    def test_try_penalty_conversion(self, scoring, game):
        """Test canonical event values: try 5, penalty 3, conversion 2."""
        scoring.award_event('s1', 'try')
        scoring.award_event('s1', 'conversion')
        scoring.award_event('s2', 'penalty')

        assert game.get_member('s1').points == 7
        assert game.get_member('s2').points == 3

    def test_custom_amount(self, scoring, game):
        """Test any positive integer can be awarded."""
        assert scoring.award_points('s3', 7)
        assert game.get_member('s3').points == 7

    def test_unknown_member_is_noop(self, scoring, game):
        """Test points for an unknown id change nothing."""
        assert scoring.award_points('nobody', 5) is False
        assert all(m.points == 0 for m in game.team_members)

    @pytest.mark.parametrize('amount', [0, -3, 2.5, True])
    def test_invalid_amounts_rejected(self, scoring, game, amount):
        """Test zero, negative and non-integer awards are ignored."""
        assert scoring.award_points('s1', amount) is False
        assert game.get_member('s1').points == 0

    def test_unknown_event(self, scoring):
        """Test an unrecognized event awards nothing."""
        assert scoring.award_event('s1', 'drop goal') is False

    def test_custom_score_values(self, game):
        """Test event values can be overridden."""
        scoring = ScoringAggregator(game, {'try': 4})
        scoring.award_event('s1', 'try')
        assert game.get_member('s1').points == 4


class TestTotals:
    """Tests for member and player totals."""

    def test_member_total_includes_linked_substitute(self, scoring, game):
        """Test a starter's total bundles their linked substitute's points."""
        game.get_member('s1').linked_substitute_id = 'r16'
        scoring.award_points('s1', 5)
        scoring.award_points('r16', 3)

        assert scoring.total_for_member('s1') == 8
        assert scoring.total_for_member('r16') == 3

    def test_substitute_points_go_to_starters_player(self, scoring, game):
        """Test a linked substitute's points count for whoever drew the starter."""
        game.get_member('s3').linked_substitute_id = 'r17'
        scoring.award_points('r17', 5)

        assert scoring.total_for_player('p2') == 5
        assert scoring.total_for_player('p1') == 0

    def test_unknown_ids_total_zero(self, scoring):
        """Test unknown member and player ids total 0."""
        assert scoring.total_for_member('nobody') == 0
        assert scoring.total_for_player('nobody') == 0

    def test_player_total_sums_members(self, scoring):
        """Test a player's total is the sum over their drawn members."""
        scoring.award_points('s1', 5)
        scoring.award_points('s2', 3)
        scoring.award_points('s3', 2)

        assert scoring.total_for_player('p1') == 8
        assert scoring.total_for_player('p2') == 2

    def test_totals_are_stable_between_awards(self, scoring):
        """Test reading totals twice gives the same answer."""
        scoring.award_points('s4', 5)
        assert scoring.total_for_player('p3') == scoring.total_for_player('p3') == 5

    def test_player_breakdown(self, scoring, game):
        """Test breakdown lists member totals in draw order."""
        game.get_member('s2').linked_substitute_id = 'r16'
        scoring.award_points('s1', 5)
        scoring.award_points('r16', 2)

        total, breakdown = scoring.player_breakdown('p1')
        assert total == 7
        assert list(breakdown.items()) == [('s1', 5), ('s2', 2)]

    def test_breakdown_unknown_player(self, scoring):
        assert scoring.player_breakdown('nobody') == (0, {})


def _game_with_totals(totals):
    game = build_game(num_players=len(totals))
    for player, (total, starter) in zip(game.sweepstake_players, zip(totals, game.starters)):
        player.assigned_team_member_ids = [starter.id]
        starter.points = total
    return game


class TestRankingAndWinners:
    """Tests for standings and winner detection."""

    def test_two_way_tie(self):
        """Test totals [10, 20, 20, 5] give both 20-point players as winners."""
        game = _game_with_totals([10, 20, 20, 5])
        winners = ScoringAggregator(game).winners()

        assert [p.id for p in winners] == ['p2', 'p3']

    def test_single_winner(self):
        """Test totals [10, 20, 5] give one winner."""
        game = _game_with_totals([10, 20, 5])
        winners = ScoringAggregator(game).winners()

        assert [p.id for p in winners] == ['p2']

    def test_ranking_descending_and_stable(self):
        """Test ranking sorts by total and keeps game order on ties."""
        game = _game_with_totals([10, 20, 20, 5, 10])
        ranked = ScoringAggregator(game).ranked_players()

        assert [p.id for p in ranked] == ['p2', 'p3', 'p1', 'p5', 'p4']

    def test_player_without_members_ranks_at_zero(self, scoring):
        """Test a player with nothing drawn totals 0 and still ranks."""
        scoring.award_points('s1', 5)
        ranked = scoring.ranked_players()

        assert ranked[0].id == 'p1'
        assert 'p4' in [p.id for p in ranked]
        assert scoring.total_for_player('p4') == 0

    def test_everyone_on_zero_all_win(self, scoring, game):
        """Test a scoreless game is a tie between every player."""
        assert len(scoring.winners()) == len(game.sweepstake_players)

    def test_no_players_no_winners(self, game):
        game.sweepstake_players = []
        assert ScoringAggregator(game).winners() == []
