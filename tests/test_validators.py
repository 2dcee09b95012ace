"""Unit tests for validation functions."""

import random

from sweepstake.draw import DrawEngine
from sweepstake.models import Allocation, ColorData, TeamMember
from sweepstake.validators import (
    validate_allocations,
    validate_colors,
    validate_draw_ready,
    validate_links,
    validate_players,
    validate_roster,
)

from conftest import build_game


class TestRosterValidation:
    """Tests for roster validation."""

    def test_valid_roster(self, game):
        """Test that a full 15 + 8 roster passes."""
        assert validate_roster(game) == []

    def test_missing_starter(self, game):
        """Test a roster one starter short."""
        game.team_members.pop(0)
        errors = validate_roster(game)
        assert errors == ['Roster has 14 starters (needs 15)']

    def test_extra_substitute(self, game):
        """Test a roster with nine substitutes."""
        game.team_members.append(TeamMember(name='Extra', is_starter=False, is_substitute=True))
        errors = validate_roster(game)
        assert errors == ['Roster has 9 substitutes (needs 8)']

    def test_no_enabled_starters(self):
        """Test a roster with every starter disabled."""
        errors = validate_roster(build_game(enabled_starters=0))
        assert 'No starters are enabled for the game' in errors

    def test_member_with_both_roles(self, game):
        """Test a member flagged as both starter and substitute."""
        game.team_members[0].is_substitute = True
        errors = validate_roster(game)
        assert any('either a starter or a substitute' in e for e in errors)

    def test_duplicate_ids(self, game):
        """Test repeated member ids are reported."""
        game.team_members[1].id = game.team_members[0].id
        errors = validate_roster(game)
        assert any('duplicate member ids' in e for e in errors)

    def test_custom_counts(self, game):
        """Test required counts can be changed."""
        assert validate_roster(game, starter_count=10, substitute_count=8) == [
            'Roster has 15 starters (needs 10)'
        ]


class TestPlayerValidation:
    """Tests for sweepstake player validation."""

    def test_six_named_players(self, game):
        assert validate_players(game.sweepstake_players) == []

    def test_wrong_count(self):
        """Test five players when six are required."""
        errors = validate_players(build_game(num_players=5).sweepstake_players)
        assert errors == ['Game has 5 players (needs 6)']

    def test_player_range(self):
        """Test variants that accept 2-6 players."""
        players = build_game(num_players=3).sweepstake_players
        assert validate_players(players, min_players=2, max_players=6) == []
        assert validate_players(players[:1], min_players=2, max_players=6) == [
            'Game has 1 players (needs 2-6)'
        ]

    def test_blank_names(self, game):
        """Test whitespace-only names count as missing."""
        game.sweepstake_players[0].name = '   '
        game.sweepstake_players[1].name = ''
        errors = validate_players(game.sweepstake_players)
        assert errors == ['2 player(s) have no name']

    def test_duplicate_colors(self, game):
        """Test two players sharing a color."""
        game.sweepstake_players[1].color = ColorData(0.2, 0.6, 0.9)
        errors = validate_colors(game.sweepstake_players)
        assert len(errors) == 1
        assert '0.20,0.60,0.90' in errors[0]


class TestLinkValidation:
    """Tests for substitute link validation."""

    def test_valid_links(self, game):
        game.get_member('s1').linked_substitute_id = 'r16'
        game.get_member('s2').linked_substitute_id = 'r17'
        assert validate_links(game) == []

    def test_substitute_linked_twice(self, game):
        """Test one substitute held by two starters."""
        game.get_member('s1').linked_substitute_id = 'r16'
        game.get_member('s2').linked_substitute_id = 'r16'
        errors = validate_links(game)
        assert errors == ['Substitutes linked to more than one starter: r16']

    def test_link_to_starter(self, game):
        """Test a starter linked to another starter."""
        game.get_member('s1').linked_substitute_id = 's2'
        errors = validate_links(game)
        assert len(errors) == 1
        assert 'not a substitute' in errors[0]

    def test_substitute_holding_link(self, game):
        game.get_member('r16').linked_substitute_id = 'r17'
        errors = validate_links(game)
        assert errors == ['Sub 16 is not a starter but has a linked substitute']


class TestDrawReady:
    """Tests for combined draw readiness."""

    def test_ready(self, game):
        assert validate_draw_ready(game) == []

    def test_collects_roster_and_player_errors(self):
        game = build_game(num_players=4, enabled_starters=0)
        errors = validate_draw_ready(game)
        assert 'No starters are enabled for the game' in errors
        assert 'Game has 4 players (needs 6)' in errors


class TestAllocationValidation:
    """Tests for post-draw consistency checks."""

    def test_engine_draw_is_consistent(self, game):
        engine = DrawEngine(random.Random(1))
        result = engine.run_draw([m.id for m in game.enabled_starters], game.sweepstake_players)
        DrawEngine.apply(result, game.sweepstake_players)
        assert validate_allocations(game) == []

    def test_member_drawn_twice(self, game):
        p1, p2 = game.sweepstake_players[:2]
        p1.draw_rounds = [[Allocation(1, p1.id, 's1')]]
        p1.assigned_team_member_ids = ['s1']
        p2.draw_rounds = [[Allocation(1, p2.id, 's1')]]
        p2.assigned_team_member_ids = ['s1']
        errors = validate_allocations(game)
        assert errors == ['Members allocated more than once: s1']

    def test_substitute_drawn(self, game):
        p1 = game.sweepstake_players[0]
        p1.draw_rounds = [[Allocation(1, p1.id, 'r16')]]
        p1.assigned_team_member_ids = ['r16']
        errors = validate_allocations(game)
        assert errors == ['Player 1 holds r16, which is not a starter']

    def test_assigned_ids_out_of_sync(self, game):
        p1 = game.sweepstake_players[0]
        p1.draw_rounds = [[Allocation(1, p1.id, 's1')]]
        p1.assigned_team_member_ids = []
        errors = validate_allocations(game)
        assert errors == ["Player 1's assigned members do not match their draw rounds"]
