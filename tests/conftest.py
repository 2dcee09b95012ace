"""Shared fixtures for sweepstake tests."""

import random

import pytest

from sweepstake.colors import color_at
from sweepstake.models import Game, SweepstakePlayer, TeamMember
from sweepstake.persistence import GamePersistenceService
from sweepstake.schemas import SweepstakeConfig
from sweepstake.session import GameSession


def build_game(num_players: int = 6, enabled_starters: int = 15) -> Game:
    """Full 15 + 8 roster with named members and ``num_players`` players."""
    members = []
    for i in range(15):
        members.append(
            TeamMember(
                name=f'Starter {i + 1}',
                is_starter=True,
                is_substitute=False,
                is_enabled_for_game=i < enabled_starters,
                id=f's{i + 1}',
            )
        )
    for i in range(8):
        members.append(
            TeamMember(
                name=f'Sub {i + 16}',
                is_starter=False,
                is_substitute=True,
                is_enabled_for_game=False,
                id=f'r{i + 16}',
            )
        )
    players = [
        SweepstakePlayer(name=f'Player {i + 1}', color=color_at(i), id=f'p{i + 1}')
        for i in range(num_players)
    ]
    return Game(team_members=members, sweepstake_players=players)


@pytest.fixture
def game():
    return build_game()


@pytest.fixture
def config(tmp_path):
    return SweepstakeConfig(
        starter_count=15,
        substitute_count=8,
        min_players=6,
        max_players=6,
        score_values={'try': 5, 'penalty': 3, 'conversion': 2},
        data_dir=str(tmp_path),
    )


@pytest.fixture
def persistence(tmp_path):
    return GamePersistenceService(tmp_path)


@pytest.fixture
def session(persistence, config):
    return GameSession(persistence=persistence, config=config, rng=random.Random(42))
