"""Game and master player list storage.

Each key is stored as ``<data_dir>/<key>.json``. Failures are logged and
swallowed so the in-memory game stays the source of truth for the session.
"""

import logging
from pathlib import Path
from typing import Optional

from .constants import GAME_KEY, MASTER_PLAYERS_KEY
from .models import Allocation, ColorData, Game, SweepstakePlayer, TeamMember
from .schemas import (
    AllocationRecord,
    ColorRecord,
    GameFile,
    PlayersFile,
    SweepstakePlayerRecord,
    TeamMemberRecord,
)
from .utils import load_json, save_json

logger = logging.getLogger('sweepstake.persistence')


def _allocation_to_record(allocation: Allocation) -> AllocationRecord:
    return AllocationRecord(
        id=allocation.id,
        round_number=allocation.round_number,
        sweepstake_player_id=allocation.sweepstake_player_id,
        team_member_id=allocation.team_member_id,
    )


def player_to_record(player: SweepstakePlayer) -> SweepstakePlayerRecord:
    """Convert a SweepstakePlayer to its stored form."""
    color = player.color
    return SweepstakePlayerRecord(
        id=player.id,
        name=player.name,
        color=ColorRecord(red=color.red, green=color.green, blue=color.blue, alpha=color.alpha),
        assigned_team_member_ids=list(player.assigned_team_member_ids),
        draw_rounds=[[_allocation_to_record(a) for a in rnd] for rnd in player.draw_rounds],
    )


def player_from_record(record: SweepstakePlayerRecord) -> SweepstakePlayer:
    """Build a SweepstakePlayer from its stored form."""
    return SweepstakePlayer(
        id=record.id,
        name=record.name,
        color=ColorData(**record.color.model_dump()),
        assigned_team_member_ids=list(record.assigned_team_member_ids),
        draw_rounds=[[Allocation(**a.model_dump()) for a in rnd] for rnd in record.draw_rounds],
    )


def game_to_record(game: Game) -> GameFile:
    """Convert a Game to its stored snapshot."""
    return GameFile(
        id=game.id,
        name=game.name,
        team_members=[
            TeamMemberRecord(
                id=m.id,
                name=m.name,
                position=m.position,
                is_starter=m.is_starter,
                is_substitute=m.is_substitute,
                is_enabled_for_game=m.is_enabled_for_game,
                linked_substitute_id=m.linked_substitute_id,
                points=m.points,
            )
            for m in game.team_members
        ],
        sweepstake_players=[player_to_record(p) for p in game.sweepstake_players],
        is_draw_complete=game.is_draw_complete,
    )


def game_from_record(record: GameFile) -> Game:
    """Build a Game from a stored snapshot."""
    return Game(
        id=record.id,
        name=record.name,
        team_members=[TeamMember(**m.model_dump()) for m in record.team_members],
        sweepstake_players=[player_from_record(p) for p in record.sweepstake_players],
        is_draw_complete=record.is_draw_complete,
    )


class GamePersistenceService:
    """JSON file key-value store for the current game and the master player list."""

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        return self.data_dir / f'{key}.json'

    def save_game(self, game: Game) -> bool:
        """Persist the game snapshot. Returns False if it could not be written."""
        try:
            save_json(self._path(GAME_KEY), game_to_record(game))
        except (OSError, TypeError, ValueError) as e:
            logger.error(f'Could not save game {game.id}: {e}')
            return False
        return True

    def load_game(self) -> Optional[Game]:
        """Load the saved game, or None if there is none or it is unreadable."""
        path = self._path(GAME_KEY)
        if not path.exists():
            return None
        try:
            record = load_json(path, schema=GameFile)
        except (OSError, ValueError) as e:
            logger.warning(f'Discarding unreadable game snapshot {path}: {e}')
            return None
        return game_from_record(record)

    def clear_game(self) -> None:
        """Remove the saved game."""
        try:
            self._path(GAME_KEY).unlink(missing_ok=True)
        except OSError as e:
            logger.error(f'Could not clear saved game: {e}')

    def save_master_player_list(self, players: list[SweepstakePlayer]) -> bool:
        """Persist the master player list. Returns False if it could not be written."""
        # Master copies carry no draw data
        records = [player_to_record(p.fresh_copy()) for p in players]
        try:
            save_json(self._path(MASTER_PLAYERS_KEY), PlayersFile(players=records))
        except (OSError, TypeError, ValueError) as e:
            logger.error(f'Could not save master player list: {e}')
            return False
        return True

    def load_players(self) -> list[SweepstakePlayer]:
        """Load the master player list (empty if missing or unreadable)."""
        path = self._path(MASTER_PLAYERS_KEY)
        if not path.exists():
            return []
        try:
            record = load_json(path, schema=PlayersFile)
        except (OSError, ValueError) as e:
            logger.warning(f'Discarding unreadable player list {path}: {e}')
            return []
        return [player_from_record(p) for p in record.players]
