"""Game session: the single owner of a sweepstake's state.

All roster edits, player selection, draws and point awards go through
GameSession. Each mutation is persisted and then announced to subscribers.
"""

import logging
import random
import threading
from typing import Callable, Iterable, Optional

from .colors import color_at, ensure_unique_colors, next_available_color
from .config import get_config
from .draw import DrawEngine, DrawResult
from .models import ColorData, Game, SweepstakePlayer, TeamMember
from .persistence import GamePersistenceService
from .roster_import import ExtractedPlayer, fill_roster
from .schemas import SweepstakeConfig
from .scoring import ScoringAggregator
from .validators import validate_draw_ready

logger = logging.getLogger('sweepstake.session')

Listener = Callable[[Game], None]


class GameSession:
    """
    Owns the current Game and the master player list.

    Operations that are not possible yet (draw before the roster is
    complete, linking to a member that is not a starter, unknown ids) do
    nothing and return None or False.
    """

    def __init__(
        self,
        persistence: Optional[GamePersistenceService] = None,
        config: Optional[SweepstakeConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Load saved state, or create defaults when nothing is saved.

        Args:
            persistence: Storage for the game and master list (default:
                a JSON store in the configured data directory)
            config: Sweepstake rules (default: get_config())
            rng: Random generator for draws; pass a seeded one for
                repeatable draws
        """
        self.config = config or get_config()
        self.persistence = persistence or GamePersistenceService(self.config.data_dir)
        self._engine = DrawEngine(rng)
        self._lock = threading.RLock()
        self._listeners: list[Listener] = []

        self.master_players: list[SweepstakePlayer] = self.persistence.load_players()
        if not self.master_players:
            self.master_players = [
                SweepstakePlayer(name=f'Player {i + 1}', color=color_at(i))
                for i in range(self.config.max_players)
            ]
            self._save_master_players()
        elif ensure_unique_colors(self.master_players):
            self._save_master_players()

        saved = self.persistence.load_game()
        if saved is not None:
            self.game = saved
            self._sync_selected_players()
            logger.info(f'Loaded game {saved.id}')
        else:
            self.game = self._new_game()
        self._save_game()

    # Change notification

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener(game)`` after every change."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _changed(self) -> None:
        self._save_game()
        for listener in list(self._listeners):
            try:
                listener(self.game)
            except Exception:
                # The change is already saved, so keep notifying the rest
                logger.exception(f'Change listener {listener!r} failed')

    def _save_game(self) -> None:
        self.persistence.save_game(self.game)

    def _save_master_players(self) -> None:
        self.persistence.save_master_player_list(self.master_players)

    # Setup

    def _new_game(self) -> Game:
        game = Game(
            sweepstake_players=[p.fresh_copy() for p in self.master_players[: self.config.max_players]]
        )
        for _ in range(self.config.starter_count):
            game.team_members.append(TeamMember(name='', is_starter=True, is_substitute=False))
        for _ in range(self.config.substitute_count):
            game.team_members.append(
                TeamMember(name='', is_starter=False, is_substitute=True, is_enabled_for_game=False)
            )
        logger.info(f'Created game {game.id}')
        return game

    def _sync_selected_players(self) -> None:
        """Refresh selected players' names and colors from the master list."""
        masters = {p.id: p for p in self.master_players}
        synced = []
        for player in self.game.sweepstake_players:
            master = masters.get(player.id)
            if master is None:
                continue
            player.name = master.name
            player.color = master.color
            synced.append(player)
        self.game.sweepstake_players = synced

    def reset_game(self) -> Game:
        """Discard the current game and start a fresh one; the master list is kept."""
        with self._lock:
            self.persistence.clear_game()
            self.game = self._new_game()
            self._changed()
            return self.game

    @property
    def is_team_setup_complete(self) -> bool:
        return (
            len(self.game.starters) == self.config.starter_count
            and len(self.game.substitutes) == self.config.substitute_count
        )

    def draw_blockers(self) -> list[str]:
        """Reasons the draw cannot run yet (empty when it can)."""
        return validate_draw_ready(
            self.game,
            starter_count=self.config.starter_count,
            substitute_count=self.config.substitute_count,
            min_players=self.config.min_players,
            max_players=self.config.max_players,
        )

    @property
    def can_run_draw(self) -> bool:
        return not self.draw_blockers()

    # Roster

    def get_team_member(self, member_id: str) -> Optional[TeamMember]:
        return self.game.get_member(member_id)

    def find_team_member(self, name_or_id: str) -> Optional[TeamMember]:
        """Look a member up by id, falling back to a case-insensitive name match."""
        member = self.game.get_member(name_or_id)
        if member is not None:
            return member
        wanted = name_or_id.strip().lower()
        for member in self.game.team_members:
            if member.name.strip().lower() == wanted:
                return member
        return None

    def update_team_member(
        self,
        member_id: str,
        name: Optional[str] = None,
        position: Optional[str] = None,
    ) -> bool:
        """
        Rename a member and/or set their position label.

        An empty position string clears the label.

        Returns:
            True if the member exists
        """
        with self._lock:
            member = self.game.get_member(member_id)
            if member is None:
                return False
            if name is not None:
                member.name = name
            if position is not None:
                member.position = position or None
            self._changed()
            return True

    def toggle_enabled_for_game(self, member_id: str) -> bool:
        """Flip whether a starter can be drawn. Returns False for non-starters."""
        with self._lock:
            member = self.game.get_member(member_id)
            if member is None or not member.is_starter:
                return False
            member.is_enabled_for_game = not member.is_enabled_for_game
            self._changed()
            return True

    def link_substitute(self, substitute_id: str, starter_id: str) -> bool:
        """
        Link a substitute to a starter, moving it off any other starter.

        Returns:
            True if the link was made
        """
        with self._lock:
            starter = self.game.get_member(starter_id)
            substitute = self.game.get_member(substitute_id)
            if starter is None or not starter.is_starter:
                return False
            if substitute is None or not substitute.is_substitute:
                return False
            for member in self.game.starters:
                if member.linked_substitute_id == substitute_id:
                    member.linked_substitute_id = None
            starter.linked_substitute_id = substitute_id
            self._changed()
            return True

    def unlink_substitute(self, starter_id: str) -> bool:
        """Remove a starter's linked substitute. Returns False for non-starters."""
        with self._lock:
            starter = self.game.get_member(starter_id)
            if starter is None or not starter.is_starter:
                return False
            starter.linked_substitute_id = None
            self._changed()
            return True

    def get_linked_substitute(self, starter_id: str) -> Optional[TeamMember]:
        starter = self.game.get_member(starter_id)
        if starter is None or starter.linked_substitute_id is None:
            return None
        return self.game.get_member(starter.linked_substitute_id)

    def display_name(self, member_id: str) -> str:
        member = self.game.get_member(member_id)
        if member is None:
            return ''
        return member.display_name(self.get_linked_substitute(member_id))

    def import_roster(self, entries: Iterable[ExtractedPlayer]) -> list[TeamMember]:
        """Fill empty roster slots from parsed team-sheet entries."""
        with self._lock:
            filled = fill_roster(self.game, entries)
            if filled:
                self._changed()
            return filled

    # Players

    def is_player_selected_for_game(self, player_id: str) -> bool:
        return self.game.get_player(player_id) is not None

    def _master(self, player_id: str) -> Optional[SweepstakePlayer]:
        for player in self.master_players:
            if player.id == player_id:
                return player
        return None

    def find_player(self, name_or_id: str) -> Optional[SweepstakePlayer]:
        """Look a selected player up by id or case-insensitive name."""
        player = self.game.get_player(name_or_id)
        if player is not None:
            return player
        wanted = name_or_id.strip().lower()
        for player in self.game.sweepstake_players:
            if player.name.strip().lower() == wanted:
                return player
        return None

    def add_master_player(self, name: str) -> SweepstakePlayer:
        """Add a player to the master list with the next unused color."""
        with self._lock:
            used = {p.color.key for p in self.master_players}
            player = SweepstakePlayer(name=name, color=next_available_color(used))
            self.master_players.append(player)
            self._save_master_players()
            return player

    def update_sweepstake_player(
        self,
        player_id: str,
        name: Optional[str] = None,
        color: Optional[ColorData] = None,
    ) -> bool:
        """
        Rename and/or recolor a player in the master list and the game.

        Returns:
            True if the player exists in either list
        """
        with self._lock:
            found = False
            for player in (self._master(player_id), self.game.get_player(player_id)):
                if player is None:
                    continue
                found = True
                if name is not None:
                    player.name = name
                if color is not None:
                    player.color = color
            if not found:
                return False
            self._save_master_players()
            self._changed()
            return True

    def delete_master_player(self, player_id: str) -> bool:
        """Delete a player from the master list, removing them from the game first."""
        with self._lock:
            if self.is_player_selected_for_game(player_id):
                self.game.sweepstake_players = [
                    p for p in self.game.sweepstake_players if p.id != player_id
                ]
                self._changed()
            before = len(self.master_players)
            self.master_players = [p for p in self.master_players if p.id != player_id]
            self._save_master_players()
            return len(self.master_players) < before

    def toggle_player_selection(self, player_id: str) -> bool:
        """
        Add a master player to the game, or remove them if already selected.

        Players are only added while the game has fewer than max_players.

        Returns:
            True if the selection changed
        """
        with self._lock:
            if self.is_player_selected_for_game(player_id):
                self.game.sweepstake_players = [
                    p for p in self.game.sweepstake_players if p.id != player_id
                ]
            else:
                master = self._master(player_id)
                if master is None or len(self.game.sweepstake_players) >= self.config.max_players:
                    return False
                self.game.sweepstake_players.append(master.fresh_copy())
            self._changed()
            return True

    # Draw

    def run_full_draw(self, redraw: bool = False) -> Optional[DrawResult]:
        """
        Draw every enabled starter for the game's players.

        Args:
            redraw: Replace a completed draw. Without it a completed draw
                is left untouched.

        Returns:
            DrawResult, or None if the draw did not run
        """
        with self._lock:
            if self.game.is_draw_complete and not redraw:
                logger.info('Draw already complete; reset or redraw to run it again')
                return None
            blockers = self.draw_blockers()
            if blockers:
                logger.info(f'Draw not ready: {"; ".join(blockers)}')
                return None

            result = self._engine.run_draw(
                [m.id for m in self.game.enabled_starters],
                self.game.sweepstake_players,
            )
            if result is None:
                return None

            DrawEngine.apply(result, self.game.sweepstake_players)
            self.game.is_draw_complete = True
            self._changed()
            return result

    def reset_draw(self) -> None:
        """Clear every player's draw data and mark the draw as not run."""
        with self._lock:
            for player in self.game.sweepstake_players:
                player.assigned_team_member_ids = []
                player.draw_rounds = []
            self.game.is_draw_complete = False
            self._changed()

    # Scoring

    @property
    def scoring(self) -> ScoringAggregator:
        return ScoringAggregator(self.game, self.config.score_values)

    def add_points(self, member_id: str, points: int) -> bool:
        with self._lock:
            if not self.scoring.award_points(member_id, points):
                return False
            self._changed()
            return True

    def add_score(self, member_id: str, event: str) -> bool:
        """Award a named scoring event ('try', 'penalty', 'conversion')."""
        with self._lock:
            if not self.scoring.award_event(member_id, event):
                return False
            self._changed()
            return True

    def add_try(self, member_id: str) -> bool:
        return self.add_score(member_id, 'try')

    def add_penalty(self, member_id: str) -> bool:
        return self.add_score(member_id, 'penalty')

    def add_conversion(self, member_id: str) -> bool:
        return self.add_score(member_id, 'conversion')

    def total_for_member(self, member_id: str) -> int:
        return self.scoring.total_for_member(member_id)

    def total_for_player(self, player_id: str) -> int:
        return self.scoring.total_for_player(player_id)

    def ranked_players(self) -> list[SweepstakePlayer]:
        return self.scoring.ranked_players()

    def winners(self) -> list[SweepstakePlayer]:
        return self.scoring.winners()
