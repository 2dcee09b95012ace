"""Point awards and per-player totals."""

import logging
from typing import Optional

from .constants import SCORE_VALUES
from .models import Game, SweepstakePlayer, TeamMember

logger = logging.getLogger('sweepstake.scoring')


class ScoringAggregator:
    """
    Awards points to team members and totals them per sweepstake player.

    A starter's total includes the points of the substitute linked to it,
    so a replacement's points count for whoever drew the starter.
    """

    def __init__(self, game: Game, score_values: Optional[dict[str, int]] = None):
        """
        Args:
            game: Game whose members and players are scored
            score_values: Points per scoring event (default: try 5,
                penalty 3, conversion 2)
        """
        self.game = game
        self.score_values = dict(score_values or SCORE_VALUES)

    def award_points(self, member_id: str, amount: int) -> bool:
        """
        Add ``amount`` to a member's points.

        Args:
            member_id: Member to credit
            amount: Positive number of points

        Returns:
            True if points were added; False for an unknown member or a
            non-positive amount
        """
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            logger.warning(f'Ignoring invalid point award {amount!r} for {member_id}')
            return False
        member = self.game.get_member(member_id)
        if member is None:
            logger.debug(f'Ignoring points for unknown member {member_id}')
            return False
        member.points += amount
        logger.info(f'{member.name or member.id} +{amount} pts (now {member.points})')
        return True

    def award_event(self, member_id: str, event: str) -> bool:
        """
        Award the points for a named scoring event ('try', 'penalty', 'conversion').

        Returns:
            True if points were added
        """
        amount = self.score_values.get(event)
        if amount is None:
            logger.warning(f'Unknown scoring event: {event}')
            return False
        return self.award_points(member_id, amount)

    def linked_substitute(self, member: TeamMember) -> Optional[TeamMember]:
        if not member.is_starter or member.linked_substitute_id is None:
            return None
        return self.game.get_member(member.linked_substitute_id)

    def total_for_member(self, member_id: str) -> int:
        """Member's points plus their linked substitute's points (0 if unknown)."""
        member = self.game.get_member(member_id)
        if member is None:
            return 0
        total = member.points
        substitute = self.linked_substitute(member)
        if substitute is not None:
            total += substitute.points
        return total

    def total_for_player(self, player_id: str) -> int:
        """Sum of member totals over everyone the player drew (0 if unknown)."""
        player = self.game.get_player(player_id)
        if player is None:
            return 0
        return sum(self.total_for_member(member_id) for member_id in player.assigned_team_member_ids)

    def player_breakdown(self, player_id: str) -> tuple[int, dict[str, int]]:
        """
        Score breakdown for one player.

        Returns:
            Tuple of (total, {member_id: member total}) in draw order
        """
        player = self.game.get_player(player_id)
        if player is None:
            return 0, {}
        breakdown = {
            member_id: self.total_for_member(member_id)
            for member_id in player.assigned_team_member_ids
        }
        return sum(breakdown.values()), breakdown

    def ranked_players(self) -> list[SweepstakePlayer]:
        """Players by total, highest first; ties keep game order."""
        return sorted(
            self.game.sweepstake_players,
            key=lambda p: self.total_for_player(p.id),
            reverse=True,
        )

    def winners(self) -> list[SweepstakePlayer]:
        """Every player sharing the highest total (more than one on a tie)."""
        if not self.game.sweepstake_players:
            return []
        totals = {p.id: self.total_for_player(p.id) for p in self.game.sweepstake_players}
        best = max(totals.values())
        return [p for p in self.game.sweepstake_players if totals[p.id] == best]
