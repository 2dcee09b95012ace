"""Random draw allocating team members to sweepstake players."""

import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .constants import MIN_DRAW_PLAYERS
from .models import Allocation, SweepstakePlayer

logger = logging.getLogger('sweepstake.draw')


@dataclass
class DrawResult:
    """
    Outcome of one draw.

    Attributes:
        allocations: Every allocation, in the order members were drawn
        round_count: Number of rounds the draw took
    """
    allocations: list[Allocation] = field(default_factory=list)
    round_count: int = 0

    def for_player(self, player_id: str) -> list[Allocation]:
        """Allocations for one player, in draw order."""
        return [a for a in self.allocations if a.sweepstake_player_id == player_id]

    def rounds_for_player(self, player_id: str) -> list[list[Allocation]]:
        """Allocations for one player grouped by round (index = round - 1)."""
        rounds: list[list[Allocation]] = []
        for allocation in self.for_player(player_id):
            while len(rounds) < allocation.round_number:
                rounds.append([])
            rounds[allocation.round_number - 1].append(allocation)
        return rounds

    @property
    def member_ids(self) -> list[str]:
        return [a.team_member_id for a in self.allocations]


class DrawEngine:
    """
    Allocates eligible team members to sweepstake players in rounds.

    Each round shuffles the players, then hands each player in turn one
    member picked at random from those still undrawn. The final round
    stops early when the pool runs out, so player totals differ by at
    most one member and who misses out is random.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        """
        Create a draw engine.

        Args:
            rng: Random generator to use; pass a seeded one for repeatable
                draws. A new non-deterministic generator is used otherwise.
        """
        self._rng = rng or random.Random()

    def run_draw(
        self,
        eligible_member_ids: Iterable[str],
        players: list[SweepstakePlayer],
    ) -> Optional[DrawResult]:
        """
        Draw every eligible member for exactly one player.

        The players themselves are not modified; use apply() to attach the
        result to them.

        Args:
            eligible_member_ids: Ids of members that may be drawn
            players: Players taking part, in their listed order

        Returns:
            DrawResult, or None when there is nothing to draw or fewer
            than two players
        """
        remaining = list(dict.fromkeys(eligible_member_ids))
        if not remaining:
            logger.debug('Draw skipped: no eligible members')
            return None
        if len(players) < MIN_DRAW_PLAYERS:
            logger.debug(f'Draw skipped: {len(players)} player(s), need {MIN_DRAW_PLAYERS}')
            return None

        result = DrawResult()
        round_number = 0

        while remaining:
            round_number += 1
            shuffled = list(players)
            self._rng.shuffle(shuffled)

            for player in shuffled:
                if not remaining:
                    break
                member_id = self._rng.choice(remaining)
                remaining.remove(member_id)
                result.allocations.append(
                    Allocation(
                        round_number=round_number,
                        sweepstake_player_id=player.id,
                        team_member_id=member_id,
                    )
                )

        result.round_count = round_number
        logger.info(
            f'Drew {len(result.allocations)} members for {len(players)} players '
            f'over {round_number} rounds'
        )
        return result

    @staticmethod
    def apply(result: DrawResult, players: list[SweepstakePlayer]) -> None:
        """
        Replace each player's draw data with their share of ``result``.

        Any allocations from an earlier draw are discarded first.

        Args:
            result: Draw to attach
            players: Players that took part in the draw
        """
        for player in players:
            player.assigned_team_member_ids = []
            player.draw_rounds = []

        for player in players:
            player.draw_rounds = result.rounds_for_player(player.id)
            player.assigned_team_member_ids = [a.team_member_id for a in player.allocations]


def run_draw(
    eligible_member_ids: Iterable[str],
    players: list[SweepstakePlayer],
    rng: Optional[random.Random] = None,
) -> Optional[DrawResult]:
    """Run a single draw with a one-off DrawEngine."""
    return DrawEngine(rng).run_draw(eligible_member_ids, players)
