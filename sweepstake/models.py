"""Data models for the rugby sweepstake."""

import uuid
from dataclasses import dataclass, field
from typing import List, Optional


def new_id() -> str:
    """Generate a new random identifier."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class ColorData:
    """Display color for a sweepstake player (components in 0.0-1.0)."""
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @property
    def key(self) -> str:
        """Rounded string form used for uniqueness comparisons."""
        return f'{self.red:.2f},{self.green:.2f},{self.blue:.2f}'

    @property
    def hex(self) -> str:
        return '{:02X}{:02X}{:02X}'.format(
            round(self.red * 255), round(self.green * 255), round(self.blue * 255)
        )


@dataclass(frozen=True)
class Allocation:
    """One team member drawn for one sweepstake player in one round."""
    round_number: int  # 1-based
    sweepstake_player_id: str
    team_member_id: str
    id: str = field(default_factory=new_id)


@dataclass
class TeamMember:
    """A starter or substitute on the match-day roster."""
    name: str
    is_starter: bool
    is_substitute: bool
    position: Optional[str] = None
    is_enabled_for_game: bool = True  # Only meaningful for starters
    linked_substitute_id: Optional[str] = None
    points: int = 0
    id: str = field(default_factory=new_id)

    def display_name(self, linked_substitute: Optional['TeamMember'] = None) -> str:
        """Name shown for the member's slot, e.g. 'Smith (Jones on)'."""
        if linked_substitute is not None:
            return f'{self.name} ({linked_substitute.name} on)'
        return self.name


@dataclass
class SweepstakePlayer:
    """A participant in the sweepstake."""
    name: str
    color: ColorData
    assigned_team_member_ids: List[str] = field(default_factory=list)
    draw_rounds: List[List[Allocation]] = field(default_factory=list)  # draw_rounds[round - 1]
    id: str = field(default_factory=new_id)

    def fresh_copy(self) -> 'SweepstakePlayer':
        """Copy of this player with no game-specific draw data."""
        return SweepstakePlayer(name=self.name, color=self.color, id=self.id)

    @property
    def allocations(self) -> List[Allocation]:
        return [allocation for round_allocations in self.draw_rounds for allocation in round_allocations]


@dataclass
class Game:
    """Aggregate root for one play-through of the sweepstake."""
    team_members: List[TeamMember] = field(default_factory=list)
    sweepstake_players: List[SweepstakePlayer] = field(default_factory=list)
    is_draw_complete: bool = False
    name: Optional[str] = None
    id: str = field(default_factory=new_id)

    @property
    def starters(self) -> List[TeamMember]:
        return [m for m in self.team_members if m.is_starter]

    @property
    def substitutes(self) -> List[TeamMember]:
        return [m for m in self.team_members if m.is_substitute]

    @property
    def enabled_starters(self) -> List[TeamMember]:
        return [m for m in self.starters if m.is_enabled_for_game]

    def get_member(self, member_id: Optional[str]) -> Optional[TeamMember]:
        for member in self.team_members:
            if member.id == member_id:
                return member
        return None

    def get_player(self, player_id: Optional[str]) -> Optional[SweepstakePlayer]:
        for player in self.sweepstake_players:
            if player.id == player_id:
                return player
        return None

    @property
    def allocations(self) -> List[Allocation]:
        """All allocations of the current draw, ordered by round."""
        result = [a for player in self.sweepstake_players for a in player.allocations]
        return sorted(result, key=lambda a: a.round_number)
