"""Pydantic schemas for persisted snapshots and configuration."""

from pydantic import BaseModel, Field, field_validator, model_validator


class ColorRecord(BaseModel):
    """Player display color."""

    red: float = Field(..., ge=0.0, le=1.0)
    green: float = Field(..., ge=0.0, le=1.0)
    blue: float = Field(..., ge=0.0, le=1.0)
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)

    class Config:
        extra = 'forbid'


class AllocationRecord(BaseModel):
    """One draw allocation."""

    id: str = Field(..., min_length=1)
    round_number: int = Field(..., ge=1)
    sweepstake_player_id: str = Field(..., min_length=1)
    team_member_id: str = Field(..., min_length=1)

    class Config:
        extra = 'forbid'


class TeamMemberRecord(BaseModel):
    """Starter or substitute on the roster."""

    id: str = Field(..., min_length=1)
    name: str = ''
    position: str | None = None
    is_starter: bool
    is_substitute: bool
    is_enabled_for_game: bool = True
    linked_substitute_id: str | None = None
    points: int = Field(default=0, ge=0)

    @model_validator(mode='after')
    def validate_role(self):
        """Ensure a member is exactly one of starter or substitute."""
        if self.is_starter == self.is_substitute:
            raise ValueError(f'Member {self.id} must be either a starter or a substitute')
        if self.is_substitute and self.linked_substitute_id is not None:
            raise ValueError(f'Substitute {self.id} cannot hold a linked substitute')
        return self

    class Config:
        extra = 'forbid'


class SweepstakePlayerRecord(BaseModel):
    """Sweepstake player, with any draw data attached."""

    id: str = Field(..., min_length=1)
    name: str = ''
    color: ColorRecord
    assigned_team_member_ids: list[str] = Field(default_factory=list)
    draw_rounds: list[list[AllocationRecord]] = Field(default_factory=list)

    class Config:
        extra = 'forbid'


class GameFile(BaseModel):
    """Complete game snapshot."""

    id: str = Field(..., min_length=1)
    name: str | None = None
    team_members: list[TeamMemberRecord] = Field(default_factory=list)
    sweepstake_players: list[SweepstakePlayerRecord] = Field(default_factory=list)
    is_draw_complete: bool = False

    @field_validator('team_members')
    @classmethod
    def validate_unique_members(cls, v):
        """Ensure member ids are not repeated."""
        seen = set()
        for member in v:
            if member.id in seen:
                raise ValueError(f'Duplicate team member id: {member.id}')
            seen.add(member.id)
        return v

    class Config:
        extra = 'forbid'


class PlayersFile(BaseModel):
    """Master list of sweepstake players."""

    players: list[SweepstakePlayerRecord]

    class Config:
        extra = 'forbid'


class SweepstakeConfig(BaseModel):
    """Sweepstake rules and storage settings."""

    starter_count: int = Field(..., ge=1, le=30)
    substitute_count: int = Field(..., ge=0, le=30)
    min_players: int = Field(..., ge=2, le=12)
    max_players: int = Field(..., ge=2, le=12)
    score_values: dict[str, int]
    data_dir: str = 'data'

    @field_validator('score_values')
    @classmethod
    def validate_score_values(cls, v):
        """Ensure every scoring event is known and worth a positive amount."""
        valid_events = {'try', 'penalty', 'conversion'}
        for event, points in v.items():
            if event not in valid_events:
                raise ValueError(f'Invalid scoring event: {event}')
            if points <= 0:
                raise ValueError(f'Invalid points for {event}: {points}')
        return v

    @model_validator(mode='after')
    def validate_player_range(self):
        """Ensure min_players does not exceed max_players."""
        if self.min_players > self.max_players:
            raise ValueError(
                f'min_players ({self.min_players}) exceeds max_players ({self.max_players})'
            )
        return self

    class Config:
        extra = 'forbid'
