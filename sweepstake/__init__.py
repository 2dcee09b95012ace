from .models import Allocation, ColorData, Game, SweepstakePlayer, TeamMember
from .draw import DrawEngine, DrawResult, run_draw
from .scoring import ScoringAggregator
from .colors import color_at, ensure_unique_colors, next_available_color
from .persistence import GamePersistenceService
from .roster_import import ExtractedPlayer, fill_roster, parse_player_line, parse_players
from .session import GameSession
from .validators import (
    validate_allocations,
    validate_colors,
    validate_draw_ready,
    validate_links,
    validate_players,
    validate_roster,
)
from .report import format_draw_results, format_scoreboard
from .excel_export import export_scoreboard

__all__ = [
    # Models
    'Allocation',
    'ColorData',
    'Game',
    'SweepstakePlayer',
    'TeamMember',
    # Draw
    'DrawEngine',
    'DrawResult',
    'run_draw',
    # Scoring
    'ScoringAggregator',
    # Colors
    'color_at',
    'ensure_unique_colors',
    'next_available_color',
    # Storage
    'GamePersistenceService',
    # Roster import
    'ExtractedPlayer',
    'fill_roster',
    'parse_player_line',
    'parse_players',
    # Session
    'GameSession',
    # Validation
    'validate_allocations',
    'validate_colors',
    'validate_draw_ready',
    'validate_links',
    'validate_players',
    'validate_roster',
    # Output
    'format_draw_results',
    'format_scoreboard',
    'export_scoreboard',
]
