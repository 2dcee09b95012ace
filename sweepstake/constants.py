"""Constants and mappings for the rugby sweepstake."""

# Squad shape for a match day: 15 starters plus 8 replacements
STARTER_COUNT = 15
SUBSTITUTE_COUNT = 8

# Sweepstake players selected into a game
DEFAULT_PLAYER_COUNT = 6
MIN_DRAW_PLAYERS = 2

# Points awarded per scoring event
TRY_POINTS = 5
PENALTY_POINTS = 3
CONVERSION_POINTS = 2

SCORE_VALUES = {
    'try': TRY_POINTS,
    'penalty': PENALTY_POINTS,
    'conversion': CONVERSION_POINTS,
}

# Keys used by the key-value store
GAME_KEY = 'rugby_sweepstake_game'
MASTER_PLAYERS_KEY = 'rugby_sweepstake_master_players'

# Player colors (red, green, blue), assigned in this order
COLOR_PALETTE = [
    (0.2, 0.6, 0.9),  # Blue
    (0.9, 0.2, 0.2),  # Red
    (0.2, 0.8, 0.3),  # Green
    (0.9, 0.7, 0.1),  # Yellow
    (0.7, 0.2, 0.8),  # Purple
    (1.0, 0.5, 0.0),  # Orange
    (0.0, 0.7, 0.9),  # Cyan
    (0.9, 0.4, 0.6),  # Pink
    (0.4, 0.6, 0.2),  # Olive
    (0.8, 0.4, 0.2),  # Brown
    (0.3, 0.3, 0.8),  # Indigo
    (0.9, 0.8, 0.3),  # Gold
]

# Rugby union shirt number -> position label
POSITION_BY_NUMBER = {
    1: 'Loosehead Prop',
    2: 'Hooker',
    3: 'Tighthead Prop',
    4: 'Lock',
    5: 'Lock',
    6: 'Blindside Flanker',
    7: 'Openside Flanker',
    8: 'Number 8',
    9: 'Scrum-half',
    10: 'Fly-half',
    11: 'Left Wing',
    12: 'Inside Centre',
    13: 'Outside Centre',
    14: 'Right Wing',
    15: 'Full-back',
}

# Shirt numbers are 1-99 on a team sheet
MAX_SHIRT_NUMBER = 99

# Words that mark a team-sheet line as a header rather than a player
HEADER_WORDS = ('team', 'player', 'squad')
