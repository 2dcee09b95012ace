"""Validation functions for rosters, players, links and draw results."""

from collections import Counter

from .constants import DEFAULT_PLAYER_COUNT, STARTER_COUNT, SUBSTITUTE_COUNT
from .models import Game, SweepstakePlayer


def _duplicates(values) -> list[str]:
    return sorted(value for value, count in Counter(values).items() if count > 1)


def validate_roster(
    game: Game,
    starter_count: int = STARTER_COUNT,
    substitute_count: int = SUBSTITUTE_COUNT,
) -> list[str]:
    """
    Validate that the roster is complete enough to run a draw.

    Checks:
    - Exact starter and substitute counts
    - Every member is exactly one of starter or substitute
    - At least one starter enabled for the game
    - No duplicate member ids

    Args:
        game: Game whose roster is checked
        starter_count: Required number of starters
        substitute_count: Required number of substitutes

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    starters = len(game.starters)
    substitutes = len(game.substitutes)
    if starters != starter_count:
        errors.append(f'Roster has {starters} starters (needs {starter_count})')
    if substitutes != substitute_count:
        errors.append(f'Roster has {substitutes} substitutes (needs {substitute_count})')

    for member in game.team_members:
        if member.is_starter == member.is_substitute:
            label = member.name or member.id
            errors.append(f'{label} must be either a starter or a substitute')

    if not game.enabled_starters:
        errors.append('No starters are enabled for the game')

    duplicates = _duplicates(m.id for m in game.team_members)
    if duplicates:
        errors.append(f'Roster has duplicate member ids: {", ".join(duplicates)}')

    return errors


def validate_players(
    players: list[SweepstakePlayer],
    min_players: int = DEFAULT_PLAYER_COUNT,
    max_players: int = DEFAULT_PLAYER_COUNT,
) -> list[str]:
    """
    Validate the sweepstake players selected for a game.

    Checks:
    - Player count within [min_players, max_players]
    - Every player has a non-blank name
    - No duplicate player ids

    Args:
        players: Players selected into the game
        min_players: Fewest players allowed
        max_players: Most players allowed

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    count = len(players)
    if min_players == max_players and count != min_players:
        errors.append(f'Game has {count} players (needs {min_players})')
    elif not (min_players <= count <= max_players):
        errors.append(f'Game has {count} players (needs {min_players}-{max_players})')

    unnamed = sum(1 for p in players if not p.name.strip())
    if unnamed:
        errors.append(f'{unnamed} player(s) have no name')

    duplicates = _duplicates(p.id for p in players)
    if duplicates:
        errors.append(f'Duplicate player ids: {", ".join(duplicates)}')

    return errors


def validate_colors(players: list[SweepstakePlayer]) -> list[str]:
    """Check that no two players share a display color."""
    duplicates = _duplicates(p.color.key for p in players)
    if duplicates:
        return [f'Players share colors: {"; ".join(duplicates)}']
    return []


def validate_links(game: Game) -> list[str]:
    """
    Validate substitute links on the roster.

    Checks:
    - Only starters hold a linked substitute
    - Every linked id refers to a substitute on the roster
    - No substitute is linked from more than one starter

    Args:
        game: Game whose links are checked

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    linked_ids = []

    for member in game.team_members:
        if member.linked_substitute_id is None:
            continue
        label = member.name or member.id
        if not member.is_starter:
            errors.append(f'{label} is not a starter but has a linked substitute')
            continue
        substitute = game.get_member(member.linked_substitute_id)
        if substitute is None or not substitute.is_substitute:
            errors.append(f'{label} is linked to {member.linked_substitute_id}, which is not a substitute')
            continue
        linked_ids.append(member.linked_substitute_id)

    duplicates = _duplicates(linked_ids)
    if duplicates:
        errors.append(f'Substitutes linked to more than one starter: {", ".join(duplicates)}')

    return errors


def validate_draw_ready(
    game: Game,
    starter_count: int = STARTER_COUNT,
    substitute_count: int = SUBSTITUTE_COUNT,
    min_players: int = DEFAULT_PLAYER_COUNT,
    max_players: int = DEFAULT_PLAYER_COUNT,
) -> list[str]:
    """
    Collect every reason the draw cannot run yet.

    Returns:
        List of error messages (empty if the draw can run)
    """
    errors = validate_roster(game, starter_count, substitute_count)
    errors.extend(validate_players(game.sweepstake_players, min_players, max_players))
    return errors


def validate_allocations(game: Game) -> list[str]:
    """
    Check a completed draw for internal consistency.

    Checks:
    - Every allocated member is a starter on the roster
    - No member is allocated twice
    - Every allocation belongs to the player holding it
    - Each player's assigned ids match their allocations in draw order

    Args:
        game: Game after a draw

    Returns:
        List of validation error messages (empty if consistent)
    """
    errors = []

    allocated_ids = []
    for player in game.sweepstake_players:
        player_allocations = player.allocations
        for allocation in player_allocations:
            allocated_ids.append(allocation.team_member_id)
            member = game.get_member(allocation.team_member_id)
            if member is None or not member.is_starter:
                errors.append(f'{player.name} holds {allocation.team_member_id}, which is not a starter')
            if allocation.sweepstake_player_id != player.id:
                errors.append(f'{player.name} holds an allocation made for {allocation.sweepstake_player_id}')

        drawn_ids = [a.team_member_id for a in player_allocations]
        if drawn_ids != player.assigned_team_member_ids:
            errors.append(f"{player.name}'s assigned members do not match their draw rounds")

    duplicates = _duplicates(allocated_ids)
    if duplicates:
        errors.append(f'Members allocated more than once: {", ".join(duplicates)}')

    return errors
