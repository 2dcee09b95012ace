"""Player color assignment."""

import logging

from .constants import COLOR_PALETTE
from .models import ColorData, SweepstakePlayer

logger = logging.getLogger('sweepstake.colors')


def color_at(index: int) -> ColorData:
    """Palette color at ``index``, wrapping around the palette."""
    red, green, blue = COLOR_PALETTE[index % len(COLOR_PALETTE)]
    return ColorData(red=red, green=green, blue=blue)


def next_available_color(used_keys: set[str]) -> ColorData:
    """
    First palette color whose key is not in ``used_keys``.

    Once every palette color is taken, colors cycle based on how many
    are already in use.

    Args:
        used_keys: ColorData.key values already assigned

    Returns:
        Color to assign to a new player
    """
    for index in range(len(COLOR_PALETTE)):
        color = color_at(index)
        if color.key not in used_keys:
            return color
    return color_at(len(used_keys))


def ensure_unique_colors(players: list[SweepstakePlayer]) -> bool:
    """
    Reassign duplicate colors so every player's color is unique.

    The first player holding a color keeps it; later holders get the next
    unused palette color. Running it again on the result changes nothing.

    Args:
        players: Players to normalize, modified in place

    Returns:
        True if any player's color changed
    """
    assigned: set[str] = set()
    changed = False

    for player in players:
        if player.color.key in assigned:
            new_color = next_available_color(assigned)
            logger.info(f'Reassigning duplicate color {player.color.key} for {player.name!r} to {new_color.key}')
            player.color = new_color
            changed = True
        assigned.add(player.color.key)

    return changed
