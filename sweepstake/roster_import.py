"""Team sheet parsing and roster filling.

Text recognized from a team sheet arrives one line per entry, e.g.
"1. John Smith", "#9 - Jones" or "Jersey 10: Owen Farrell". Lines are
turned into (shirt number, name) pairs which then fill empty roster slots.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional

from .constants import HEADER_WORDS, MAX_SHIRT_NUMBER, POSITION_BY_NUMBER
from .models import Game, TeamMember
from .utils import to_title_case

logger = logging.getLogger('sweepstake.roster_import')

_NOISE_PATTERN = re.compile(r'jersey|number|#', re.IGNORECASE)
_NUMBERED_PATTERN = re.compile(r'^(\d+)[.:\s\-]+(.+)$')
_SEPARATORS = re.compile(r'[.:\s\-]+')


@dataclass(frozen=True)
class ExtractedPlayer:
    """A name read from a team sheet, with its shirt number when present."""
    number: Optional[int]
    name: str


def _valid_number(text: str) -> Optional[int]:
    # isdigit() also accepts superscripts, which int() rejects
    if not text.isdecimal():
        return None
    number = int(text)
    if 0 < number <= MAX_SHIRT_NUMBER:
        return number
    return None


def parse_player_line(line: str) -> Optional[ExtractedPlayer]:
    """
    Parse one team-sheet line.

    Examples:
        "1. John Smith"      -> ExtractedPlayer(1, "John Smith")
        "#9 - Ben Youngs"    -> ExtractedPlayer(9, "Ben Youngs")
        "Jersey 10: Farrell" -> ExtractedPlayer(10, "Farrell")
        "Maro Itoje"         -> ExtractedPlayer(None, "Maro Itoje")
        "Team Sheet"         -> None

    Returns:
        ExtractedPlayer, or None for blank, header-like or number-only lines
    """
    cleaned = _NOISE_PATTERN.sub('', line).strip()
    if not cleaned:
        return None

    match = _NUMBERED_PATTERN.match(cleaned)
    if match:
        number = _valid_number(match.group(1))
        name = match.group(2).strip(' .-:')
        if number is not None and name:
            return ExtractedPlayer(number=number, name=name)

    parts = [p for p in _SEPARATORS.split(cleaned) if p]
    if len(parts) >= 2 and parts[0].isdecimal():
        number = _valid_number(parts[0])
        if number is not None:
            return ExtractedPlayer(number=number, name=' '.join(parts[1:]))

    lowered = cleaned.lower()
    if (
        len(cleaned) > 2
        and not any(word in lowered for word in HEADER_WORDS)
        and not cleaned.isdigit()
    ):
        return ExtractedPlayer(number=None, name=cleaned)

    return None


def parse_players(text: str) -> list[ExtractedPlayer]:
    """Parse every usable line of recognized team-sheet text."""
    players = []
    for line in text.splitlines():
        player = parse_player_line(line.strip())
        if player is not None:
            players.append(player)
    return players


def _slot_for_number(game: Game, number: int) -> Optional[TeamMember]:
    starters = game.starters
    substitutes = game.substitutes
    if number < 1:
        return None
    if number <= len(starters):
        return starters[number - 1]
    if number <= len(starters) + len(substitutes):
        return substitutes[number - len(starters) - 1]
    return None


def fill_roster(game: Game, entries: Iterable[ExtractedPlayer]) -> list[TeamMember]:
    """
    Put imported names into empty roster slots.

    A shirt number claims its own slot (1-15 starters, 16-23 substitutes
    for a standard squad) when that slot is still empty. Everything else
    goes to the first empty slot, starters before substitutes. Named
    slots are never overwritten.

    Args:
        game: Game whose roster is filled, modified in place
        entries: Parsed team-sheet entries

    Returns:
        Members that received a name, in fill order
    """
    filled: list[TeamMember] = []
    leftovers: list[ExtractedPlayer] = []

    for entry in entries:
        name = to_title_case(entry.name)
        if not name:
            continue
        slot = _slot_for_number(game, entry.number) if entry.number is not None else None
        if slot is None or slot.name.strip():
            leftovers.append(entry)
            continue
        slot.name = name
        if slot.position is None and entry.number in POSITION_BY_NUMBER and slot.is_starter:
            slot.position = POSITION_BY_NUMBER[entry.number]
        filled.append(slot)

    open_slots = [m for m in game.starters + game.substitutes if not m.name.strip()]
    for entry, slot in zip(leftovers, open_slots):
        slot.name = to_title_case(entry.name)
        filled.append(slot)

    skipped = len(leftovers) - min(len(leftovers), len(open_slots))
    if skipped:
        logger.warning(f'{skipped} imported name(s) did not fit in the roster')
    logger.info(f'Imported {len(filled)} name(s) into the roster')
    return filled
