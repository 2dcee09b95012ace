"""Plain-text summaries of the draw and the scoreboard."""

from .models import Game
from .session import GameSession


def _member_label(game: Game, member_id: str) -> str:
    member = game.get_member(member_id)
    if member is None:
        return member_id
    label = member.name or 'Unnamed'
    if member.position:
        label += f' - {member.position}'
    return label


def format_draw_results(game: Game) -> str:
    """
    Describe who drew whom, round by round.

    Example:
        Alice
          Round 1: Owen Farrell - Fly-half
          Round 2: Maro Itoje - Lock
    """
    if not game.is_draw_complete:
        return 'The draw has not been run yet.'

    lines = []
    for player in game.sweepstake_players:
        lines.append(player.name)
        for round_number, allocations in enumerate(player.draw_rounds, 1):
            if not allocations:
                continue
            names = ', '.join(_member_label(game, a.team_member_id) for a in allocations)
            lines.append(f'  Round {round_number}: {names}')
    return '\n'.join(lines)


def format_scoreboard(session: GameSession) -> str:
    """
    Winner banner, final standings and each player's point breakdown.

    Args:
        session: Session holding the scored game

    Returns:
        Multi-line scoreboard text
    """
    game = session.game
    scoring = session.scoring
    winners = scoring.winners()
    lines = []

    if len(winners) == 1:
        winner = winners[0]
        lines.append(f'Winner: {winner.name} ({scoring.total_for_player(winner.id)} points)')
    elif winners:
        names = ', '.join(w.name for w in winners)
        lines.append(f'Tie! {names} ({scoring.total_for_player(winners[0].id)} points each)')

    lines.append('')
    lines.append('Final Standings')
    lines.append('=' * 40)
    for rank, player in enumerate(scoring.ranked_players(), 1):
        lines.append(f'  #{rank} {player.name}: {scoring.total_for_player(player.id)} pts')

    lines.append('')
    lines.append('Point Breakdown')
    lines.append('=' * 40)
    for player in game.sweepstake_players:
        total, breakdown = scoring.player_breakdown(player.id)
        lines.append(f'{player.name}: {total} pts')
        for member_id, points in breakdown.items():
            lines.append(f'  - {session.display_name(member_id) or member_id}: {points} pts')

    return '\n'.join(lines)
