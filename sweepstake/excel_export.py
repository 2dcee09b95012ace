"""Excel export of standings and draw results."""

import logging
from pathlib import Path

import openpyxl
from openpyxl.styles import Font, PatternFill

from .session import GameSession

logger = logging.getLogger('sweepstake.excel_export')


def export_scoreboard(session: GameSession, excel_path: str | Path) -> Path:
    """
    Write standings and draw results to an Excel workbook.

    The workbook has two sheets:
    - "Standings": rank, player, points; winners in bold
    - "Draw": one row per allocation with round, player, member and member total

    Player name cells are filled with the player's color.

    Args:
        session: Session holding the game to export
        excel_path: Output .xlsx path (overwritten if it exists)

    Returns:
        Path the workbook was saved to
    """
    excel_path = Path(excel_path)
    game = session.game
    scoring = session.scoring
    winner_ids = {p.id for p in scoring.winners()}

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = 'Standings'
    ws.append(['Rank', 'Player', 'Points'])
    for cell in ws[1]:
        cell.font = Font(bold=True)

    for rank, player in enumerate(scoring.ranked_players(), 1):
        ws.append([rank, player.name, scoring.total_for_player(player.id)])
        row = ws.max_row
        name_cell = ws.cell(row=row, column=2)
        name_cell.fill = PatternFill(fill_type='solid', fgColor=player.color.hex)
        if player.id in winner_ids:
            for cell in ws[row]:
                cell.font = Font(bold=True)

    draw_ws = wb.create_sheet('Draw')
    draw_ws.append(['Round', 'Player', 'Team Member', 'Position', 'Points'])
    for cell in draw_ws[1]:
        cell.font = Font(bold=True)

    players = {p.id: p for p in game.sweepstake_players}
    for allocation in game.allocations:
        member = game.get_member(allocation.team_member_id)
        player = players.get(allocation.sweepstake_player_id)
        draw_ws.append([
            allocation.round_number,
            player.name if player else allocation.sweepstake_player_id,
            session.display_name(allocation.team_member_id),
            member.position if member and member.position else '',
            scoring.total_for_member(allocation.team_member_id),
        ])

    excel_path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(excel_path)
    wb.close()
    logger.info(f'Scoreboard saved to {excel_path}')
    return excel_path
