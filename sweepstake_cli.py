#!/usr/bin/env python3
"""
Rugby Sweepstake CLI

Runs a sweepstake from the command line. Game state is kept in JSON files
in the data directory between invocations.

Usage:
    python sweepstake_cli.py import-roster team_sheet.txt
    python sweepstake_cli.py draw
    python sweepstake_cli.py score "Owen Farrell" penalty
    python sweepstake_cli.py standings
"""

import argparse
import random
import sys
from pathlib import Path

from sweepstake import (
    GamePersistenceService,
    GameSession,
    export_scoreboard,
    format_draw_results,
    format_scoreboard,
    parse_players,
)
from sweepstake.config import get_data_dir
from sweepstake.logging_config import setup_logging


def print_status(session: GameSession) -> None:
    game = session.game
    print(f"Game {game.id}")
    print(f"  Starters: {len(game.starters)} ({len(game.enabled_starters)} enabled)")
    print(f"  Substitutes: {len(game.substitutes)}")
    print(f"  Players: {', '.join(p.name for p in game.sweepstake_players) or 'none'}")
    print(f"  Draw complete: {'yes' if game.is_draw_complete else 'no'}")
    blockers = session.draw_blockers()
    if blockers and not game.is_draw_complete:
        print("  Not ready to draw:")
        for reason in blockers:
            print(f"    - {reason}")


def main():
    parser = argparse.ArgumentParser(description="Rugby match sweepstake")
    parser.add_argument(
        "--data-dir", "-d",
        default=None,
        help="Directory holding the saved game and player list (default: from sweepstake_config.json)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write a full debug log to this file",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("status", help="Show roster and draw readiness")

    draw_parser = subparsers.add_parser("draw", help="Run the draw")
    draw_parser.add_argument("--redraw", action="store_true", help="Replace a completed draw")
    draw_parser.add_argument("--seed", type=int, default=None, help="Seed for a repeatable draw")

    score_parser = subparsers.add_parser("score", help="Award points to a team member")
    score_parser.add_argument("member", help="Team member name or id")
    score_parser.add_argument(
        "event",
        nargs="?",
        choices=["try", "penalty", "conversion"],
        help="Scoring event",
    )
    score_parser.add_argument("--points", type=int, default=None, help="Award a custom number of points")

    subparsers.add_parser("standings", help="Show the scoreboard")

    import_parser = subparsers.add_parser("import-roster", help="Fill the roster from a team sheet text file")
    import_parser.add_argument("file", help="Text file, one player per line")

    rename_parser = subparsers.add_parser("rename", help="Rename a team member")
    rename_parser.add_argument("member", help="Team member name or id")
    rename_parser.add_argument("name", help="New name")

    link_parser = subparsers.add_parser("link", help="Link a substitute to a starter")
    link_parser.add_argument("starter", help="Starter name or id")
    link_parser.add_argument("substitute", help="Substitute name or id")

    unlink_parser = subparsers.add_parser("unlink", help="Remove a starter's linked substitute")
    unlink_parser.add_argument("starter", help="Starter name or id")

    add_player_parser = subparsers.add_parser("add-player", help="Add a sweepstake player to the master list")
    add_player_parser.add_argument("name", help="Player name")

    select_parser = subparsers.add_parser("select", help="Add or remove a master player from the game")
    select_parser.add_argument("name", help="Player name or id")

    export_parser = subparsers.add_parser("export", help="Export standings and draw to Excel")
    export_parser.add_argument("output", help="Output .xlsx path")

    subparsers.add_parser("reset", help="Start a new game (keeps the player list)")

    args = parser.parse_args()

    setup_logging(verbose=args.verbose, log_file=Path(args.log_file) if args.log_file else None)

    rng = random.Random(args.seed) if getattr(args, "seed", None) is not None else None
    data_dir = Path(args.data_dir) if args.data_dir else get_data_dir()
    session = GameSession(persistence=GamePersistenceService(data_dir), rng=rng)

    if args.command == "status":
        print_status(session)

    elif args.command == "draw":
        result = session.run_full_draw(redraw=args.redraw)
        if result is None:
            print("❌ Draw did not run")
            print_status(session)
            sys.exit(1)
        print(f"Draw complete: {len(result.allocations)} members over {result.round_count} rounds\n")
        print(format_draw_results(session.game))

    elif args.command == "score":
        member = session.find_team_member(args.member)
        if member is None:
            print(f"❌ Unknown team member: {args.member}")
            sys.exit(1)
        if args.points is not None:
            awarded = session.add_points(member.id, args.points)
        elif args.event:
            awarded = session.add_score(member.id, args.event)
        else:
            print("❌ Give a scoring event or --points")
            sys.exit(1)
        if not awarded:
            print("❌ No points awarded")
            sys.exit(1)
        print(f"{member.name}: {member.points} pts ({session.total_for_member(member.id)} with substitute)")

    elif args.command == "standings":
        print(format_scoreboard(session))

    elif args.command == "import-roster":
        path = Path(args.file)
        if not path.exists():
            print(f"❌ Team sheet not found: {path}")
            sys.exit(1)
        entries = parse_players(path.read_text(encoding="utf-8"))
        filled = session.import_roster(entries)
        print(f"Read {len(entries)} names, filled {len(filled)} roster slots")
        for member in filled:
            role = "Starter" if member.is_starter else "Substitute"
            print(f"  {role}: {member.name}")

    elif args.command == "rename":
        member = session.find_team_member(args.member)
        if member is None or not session.update_team_member(member.id, name=args.name):
            print(f"❌ Unknown team member: {args.member}")
            sys.exit(1)

    elif args.command == "link":
        starter = session.find_team_member(args.starter)
        substitute = session.find_team_member(args.substitute)
        if starter is None or substitute is None or not session.link_substitute(substitute.id, starter.id):
            print("❌ Could not link: give an existing starter and substitute")
            sys.exit(1)
        print(session.display_name(starter.id))

    elif args.command == "unlink":
        starter = session.find_team_member(args.starter)
        if starter is None or not session.unlink_substitute(starter.id):
            print(f"❌ Unknown starter: {args.starter}")
            sys.exit(1)

    elif args.command == "add-player":
        player = session.add_master_player(args.name)
        print(f"Added {player.name} ({player.id})")

    elif args.command == "select":
        wanted = args.name.strip().lower()
        match = next(
            (p for p in session.master_players if p.id == args.name or p.name.strip().lower() == wanted),
            None,
        )
        if match is None or not session.toggle_player_selection(match.id):
            print(f"❌ Could not change selection for {args.name}")
            sys.exit(1)
        state = "selected" if session.is_player_selected_for_game(match.id) else "removed"
        print(f"{match.name} {state}")

    elif args.command == "export":
        path = export_scoreboard(session, args.output)
        print(f"Scoreboard saved to {path}")

    elif args.command == "reset":
        session.reset_game()
        print("New game started")


if __name__ == "__main__":
    main()
