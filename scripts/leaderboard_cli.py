"""
Command-line front end for the leaderboard.

Each invocation loads the board from the preferred backend, performs at most
one action and prints the ranked result.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from leaderboard_client.controller import LeaderboardController, Notification
from leaderboard_client.factory import build_controller

logger = logging.getLogger(__name__)


def _print_notification(notification: Notification) -> None:
    stream = sys.stderr if notification.level == "error" else sys.stdout
    print(f"[{notification.level}] {notification.message}", file=stream)


def _print_board(controller: LeaderboardController) -> None:
    mode = "database" if controller.is_remote else "local"
    print(f"Leaderboard ({mode} storage)")
    if not controller.participants:
        print("  No participants yet.")
        return
    summary = controller.summary()
    for position, participant in enumerate(controller.participants, start=1):
        marker = "*" if participant is summary.leader else " "
        print(
            f" {marker}{position:>3}. {participant.name:<24} {participant.score:>6}  [{participant.id}]"
        )
    print(f"  {summary.participant_count} participants, total points: {summary.total_points}")


def _confirm(name: str) -> bool:
    answer = input(f"Remove {name}? This action cannot be undone. [y/N] ")
    return answer.strip().lower() in {"y", "yes"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Leaderboard")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("show", help="Print the ranked board")
    sub.add_parser("mode", help="Print the active storage backend")
    sub.add_parser("toggle", help="Switch between local and database storage")

    add = sub.add_parser("add", help="Add a participant with score 0")
    add.add_argument("name")

    up = sub.add_parser("up", help="Add one point")
    up.add_argument("id")

    down = sub.add_parser("down", help="Remove one point")
    down.add_argument("id")

    adjust = sub.add_parser("adjust", help="Change a score by DELTA")
    adjust.add_argument("id")
    adjust.add_argument("delta", type=int)

    remove = sub.add_parser("remove", help="Delete a participant")
    remove.add_argument("id")
    remove.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s %(asctime)s %(message)s",
        datefmt="%m/%d/%Y %I:%M:%S %p",
    )

    controller = build_controller(notify=_print_notification)
    controller.initialize()

    command = args.command or "show"
    ok = True
    if command == "mode":
        print(controller.active_backend.value)
        return 0
    if command == "toggle":
        ok = controller.toggle_backend()
    elif command == "add":
        ok = controller.add_participant(args.name)
    elif command == "up":
        ok = controller.increment(args.id)
    elif command == "down":
        ok = controller.decrement(args.id)
    elif command == "adjust":
        ok = controller.adjust_score(args.id, args.delta)
    elif command == "remove":
        target = controller.stage_removal(args.id)
        if target is None:
            print(f"No participant with id {args.id}", file=sys.stderr)
            return 1
        if args.yes or _confirm(target.name):
            ok = controller.confirm_removal()
        else:
            controller.cancel_removal()

    _print_board(controller)
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
