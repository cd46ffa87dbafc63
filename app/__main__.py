"""Entry point: ``python -m app``.

Commands:
  - ``python -m app serve``              → Launch the quest HTTP API
  - ``python -m app list``               → Print the saved goals
  - ``python -m app add simple Read --points 100``
  - ``python -m app record 1``           → Record one achievement and save

``add`` and ``record`` load the goals file, apply the change and save it
back. The score ledger is not stored, so ``record`` only reports the points
earned by that event.
"""

from __future__ import annotations

import argparse
import logging
import sys

from app.config import settings
from app.logging_config import setup_logging
from app.quest.errors import QuestError
from app.quest.inputs import parse_int
from app.quest.session import QuestSession

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="app", description="Eternal Quest goal tracker")
    parser.add_argument("--log-level", type=str, default=None, choices=LOG_LEVELS)
    sub = parser.add_subparsers(dest="command", required=True)

    srv = sub.add_parser("serve", help="Start the quest HTTP API")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)

    ls = sub.add_parser("list", help="List saved goals")
    ls.add_argument("--file", type=str, default=None, help="Goals file (default: settings.goals_file)")

    add = sub.add_parser("add", help="Add a goal to the goals file")
    add.add_argument("variant", help="simple | eternal | checklist")
    add.add_argument("name")
    add.add_argument("--points", help="Points per completion (simple/eternal)")
    add.add_argument("--target-count", help="Completions required (checklist)")
    add.add_argument("--points-per", help="Points per completion (checklist)")
    add.add_argument("--bonus", help="Bonus on reaching the target (checklist)")
    add.add_argument("--file", type=str, default=None)

    rec = sub.add_parser("record", help="Record an achievement for goal INDEX")
    rec.add_argument("index", help="Goal number as shown by 'list'")
    rec.add_argument("--file", type=str, default=None)

    return parser


def _optional_int(raw: str | None, field: str) -> int | None:
    return None if raw is None else parse_int(raw, field)


def _open_session(path: str | None) -> QuestSession:
    session = QuestSession(path)
    if not session.load_goals():
        print(f"No saved goals found at {session.goals_file}.")
    return session


def _cmd_list(args: argparse.Namespace) -> None:
    session = _open_session(args.file)
    for index, status in session.list_goals():
        print(f"{index}. {status}")


def _cmd_add(args: argparse.Namespace) -> None:
    params = {
        "points": _optional_int(args.points, "points"),
        "target_count": _optional_int(args.target_count, "target-count"),
        "points_per_event": _optional_int(args.points_per, "points-per"),
        "bonus": _optional_int(args.bonus, "bonus"),
    }
    session = _open_session(args.file)
    goal = session.add_goal(args.variant, args.name, **params)
    session.save_goals()
    print(f"Added goal #{len(session)}: {goal.name}")


def _cmd_record(args: argparse.Namespace) -> None:
    index = parse_int(args.index, "index")
    session = _open_session(args.file)
    earned = session.record_achievement(index)
    session.save_goals()
    print(f"You earned {earned} points!")


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from app.main import create_app

    uvicorn.run(create_app(), host=args.host, port=args.port, log_level=args.log_level.lower())


COMMANDS = {
    "list": _cmd_list,
    "add": _cmd_add,
    "record": _cmd_record,
    "serve": _run_server,
}


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.log_level is None:
        # Keep one-shot commands quiet unless asked
        args.log_level = settings.log_level if args.command == "serve" else "WARNING"
    setup_logging(args.log_level)

    try:
        COMMANDS[args.command](args)
    except QuestError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
