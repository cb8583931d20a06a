from __future__ import annotations

import argparse
import asyncio
import os
from dataclasses import replace
from pathlib import Path

from .actions import CommandAction, CommandOutcome, build_actions
from .config import ClientConfig, default_settings_path, load_settings
from .logs import DEFAULT_LOG_LEVEL, configure_logging
from .notifier import DesktopNotifier, NotificationSurface, StreamNotifier
from .prompts import ConsoleFormPresenter, FormPresenter, PresetFormPresenter
from .selection import Project, Selection, StaticSelection, Tag, Task
from .transport import HttpTransport


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="montage-commands",
        description="Start, extend or pause a Montage focus session",
    )
    parser.add_argument("--addr", default=None, help="Montage server address (MONTAGE_ADDR)")
    parser.add_argument("--port", type=int, default=None, help="Montage server port (MONTAGE_PORT)")
    parser.add_argument("--endpoint", default=None, help="full GraphQL endpoint URL (MONTAGE_ENDPOINT)")
    parser.add_argument(
        "--settings",
        default=str(default_settings_path()),
        help="settings JSON path (default ~/.montage_commands/settings.json)",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("MONTAGE_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        help="loguru level for diagnostics on stderr",
    )
    parser.add_argument("--no-notify", action="store_true", help="print notifications instead of using the desktop")
    parser.add_argument("-y", "--yes", action="store_true", help="skip the form and use flags and defaults")

    subparsers = parser.add_subparsers(dest="command", required=True)

    start_parser = subparsers.add_parser("start", help="start a focus session")
    start_parser.add_argument("--description", default=None, help="session description")
    start_parser.add_argument("--minutes", default=None, help="session length in minutes")
    start_parser.add_argument("--task", default=None, help="selected task name")
    start_parser.add_argument("--task-minutes", type=int, default=None, help="selected task estimate")
    start_parser.add_argument("--task-project", default=None, help="project containing the selected task")
    start_parser.add_argument("--tag", action="append", default=[], help="selected tag (repeatable)")
    start_parser.add_argument("--project", action="append", default=[], help="selected project (repeatable)")

    break_parser = subparsers.add_parser("break", help="start a break")
    break_parser.add_argument("--description", default=None, help="break description")
    break_parser.add_argument("--minutes", default=None, help="break length in minutes")

    extend_parser = subparsers.add_parser("extend", help="extend the current session")
    extend_parser.add_argument("--minutes", default=None, help="minutes to add")

    extend_to_parser = subparsers.add_parser("extend-to", help="extend the current session until a time")
    extend_to_parser.add_argument("--until", dest="target", default=None, help="target time HH:MM")

    return parser


def main(argv: list[str] | None = None, transport: HttpTransport | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    config = _client_config(args)
    settings = load_settings(Path(args.settings))
    surface: NotificationSurface = StreamNotifier() if args.no_notify else DesktopNotifier()
    selection = _selection(args)
    actions = build_actions(
        presenter=_presenter(args),
        surface=surface,
        selection_source=StaticSelection(selection),
        config=config,
        settings=settings,
        transport=transport,
    )

    action = actions[args.command]
    if args.command == "start" and not selection.is_empty and not action.validate():
        parser.error("start needs exactly one task, one tag or one project selected")

    try:
        outcome = _run_flow(action)
    except KeyboardInterrupt:
        return 130
    return 1 if outcome.status == "failed" else 0


def _run_flow(action: CommandAction) -> CommandOutcome:
    # SIGINT must stay a KeyboardInterrupt for the console form to see it.
    loop = asyncio.new_event_loop()
    task = loop.create_task(action.run())
    try:
        return loop.run_until_complete(task)
    except KeyboardInterrupt:
        if not task.done():
            task.cancel()
            loop.run_until_complete(asyncio.gather(task, return_exceptions=True))
        raise
    finally:
        loop.close()


def _client_config(args: argparse.Namespace) -> ClientConfig:
    config = ClientConfig.from_env()
    if args.addr:
        config = replace(config, addr=args.addr, endpoint=None)
    if args.port is not None:
        config = replace(config, port=args.port, endpoint=None)
    if args.endpoint:
        config = replace(config, endpoint=args.endpoint)
    return config


def _presenter(args: argparse.Namespace) -> FormPresenter:
    values = {
        "description": getattr(args, "description", None),
        "minutes": getattr(args, "minutes", None),
        "target": getattr(args, "target", None),
    }
    if args.yes:
        return PresetFormPresenter(values)
    return ConsoleFormPresenter(overrides=values)


def _selection(args: argparse.Namespace) -> Selection:
    if args.command != "start":
        return Selection()
    tasks: tuple[Task, ...] = ()
    if args.task:
        project = Project(args.task_project) if args.task_project else None
        tasks = (Task(args.task, estimated_minutes=args.task_minutes, project=project),)
    return Selection(
        tasks=tasks,
        tags=tuple(Tag(name) for name in args.tag),
        projects=tuple(Project(name) for name in args.project),
    )
