"""vtodo command-line interface."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import colorama

from .config import Settings, load_settings
from .core import add_entry, pick_name, remove_entries, set_status
from .deadlines import KEYWORDS, parse_deadline
from .logging_setup import setup_logging
from .models import MAX_PRIORITY, Entry, Status, TodoError
from .render import print_store
from .storage import load_words, read_store, write_store

logger = logging.getLogger(__name__)

DESCRIPTION = f"""Something to help me organise.

Deadlines can be one of: {", ".join(KEYWORDS)},
or a day of this month as a single number."""


def priority_type(raw: str) -> int:
    """argparse type for -p: an integer 0..255."""
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid priority: {raw!r}")
    if not 0 <= value <= MAX_PRIORITY:
        raise argparse.ArgumentTypeError(f"priority must be between 0 and {MAX_PRIORITY}")
    return value


def cmd_list(args: argparse.Namespace, settings: Settings) -> None:
    store = read_store(str(settings.data_path))
    print_store(store, color=settings.color)


def cmd_add(args: argparse.Namespace, settings: Settings) -> None:
    text = args.text.strip()
    deadline = parse_deadline(args.deadline) if args.deadline is not None else None

    store = read_store(str(settings.data_path))
    words = load_words(str(settings.words_path))
    entry_id = pick_name(store, words, max_attempts=settings.name_attempts)
    print(f"Adding {entry_id} - '{text}'")

    add_entry(store, Entry(id=entry_id, task=text, deadline=deadline, priority=args.priority))
    print_store(store, color=settings.color)
    write_store(str(settings.data_path), store)


def _set_progress(args: argparse.Namespace, settings: Settings, status: Status, verb: str) -> None:
    store = read_store(str(settings.data_path))
    print(f"{verb} '{args.id}'")
    if not set_status(store, args.id, status):
        print(f"Could not find '{args.id}' to update, exiting..")
        return
    print_store(store, color=settings.color)
    write_store(str(settings.data_path), store)


def cmd_start(args: argparse.Namespace, settings: Settings) -> None:
    _set_progress(args, settings, "Started", "Starting")


def cmd_resolve(args: argparse.Namespace, settings: Settings) -> None:
    _set_progress(args, settings, "Resolved", "Resolving")


def cmd_remove(args: argparse.Namespace, settings: Settings) -> None:
    store = read_store(str(settings.data_path))
    print(f"Removing '{args.id}'")
    if not remove_entries(store, args.id):
        print(f"Could not find '{args.id}' to remove, exiting..")
        return
    print_store(store, color=settings.color)
    write_store(str(settings.data_path), store)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    p = argparse.ArgumentParser(
        prog="todo",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "--dir",
        type=Path,
        default=None,
        help="Directory holding data.json and nouns.txt (default: ~/.todo.d)",
    )
    p.add_argument("--no-color", action="store_true", help="Disable colored output")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    p.set_defaults(func=cmd_list)
    sub = p.add_subparsers(dest="cmd")

    s_list = sub.add_parser("list", help="Show all tasks (default)")
    s_list.set_defaults(func=cmd_list)

    s_add = sub.add_parser("add", help="Add a new task")
    s_add.add_argument("text", help="Task text, quoted if it has spaces")
    s_add.add_argument("-d", "--deadline", default=None, help="Vague deadline, e.g. today or 14")
    s_add.add_argument("-p", "--priority", type=priority_type, default=0, help="Priority 0-255")
    s_add.set_defaults(func=cmd_add)

    s_start = sub.add_parser("start", help="Mark a task as started")
    s_start.add_argument("id", help="Task name as shown by `list`")
    s_start.set_defaults(func=cmd_start)

    s_resolve = sub.add_parser("resolve", help="Mark a task as resolved")
    s_resolve.add_argument("id")
    s_resolve.set_defaults(func=cmd_resolve)

    s_remove = sub.add_parser("remove", help="Delete a task")
    s_remove.add_argument("id")
    s_remove.set_defaults(func=cmd_remove)

    return p


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point. Runs `list` if no subcommand is given."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(
            data_dir=args.dir,
            color=False if args.no_color else None,
            log_level="DEBUG" if args.verbose else None,
        )
        setup_logging(level=settings.log_level, log_file=settings.log_file)
        if settings.color:
            colorama.just_fix_windows_console()
        logger.debug("command=%s data=%s", args.cmd or "list", settings.data_path)
        args.func(args, settings)
    except TodoError as e:
        logger.debug("aborting", exc_info=True)
        sys.exit(f"Error: {e}")


if __name__ == "__main__":
    main()
