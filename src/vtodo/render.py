"""Human-readable, colorized task lines."""

from datetime import datetime
from typing import List, Optional

from colorama import Fore, Style

from .deadlines import in_zone_of, is_urgent
from .models import Entry, Status, Store

EMPTY_MESSAGE = "Nothing todo, woooooo!"

STATUS_LABELS = {
    "NotStarted": "Not Started",
    "Started": "Started",
    "Resolved": "Resolved",
}


def _paint(text: str, style: str, color: bool) -> str:
    if not color or not text:
        return text
    return f"{style}{text}{Style.RESET_ALL}"


def status_style(status: Status, urgent: bool) -> str:
    """Color for a status label; urgent unresolved work is red."""
    if status == "Resolved":
        return Fore.GREEN
    if urgent:
        return Fore.RED
    if status == "Started":
        return Fore.YELLOW
    return Style.DIM


def format_entry(entry: Entry, now: Optional[datetime] = None, color: bool = True) -> str:
    """One entry as `Task: id Priority: n | text | status` plus an optional deadline line."""
    urgent = is_urgent(entry, now)

    deadline_str = ""
    if entry.deadline is not None:
        deadline_str = _paint(
            in_zone_of(entry.deadline, now).strftime("\n\t Deadline: %d-%m %H:%M"),
            Fore.RED if urgent else Style.DIM,
            color,
        )

    priority_str = f"Priority: {entry.priority}" if entry.priority > 0 else ""
    status_str = _paint(STATUS_LABELS[entry.status], status_style(entry.status, urgent), color)
    task_str = _paint(entry.task, Style.BRIGHT, color)

    return f"Task: {entry.id} {priority_str} | {task_str} | {status_str} {deadline_str}"


def format_store(store: Store, now: Optional[datetime] = None, color: bool = True) -> List[str]:
    if not store.entries:
        return [EMPTY_MESSAGE]
    return [format_entry(e, now=now, color=color) for e in store.entries]


def print_store(store: Store, now: Optional[datetime] = None, color: bool = True) -> None:
    for line in format_store(store, now=now, color=color):
        print(line)
