"""Vague deadline keywords -> concrete local timestamps."""

import logging
from datetime import datetime, timedelta
from typing import Optional

from .models import DeadlineError, Entry, local_now

logger = logging.getLogger(__name__)

KEYWORDS = ("tomorrow", "today", "tonight", "evening", "week", "next week")


def _at(now: datetime, hour: int, minute: int) -> datetime:
    return now.replace(hour=hour, minute=minute, second=0, microsecond=0)


def parse_deadline(text: str, now: Optional[datetime] = None) -> datetime:
    """Resolve a vague deadline relative to ``now``.

    Accepted forms:
      - ``tomorrow``           now + 1 day
      - ``today``/``tonight``  today at 23:30
      - ``evening``            today at 23:00
      - ``week``/``next week`` now + 7 days
      - a day number ``d``     day d of the current month at 15:00

    Raises DeadlineError for anything else.
    """
    if now is None:
        now = local_now()
    word = text.strip()

    if word == "tomorrow":
        result = now + timedelta(days=1)
    elif word in ("today", "tonight"):
        result = _at(now, 23, 30)
    elif word == "evening":
        result = _at(now, 23, 0)
    elif word in ("week", "next week"):
        result = now + timedelta(days=7)
    else:
        if not (word.isascii() and word.isdigit()):
            raise DeadlineError(f"I don't understand the date you asked for: {text!r}")
        day = int(word)
        if day > 255:
            raise DeadlineError(f"I don't understand the date you asked for: {text!r}")
        try:
            result = _at(now, 15, 0).replace(day=day)
        except ValueError as e:
            raise DeadlineError(f"No day {day} in the current month ({e})") from e

    logger.debug("deadline %r resolved to %s", text, result.isoformat())
    return result


def in_zone_of(deadline: datetime, now: Optional[datetime] = None) -> datetime:
    """Express deadline in the same zone as now (local time by default)."""
    if now is None:
        now = local_now()
    if deadline.tzinfo is not None and now.tzinfo is not None:
        return deadline.astimezone(now.tzinfo)
    return deadline


def is_urgent(entry: Entry, now: Optional[datetime] = None) -> bool:
    """True when the deadline date is today or earlier and the entry is unresolved."""
    if entry.deadline is None or entry.status == "Resolved":
        return False
    if now is None:
        now = local_now()
    return in_zone_of(entry.deadline, now).date() <= now.date()
