"""File I/O for the vtodo data file and word list."""

import json
import logging
import os
import re
from datetime import datetime
from typing import Any, Dict, List, Optional

from .models import (
    MAX_PRIORITY,
    STATUSES,
    CorruptStoreError,
    Entry,
    StorageError,
    Store,
    WordListError,
    local_now,
)

logger = logging.getLogger(__name__)

# RFC 3339 as written by other tools: up to nanosecond precision, optional Z suffix.
TIMESTAMP_RE = re.compile(r"^(?P<base>[^.]+?)(?:\.(?P<frac>\d+))?(?P<tz>Z|z|[+-]\d{2}:?\d{2})?$")


def _normalize_timestamp(raw: str) -> str:
    """Rewrite raw into a form datetime.fromisoformat accepts on every supported Python."""
    m = TIMESTAMP_RE.match(raw.strip())
    if m is None:
        return raw
    out = m.group("base")
    if m.group("frac"):
        out += "." + (m.group("frac") + "000000")[:6]
    tz = m.group("tz")
    if tz in ("Z", "z"):
        out += "+00:00"
    elif tz:
        out += tz if ":" in tz else f"{tz[:3]}:{tz[3:]}"
    return out


def _parse_time(raw: Any) -> datetime:
    if not isinstance(raw, str):
        raise ValueError(f"expected a timestamp string, got {raw!r}")
    ts = datetime.fromisoformat(_normalize_timestamp(raw))
    if ts.tzinfo is None:
        ts = ts.astimezone()
    return ts


def entry_to_dict(entry: Entry) -> Dict[str, Any]:
    return {
        "id": entry.id,
        "task": entry.task,
        "deadline": entry.deadline.isoformat() if entry.deadline else None,
        "status": entry.status,
        "priority": entry.priority,
    }


def entry_from_dict(raw: Dict[str, Any]) -> Entry:
    """Build an Entry from its JSON form. Raises ValueError/KeyError/TypeError on bad input."""
    status = raw["status"]
    if status not in STATUSES:
        raise ValueError(f"unknown status {status!r}")
    priority = raw["priority"]
    if isinstance(priority, bool) or not isinstance(priority, int):
        raise ValueError(f"priority must be an integer, got {priority!r}")
    if not 0 <= priority <= MAX_PRIORITY:
        raise ValueError(f"priority out of range: {priority}")
    if not isinstance(raw["id"], str) or not isinstance(raw["task"], str):
        raise ValueError("id and task must be strings")
    deadline = raw.get("deadline")
    return Entry(
        id=raw["id"],
        task=raw["task"],
        deadline=_parse_time(deadline) if deadline is not None else None,
        status=status,
        priority=priority,
    )


def store_to_dict(store: Store) -> Dict[str, Any]:
    return {
        "entries": [entry_to_dict(e) for e in store.entries],
        "last_updated": store.last_updated.isoformat(),
    }


def store_from_dict(raw: Any) -> Store:
    if not isinstance(raw, dict):
        raise ValueError("top-level value must be an object")
    entries = raw["entries"]
    if not isinstance(entries, list):
        raise ValueError("'entries' must be a list")
    return Store(
        entries=[entry_from_dict(e) for e in entries],
        last_updated=_parse_time(raw["last_updated"]),
    )


def read_store(path: str) -> Store:
    """Load the data file.

    A missing file is an empty store. Anything that cannot be decoded raises
    CorruptStoreError; an unreadable file raises StorageError.
    """
    if not os.path.exists(path):
        logger.debug("no data file at %s, starting empty", path)
        return Store()

    try:
        with open(path, "r", encoding="utf-8") as f:
            store = store_from_dict(json.load(f))
    except OSError as e:
        raise StorageError(f"Could not read data file {path}: {e}") from e
    except (ValueError, KeyError, TypeError) as e:
        raise CorruptStoreError(f"Data file {path} is corrupted:\n{e}") from e

    logger.debug("loaded %d entries from %s", len(store.entries), path)
    return store


def write_store(path: str, store: Store, now: Optional[datetime] = None) -> None:
    """Overwrite the data file with the whole store."""
    store.last_updated = now or local_now()
    try:
        ensure_dir_exists(os.path.dirname(os.path.abspath(path)))
        with open(path, "w", encoding="utf-8") as f:
            json.dump(store_to_dict(store), f, ensure_ascii=False)
    except OSError as e:
        raise StorageError(f"Could not write data file {path}: {e}") from e
    logger.debug("saved %d entries to %s", len(store.entries), path)


def load_words(path: str) -> List[str]:
    """Read the id word list: one word per line, blanks ignored."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            words = [line.strip() for line in f]
    except FileNotFoundError as e:
        raise WordListError(f"Word list not found at {path}") from e
    except OSError as e:
        raise WordListError(f"Could not read word list {path}: {e}") from e
    words = [w for w in words if w]
    if not words:
        raise WordListError(f"Word list at {path} is empty")
    logger.debug("loaded %d words from %s", len(words), path)
    return words


def ensure_dir_exists(path: str) -> None:
    os.makedirs(path, exist_ok=True)
