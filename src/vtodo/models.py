"""Data models, constants and errors for vtodo."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Literal, Optional, get_args

DEFAULT_DIR_NAME = ".todo.d"
DEFAULT_DATA_FILE = "data.json"
DEFAULT_WORDS_FILE = "nouns.txt"
DEFAULT_NAME_ATTEMPTS = 100
MAX_PRIORITY = 255

Status = Literal["NotStarted", "Started", "Resolved"]
STATUSES = get_args(Status)


def local_now() -> datetime:
    """Current time as an aware datetime in the local zone."""
    return datetime.now().astimezone()


@dataclass
class Entry:
    """A single todo item."""

    id: str
    task: str
    deadline: Optional[datetime] = None
    status: Status = "NotStarted"
    priority: int = 0


@dataclass
class Store:
    """All entries plus the time the file was last written."""

    entries: List[Entry] = field(default_factory=list)
    last_updated: datetime = field(default_factory=local_now)


class TodoError(Exception):
    """Base class for fatal vtodo errors."""


class CorruptStoreError(TodoError):
    pass


class StorageError(TodoError):
    """The data file could not be read or written."""


class DeadlineError(TodoError, ValueError):
    pass


class WordListError(TodoError):
    pass


class NameExhaustedError(TodoError):
    pass


class ConfigError(TodoError):
    pass
