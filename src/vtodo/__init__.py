"""vtodo - a small personal todo list with vague deadlines."""

__version__ = "1.0.0"

from .models import (
    Entry,
    Store,
    Status,
    TodoError,
    CorruptStoreError,
    StorageError,
    DeadlineError,
    WordListError,
    NameExhaustedError,
    ConfigError,
)
from .storage import read_store, write_store, load_words
from .core import add_entry, find_entry, remove_entries, set_status, pick_name
from .deadlines import parse_deadline, is_urgent

__all__ = [
    "Entry",
    "Store",
    "Status",
    "TodoError",
    "CorruptStoreError",
    "StorageError",
    "DeadlineError",
    "WordListError",
    "NameExhaustedError",
    "ConfigError",
    "read_store",
    "write_store",
    "load_words",
    "add_entry",
    "find_entry",
    "remove_entries",
    "set_status",
    "pick_name",
    "parse_deadline",
    "is_urgent",
]
