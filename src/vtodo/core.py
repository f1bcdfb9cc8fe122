"""Store operations and identifier assignment (pure functions, no I/O)."""

import logging
import random
from typing import Optional, Sequence

from .models import (
    DEFAULT_NAME_ATTEMPTS,
    Entry,
    NameExhaustedError,
    Status,
    Store,
    WordListError,
)

logger = logging.getLogger(__name__)


def add_entry(store: Store, entry: Entry) -> None:
    store.entries.append(entry)


def find_entry(store: Store, entry_id: str) -> Optional[Entry]:
    """Return the first entry with entry_id, or None."""
    for e in store.entries:
        if e.id == entry_id:
            return e
    return None


def remove_entries(store: Store, entry_id: str) -> int:
    """Drop every entry with entry_id; return how many were removed."""
    before = len(store.entries)
    store.entries[:] = [e for e in store.entries if e.id != entry_id]
    return before - len(store.entries)


def set_status(store: Store, entry_id: str, status: Status) -> bool:
    """Set the status of the first matching entry. False if there is none."""
    entry = find_entry(store, entry_id)
    if entry is None:
        return False
    entry.status = status
    return True


def pick_name(
    store: Store,
    words: Sequence[str],
    rng: Optional[random.Random] = None,
    max_attempts: int = DEFAULT_NAME_ATTEMPTS,
) -> str:
    """Draw random words until one is not already used as an id.

    Gives up with NameExhaustedError after max_attempts draws.
    """
    if not words:
        raise WordListError("Word list is empty")
    rng = rng or random.Random()
    taken = {e.id for e in store.entries}
    for attempt in range(1, max_attempts + 1):
        word = rng.choice(words)
        if word not in taken:
            logger.debug("picked id %r after %d draw(s)", word, attempt)
            return word
    raise NameExhaustedError(
        f"Could not find an unused name after {max_attempts} attempts "
        f"({len(taken)} ids in use, {len(words)} words available)"
    )
