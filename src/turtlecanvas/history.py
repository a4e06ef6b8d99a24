"""Bounded command history with a recall cursor."""

import logging
from collections import deque

from .errors import HistoryError

LOG = logging.getLogger(__name__)

DEFAULT_MAX_SIZE = 1 << 20


def _check_size(max_size) -> int:
    if isinstance(max_size, bool) or not isinstance(max_size, int) or max_size < 0:
        raise HistoryError(
            f"expected max_size to be a non-negative int, but got {max_size!r}"
        )
    if max_size < 2:
        LOG.warning("History budget set to %d; this seems like an accident", max_size)
    return max_size


class History:
    """
    FIFO of past commands, bounded by total characters rather than entries.

    The cursor points one past the newest entry after every `record`, so the
    first `recall_previous` returns the newest command.

    >>> h = History()
    >>> h.record("a"); h.record("b")
    >>> h.recall_previous()
    'b'
    >>> h.recall_previous()
    'a'
    >>> h.recall_next()
    'b'
    >>> h.recall_next()
    ''
    """

    def __init__(self, max_size: int = DEFAULT_MAX_SIZE):
        self._max_size = _check_size(max_size)
        self._entries: deque[str] = deque()
        self._size = 0
        self._index = 0

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def size(self) -> int:
        """Characters currently stored."""
        return self._size

    @property
    def index(self) -> int:
        return self._index

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def _get(self, index: int) -> str:
        if 0 <= index < len(self._entries):
            return self._entries[index]
        return ""

    def current(self) -> str:
        """Entry under the cursor, or an empty string."""
        return self._get(self._index)

    def newest(self) -> str:
        return self._get(len(self._entries) - 1)

    def oldest(self) -> str:
        return self._get(0)

    def record(self, text: str):
        """Append `text` and move the cursor past it, then flush old entries."""
        self._entries.append(text)
        self._size += len(text)
        self._index = len(self._entries)
        self._flush()

    def _flush(self):
        while self._size > self._max_size:
            evicted = self._entries.popleft()
            self._size -= len(evicted)
            self._index = max(self._index - 1, 0)
            LOG.debug("Evicted %d chars from history", len(evicted))

    def recall_previous(self) -> str:
        self._index = max(self._index - 1, 0)
        return self.current()

    def recall_next(self) -> str:
        self._index = min(self._index + 1, len(self._entries))
        return self.current()

    def set_max_size(self, max_size: int):
        self._max_size = _check_size(max_size)
        self._flush()

    def clear(self):
        self._entries.clear()
        self._size = 0
        self._index = 0
