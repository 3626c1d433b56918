"""Session input history with up/down navigation and a preserved draft."""

from __future__ import annotations

from collections import deque

MAX_HISTORY_SIZE = 100


class InputHistory:
    """Stores submitted inputs (oldest first) and lets the user walk through them."""

    def __init__(self) -> None:
        self._entries: deque[str] = deque(maxlen=MAX_HISTORY_SIZE)
        self._position: int | None = None
        self._draft = ""

    @property
    def position(self) -> int | None:
        """Index of the entry being shown, or None when at the draft position."""
        return self._position

    def push(self, entry: str) -> None:
        """Add an entry, ignoring blank input and consecutive duplicates."""
        entry = entry.strip()
        if not entry:
            return
        if self._entries and self._entries[-1] == entry:
            return
        self._entries.append(entry)
        self.reset_position()

    def previous(self, current_input: str) -> str | None:
        """Move to an older entry; None if there is nothing older."""
        if not self._entries:
            return None
        if self._position is None:
            self._draft = current_input
            self._position = len(self._entries) - 1
        elif self._position > 0:
            self._position -= 1
        else:
            return None
        return self._entries[self._position]

    def next(self) -> str | None:
        """Move to a newer entry, or back to the draft; None if already newest."""
        if self._position is None:
            return None
        if self._position + 1 < len(self._entries):
            self._position += 1
            return self._entries[self._position]
        self._position = None
        return self._draft

    def reset_position(self) -> None:
        """Leave navigation mode without clearing stored entries."""
        self._position = None
        self._draft = ""

    def __len__(self) -> int:
        return len(self._entries)