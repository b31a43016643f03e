from typing import Optional

from browser_model.types import HistoryEntry


class BrowserHistory:
    """Visited locations in visit order plus a cursor into them"""

    def __init__(self):
        self._history: list[HistoryEntry] = []
        self._current_index: int = -1

    def __len__(self) -> int:
        return len(self._history)

    @property
    def current_index(self) -> int:
        """Index of the current entry, -1 while nothing has been visited"""
        return self._current_index

    def add_entry(self, entry: HistoryEntry) -> None:
        """Commit a visit; entries after the cursor are discarded first"""
        if self._current_index < len(self._history) - 1:
            self._history = self._history[: self._current_index + 1]

        self._history.append(entry)
        self._current_index = len(self._history) - 1

    def can_go_back(self) -> bool:
        """True when an entry exists before the cursor"""
        return self._current_index > 0

    def can_go_forward(self) -> bool:
        """True when an entry exists after the cursor"""
        return self._current_index < len(self._history) - 1

    def get_current(self) -> Optional[HistoryEntry]:
        """Entry under the cursor, None while empty"""
        if self._current_index >= 0:
            return self._history[self._current_index]
        return None

    def get_history(self) -> list[HistoryEntry]:
        """Snapshot of the entries; changing it leaves the history alone"""
        return list(self._history)

    def go_back(self) -> HistoryEntry:
        """Move to the previous entry; IndexError at the first one"""
        if not self.can_go_back():
            raise IndexError("already at the first history entry")
        self._current_index -= 1
        return self._history[self._current_index]

    def go_forward(self) -> HistoryEntry:
        """Move to the next entry; IndexError at the last one"""
        if not self.can_go_forward():
            raise IndexError("already at the last history entry")
        self._current_index += 1
        return self._history[self._current_index]
