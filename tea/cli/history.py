from __future__ import annotations
from typing import Iterator, List, Optional


class History:
    """
    Submitted lines, newest first, plus the recall cursor used by the editor.

    cursor == -1 means nothing is being recalled. Moving the cursor past either
    end is a no-op, so it always stays within [-1, len - 1].
    """

    def __init__(self) -> None:
        self._entries: List[str] = []
        self.cursor: int = -1

    def record(self, line: str) -> None:
        if not line.strip():
            raise ValueError("blank lines are not recorded")
        self._entries.insert(0, line)
        self.cursor = -1

    def get(self, index: int) -> str:
        if not 0 <= index < len(self._entries):
            raise IndexError(f"history index out of range: {index}")
        return self._entries[index]

    def reset_cursor(self) -> None:
        self.cursor = -1

    def older(self) -> Optional[str]:
        """Step toward older entries. Returns the recalled entry, or None if already at the oldest."""
        if self.cursor >= len(self._entries) - 1:
            return None
        self.cursor += 1
        return self._entries[self.cursor]

    def newer(self) -> Optional[str]:
        """Step toward newer entries. Returns '' when stepping back to the blank line."""
        if self.cursor < 0:
            return None
        self.cursor -= 1
        if self.cursor < 0:
            return ""
        return self._entries[self.cursor]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
