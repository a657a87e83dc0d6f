"""Gap buffer: a text store that makes edits at the cursor cheap."""

from __future__ import annotations

GAP_DEFAULT_SIZE = 256
BUFFER_GROW_SIZE = 512


class GapBuffer:
    """Text with a movable cursor, stored around a gap at the cursor position."""

    def __init__(self) -> None:
        self._data: list[str] = [""] * GAP_DEFAULT_SIZE
        self._gap_start = 0
        self._gap_end = GAP_DEFAULT_SIZE

    def _grow(self) -> None:
        right = self._data[self._gap_end:]
        new_capacity = len(self._data) + BUFFER_GROW_SIZE
        gap = new_capacity - self._gap_start - len(right)
        self._data = self._data[: self._gap_start] + [""] * gap + right
        self._gap_end = new_capacity - len(right)

    def insert(self, c: str) -> None:
        """Insert a single character at the cursor and advance the cursor."""
        if not isinstance(c, str) or len(c) != 1:
            raise ValueError("insert expects exactly one character")
        if self._gap_start == self._gap_end:
            self._grow()
        self._data[self._gap_start] = c
        self._gap_start += 1

    def insert_text(self, text: str) -> None:
        """Insert every character of text at the cursor."""
        for c in text:
            self.insert(c)

    def delete(self) -> None:
        """Remove the character before the cursor, like Backspace."""
        if self._gap_start == 0:
            raise IndexError("nothing to delete")
        self._gap_start -= 1
        self._data[self._gap_start] = ""

    def move_cursor(self, pos: int) -> None:
        """Move the cursor to pos, clamped to the end of the text."""
        if pos < 0:
            raise ValueError("cursor position cannot be negative")
        pos = min(pos, len(self))
        current = self._gap_start
        if pos < current:
            diff = current - pos
            self._gap_end -= diff
            self._gap_start -= diff
            moved = self._data[self._gap_start : self._gap_start + diff]
            self._data[self._gap_end : self._gap_end + diff] = moved
        elif pos > current:
            diff = pos - current
            moved = self._data[self._gap_end : self._gap_end + diff]
            self._data[self._gap_start : self._gap_start + diff] = moved
            self._gap_start += diff
            self._gap_end += diff

    def __len__(self) -> int:
        return len(self._data) - (self._gap_end - self._gap_start)

    def __str__(self) -> str:
        return "".join(self._data[: self._gap_start] + self._data[self._gap_end:])