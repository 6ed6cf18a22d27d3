from typing import Iterator, List, Optional


class ContextBuffer:
    """Fixed-size ring of the most recent unchanged lines.

    Once full, each push overwrites the oldest line. ``dropped`` counts the
    overwritten lines since the last flush.
    """

    def __init__(self, size: int):
        if size < 0:
            raise ValueError("Context buffer size must not be negative.")
        self._lines: List[Optional[str]] = [None] * size
        self._offset: int = 0
        self._count: int = 0
        self.dropped: int = 0

    @property
    def capacity(self) -> int:
        return len(self._lines)

    def __len__(self) -> int:
        return self._count

    def push(self, line: str) -> None:
        size = len(self._lines)
        if size == 0:
            self.dropped += 1
            return

        if self._count == size:
            self.dropped += 1
        else:
            self._count += 1

        self._lines[self._offset] = line
        self._offset = (self._offset + 1) % size

    def __iter__(self) -> Iterator[str]:
        size = len(self._lines)
        cursor = (self._offset - self._count + size) % size if size else 0

        for _ in range(self._count):
            line = self._lines[cursor]
            assert line is not None
            yield line
            cursor = (cursor + 1) % size

    def flush(self) -> List[str]:
        lines = list(self)
        self.clear()
        return lines

    def clear(self) -> None:
        self._lines = [None] * len(self._lines)
        self._offset = 0
        self._count = 0
        self.dropped = 0
