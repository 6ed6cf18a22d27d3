from __future__ import annotations

from numdiff.edit_distance import NoOp, compute


def char_equal(a: str, b: str) -> bool:
    return a == b


def char_editable(char: str) -> bool:
    return not char.isnumeric()


def line_editable(line: str) -> bool:
    """A line is hidden from the diff when it is made only of numeric
    characters. Empty lines stay editable."""
    return not (line and all(char.isnumeric() for char in line))


def lines_equal(a: str, b: str) -> bool:
    """Compare two lines, ignoring any difference confined to digits.

    The lines are diffed character by character with numeric characters
    marked non-editable; they are equal when no visible insert or delete is
    left over.
    """
    script = compute(list(a), list(b), char_equal, char_editable)
    return all(isinstance(op, NoOp) for op in script)


class LineEquality:
    """Caching wrapper around ``lines_equal`` for a single diff run."""

    def __init__(self) -> None:
        self.cache: dict[tuple[str, str], bool] = {}
        self.hits = 0

    def __call__(self, a: str, b: str) -> bool:
        if a == b:
            return True

        key = (a, b)
        if key in self.cache:
            self.hits += 1
            return self.cache[key]

        result = self.cache[key] = lines_equal(a, b)
        return result
