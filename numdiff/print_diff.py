from __future__ import annotations

from typing import Iterable

from numdiff.color import Color
from numdiff.render import TaggedLine

DIFF_FORMATS: dict[str, str] = {
    "context": "normal",
    "new": "green",
    "old": "red",
    "elided": "cyan",
}

SLOTS: dict[str, str] = {
    "context": "context",
    "added": "new",
    "removed": "old",
    "elided": "elided",
}


class PrintDiffMixin:
    def diff_style(self, name: str) -> str:
        style = self.config.get(["color", "diff", name])

        if isinstance(style, str) and style:
            return style

        return DIFF_FORMATS[name]

    def diff_fmt(self, name: str, text: str) -> str:
        return self.fmt(self.diff_style(name), text)

    def check_diff_formats(self) -> None:
        for name in DIFF_FORMATS:
            Color.codes(self.diff_style(name))

    def print_diff(self, tagged_lines: Iterable[TaggedLine]) -> None:
        for line in tagged_lines:
            self.print_tagged_line(line)

    def print_tagged_line(self, line: TaggedLine) -> None:
        self.println(self.diff_fmt(SLOTS[line.tag], str(line)))
