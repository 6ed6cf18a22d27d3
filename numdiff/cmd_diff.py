from __future__ import annotations

import logging
from typing import Optional

from numdiff.cmd_base import Base
from numdiff.config import ParseError, Settings
from numdiff.diff import diff, has_changes, lines
from numdiff.print_diff import PrintDiffMixin
from numdiff.render import render

log = logging.getLogger(__name__)

STDIN_PATH = "-"


class Diff(PrintDiffMixin, Base):
    def run(self) -> None:
        if len(self.args) != 2:
            self.eprintln("usage: numdiff [OPTIONS] OLD NEW")
            self.exit(2)

        if self.args.count(STDIN_PATH) > 1:
            self.eprintln("numdiff: standard input can only be read once")
            self.exit(2)

        try:
            self.settings = Settings.load(
                self.config,
                context=self.options.get("context"),
                elide=self.options.get("elide"),
                color=self.options.get("color"),
            )
            self.check_diff_formats()
        except (ParseError, ValueError) as e:
            self.eprintln(f"fatal: {e}")
            self.exit(2)

        if self.settings.color == "always":
            self.colorize = True
        elif self.settings.color == "never":
            self.colorize = False

        a_path, b_path = self.args
        a = lines(self.read_input(a_path))
        b = lines(self.read_input(b_path))

        script = diff(a, b)
        if not has_changes(script):
            log.debug("%s and %s compare equal", a_path, b_path)
            self.exit(0)

        self.print_diff(
            render(script, a, b, self.settings.context, self.settings.elide)
        )
        self.exit(1)

    def read_input(self, path: str) -> str:
        if path == STDIN_PATH:
            return self.stdin.read()

        data: Optional[str] = None
        try:
            data = self.expanded_path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
            self.eprintln(f"numdiff: {path}: {reason}")
            self.exit(2)

        assert data is not None
        return data
