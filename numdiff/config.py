from __future__ import annotations

import logging
import os
import re
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import (
    List,
    Mapping,
    Optional,
    Pattern,
    Sequence,
    TextIO,
    Tuple,
    TypeAlias,
    cast,
)

from numdiff.render import CONTEXT_RADIUS

log = logging.getLogger(__name__)

ConfigValue: TypeAlias = bool | int | str

CONFIG_ENV = "NUMDIFF_CONFIG"
DEFAULT_CONFIG = "~/.numdiffrc"

SECTION_LINE: Pattern[str] = re.compile(
    r'^\s*\[([a-z0-9-]+)( "(.+)")?\]\s*(?:$|#|;)', re.I
)
VARIABLE_LINE: Pattern[str] = re.compile(
    r"^\s*([a-z][a-z0-9-]*)\s*=\s*(.*?)\s*(?:$|#|;)", re.I | re.M
)
BLANK_LINE: Pattern[str] = re.compile(r"^\s*(?:$|#|;)")
INTEGER: Pattern[str] = re.compile(r"^-?(0|[1-9][0-9]*)$")


class ParseError(Exception):
    pass


@dataclass
class Section:
    name: Sequence[str]

    @staticmethod
    def normalize(name: Sequence[str]) -> tuple[str, str]:
        if not name:
            return ("", "")
        return (name[0].lower(), ".".join(name[1:]))


@dataclass
class Variable:
    name: str
    value: ConfigValue

    @staticmethod
    def normalize(name: Optional[str]) -> Optional[str]:
        return name.lower() if name else None


@dataclass
class Line:
    text: str
    section: Section
    variable: Optional[Variable] = None

    @property
    def normal_variable(self) -> Optional[str]:
        return Variable.normalize(self.variable.name) if self.variable else None


class ConfigFile:
    """Read-only view of a git-config style file.

    Keys are sequences such as ``["diff", "context"]`` or
    ``["color", "diff", "new"]``; the last part names the variable and the
    rest the section. Section and variable names are case-insensitive,
    subsection names are not.
    """

    def __init__(self, path: Path | None) -> None:
        self.path: Path | None = path
        self.lines: dict[tuple[str, str], List[Line]] = defaultdict(list)
        self.loaded = False
        self.lineno = 0

    @classmethod
    def locate(
        cls, path: Path | str | None = None, env: Mapping[str, str] | None = None
    ) -> ConfigFile:
        env = os.environ if env is None else env
        if path is None:
            path = env.get(CONFIG_ENV) or DEFAULT_CONFIG
        return cls(Path(path).expanduser())

    def open(self) -> None:
        if not self.loaded:
            self.read_config_file()

    def get(self, key: Sequence[str]) -> ConfigValue | None:
        try:
            return self.get_all(key)[-1]
        except IndexError:
            return None

    def get_all(self, key: Sequence[str]) -> List[ConfigValue]:
        self.open()
        section, var = self.split_key(key)
        lines = self.find_lines(section, var)
        return [cast(Variable, ln.variable).value for ln in lines]

    def line_count(self) -> int:
        return sum(len(ls) for ls in self.lines.values())

    @staticmethod
    def split_key(key: Sequence[str]) -> Tuple[List[str], str]:
        parts = list(map(str, key))
        var = parts.pop()
        return (parts, var)

    def find_lines(self, key: Sequence[str], var: str) -> List[Line]:
        name = Section.normalize(key)
        if name not in self.lines:
            return []

        normal = Variable.normalize(var)
        return [ln for ln in self.lines[name] if ln.normal_variable == normal]

    def read_config_file(self) -> None:
        self.lines = defaultdict(list)
        self.loaded = True
        section = Section([])

        if self.path is None:
            return

        self.lineno = 0

        try:
            with self.path.open("r", encoding="utf-8") as fh:
                while True:
                    start = self.lineno + 1
                    try:
                        raw = self.read_line(fh)
                    except EOFError:
                        break
                    line = self.parse_line(section, raw, start)
                    section = line.section
                    self.lines[Section.normalize(section.name)].append(line)
        except FileNotFoundError:
            log.debug("no config file at %s", self.path)
            return
        except OSError as e:
            raise ParseError(
                f"cannot read config file {self.path}: {e.strerror}"
            ) from e

        log.debug("read %d config lines from %s", self.line_count(), self.path)

    def read_line(self, fh: TextIO) -> str:
        buffer = ""
        while True:
            chunk = fh.readline()
            if chunk == "":
                if buffer:
                    return buffer
                raise EOFError
            self.lineno += 1
            buffer += chunk
            if not buffer.endswith("\\\n"):
                return buffer

    def parse_line(self, section: Section, line: str, lineno: int) -> Line:
        if m := SECTION_LINE.match(line):
            section = Section([m.group(1)] + ([m.group(3)] if m.group(3) else []))
            return Line(line, section)
        if m := VARIABLE_LINE.match(line.replace("\\\n", "")):
            variable = Variable(m.group(1), self.parse_value(m.group(2)))
            return Line(line, section, variable)
        if BLANK_LINE.match(line):
            return Line(line, section)
        raise ParseError(f"bad config line {lineno} in file {self.path}")

    @staticmethod
    def parse_value(value: str) -> ConfigValue:
        lower = value.lower()
        if lower in {"yes", "on", "true"}:
            return True
        if lower in {"no", "off", "false"}:
            return False
        if INTEGER.match(value):
            return int(value)
        return value


COLOR_MODES = ("auto", "always", "never")


@dataclass
class Settings:
    context: int = CONTEXT_RADIUS
    elide: bool = True
    color: str = "auto"

    @classmethod
    def load(
        cls,
        config: ConfigFile,
        context: Optional[int] = None,
        elide: Optional[bool] = None,
        color: Optional[str] = None,
    ) -> Settings:
        settings = cls()

        value = config.get(["diff", "context"])
        if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
            settings.context = value
        elif value is not None:
            raise ParseError(f"diff.context must be a non-negative integer: {value}")

        value = config.get(["diff", "elide"])
        if isinstance(value, bool):
            settings.elide = value
        elif value is not None:
            raise ParseError(f"diff.elide must be a boolean: {value}")

        value = config.get(["color", "ui"])
        if value is True:
            settings.color = "always"
        elif value is False:
            settings.color = "never"
        elif value in COLOR_MODES:
            settings.color = cast(str, value)
        elif value is not None:
            raise ParseError(f"color.ui must be one of {', '.join(COLOR_MODES)}")

        if context is not None:
            settings.context = context
        if elide is not None:
            settings.elide = elide
        if color is not None:
            settings.color = color

        return settings
