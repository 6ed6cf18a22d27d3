from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import Any, MutableMapping, TextIO

from numdiff.color import Color
from numdiff.config import ConfigFile


class Base:
    def __init__(
        self,
        _dir: Path,
        env: MutableMapping[str, str],
        args: list[str],
        stdin: TextIO,
        stdout: TextIO,
        stderr: TextIO,
        options: dict[str, Any] | None = None,
    ):
        self.dir: Path = _dir
        self.env: MutableMapping[str, str] = env
        self.args: list[str] = args
        self.stdin: TextIO = stdin
        self.stdout: TextIO = stdout
        self.stderr: TextIO = stderr
        self.options: dict[str, Any] = options or {}
        self.status: int | None = None
        self.isatty: bool = stdout.isatty()
        self.colorize: bool = self.isatty

    @cached_property
    def config(self) -> ConfigFile:
        return ConfigFile.locate(self.options.get("config"), self.env)

    def exit(self, status: int = 0) -> None:
        self.status = status
        raise ExitSignal(self.status)

    def execute(self) -> int:
        try:
            self.run()
            self.status = 0
        except ExitSignal as e:
            self.status = e.status

        self.stdout.flush()
        self.stderr.flush()

        assert self.status is not None
        return self.status

    def expanded_path(self, path: str) -> Path:
        return (self.dir / path).absolute()

    def fmt(self, style: str | list[str], string: str) -> str:
        return Color.format(style, string) if self.colorize else string

    def run(self) -> None:
        raise NotImplementedError(f"{self.__class__.__name__}.run() not implemented")

    def println(self, string: str) -> None:
        self.stdout.write(string + "\n")

    def eprintln(self, string: str) -> None:
        self.stderr.write(string + "\n")


class ExitSignal(Exception):
    def __init__(self, status: int = 0) -> None:
        super().__init__(f"Exit with status {status}")
        self.status: int | None = status
