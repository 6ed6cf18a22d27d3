from io import StringIO
from pathlib import Path
from typing import Any, Callable, Mapping, Protocol, TypeAlias

import pytest

from numdiff.cmd_diff import Diff

NumdiffCmdResult: TypeAlias = tuple[Diff, StringIO, StringIO, StringIO]

WriteFile: TypeAlias = Callable[[str, str], Path]


class NumdiffCmd(Protocol):
    def __call__(
        self,
        *argv: str,
        env: Mapping[str, str] | None = None,
        stdin_data: str = "",
        **options: Any,
    ) -> NumdiffCmdResult: ...


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    path = tmp_path / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "numdiffrc"


@pytest.fixture
def write_file(workspace: Path) -> WriteFile:
    def _write_file(name: str, contents: str) -> Path:
        path = workspace / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(contents, encoding="utf-8")
        return path

    return _write_file


@pytest.fixture
def write_config(config_path: Path) -> Callable[[str], None]:
    def _write_config(contents: str) -> None:
        config_path.write_text(contents, encoding="utf-8")

    return _write_config


@pytest.fixture
def numdiff_cmd(workspace: Path, config_path: Path) -> NumdiffCmd:
    def _numdiff_cmd(
        *argv: str,
        env: Mapping[str, str] | None = None,
        stdin_data: str = "",
        **options: Any,
    ) -> NumdiffCmdResult:
        env = dict(env or {})
        env.setdefault("NUMDIFF_CONFIG", str(config_path))
        stdin = StringIO(stdin_data)
        stdout = StringIO()
        stderr = StringIO()
        cmd = Diff(workspace, env, list(argv), stdin, stdout, stderr, options)
        cmd.execute()
        return cmd, stdin, stdout, stderr

    return _numdiff_cmd
