import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from numdiff.cli import cli
from tests.conftest import WriteFile


@pytest.fixture
def runner(config_path: Path) -> CliRunner:
    return CliRunner(
        env={"NUMDIFF_CONFIG": str(config_path), "NUMDIFF_LOG_FILE": None}
    )


@pytest.fixture
def paths(write_file: WriteFile) -> tuple[str, str]:
    old = write_file("old.txt", "alpha\nbeta 1\ngamma\n")
    new = write_file("new.txt", "alpha\nbeta 2\ndelta\n")
    return str(old), str(new)


def test_it_exits_with_1_when_files_differ(runner, paths):
    result = runner.invoke(cli, list(paths))

    assert result.exit_code == 1
    assert result.output == "  alpha\n  beta 1\n+ delta\n- gamma\n"


def test_it_exits_with_0_when_files_match(runner, paths):
    old, _ = paths
    result = runner.invoke(cli, [old, old])

    assert result.exit_code == 0
    assert result.output == ""


def test_it_accepts_a_context_radius(runner, paths):
    result = runner.invoke(cli, ["-U", "0", "--no-elide", *paths])

    assert result.exit_code == 1
    assert result.output == "+ delta\n- gamma\n"


def test_it_forces_color(runner, paths):
    result = runner.invoke(cli, ["--color", "always", *paths])

    assert result.exit_code == 1
    assert "\x1b[31m- gamma\x1b[0m" in result.output


def test_it_rejects_a_negative_context(runner, paths):
    result = runner.invoke(cli, ["--context", "-1", *paths])

    assert result.exit_code == 2
    assert "Invalid value" in result.output


def test_it_writes_a_log_file(runner, paths, tmp_path):
    log_file = tmp_path / "logs" / "numdiff.log"
    result = runner.invoke(
        cli, ["--log-level", "debug", "--log-file", str(log_file), *paths]
    )

    assert result.exit_code == 1
    assert log_file.exists()

    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
