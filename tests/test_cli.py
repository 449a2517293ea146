from __future__ import annotations

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from safetext import cli as cli_module
from safetext.cli import cli
from safetext.logs import configure_logging


@pytest.fixture
def runner(monkeypatch) -> CliRunner:
    """
    :return: Click runner with logging setup stubbed out
    """
    levels: list[str] = []
    monkeypatch.setattr(cli_module, "configure_logging", levels.append)
    runner = CliRunner()
    runner.levels = levels
    return runner


def test_text_from_stdin(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["text"], input="<p>Hello <b>world</b></p><script>x()</script>")
    assert result.exit_code == 0
    assert result.output == "Hello world\n"


def test_text_from_files(runner: CliRunner, tmp_path: Path) -> None:
    first = tmp_path / "a.html"
    second = tmp_path / "b.html"
    first.write_text("<style>p{}</style><p>first</p>", encoding="utf-8")
    second.write_text("second &amp; last<script", encoding="utf-8")
    result = runner.invoke(cli, ["text", str(first), str(second)])
    assert result.exit_code == 0
    assert result.output == "first\nsecond & last\n"


def test_deny_option_replaces_default(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["text", "-d", "nav", "--deny", "FOOTER"], input="<nav>menu</nav>body<footer>f</footer><style>s</style>")
    assert result.exit_code == 0
    assert result.output == "bodys\n"


def test_collapse_option(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["text", "--collapse"], input="<p>  a\n\n b </p>")
    assert result.exit_code == 0
    assert result.output == "a b\n"


def test_encoding_option(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["text", "--encoding", "latin-1"], input="<p>déjà vu</p>".encode("latin-1"))
    assert result.exit_code == 0
    assert result.output == "déjà vu\n"


def test_missing_file_is_usage_error(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["text", str(tmp_path / "missing.html")])
    assert result.exit_code == 2


def test_log_level_passed_to_configure_logging(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--log-level", "debug", "text"], input="")
    assert result.exit_code == 0
    assert runner.levels == ["DEBUG"]


def test_configure_logging_routes_stdlib_records(capsys, restore_logging) -> None:
    configure_logging("INFO")
    logging.getLogger("safetext.test").info("routed through loguru")
    logging.getLogger("safetext.test").debug("below threshold")
    err = capsys.readouterr().err
    assert "routed through loguru" in err
    assert "below threshold" not in err
