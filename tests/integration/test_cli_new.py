"""Integration tests for the ``ranchgen new`` command."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from conftest import UMBRELLA_FILES, project_files, tree
from ranchgen import cli, utils

pytestmark = pytest.mark.integration


@pytest.fixture(autouse=True)
def captured(monkeypatch) -> io.StringIO:
    """Route all console output into a buffer."""
    buffer = io.StringIO()
    recording = Console(file=buffer, width=200, soft_wrap=True)
    monkeypatch.setattr(utils, "console", recording)
    monkeypatch.setattr(cli, "console", recording)
    for var in (
        "RANCHGEN_ELIXIR_VERSION",
        "RANCHGEN_RANCH",
        "RANCHGEN_RESERVED_MODULES",
        "RANCHGEN_QUIET",
    ):
        monkeypatch.delenv(var, raising=False)
    return buffer


def _run(*argv: str) -> int:
    try:
        cli.main(list(argv))
    except SystemExit as exc:
        return int(exc.code or 0)
    return 0


class TestNewCommand:
    def test_creates_project(self, workspace: Path, captured):
        target = workspace / "a111"
        assert _run("new", str(target), "--quiet") == 0
        assert tree(target)[0] == project_files("a111")
        output = captured.getvalue()
        assert "Your ranch project was created successfully." in output
        assert f"cd {target}" in output

    def test_lists_created_files(self, workspace: Path, captured):
        assert _run("new", str(workspace / "a111")) == 0
        assert "* creating lib/a111/ssl_acceptor.ex" in captured.getvalue()

    def test_quiet_still_lists_created_files(self, workspace: Path, captured):
        target = workspace / "a111"
        assert _run("new", str(target), "--quiet") == 0
        output = captured.getvalue()
        assert f"* creating {target / 'mix.exs'}" in output
        assert f"* creating {target / 'lib' / 'a111' / 'tcp_acceptor.ex'}" in output

    def test_listing_printed_once(self, workspace: Path, captured):
        assert _run("new", str(workspace / "a111")) == 0
        assert captured.getvalue().count("mix.exs") == 1

    def test_umbrella(self, workspace: Path, captured):
        target = workspace / "platform"
        assert _run("new", str(target), "--umbrella", "-q") == 0
        assert tree(target)[0] == UMBRELLA_FILES
        assert "umbrella project was created successfully" in captured.getvalue()

    def test_sup_and_names(self, workspace: Path):
        target = workspace / "dir"
        assert _run("new", str(target), "--app", "svc", "--module", "Acme.Svc", "--sup", "-q") == 0
        assert "use Application" in (target / "lib" / "svc.ex").read_text(encoding="utf-8")

    def test_elixir_version_option(self, workspace: Path):
        target = workspace / "a111"
        assert _run("new", str(target), "--elixir-version", "1.4.2", "-q") == 0
        assert 'elixir: "~> 1.4"' in (target / "mix.exs").read_text(encoding="utf-8")

    def test_elixir_version_from_env(self, workspace: Path, monkeypatch):
        monkeypatch.setenv("RANCHGEN_ELIXIR_VERSION", "1.3.0")
        target = workspace / "a111"
        assert _run("new", str(target), "-q") == 0
        assert 'elixir: "~> 1.3"' in (target / "mix.exs").read_text(encoding="utf-8")


class TestFailures:
    def test_missing_path(self, captured):
        assert _run("new") == 1
        assert "Expected PATH to be given" in captured.getvalue()

    def test_no_command(self, captured):
        assert _run() == 1

    def test_invalid_inferred_name(self, workspace: Path, captured):
        target = workspace / "Bad-Name"
        assert _run("new", str(target)) == 1
        output = captured.getvalue()
        assert "Error:" in output
        assert "--app APP" in output
        assert not target.exists()

    def test_invalid_module(self, workspace: Path, captured):
        assert _run("new", str(workspace / "ok"), "--module", "nope") == 1
        assert "valid Elixir alias" in captured.getvalue()

    def test_taken_module(self, workspace: Path, captured):
        assert _run("new", str(workspace / "ok"), "--module", "GenServer") == 1
        assert "already taken" in captured.getvalue()

    def test_reserved_from_env(self, workspace: Path, captured, monkeypatch):
        monkeypatch.setenv("RANCHGEN_RESERVED_MODULES", "Ok, Other")
        assert _run("new", str(workspace / "ok")) == 1
        assert "Module name Ok is already taken" in captured.getvalue()

    def test_existing_file(self, workspace: Path, captured):
        target = workspace / "a111"
        assert _run("new", str(target), "-q") == 0
        assert _run("new", str(target), "-q") == 1
        assert "Refusing to overwrite existing file" in captured.getvalue()

    def test_invalid_elixir_version(self, workspace: Path, captured):
        assert _run("new", str(workspace / "a111"), "--elixir-version", "latest") == 1
        assert "Invalid configuration" in captured.getvalue()
        assert not (workspace / "a111").exists()

    def test_overlong_path(self, workspace: Path, captured):
        assert _run("new", str(workspace / ("a" * 300)), "-q") == 1
        output = captured.getvalue()
        assert "Error: Cannot create" in output
        assert "Traceback" not in output
