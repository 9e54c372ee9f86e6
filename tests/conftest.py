"""Shared pytest fixtures for the ranchgen test suite.

Provides reusable fixtures for:
- Temporary target directories
- A fake module-name registry
- A quiet generator writing to a recording console
- Pre-validated identifiers and bindings
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from ranchgen.config import Config
from ranchgen.scaffolder import Bindings, Identifier, ProjectGenerator


# ---------------------------------------------------------------------------
# Expected layouts
# ---------------------------------------------------------------------------

def project_files(app: str) -> set[str]:
    """Every file of a single-project tree for *app*."""
    return {
        "README.md",
        ".gitignore",
        ".editorconfig",
        "mix.exs",
        "config/config.exs",
        "config/dev.exs",
        "config/prod.exs",
        "config/test.exs",
        f"lib/{app}/ssl_acceptor.ex",
        f"lib/{app}/tcp_acceptor.ex",
        f"lib/{app}/ssl_protocol_handler.ex",
        f"lib/{app}/tcp_protocol_handler.ex",
        f"lib/{app}.ex",
        "test/test_helper.exs",
        f"test/{app}_test.exs",
    }


UMBRELLA_FILES = {"README.md", ".gitignore", "mix.exs", "config/config.exs"}


def tree(root: Path) -> tuple[set[str], set[str]]:
    """Return ``(files, directories)`` under *root* as posix relative paths."""
    files: set[str] = set()
    dirs: set[str] = set()
    for p in root.rglob("*"):
        rel = p.relative_to(root).as_posix()
        (dirs if p.is_dir() else files).add(rel)
    return files, dirs


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------

class FakeRegistry:
    """Name registry that knows only the names it was given."""

    def __init__(self, *names: str) -> None:
        self.names = set(names)
        self.queries: list[str] = []

    def is_defined(self, name: str) -> bool:
        self.queries.append(name)
        return name in self.names


@pytest.fixture
def fake_registry() -> FakeRegistry:
    return FakeRegistry("Taken", "Already.Here")


@pytest.fixture
def recording_console() -> Console:
    """A Rich console that writes to memory instead of the terminal."""
    return Console(file=io.StringIO(), force_terminal=False, width=120, soft_wrap=True)


@pytest.fixture
def generator(fake_registry: FakeRegistry, recording_console: Console) -> ProjectGenerator:
    """A generator with a fake registry, fixed Elixir version and quiet output."""
    config = Config(elixir_version="1.2.3", quiet=True)
    return ProjectGenerator(config, registry=fake_registry, console=recording_console)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Empty directory that generated projects are created in."""
    ws = tmp_path / "workspace"
    ws.mkdir()
    return ws


@pytest.fixture
def target(workspace: Path) -> Path:
    """Not-yet-existing project directory named ``a111``."""
    return workspace / "a111"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

@pytest.fixture
def identifier() -> Identifier:
    return Identifier(app="a111", mod="A111")


@pytest.fixture
def bindings() -> Bindings:
    return Bindings(
        app="a111",
        mod="A111",
        otp_app="[applications: [:logger, :ranch]]",
        version="1.2",
    )
