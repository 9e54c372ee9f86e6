"""Selection of the templates and directories a run produces.

``build_plan`` turns the validated identifier and the generation options into
an ordered list of steps.  Every ``CreateDir`` for a directory comes before
any ``WriteFile`` targeting a path inside it; steps for unrelated subtrees
carry no ordering constraint.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Union

from .catalog import CATALOG, TemplateCatalog, TemplateEntry
from .models import Bindings, GenerationOptions, Identifier, Mode


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CreateDir:
    """Create a directory (relative to the project root)."""

    path: PurePosixPath


@dataclass(frozen=True)
class WriteFile:
    """Render *template* and write it to *path* (relative to the root)."""

    path: PurePosixPath
    template: TemplateEntry


PlanStep = Union[CreateDir, WriteFile]


@dataclass(frozen=True)
class ProjectPlan:
    """Ordered steps of one generation run plus the bindings to render with."""

    mode: Mode
    bindings: Bindings
    steps: tuple[PlanStep, ...]

    @property
    def directories(self) -> list[PurePosixPath]:
        return [s.path for s in self.steps if isinstance(s, CreateDir)]

    @property
    def files(self) -> list[PurePosixPath]:
        return [s.path for s in self.steps if isinstance(s, WriteFile)]

    def check_order(self) -> None:
        """Verify that no step targets a directory not created before it.

        The project root is the materializer's job and always counts as
        created.

        Raises:
            ValueError: On the first step whose parent directory is missing.
        """
        created: set[PurePosixPath] = {PurePosixPath(".")}
        for step in self.steps:
            parent = step.path.parent
            if parent not in created:
                raise ValueError(
                    f"Plan step for {step.path} precedes creation of {parent}"
                )
            if isinstance(step, CreateDir):
                created.add(step.path)


# ---------------------------------------------------------------------------
# Plan construction
# ---------------------------------------------------------------------------


def build_plan(
    identifier: Identifier,
    options: GenerationOptions,
    bindings: Bindings,
    catalog: TemplateCatalog = CATALOG,
    *,
    in_umbrella: bool = False,
) -> ProjectPlan:
    """Select the steps for *options*.

    Args:
        identifier: Validated project names.
        options: Generation mode switches.
        bindings: Variables the materializer renders each template with.
        catalog: Template registry to select from.
        in_umbrella: Whether the target sits in an umbrella's ``apps/``
            directory.  Only affects the single-project manifest.

    Returns:
        A plan whose order satisfies :meth:`ProjectPlan.check_order`.
    """
    builder = _StepBuilder(catalog, identifier.app)

    if options.umbrella:
        builder.file("gitignore")
        builder.file("readme")
        builder.file("mixfile_umbrella")
        builder.directory("apps")
        builder.directory("config")
        builder.file("config_umbrella")
        return ProjectPlan(Mode.UMBRELLA, bindings, tuple(builder.steps))

    builder.file("readme")
    builder.file("gitignore")
    builder.file("editorconfig")
    builder.file("mixfile_apps" if in_umbrella else "mixfile")

    builder.directory("config")
    for key in ("config", "config_dev", "config_prod", "config_test"):
        builder.file(key)

    builder.directory("lib")
    builder.directory(f"lib/{identifier.app}")
    for key in (
        "ssl_acceptor",
        "tcp_acceptor",
        "ssl_protocol_handler",
        "tcp_protocol_handler",
    ):
        builder.file(key)
    builder.file("lib_sup" if options.supervised else "lib")

    builder.directory("test")
    builder.file("test_helper")
    builder.file("test")

    return ProjectPlan(Mode.PROJECT, bindings, tuple(builder.steps))


class _StepBuilder:
    def __init__(self, catalog: TemplateCatalog, app: str) -> None:
        self.catalog = catalog
        self.app = app
        self.steps: list[PlanStep] = []

    def directory(self, path: str) -> None:
        self.steps.append(CreateDir(PurePosixPath(path)))

    def file(self, key: str) -> None:
        entry = self.catalog[key]
        self.steps.append(WriteFile(entry.relative_path(self.app), entry))


# ---------------------------------------------------------------------------
# Umbrella detection
# ---------------------------------------------------------------------------

_APPS_PATH_RE = re.compile(r"""apps_path:\s*["']([^"']+)["']""")


def detect_umbrella(target: str | Path) -> bool:
    """Guess whether *target* is being created inside an umbrella project.

    Looks for a ``mix.exs`` two levels up whose ``apps_path`` points at the
    target's parent directory.  This is a heuristic: anything that cannot be
    read or matched counts as a standalone project.
    """
    apps_dir = Path(target).expanduser().resolve().parent
    manifest = apps_dir.parent / "mix.exs"
    try:
        text = manifest.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return False

    match = _APPS_PATH_RE.search(text)
    if match is None:
        return False
    try:
        return (apps_dir.parent / match.group(1)).resolve() == apps_dir
    except (OSError, RuntimeError):
        return False
