"""Execution of a project plan against the filesystem.

The ``Materializer`` walks a :class:`~.plan.ProjectPlan` in order, renders each
file and hands it to a filesystem sink.  The first failure stops the run;
whatever was created before it stays on disk for inspection.
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from ..utils import console as default_console
from .errors import AlreadyExistsError, PathUncreatableError, ScaffoldError
from .models import Mode
from .plan import CreateDir, ProjectPlan, WriteFile
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Filesystem sink
# ---------------------------------------------------------------------------


class LocalFileSystem:
    """Creates directories and files on the local disk.

    Files are never overwritten, and each file appears either complete or
    not at all: content goes to a temporary file in the destination
    directory, which is then hard-linked to the final name.
    """

    def create_directory(self, path: Path) -> None:
        """Create *path* and its parents; an existing directory is fine.

        Raises:
            PathUncreatableError: If a non-directory occupies *path* or the
                operating system refuses the creation.
        """
        try:
            if path.exists() and not path.is_dir():
                raise PathUncreatableError(path, "a file already exists at this path")
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise PathUncreatableError(path, exc.strerror or str(exc)) from exc

    def create_file(self, path: Path, content: str) -> None:
        """Write *content* to the new file *path*.

        Raises:
            AlreadyExistsError: If *path* already exists.
            PathUncreatableError: If the operating system refuses the write.
        """
        try:
            if path.exists() or path.is_symlink():
                raise AlreadyExistsError(path)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".ranchgen-")
        except OSError as exc:
            raise PathUncreatableError(path, exc.strerror or str(exc)) from exc

        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
                handle.write(content)
            os.link(tmp_name, path)
        except FileExistsError as exc:
            raise AlreadyExistsError(path) from exc
        except OSError as exc:
            raise PathUncreatableError(path, exc.strerror or str(exc)) from exc
        finally:
            os.unlink(tmp_name)


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------


@dataclass
class MaterializeReport:
    """Outcome of a materialization run."""

    root: Path
    mode: Mode
    created: list[Path] = field(default_factory=list)
    error: ScaffoldError | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    def summary(self) -> str:
        """Return a human-readable list of what was created."""
        lines = [f"* creating {p}" for p in self.created]
        if self.error is not None:
            lines.append(f"Error: {self.error}")
        return "\n".join(lines)


def next_steps(mode: Mode, path: str | Path) -> str:
    """Return the hint printed after a successful run."""
    if mode is Mode.UMBRELLA:
        return (
            "Your umbrella project was created successfully.\n"
            "Inside your project, you will find an apps/ directory\n"
            "where you can create and host many apps:\n"
            "\n"
            f"    cd {path}\n"
            "    cd apps\n"
            "    ranchgen new my_app\n"
            "\n"
            'Commands like "mix compile" and "mix test" when executed\n'
            "in the umbrella project root will automatically run\n"
            "for each application in the apps/ directory."
        )
    return (
        "Your ranch project was created successfully.\n"
        'You can use "mix" to compile it, test it, and more:\n'
        "\n"
        f"    cd {path}\n"
        "    mix deps.get\n"
        "    mix test\n"
        "\n"
        'Run "mix help" for more commands.'
    )


# ---------------------------------------------------------------------------
# Materializer
# ---------------------------------------------------------------------------


class Materializer:
    """Applies a plan to a filesystem sink, one step at a time."""

    def __init__(
        self,
        fs: LocalFileSystem | None = None,
        renderer: TemplateRenderer | None = None,
        console: Console | None = None,
        quiet: bool = False,
    ) -> None:
        self.fs = fs or LocalFileSystem()
        self.renderer = renderer or TemplateRenderer()
        self.console = console or default_console
        self.quiet = quiet

    def execute(self, plan: ProjectPlan, root: str | Path) -> MaterializeReport:
        """Create the project described by *plan* under *root*.

        Returns:
            A report listing created paths in order.  On failure ``error``
            holds the exception of the failed step and nothing after it was
            attempted.
        """
        root = Path(root)
        report = MaterializeReport(root=root, mode=plan.mode)
        context = plan.bindings.as_context()

        try:
            self.fs.create_directory(root)
            for step in plan.steps:
                target = root / step.path
                if isinstance(step, CreateDir):
                    self.fs.create_directory(target)
                else:
                    content = self.renderer.render(
                        step.template.body, step.template.context(context)
                    )
                    self.fs.create_file(target, content)
                self._announce(step)
                report.created.append(target)
        except ScaffoldError as exc:
            report.error = exc
        return report

    def _announce(self, step: CreateDir | WriteFile) -> None:
        if not self.quiet:
            self.console.print(f"[green]* creating[/green] {step.path}")
