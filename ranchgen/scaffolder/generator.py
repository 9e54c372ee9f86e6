"""Main scaffolding orchestrator.

Ties the pieces together for one run: validate the names, bind the template
variables, build the plan and materialize it.  Validation happens before any
filesystem access, so a bad name never leaves a half-created directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console

from ..utils import console as default_console
from ..utils import infer_app_name
from .bindings import build_bindings
from .catalog import CATALOG, TemplateCatalog
from .materializer import LocalFileSystem, Materializer, MaterializeReport
from .models import GenerationOptions, Identifier
from .naming import (
    NameRegistry,
    StaticNameRegistry,
    camelize,
    check_module_availability,
    validate_app_name,
    validate_module_name,
)
from .plan import ProjectPlan, build_plan, detect_umbrella
from .templates import TemplateRenderer

if TYPE_CHECKING:
    from ranchgen.config import Config


class ProjectGenerator:
    """Generates a ranch project skeleton.

    Collaborators default to the real ones and can be injected for tests:
    ``registry`` answers module-name availability, ``fs`` creates paths.
    """

    def __init__(
        self,
        config: Config | None = None,
        registry: NameRegistry | None = None,
        fs: LocalFileSystem | None = None,
        catalog: TemplateCatalog = CATALOG,
        console: Console | None = None,
    ) -> None:
        if config is None:
            from ranchgen.config import Config

            config = Config()
        self.config = config
        self.registry = registry or StaticNameRegistry(extra=config.reserved_modules)
        self.catalog = catalog
        self.materializer = Materializer(
            fs=fs or LocalFileSystem(),
            renderer=TemplateRenderer(),
            console=console or default_console,
            quiet=config.quiet,
        )

    # -- Public API --------------------------------------------------------

    def resolve_identifier(
        self,
        path: str | Path,
        app: str | None = None,
        module: str | None = None,
    ) -> Identifier:
        """Validate (or infer) the application and module names.

        Raises:
            InvalidNameError: If either name breaks its syntax rule.
            NameCollisionError: If the module name is already taken.
        """
        explicit = app is not None
        app_name = validate_app_name(app if explicit else infer_app_name(path), explicit)
        mod = validate_module_name(module if module is not None else camelize(app_name))
        check_module_availability(mod, self.registry)
        return Identifier(app=app_name, mod=mod)

    def plan(
        self,
        path: str | Path,
        identifier: Identifier,
        options: GenerationOptions,
        in_umbrella: bool | None = None,
    ) -> ProjectPlan:
        """Build the plan for *identifier* at *path*.

        When *in_umbrella* is ``None`` it is detected from the directories
        around *path*.
        """
        if in_umbrella is None:
            in_umbrella = not options.umbrella and detect_umbrella(path)
        bindings = build_bindings(
            identifier,
            options,
            runtime_version=self.config.elixir_version,
            ranch_requirement=self.config.ranch_requirement,
        )
        return build_plan(
            identifier, options, bindings, self.catalog, in_umbrella=in_umbrella
        )

    def generate(
        self,
        path: str | Path,
        app: str | None = None,
        module: str | None = None,
        options: GenerationOptions | None = None,
        in_umbrella: bool | None = None,
    ) -> MaterializeReport:
        """Generate the project at *path*.

        Raises:
            InvalidNameError: If a name is invalid (nothing is created).
            NameCollisionError: If the module name is taken (nothing is
                created).

        Returns:
            The materialization report; check ``report.success``.
        """
        options = options or GenerationOptions()
        identifier = self.resolve_identifier(path, app, module)
        plan = self.plan(path, identifier, options, in_umbrella)
        return self.materializer.execute(plan, path)
