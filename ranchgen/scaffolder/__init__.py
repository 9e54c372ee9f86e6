"""ranchgen scaffolder -- generates ranch-based Elixir project skeletons.

This package validates the project names, selects the template variant for
the requested mode (single project, supervised, umbrella), renders every
template with the run's bindings and writes the result to disk without ever
overwriting an existing file.

Quick usage::

    from ranchgen.scaffolder import GenerationOptions, ProjectGenerator

    generator = ProjectGenerator()
    report = generator.generate("hello_world", options=GenerationOptions(supervised=True))
    assert report.success
"""

from ranchgen.scaffolder.catalog import CATALOG, TemplateCatalog, TemplateEntry
from ranchgen.scaffolder.errors import (
    AlreadyExistsError,
    InvalidNameError,
    NameCollisionError,
    PathUncreatableError,
    ScaffoldError,
)
from ranchgen.scaffolder.generator import ProjectGenerator
from ranchgen.scaffolder.materializer import LocalFileSystem, Materializer, MaterializeReport
from ranchgen.scaffolder.models import Bindings, GenerationOptions, Identifier, Mode
from ranchgen.scaffolder.templates import TemplateRenderer, render

__all__ = [
    "AlreadyExistsError",
    "Bindings",
    "CATALOG",
    "GenerationOptions",
    "Identifier",
    "InvalidNameError",
    "LocalFileSystem",
    "MaterializeReport",
    "Materializer",
    "Mode",
    "NameCollisionError",
    "PathUncreatableError",
    "ProjectGenerator",
    "ScaffoldError",
    "TemplateCatalog",
    "TemplateEntry",
    "TemplateRenderer",
    "render",
]
