"""Variable bindings for a generation run."""

from __future__ import annotations

from .models import Bindings, GenerationOptions, Identifier
from .version import format_version


def otp_app_clause(mod: str, supervised: bool) -> str:
    """Return the ``application/0`` keyword list for the project.

    A supervised project names its entry module as the application callback.
    """
    if supervised:
        return f"[applications: [:logger, :ranch], mod: {{{mod}, []}}]"
    return "[applications: [:logger, :ranch]]"


def build_bindings(
    identifier: Identifier,
    options: GenerationOptions,
    runtime_version: str,
    ranch_requirement: str = "~> 1.0",
) -> Bindings:
    """Build the bindings for *identifier* under *options*.

    Umbrella projects have no code of their own, so only the module name is
    bound alongside the dependency requirement.  ``otp_app`` is bound for
    every single project but only the supervised entry point renders it.

    Raises:
        ValueError: If *runtime_version* is not a full semantic version.
    """
    if options.umbrella:
        return Bindings(mod=identifier.mod, ranch=ranch_requirement)

    return Bindings(
        app=identifier.app,
        mod=identifier.mod,
        otp_app=otp_app_clause(identifier.mod, options.supervised),
        version=format_version(runtime_version),
        ranch=ranch_requirement,
        supervised=options.supervised,
    )
