"""ranchgen configuration.

Centralised, typed configuration for the generator.  Settings use a Pydantic
v2 model so they are validated at construction time and can be serialised
to/from JSON or built from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ranchgen.scaffolder.version import format_version


class Config(BaseModel):
    """Global generator configuration.

    Created once by the CLI entry point (usually via :meth:`from_env`) and
    passed to :class:`~ranchgen.scaffolder.generator.ProjectGenerator`.
    """

    elixir_version: str = Field(
        default="1.2.6",
        description="Full Elixir version the generated manifest requires (X.Y.Z)",
    )
    ranch_requirement: str = Field(
        default="~> 1.0", description="Version requirement for the ranch dependency"
    )
    reserved_modules: list[str] = Field(
        default_factory=list,
        description="Module names to treat as taken on top of the builtin ones",
    )
    quiet: bool = Field(default=False, description="Suppress per-file progress output")

    @field_validator("elixir_version")
    @classmethod
    def _check_version(cls, value: str) -> str:
        format_version(value)
        return value

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            RANCHGEN_ELIXIR_VERSION, RANCHGEN_RANCH,
            RANCHGEN_RESERVED_MODULES (comma separated), RANCHGEN_QUIET.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("RANCHGEN_ELIXIR_VERSION"):
            kwargs["elixir_version"] = os.environ["RANCHGEN_ELIXIR_VERSION"]
        if os.environ.get("RANCHGEN_RANCH"):
            kwargs["ranch_requirement"] = os.environ["RANCHGEN_RANCH"]

        reserved = os.environ.get("RANCHGEN_RESERVED_MODULES", "")
        kwargs["reserved_modules"] = [m.strip() for m in reserved.split(",") if m.strip()]

        quiet = os.environ.get("RANCHGEN_QUIET", "").strip().lower()
        kwargs["quiet"] = quiet in ("1", "true", "yes")

        return cls(**kwargs)
