"""Pydantic v2 models shared by the scaffolder.

Defines the validated project identifier, the generation options and the
variable bindings handed to the template renderer.  All three are frozen:
they are created once per run and only read afterwards.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Mode(str, Enum):
    """Shape of the generated tree."""

    PROJECT = "project"
    UMBRELLA = "umbrella"


class Identifier(BaseModel):
    """Validated application and module names of the project."""

    model_config = ConfigDict(frozen=True)

    app: str = Field(..., description="Application name, e.g. 'my_app'")
    mod: str = Field(..., description="Module alias, e.g. 'MyApp'")


class GenerationOptions(BaseModel):
    """Switches selecting the generation mode."""

    model_config = ConfigDict(frozen=True)

    supervised: bool = Field(default=False, description="Generate a supervised entry point")
    umbrella: bool = Field(default=False, description="Generate an umbrella container")

    @property
    def mode(self) -> Mode:
        return Mode.UMBRELLA if self.umbrella else Mode.PROJECT


class Bindings(BaseModel):
    """Template variables for one generation run.

    ``app`` is empty in umbrella mode, which switches off the per-app
    sections of shared templates such as the README.
    """

    model_config = ConfigDict(frozen=True)

    app: str = Field(default="", description="Application name or '' for umbrellas")
    mod: str = Field(..., description="Module alias")
    otp_app: str = Field(default="", description="application/0 keyword list")
    version: str = Field(default="", description="Elixir requirement, e.g. '1.2'")
    ranch: str = Field(default="~> 1.0", description="ranch dependency requirement")
    supervised: bool = Field(default=False)

    def as_context(self) -> dict[str, Any]:
        """Return the bindings as a plain mapping for the renderer."""
        return self.model_dump()
