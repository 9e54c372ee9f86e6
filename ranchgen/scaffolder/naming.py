"""Application and module name validation.

The application name ends up as an OTP application atom and as file names, so
it is restricted to lowercase snake case.  The module name is an Elixir alias
(``Foo.Bar``).  When no module name is given it is derived from the
application name with :func:`camelize`.

Availability of the module name is checked against a :class:`NameRegistry`.
The check is best effort: it only knows what the registry knows, and nothing
stops the name from being taken between generation and first compile.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Protocol

from .errors import InvalidNameError, NameCollisionError


APP_NAME_RULE = r"[a-z][a-z0-9_]*"
MODULE_SEGMENT_RULE = r"[A-Z][A-Za-z0-9_]*"
MODULE_NAME_RULE = rf"{MODULE_SEGMENT_RULE}(\.{MODULE_SEGMENT_RULE})*"

_APP_NAME_RE = re.compile(APP_NAME_RULE)
_MODULE_NAME_RE = re.compile(MODULE_NAME_RULE)


# ---------------------------------------------------------------------------
# Name registry
# ---------------------------------------------------------------------------

# Top-level modules shipped with Elixir, Mix, ExUnit and the ranch dependency.
# A generated project defining one of these would clash on load.
BUILTIN_MODULES: frozenset[str] = frozenset({
    "Access", "Agent", "Application", "ArgumentError", "ArithmeticError",
    "Atom", "Base", "Behaviour", "Bitwise", "Calendar", "Code", "Date",
    "DateTime", "Dict", "EEx", "Elixir", "Enum", "Enumerable", "Exception",
    "ExUnit", "File", "Float", "GenEvent", "GenServer", "HashDict", "HashSet",
    "IEx", "IO", "Inspect", "Integer", "Kernel", "Keyword", "List", "Logger",
    "Macro", "Map", "MapSet", "Mix", "Module", "NaiveDateTime", "Node",
    "OptionParser", "Path", "Port", "Process", "Protocol", "Range", "Record",
    "Regex", "Registry", "Set", "Stream", "String", "StringIO", "Supervisor",
    "System", "Task", "Time", "Tuple", "URI", "Version",
})


class NameRegistry(Protocol):
    """Answers whether a module name is already defined at top level."""

    def is_defined(self, name: str) -> bool: ...


class StaticNameRegistry:
    """A registry backed by a fixed set of names.

    Defaults to :data:`BUILTIN_MODULES`; *extra* names (e.g. from
    configuration) are added on top.
    """

    def __init__(
        self,
        names: Iterable[str] | None = None,
        extra: Iterable[str] = (),
    ) -> None:
        base = BUILTIN_MODULES if names is None else frozenset(names)
        self.names = frozenset(base) | frozenset(extra)

    def is_defined(self, name: str) -> bool:
        return name in self.names


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_app_name(raw: str, explicit: bool) -> str:
    """Return *raw* if it is a valid application name.

    Args:
        raw: Candidate application name.
        explicit: ``True`` when given with ``--app``, ``False`` when it was
            inferred from the target path.  Only the error message differs.

    Raises:
        InvalidNameError: If the name does not match ``[a-z][a-z0-9_]*``.
    """
    if _APP_NAME_RE.fullmatch(raw):
        return raw

    message = (
        "Application name must start with a letter and have only lowercase "
        f"letters, numbers and underscore, got: {raw!r}"
    )
    if not explicit:
        message += (
            ". The application name is inferred from the path, if you'd like to "
            'explicitly name the application then use the "--app APP" option.'
        )
    raise InvalidNameError("app", raw, APP_NAME_RULE, message)


def validate_module_name(raw: str) -> str:
    """Return *raw* if it is a valid dotted module alias.

    Raises:
        InvalidNameError: If any segment fails ``[A-Z][A-Za-z0-9_]*``.
    """
    if _MODULE_NAME_RE.fullmatch(raw):
        return raw
    raise InvalidNameError(
        "module",
        raw,
        MODULE_NAME_RULE,
        "Module name must be a valid Elixir alias (for example: Foo.Bar), "
        f"got: {raw!r}",
    )


def check_module_availability(mod: str, registry: NameRegistry) -> None:
    """Raise ``NameCollisionError`` if *registry* already defines *mod*."""
    if registry.is_defined(mod):
        raise NameCollisionError(mod)


def camelize(app: str) -> str:
    """Derive a module name from an application name.

    Each underscore separated word gets its first letter upper-cased, the
    rest of the word is kept as is::

        camelize("my_app") -> "MyApp"
        camelize("a111")   -> "A111"
    """
    return "".join(word[:1].upper() + word[1:] for word in app.split("_") if word)
