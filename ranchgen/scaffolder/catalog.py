"""Static registry of scaffold templates.

Each entry maps a template key to the relative path it is written to, its
raw body (loaded once from ``templates/``) and the variables the body needs.
Paths may depend on the application name (``lib/{app}/tcp_acceptor.ex``).
Some entries share a body and differ only by fixed per-entry bindings, such
as the transport kind of the acceptor and protocol handler pairs.

The catalog is built at import time and never mutated afterwards.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from types import MappingProxyType
from typing import Any

from .templates import TemplateRenderer


_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

_SSL = {"transport": "Ssl", "transport_tag": "ssl"}
_TCP = {"transport": "Tcp", "transport_tag": "tcp"}

# key -> (output path pattern, template file, fixed bindings)
_ENTRIES: dict[str, tuple[str, str, dict[str, str]]] = {
    "readme": ("README.md", "README.md.j2", {}),
    "gitignore": (".gitignore", "gitignore.j2", {}),
    "editorconfig": (".editorconfig", "editorconfig.j2", {}),
    "mixfile": ("mix.exs", "mix.exs.j2", {}),
    "mixfile_apps": ("mix.exs", "mix_apps.exs.j2", {}),
    "mixfile_umbrella": ("mix.exs", "mix_umbrella.exs.j2", {}),
    "config": ("config/config.exs", "config/config.exs.j2", {}),
    "config_dev": ("config/dev.exs", "config/env.exs.j2", {}),
    "config_prod": ("config/prod.exs", "config/env.exs.j2", {}),
    "config_test": ("config/test.exs", "config/env.exs.j2", {}),
    "config_umbrella": ("config/config.exs", "config/config_umbrella.exs.j2", {}),
    "ssl_acceptor": ("lib/{app}/ssl_acceptor.ex", "lib/acceptor.ex.j2", _SSL),
    "tcp_acceptor": ("lib/{app}/tcp_acceptor.ex", "lib/acceptor.ex.j2", _TCP),
    "ssl_protocol_handler": (
        "lib/{app}/ssl_protocol_handler.ex", "lib/protocol_handler.ex.j2", _SSL,
    ),
    "tcp_protocol_handler": (
        "lib/{app}/tcp_protocol_handler.ex", "lib/protocol_handler.ex.j2", _TCP,
    ),
    "lib": ("lib/{app}.ex", "lib/lib.ex.j2", {}),
    "lib_sup": ("lib/{app}.ex", "lib/lib_sup.ex.j2", {}),
    "test_helper": ("test/test_helper.exs", "test/test_helper.exs.j2", {}),
    "test": ("test/{app}_test.exs", "test/test.exs.j2", {}),
}


# ---------------------------------------------------------------------------
# TemplateEntry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TemplateEntry:
    """One template of the catalog."""

    key: str
    path: str
    body: str
    variables: frozenset[str]
    fixed: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def required_variables(self) -> frozenset[str]:
        """Variables the run-wide bindings must provide."""
        return self.variables.difference(self.fixed)

    def relative_path(self, app: str) -> PurePosixPath:
        """Return the output path for a project named *app*."""
        return PurePosixPath(self.path.format(app=app))

    def context(self, bindings: Mapping[str, Any]) -> dict[str, Any]:
        """Merge the run bindings with this entry's fixed bindings."""
        return {**bindings, **self.fixed}


# ---------------------------------------------------------------------------
# TemplateCatalog
# ---------------------------------------------------------------------------


class TemplateCatalog(Mapping[str, TemplateEntry]):
    """Read-only mapping of template key to :class:`TemplateEntry`."""

    def __init__(self, entries: Mapping[str, TemplateEntry]) -> None:
        self._entries = MappingProxyType(dict(entries))

    def __getitem__(self, key: str) -> TemplateEntry:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @classmethod
    def load(
        cls,
        template_dir: str | Path | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> "TemplateCatalog":
        """Read every template body and collect its variables.

        Raises:
            FileNotFoundError: If a template file is missing.
            UnsupportedTemplateError: If a body uses unsupported syntax.
        """
        root = Path(template_dir) if template_dir is not None else _DEFAULT_TEMPLATE_DIR
        renderer = renderer or TemplateRenderer()

        bodies: dict[str, str] = {}
        entries: dict[str, TemplateEntry] = {}
        for key, (path, filename, fixed) in _ENTRIES.items():
            if filename not in bodies:
                bodies[filename] = (root / filename).read_text(encoding="utf-8")
            body = bodies[filename]
            entries[key] = TemplateEntry(
                key=key,
                path=path,
                body=body,
                variables=renderer.variables(body),
                fixed=MappingProxyType(dict(fixed)),
            )
        return cls(entries)


CATALOG = TemplateCatalog.load()
