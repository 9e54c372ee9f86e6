"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which turns a template body and a set of
bindings into final file content.  Template bodies use a deliberately small
language on top of Jinja2:

* ``<%name%>`` interpolates a bound value verbatim.
* ``<%% if flag %>...<%% endif %>`` keeps its inner text only when *flag* is
  truthy, and disappears entirely (tags included) otherwise.

Jinja2 parses the body; the resulting AST is then checked so that only
literal text, name interpolation and single-level conditionals on a name are
accepted.  Rendering has no access to the filesystem or to any other state,
so the same body and bindings always produce the same text.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jinja2 import Environment, StrictUndefined, meta, nodes


class UnsupportedTemplateError(ValueError):
    """Raised when a template uses syntax outside the supported subset."""


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders scaffold templates with project-specific bindings.

    A missing binding is a bug in the catalog, not a user error, so rendering
    uses ``StrictUndefined`` and lets ``jinja2.UndefinedError`` propagate.
    """

    def __init__(self) -> None:
        self.env = Environment(
            variable_start_string="<%",
            variable_end_string="%>",
            block_start_string="<%%",
            block_end_string="%>",
            comment_start_string="<%#",
            comment_end_string="#%>",
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    # -- Rendering ---------------------------------------------------------

    def render(self, body: str, bindings: Mapping[str, Any]) -> str:
        """Render *body* with *bindings* and return the final text.

        Raises:
            UnsupportedTemplateError: If *body* uses anything besides
                interpolation and single-level conditionals.
            jinja2.UndefinedError: If *body* references an unbound name.
        """
        self.check(body)
        template = self.env.from_string(body)
        return template.render(**bindings)

    # -- Inspection --------------------------------------------------------

    def check(self, body: str) -> nodes.Template:
        """Parse *body* and verify it only uses the supported node types."""
        ast = self.env.parse(body)
        for node in ast.body:
            _check_node(node, nested=False)
        return ast

    def variables(self, body: str) -> frozenset[str]:
        """Return every name *body* interpolates or tests."""
        return frozenset(meta.find_undeclared_variables(self.check(body)))


_default_renderer = TemplateRenderer()


def render(body: str, bindings: Mapping[str, Any]) -> str:
    """Render *body* with the shared module-level renderer."""
    return _default_renderer.render(body, bindings)


# ---------------------------------------------------------------------------
# AST whitelist
# ---------------------------------------------------------------------------


def _check_node(node: nodes.Node, nested: bool) -> None:
    if isinstance(node, nodes.Output):
        for child in node.nodes:
            if isinstance(child, nodes.TemplateData):
                continue
            if isinstance(child, nodes.Name) and child.ctx == "load":
                continue
            raise UnsupportedTemplateError(
                f"Only plain variable interpolation is supported (line {child.lineno})"
            )
        return

    if isinstance(node, nodes.If):
        if nested:
            raise UnsupportedTemplateError(
                f"Nested conditional blocks are not supported (line {node.lineno})"
            )
        if not isinstance(node.test, nodes.Name):
            raise UnsupportedTemplateError(
                f"A conditional must test a single variable (line {node.lineno})"
            )
        if node.elif_ or node.else_:
            raise UnsupportedTemplateError(
                f"Conditional blocks cannot have elif/else branches (line {node.lineno})"
            )
        for child in node.body:
            _check_node(child, nested=True)
        return

    raise UnsupportedTemplateError(
        f"Unsupported template construct {type(node).__name__} (line {node.lineno})"
    )
