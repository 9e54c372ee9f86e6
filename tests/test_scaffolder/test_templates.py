"""Tests for the template renderer and its restricted syntax."""

from __future__ import annotations

import pytest
from jinja2 import UndefinedError

from ranchgen.scaffolder.templates import (
    TemplateRenderer,
    UnsupportedTemplateError,
    render,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Interpolation
# ---------------------------------------------------------------------------


class TestInterpolation:
    def test_hello(self):
        assert render("Hello <%app%>", {"app": "x"}) == "Hello x"

    def test_spaces_inside_tag(self, renderer):
        assert renderer.render("<% app %>!", {"app": "x"}) == "x!"

    def test_value_is_not_escaped(self, renderer):
        body = "config :<%app%>, <%clause%>"
        out = renderer.render(body, {"app": "a", "clause": '<b>"&"</b>'})
        assert out == 'config :a, <b>"&"</b>'

    def test_elixir_interpolation_left_alone(self, renderer):
        body = 'import_config "#{Mix.env}.exs"\n%{socket: s}\n'
        assert renderer.render(body, {}) == body

    def test_trailing_newline_kept(self, renderer):
        assert renderer.render("<%mod%>\n", {"mod": "Foo"}) == "Foo\n"

    def test_missing_variable_is_an_error(self, renderer):
        with pytest.raises(UndefinedError):
            renderer.render("Hello <%nobody%>", {})

    def test_pure(self, renderer):
        bindings = {"app": "x"}
        assert renderer.render("<%app%>", bindings) == renderer.render("<%app%>", bindings)
        assert bindings == {"app": "x"}


# ---------------------------------------------------------------------------
# Conditionals
# ---------------------------------------------------------------------------


class TestConditional:
    BODY = "head\n<%% if flag %>\ninner <%app%>\n<%% endif %>\ntail\n"

    def test_false_removes_block(self, renderer):
        out = renderer.render(self.BODY, {"flag": False, "app": "x"})
        assert out == "head\ntail\n"

    def test_true_keeps_interpolated_inner_text(self, renderer):
        out = renderer.render(self.BODY, {"flag": True, "app": "x"})
        assert out == "head\ninner x\ntail\n"

    def test_inline_block(self, renderer):
        body = "a<%% if flag %>b<%% endif %>c"
        assert renderer.render(body, {"flag": False}) == "ac"
        assert renderer.render(body, {"flag": True}) == "abc"

    def test_empty_string_is_false(self, renderer):
        assert renderer.render("<%% if app %>yes<%% endif %>", {"app": ""}) == ""

    def test_indented_tags_are_stripped(self, renderer):
        body = "x\n    <%% if flag %>\n    y\n    <%% endif %>\nz\n"
        assert renderer.render(body, {"flag": True}) == "x\n    y\nz\n"


# ---------------------------------------------------------------------------
# Restricted syntax
# ---------------------------------------------------------------------------


class TestUnsupportedSyntax:
    @pytest.mark.parametrize(
        "body",
        [
            "<%app|upper%>",
            "<%app ~ mod%>",
            "<%app.attr%>",
            "<%% for x in items %><%x%><%% endfor %>",
            "<%% if a and b %>x<%% endif %>",
            "<%% if not a %>x<%% endif %>",
            "<%% if a %>x<%% else %>y<%% endif %>",
            "<%% if a %>x<%% elif b %>y<%% endif %>",
            "<%% if a %><%% if b %>x<%% endif %><%% endif %>",
            "<%% set x = 1 %>",
        ],
    )
    def test_rejected(self, renderer, body):
        with pytest.raises(UnsupportedTemplateError):
            renderer.render(body, {"a": True, "b": True, "app": "x", "mod": "M", "items": []})

    def test_comments_are_allowed(self, renderer):
        assert renderer.render("a<%# note #%>b", {}) == "ab"


# ---------------------------------------------------------------------------
# Variables
# ---------------------------------------------------------------------------


class TestVariables:
    def test_collects_interpolated_and_tested_names(self, renderer):
        body = "<%mod%> <%% if app %><%app%> <%version%><%% endif %>"
        assert renderer.variables(body) == {"mod", "app", "version"}

    def test_plain_text_has_none(self, renderer):
        assert renderer.variables("/_build\n/deps\n") == frozenset()
