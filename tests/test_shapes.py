"""Tests for rewrite/shapes.py: reference shape matchers.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from i18nscope.config import ScopeConfig
from i18nscope.enums import ReferenceShape
from i18nscope.rewrite import (
    match_bound_call,
    match_call,
    match_component,
    match_directive,
    match_this_call,
)
from i18nscope.syntax import Node, iter_nodes, parse_program

CONFIG = ScopeConfig(root_path="/project")


def _first_call(source: str) -> tuple[str, Node]:
    program = parse_program(source)
    return source, next(iter_nodes(program, "CallExpression"))


def _literal_text(source: str, start: int, end: int) -> str:
    return source[start:end]


# ============================================================================
# Method call shapes
# ============================================================================


class TestBoundCall:
    """Test `<template root>.$t(path)` matching."""

    @pytest.mark.parametrize("method", ["$t", "$tc"])
    def test_literal_path(self, method: str) -> None:
        """Both translate methods match with the literal's range."""
        source, call = _first_call(f"_vm.{method}('menu.open', 2)")
        match = match_bound_call(call, CONFIG)

        assert match is not None
        assert match.shape is ReferenceShape.BOUND_CALL
        assert match.path == "menu.open"
        assert _literal_text(source, match.start, match.end) == "'menu.open'"

    @pytest.mark.parametrize(
        "source",
        [
            "_vm.$t(key)",
            "_vm.$t('a' + b)",
            "_vm.$t(`a`)",
            "_vm.$t(1)",
            "_vm.$t()",
            "_vm['$t']('a')",
            "vm.$t('a')",
            "_vm.$te('a')",
            "_vm.$d('a')",
        ],
    )
    def test_non_matches(self, source: str) -> None:
        """Dynamic paths, other roots and other methods do not match."""
        _, call = _first_call(source)

        assert match_bound_call(call, CONFIG) is None

    def test_configured_template_roots(self) -> None:
        """Additional template roots are honored."""
        config = ScopeConfig(root_path="/project", template_roots=("_vm", "vm"))
        _, call = _first_call("vm.$t('a')")

        match = match_bound_call(call, config)

        assert match is not None
        assert match.path == "a"


class TestThisCall:
    """Test `this.$i18n.t(path)` matching."""

    @pytest.mark.parametrize("method", ["t", "tc"])
    def test_literal_path(self, method: str) -> None:
        """Both i18n methods match."""
        source, call = _first_call(f"this.$i18n.{method}('title')")
        match = match_this_call(call, CONFIG)

        assert match is not None
        assert match.shape is ReferenceShape.THIS_CALL
        assert _literal_text(source, match.start, match.end) == "'title'"

    @pytest.mark.parametrize(
        "source",
        [
            "this.$i18n.t(key)",
            "that.$i18n.t('a')",
            "this.i18n.t('a')",
            "this.$i18n.te('a')",
            "this.$t('a')",
        ],
    )
    def test_non_matches(self, source: str) -> None:
        """Other receivers, methods or dynamic paths do not match."""
        _, call = _first_call(source)

        assert match_this_call(call, CONFIG) is None


# ============================================================================
# Element shapes
# ============================================================================


class TestComponent:
    """Test the interpolation component's path attribute."""

    def test_quoted_attr_key(self) -> None:
        """Compiled templates quote attribute keys."""
        source, call = _first_call(
            "_c('i18n', {attrs: {\"path\": \"term\", \"tag\": \"label\"}}, [_c('a')])"
        )
        match = match_component(call, CONFIG)

        assert match is not None
        assert match.shape is ReferenceShape.COMPONENT
        assert match.path == "term"
        assert _literal_text(source, match.start, match.end) == '"term"'

    def test_identifier_attr_key(self) -> None:
        """Unquoted keys match as well."""
        _, call = _first_call("_c('i18n', {attrs: {path: 'term'}})")

        match = match_component(call, CONFIG)

        assert match is not None
        assert match.path == "term"

    @pytest.mark.parametrize(
        "source",
        [
            "_c('div', {attrs: {path: 'term'}})",
            "_c('i18n', {attrs: {path: _vm.key}})",
            "_c('i18n', {attrs: {tag: 'p'}})",
            "_c('i18n', {domProps: {path: 'term'}})",
            "_c('i18n')",
            "_c('i18n', [_vm._v('x')])",
            "h('i18n', {attrs: {path: 'term'}})",
        ],
    )
    def test_non_matches(self, source: str) -> None:
        """Other tags, factories or missing attributes do not match."""
        _, call = _first_call(source)

        assert match_component(call, CONFIG) is None


class TestDirective:
    """Test the translation directive."""

    def test_string_value(self) -> None:
        """A string directive value is the path."""
        source, call = _first_call(
            "_c('p', {directives: [{name: \"t\", rawName: \"v-t\", "
            "value: ('hello'), expression: \"'hello'\"}]})"
        )
        match = match_directive(call, CONFIG)

        assert match is not None
        assert match.shape is ReferenceShape.DIRECTIVE
        assert match.path == "hello"
        assert _literal_text(source, match.start, match.end) == "'hello'"

    def test_object_value_uses_path(self) -> None:
        """An object directive value contributes its path property."""
        source, call = _first_call(
            "_c('p', {directives: [{name: \"t\", rawName: \"v-t\", "
            "value: ({path: 'directive_1', locale: 'en'}), "
            "expression: \"{path:'directive_1'}\"}]})"
        )
        match = match_directive(call, CONFIG)

        assert match is not None
        assert match.path == "directive_1"
        assert _literal_text(source, match.start, match.end) == "'directive_1'"

    def test_later_directive_entry(self) -> None:
        """The translation directive need not be the first entry."""
        _, call = _first_call(
            "_c('input', {directives: [{name: \"model\", rawName: \"v-model\", value: (_vm.x)}, "
            "{name: \"t\", rawName: \"v-t\", value: ('label')}]})"
        )
        match = match_directive(call, CONFIG)

        assert match is not None
        assert match.path == "label"

    @pytest.mark.parametrize(
        "source",
        [
            "_c('p', {directives: [{rawName: \"v-t\", value: (_vm.key)}]})",
            "_c('p', {directives: [{rawName: \"v-t\", value: ({path: _vm.key})}]})",
            "_c('p', {directives: [{rawName: \"v-t\", value: ({locale: 'en'})}]})",
            "_c('p', {directives: [{rawName: \"v-model\", value: ('x')}]})",
            "_c('p', {directives: _vm.list})",
            "_c('p', {attrs: {id: 'x'}})",
        ],
    )
    def test_non_matches(self, source: str) -> None:
        """Dynamic values and other directives do not match."""
        _, call = _first_call(source)

        assert match_directive(call, CONFIG) is None


# ============================================================================
# Dispatch
# ============================================================================


class TestMatchCall:
    """Test match_call over all shapes."""

    def test_bound_call_only(self) -> None:
        """A method call yields a single match."""
        _, call = _first_call("_vm.$t('a')")

        assert [m.shape for m in match_call(call, CONFIG)] == [ReferenceShape.BOUND_CALL]

    def test_component_with_directive(self) -> None:
        """One element call may carry both element shapes."""
        _, call = _first_call(
            "_c('i18n', {directives: [{rawName: \"v-t\", value: ('b')}], attrs: {path: 'a'}})"
        )

        matches = match_call(call, CONFIG)

        assert [(m.shape, m.path) for m in matches] == [
            (ReferenceShape.COMPONENT, "a"),
            (ReferenceShape.DIRECTIVE, "b"),
        ]

    def test_unrelated_call(self) -> None:
        """Calls of no known shape yield nothing."""
        _, call = _first_call("console.log('a')")

        assert match_call(call, CONFIG) == []

    def test_handcrafted_tree(self) -> None:
        """Trees from other ESTree producers match the same way."""
        call: Node = {
            "type": "CallExpression",
            "callee": {
                "type": "MemberExpression",
                "computed": False,
                "object": {"type": "Identifier", "name": "_vm"},
                "property": {"type": "Identifier", "name": "$t"},
            },
            "arguments": [{"type": "Literal", "value": "x", "range": [7, 10]}],
        }

        matches = match_call(call, CONFIG)

        assert [(m.path, m.start, m.end) for m in matches] == [("x", 7, 10)]
