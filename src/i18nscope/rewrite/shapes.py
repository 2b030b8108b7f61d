"""Translation reference shapes.

A closed set of matchers over ESTree CallExpression nodes. Each matcher
returns a PathMatch for the string literal holding the translation path, or
None when the call does not have its shape. A call that has the outer shape
but a dynamic path (identifier, concatenation, template literal) or a
missing nested property is not a match either; such references are legal
and stay untouched.

Shapes, as they appear in compiled component code:

    _vm.$t('path') / _vm.$tc('path', n)               BOUND_CALL
    this.$i18n.t('path') / this.$i18n.tc('path', n)    THIS_CALL
    _c('i18n', {attrs: {"path": "path"}})              COMPONENT
    _c('p', {directives: [{rawName: "v-t", value: ('path')}]})
    _c('p', {directives: [{rawName: "v-t", value: ({path: 'path'})}]})
                                                       DIRECTIVE

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

from i18nscope.config import ScopeConfig
from i18nscope.constants import I18N_PROPERTY, THIS_TRANSLATE_METHODS, TRANSLATE_METHODS
from i18nscope.enums import ReferenceShape
from i18nscope.syntax import Node

__all__ = [
    "MATCHERS",
    "PathMatch",
    "match_bound_call",
    "match_call",
    "match_component",
    "match_directive",
    "match_this_call",
    "property_value",
    "string_literal",
]


@dataclass(frozen=True, slots=True)
class PathMatch:
    """A translation path literal found in a reference.

    Attributes:
        shape: Reference shape the literal was found in
        path: Literal value (the LeafPath being looked up)
        start: Offset of the literal's opening quote
        end: Offset just past the literal's closing quote
    """

    shape: ReferenceShape
    path: str
    start: int
    end: int


def string_literal(node: Any, shape: ReferenceShape) -> PathMatch | None:
    """Match a plain string literal that carries its source range."""
    match node:
        case {
            "type": "Literal",
            "value": str() as value,
            "range": [int() as start, int() as end],
        }:
            return PathMatch(shape=shape, path=value, start=start, end=end)
        case _:
            return None


def _key_name(key: Any) -> str | None:
    match key:
        case {"type": "Identifier", "name": str() as name}:
            return name
        case {"type": "Literal", "value": str() as value}:
            return value
        case _:
            return None


def property_value(obj: Any, name: str) -> Node | None:
    """Return the value of the first non-computed property `name` of an object expression."""
    match obj:
        case {"type": "ObjectExpression", "properties": [*properties]}:
            for prop in properties:
                match prop:
                    case {"type": "Property", "key": key, "value": value} if (
                        not prop.get("computed") and _key_name(key) == name
                    ):
                        return value
    return None


def match_bound_call(call: Node, config: ScopeConfig) -> PathMatch | None:
    """Match `<template root>.$t(path)` and `<template root>.$tc(path)`."""
    match call:
        case {
            "callee": {
                "type": "MemberExpression",
                "computed": False,
                "object": {"type": "Identifier", "name": root},
                "property": {"type": "Identifier", "name": method},
            },
            "arguments": [first, *_],
        } if root in config.template_roots and method in TRANSLATE_METHODS:
            return string_literal(first, ReferenceShape.BOUND_CALL)
        case _:
            return None


def match_this_call(call: Node, config: ScopeConfig) -> PathMatch | None:
    """Match `this.$i18n.t(path)` and `this.$i18n.tc(path)`."""
    match call:
        case {
            "callee": {
                "type": "MemberExpression",
                "computed": False,
                "object": {
                    "type": "MemberExpression",
                    "computed": False,
                    "object": {"type": "ThisExpression"},
                    "property": {"type": "Identifier", "name": owner},
                },
                "property": {"type": "Identifier", "name": method},
            },
            "arguments": [first, *_],
        } if owner == I18N_PROPERTY and method in THIS_TRANSLATE_METHODS:
            return string_literal(first, ReferenceShape.THIS_CALL)
        case _:
            return None


def _element_data(call: Node, config: ScopeConfig) -> tuple[Any, Node] | None:
    """Return (tag, data object) of an element factory call `_c(tag, {...})`."""
    match call:
        case {
            "callee": {"type": "Identifier", "name": factory},
            "arguments": [tag, {"type": "ObjectExpression"} as data, *_],
        } if factory == config.component_factory:
            return tag, data
        case _:
            return None


def match_component(call: Node, config: ScopeConfig) -> PathMatch | None:
    """Match the `path` attribute of the interpolation component."""
    element = _element_data(call, config)
    if element is None:
        return None
    tag, data = element
    match tag:
        case {"type": "Literal", "value": value} if value == config.component_tag:
            attrs = property_value(data, "attrs")
            return string_literal(property_value(attrs, "path"), ReferenceShape.COMPONENT)
        case _:
            return None


def _is_directive_entry(entry: Any, directive_name: str) -> bool:
    match entry:
        case {"type": "ObjectExpression", "properties": [*properties]}:
            return any(
                isinstance(prop, dict)
                and prop.get("type") == "Property"
                and isinstance(prop.get("value"), dict)
                and prop["value"].get("type") == "Literal"
                and prop["value"].get("value") == directive_name
                for prop in properties
            )
        case _:
            return False


def match_directive(call: Node, config: ScopeConfig) -> PathMatch | None:
    """Match the path of a translation directive on any element.

    The directive entry is the first object in the `directives` array with a
    property whose value is the directive name literal. Its `value` is the
    path, unless it is an object, in which case that object's `path` is.
    """
    element = _element_data(call, config)
    if element is None:
        return None
    _, data = element
    match property_value(data, "directives"):
        case {"type": "ArrayExpression", "elements": [*entries]}:
            pass
        case _:
            return None

    for entry in entries:
        if _is_directive_entry(entry, config.directive_name):
            value = property_value(entry, "value")
            match value:
                case {"type": "ObjectExpression"}:
                    value = property_value(value, "path")
            return string_literal(value, ReferenceShape.DIRECTIVE)
    return None


Matcher: TypeAlias = Callable[[Node, ScopeConfig], PathMatch | None]

MATCHERS: tuple[tuple[ReferenceShape, Matcher], ...] = (
    (ReferenceShape.BOUND_CALL, match_bound_call),
    (ReferenceShape.THIS_CALL, match_this_call),
    (ReferenceShape.COMPONENT, match_component),
    (ReferenceShape.DIRECTIVE, match_directive),
)


def match_call(call: Node, config: ScopeConfig) -> list[PathMatch]:
    """Try every matcher on a CallExpression.

    A method call match ends the dispatch. The component and directive
    shapes are independent: one element call may carry both.

    Returns:
        Matches in matcher order (at most one per shape)
    """
    matches: list[PathMatch] = []
    for shape, matcher in MATCHERS:
        found = matcher(call, config)
        if found is not None:
            matches.append(found)
            if shape in (ReferenceShape.BOUND_CALL, ReferenceShape.THIS_CALL):
                break
    return matches
