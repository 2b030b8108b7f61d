"""Enumerations for i18nscope type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from __future__ import annotations

from enum import StrEnum


class BlockLang(StrEnum):
    """Content format of a translation block.

    StrEnum provides automatic string conversion: str(BlockLang.YAML) == "yaml"
    """

    JSON = "json"
    """Strict JSON (default when no lang is given)."""

    JSON5 = "json5"
    """JSON5: comments, trailing commas, unquoted keys."""

    YAML = "yaml"
    """YAML document."""

    YML = "yml"
    """Alias of YAML."""

    @classmethod
    def from_option(cls, value: str | None) -> BlockLang:
        """Map a query option to a format, falling back to strict JSON.

        Example:
            >>> BlockLang.from_option("yml")
            <BlockLang.YML: 'yml'>
            >>> BlockLang.from_option("toml")
            <BlockLang.JSON: 'json'>
        """
        if value is None:
            return cls.JSON
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.JSON


class ReferenceShape(StrEnum):
    """Shape of a translation reference found in compiled component code."""

    BOUND_CALL = "bound_call"
    """Template root method: _vm.$t('path') / _vm.$tc('path')"""

    THIS_CALL = "this_call"
    """Instance i18n method: this.$i18n.t('path') / this.$i18n.tc('path')"""

    COMPONENT = "component"
    """Interpolation component: _c('i18n', {attrs: {path: 'path'}})"""

    DIRECTIVE = "directive"
    """Directive: _c('p', {directives: [{name: 't', rawName: 'v-t', value: 'path'}]})"""


class ModuleDialect(StrEnum):
    """JavaScript module dialects the reference rewriter is registered for."""

    AUTO = "javascript/auto"
    """Module or script, detected from the source."""

    DYNAMIC = "javascript/dynamic"
    """CommonJS / script."""

    ESM = "javascript/esm"
    """ECMAScript module."""


__all__ = [
    "BlockLang",
    "ModuleDialect",
    "ReferenceShape",
]
