"""Shared constants for i18nscope.

Centralized values used by the block transform, the reference rewriter and
the host adapters. Placing constants here avoids circular imports and keeps
one source of truth for the generated code and the reference shapes.

Constants are grouped by domain:
- Depth limits: Nesting limits for message trees and program walks
- Identity: FileIdentifier length
- Host limits: Minimum supported loader API version
- Reference shapes: Names matched in compiled component code
- Generated code: Installer template

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    "MAX_PROGRAM_DEPTH",
    # Identity
    "ID_LENGTH",
    # Host limits
    "MIN_LOADER_VERSION",
    "BLOCK_TYPE",
    # Reference shapes
    "DEFAULT_TEMPLATE_ROOTS",
    "TRANSLATE_METHODS",
    "I18N_PROPERTY",
    "THIS_TRANSLATE_METHODS",
    "COMPONENT_FACTORY",
    "COMPONENT_TAG",
    "DIRECTIVE_NAME",
    "SCANNED_QUERY_TYPES",
    "COMPONENT_EXTENSION",
    # Generated code
    "INSTALLER_TEMPLATE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum depth for recursion protection.
# Used by: leaf path extraction (message tree nesting).
MAX_DEPTH: int = 400

# Nesting limit of program walks. Walks use an explicit stack rather than
# recursion, so the limit only bounds pathological input; minified bundles
# and long string concatenations nest in the thousands.
MAX_PROGRAM_DEPTH: int = 100_000

# ============================================================================
# IDENTITY
# ============================================================================

# Hex characters in a FileIdentifier (blake2b digest_size * 2).
ID_LENGTH: int = 8

# ============================================================================
# HOST LIMITS
# ============================================================================

# Loader API versions below this are rejected with UnsupportedVersionError.
MIN_LOADER_VERSION: int = 2

# Query marker of translation block resources (?vue&type=custom&blockType=i18n).
BLOCK_TYPE: str = "i18n"

# ============================================================================
# REFERENCE SHAPES
# ============================================================================

# Identifiers bound to the component instance inside compiled templates
# (`var _vm = this`).
DEFAULT_TEMPLATE_ROOTS: tuple[str, ...] = ("_vm",)

# <root>.$t(path) / <root>.$tc(path)
TRANSLATE_METHODS: frozenset[str] = frozenset({"$t", "$tc"})

# this.$i18n.t(path) / this.$i18n.tc(path)
I18N_PROPERTY: str = "$i18n"
THIS_TRANSLATE_METHODS: frozenset[str] = frozenset({"t", "tc"})

# _c('i18n', {attrs: {path: ...}}) and _c(tag, {directives: [...]})
COMPONENT_FACTORY: str = "_c"
COMPONENT_TAG: str = "i18n"
DIRECTIVE_NAME: str = "v-t"

# Only compiled template and script parts of a component are scanned.
SCANNED_QUERY_TYPES: frozenset[str] = frozenset({"template", "script"})
COMPONENT_EXTENSION: str = ".vue"

# ============================================================================
# GENERATED CODE
# ============================================================================

# Installer appended to the component's translation block list. The payload
# is embedded as a single-quoted string literal.
INSTALLER_TEMPLATE: str = (
    "module.exports = function (component) {{\n"
    "  component.options.__i18n = component.options.__i18n || []\n"
    "  component.options.__i18n.push('{payload}')\n"
    "  delete component.options._Ctor\n"
    "}}\n"
)
