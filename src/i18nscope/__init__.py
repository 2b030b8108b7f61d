"""i18nscope - Per-file scoping for vue-i18n component translation blocks.

A build-time transformer pair. The translation block loader compiles each
component's `<i18n>` block into a module that merges the block's messages
into the component's i18n options, prefixing every top-level key with a
short file identifier. The reference rewriter then qualifies the literal
translation paths in the same component's compiled template and script, so
two components may declare the same key without colliding.

Public API:
    transform_block - Compile a translation block into installer module source
    rewrite_references - Edits qualifying a program's registered references
    apply_edits - Apply non-overlapping offset edits to text
    identifier_for - FileIdentifier of a component file
    PathRegistry - FileIdentifier -> LeafPaths declared by that file's block
    BuildSession - Block loader and module rewriter for one build
    ScopeConfig - Build configuration

Exceptions:
    ScopeError - Base exception class
    DecodeError - Malformed translation block
    UnsupportedVersionError - Host loader API too old
    ProgramSyntaxError - Unparseable compiled module
    EditOverlapError / EditRangeError - Edit contract violations

Submodules:
    i18nscope.block - Block decoding, path extraction and code generation
    i18nscope.rewrite - Reference shapes and the rewriter
    i18nscope.syntax - ESTree parsing (esprima) and traversal
    i18nscope.diagnostics - Error types, codes and formatting
    i18nscope.host - Loader context and build session
"""

from .block import BlockIdentity, BlockOptions, transform_block
from .config import ScopeConfig
from .diagnostics import (
    DecodeError,
    EditOverlapError,
    EditRangeError,
    ProgramSyntaxError,
    ScopeError,
    UnsupportedVersionError,
)
from .edits import apply_edits
from .enums import BlockLang, ModuleDialect, ReferenceShape
from .host import BuildSession, LoaderContext, translation_block_loader
from .identity import identifier_for
from .registry import PathRegistry
from .rewrite import rewrite_references
from .syntax import parse_program

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("i18nscope")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BlockIdentity",
    "BlockLang",
    "BlockOptions",
    "BuildSession",
    "DecodeError",
    "EditOverlapError",
    "EditRangeError",
    "LoaderContext",
    "ModuleDialect",
    "PathRegistry",
    "ProgramSyntaxError",
    "ReferenceShape",
    "ScopeConfig",
    "ScopeError",
    "UnsupportedVersionError",
    "__version__",
    "apply_edits",
    "identifier_for",
    "parse_program",
    "rewrite_references",
    "transform_block",
    "translation_block_loader",
]
