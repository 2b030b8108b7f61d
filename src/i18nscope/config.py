"""Build configuration for i18nscope.

Provides a single frozen dataclass that encapsulates the parameters shared
by the block loader and the reference rewriter of one build.

Python 3.13+.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from i18nscope.constants import (
    COMPONENT_FACTORY,
    COMPONENT_TAG,
    DEFAULT_TEMPLATE_ROOTS,
    DIRECTIVE_NAME,
    MAX_PROGRAM_DEPTH,
)
from i18nscope.enums import ModuleDialect

__all__ = ["ScopeConfig"]


@dataclass(frozen=True, slots=True)
class ScopeConfig:
    """Immutable configuration for a build.

    All fields have sensible defaults; constructing ``ScopeConfig()`` with
    no arguments produces a usable configuration rooted at the current
    working directory.

    Attributes:
        root_path: Project root FileIdentifiers are computed against
            (default: current working directory).
        scoped: Register block paths and prefix payloads per file
            (default: True). When False, blocks are emitted unwrapped and
            no reference is rewritten.
        template_roots: Identifiers bound to the component instance in
            compiled templates, matched as ``<root>.$t(...)``
            (default: ``("_vm",)``).
        component_factory: Name of the element factory in compiled
            templates (default: ``"_c"``).
        component_tag: Tag of the interpolation component (default: ``"i18n"``).
        directive_name: Raw name of the translation directive (default: ``"v-t"``).
        dialects: Module dialects the rewriter is registered for
            (default: all of ModuleDialect).
        max_depth: Nesting limit of program walks (default: MAX_PROGRAM_DEPTH).

    Example:
        >>> config = ScopeConfig(root_path="/project", template_roots=("_vm", "vm"))
        >>> config.template_roots
        ('_vm', 'vm')
    """

    root_path: str = field(default_factory=os.getcwd)
    scoped: bool = True
    template_roots: tuple[str, ...] = DEFAULT_TEMPLATE_ROOTS
    component_factory: str = COMPONENT_FACTORY
    component_tag: str = COMPONENT_TAG
    directive_name: str = DIRECTIVE_NAME
    dialects: frozenset[ModuleDialect] = frozenset(ModuleDialect)
    max_depth: int = MAX_PROGRAM_DEPTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If template_roots or dialects is empty, a name is
                empty, or max_depth is not positive.
        """
        if not self.template_roots:
            msg = "template_roots must not be empty"
            raise ValueError(msg)
        if not all(self.template_roots):
            msg = "template_roots must not contain empty names"
            raise ValueError(msg)
        if not self.component_factory or not self.component_tag or not self.directive_name:
            msg = "component_factory, component_tag and directive_name must be set"
            raise ValueError(msg)
        if not self.dialects:
            msg = "dialects must not be empty"
            raise ValueError(msg)
        if self.max_depth <= 0:
            msg = "max_depth must be positive"
            raise ValueError(msg)
