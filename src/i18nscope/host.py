"""Build host adapters.

Keeps host-specific glue outside the block transform and the rewriter:

- translation_block_loader: the per-file loader callback for translation
  block resources (`Component.vue?vue&type=custom&blockType=i18n&lang=yaml`)
- BuildSession: one build's registry plus the parse/emit hooks for compiled
  component parts (`Component.vue?vue&type=template`, `...&type=script`)

A build first loads blocks and parses modules in any order, then emits
modules. References are resolved against the registry at emit time, so a
component's template is rewritten against its own block no matter which of
the two the host visited first.

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from i18nscope.block import (
    BlockIdentity,
    BlockOptions,
    decode_text,
    parse_query,
    transform_block,
)
from i18nscope.config import ScopeConfig
from i18nscope.constants import (
    BLOCK_TYPE,
    COMPONENT_EXTENSION,
    MIN_LOADER_VERSION,
    SCANNED_QUERY_TYPES,
)
from i18nscope.diagnostics import (
    EditContractError,
    ErrorTemplate,
    ScopeError,
    UnsupportedVersionError,
)
from i18nscope.edits import apply_edits
from i18nscope.enums import ModuleDialect
from i18nscope.identity import identifier_for
from i18nscope.registry import PathRegistry
from i18nscope.rewrite import PathReference, collect_references, resolve_edits
from i18nscope.syntax import parse_program

__all__ = [
    "BuildSession",
    "FileError",
    "LoaderContext",
    "is_block_resource",
    "split_resource",
    "translation_block_loader",
]

logger = logging.getLogger(__name__)


def split_resource(resource: str) -> tuple[str, str]:
    """Split a resource into (path, query); the query keeps no leading '?'.

    Example:
        >>> split_resource("/app/src/App.vue?vue&type=template")
        ('/app/src/App.vue', 'vue&type=template')
    """
    path, _, query = resource.partition("?")
    return path, query


def is_block_resource(resource: str) -> bool:
    """Check whether resource is a translation block request."""
    _, query = split_resource(resource)
    return parse_query(query).get("blockType") == BLOCK_TYPE


def _is_scanned_module(resource: str) -> bool:
    path, query = split_resource(resource)
    if not path.endswith(COMPONENT_EXTENSION):
        return False
    return parse_query(query).get("type") in SCANNED_QUERY_TYPES


@dataclass(frozen=True, slots=True)
class FileError:
    """A file-scoped failure; the rest of the build is unaffected.

    Attributes:
        resource: Resource the failure belongs to
        error: The raised error
    """

    resource: str
    error: ScopeError

    def __str__(self) -> str:
        return f"{self.resource}: {self.error}"


@dataclass(slots=True)
class LoaderContext:
    """What the host hands the translation block loader for one resource.

    Attributes:
        resource_path: Component file path (query excluded)
        resource_query: Resource query, e.g. '?vue&type=custom&blockType=i18n&lang=yaml'
        root_context: Project root; the working directory when missing
        version: Host loader API version
        registry: Shared build registry; scoping is enabled only when present
        errors: Errors emitted for this resource
    """

    resource_path: str
    resource_query: str = ""
    root_context: str | None = None
    version: int | None = MIN_LOADER_VERSION
    registry: PathRegistry | None = None
    errors: list[ScopeError] = field(default_factory=list)

    @property
    def root_path(self) -> str:
        return self.root_context or os.getcwd()

    def emit_error(self, error: ScopeError) -> None:
        """Report a file-scoped error to the host."""
        logger.error("%s: %s", self.resource_path, error)
        self.errors.append(error)


def translation_block_loader(context: LoaderContext, source: str | bytes) -> str:
    """Compile one translation block resource into installer module source.

    Raises:
        UnsupportedVersionError: If the host loader API version is too old
        DecodeError: If the block is invalid for its lang

    Both are also reported through context.emit_error before raising.
    """
    if context.version is None or context.version < MIN_LOADER_VERSION:
        error = UnsupportedVersionError(
            ErrorTemplate.loader_version_unsupported(context.version, MIN_LOADER_VERSION),
            version=context.version,
            minimum=MIN_LOADER_VERSION,
        )
        context.emit_error(error)
        raise error

    options = BlockOptions.from_query(context.resource_query)
    if context.registry is not None:
        identity = BlockIdentity.for_file(context.root_path, context.resource_path)
    else:
        identity = BlockIdentity.unscoped()

    try:
        return transform_block(source, options, context.registry, identity)
    except ScopeError as e:
        context.emit_error(e)
        raise


class BuildSession:
    """Registry and hooks for one build.

    Example:
        >>> session = BuildSession(ScopeConfig(root_path="/app"))
        >>> outputs = session.run({
        ...     "/app/App.vue?vue&type=custom&index=0&blockType=i18n":
        ...         '{"en": {"title": "Title"}}',
        ...     "/app/App.vue?vue&type=template":
        ...         "var render = function () { var _vm = this; return _vm.$t('title') }",
        ... })
    """

    def __init__(
        self,
        config: ScopeConfig | None = None,
        *,
        loader_version: int = MIN_LOADER_VERSION,
    ) -> None:
        self.config = config or ScopeConfig()
        self.loader_version = loader_version
        self.registry = PathRegistry()
        self.errors: list[FileError] = []
        self._references: dict[str, list[PathReference]] = {}
        self._sources: dict[str, str] = {}

    def file_id(self, resource: str) -> str:
        """FileIdentifier of the component file a resource belongs to."""
        path, _ = split_resource(resource)
        return identifier_for(self.config.root_path, path)

    def _fail(self, resource: str, error: ScopeError) -> None:
        self.errors.append(FileError(resource, error))

    def load_block(self, resource: str, source: str | bytes) -> str | None:
        """Run the translation block loader for resource.

        Returns:
            Installer module source, or None when the block failed (the
            failure is recorded in errors)
        """
        path, query = split_resource(resource)
        context = LoaderContext(
            resource_path=path,
            resource_query=query,
            root_context=self.config.root_path,
            version=self.loader_version,
            registry=self.registry if self.config.scoped else None,
        )
        try:
            return translation_block_loader(context, source)
        except ScopeError as e:
            self._fail(resource, e)
            return None

    def parse_module(
        self,
        resource: str,
        source: str,
        dialect: ModuleDialect = ModuleDialect.AUTO,
    ) -> tuple[PathReference, ...]:
        """Collect the translation references of a compiled component part.

        Only template and script parts of component files are scanned, and
        only for the dialects the session is configured for.

        Parse and walk failures are recorded in errors and leave the
        resource without references.

        Returns:
            References found (empty when the resource is not scanned or failed)
        """
        self._sources[resource] = source
        self._references.pop(resource, None)

        if not self.config.scoped or dialect not in self.config.dialects:
            return ()
        if not _is_scanned_module(resource):
            return ()

        references: list[PathReference] = []
        try:
            program = parse_program(source, dialect=dialect)
            collect_references(program, self.file_id(resource), references.append, self.config)
        except ScopeError as e:
            logger.error("%s: %s", resource, e)
            self._fail(resource, e)
            return ()

        self._references[resource] = references
        logger.debug("Collected %d reference(s) from %s", len(references), resource)
        return tuple(references)

    def references(self, resource: str) -> tuple[PathReference, ...]:
        """References collected for resource by parse_module."""
        return tuple(self._references.get(resource, ()))

    def emit(self, resource: str, generated: str | None = None) -> str:
        """Produce the final text of a parsed module.

        Args:
            resource: Resource previously passed to parse_module
            generated: Text the recorded offsets refer to; defaults to the
                source given to parse_module

        Raises:
            KeyError: If resource was never parsed and generated is None
            EditContractError: If edits overlap or fall outside the text
        """
        text = generated if generated is not None else self._sources[resource]
        edits = resolve_edits(self._references.get(resource, []), self.registry)
        try:
            result = apply_edits(text, edits)
        except EditContractError as e:
            logger.error("%s: %s", resource, e)
            self._fail(resource, e)
            raise
        if edits:
            logger.info("Rewrote %d reference(s) in %s", len(edits), resource)
        return result

    def run(
        self,
        resources: Mapping[str, str | bytes],
        *,
        dialect: ModuleDialect = ModuleDialect.AUTO,
    ) -> dict[str, str]:
        """Build a set of resources: blocks and parsing first, then emission.

        Failed resources are left out of the result and recorded in errors.
        A module whose edits break the edit contract fails on its own; the
        other modules are still emitted.
        """
        outputs: dict[str, str] = {}
        modules: list[str] = []
        for resource, source in resources.items():
            if is_block_resource(resource):
                generated = self.load_block(resource, source)
                if generated is not None:
                    outputs[resource] = generated
            else:
                try:
                    text = decode_text(source)
                except ScopeError as e:
                    self._fail(resource, e)
                    continue
                self.parse_module(resource, text, dialect)
                modules.append(resource)

        for resource in modules:
            if any(error.resource == resource for error in self.errors):
                continue
            try:
                outputs[resource] = self.emit(resource)
            except EditContractError:
                # Already recorded by emit
                continue
        return outputs

    def failed_resources(self) -> tuple[str, ...]:
        """Resources with at least one recorded error, in failure order."""
        return tuple(dict.fromkeys(error.resource for error in self.errors))
