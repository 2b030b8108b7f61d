"""Reference rewriting.

Walks one file's program, records every translation reference whose path is
a string literal, and turns the references whose path the file's own
translation block declared into edits that replace the literal with
"<file id>.<path>".

Finding references and deciding on them are separate steps: a build host
collects references while parsing and resolves them against the registry
when it emits the file, after the file's translation block has been
compiled.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from i18nscope.config import ScopeConfig
from i18nscope.enums import ReferenceShape
from i18nscope.registry import PathRegistry
from i18nscope.syntax import Node, Program, ProgramVisitor

from .shapes import PathMatch, match_call

__all__ = [
    "PathReference",
    "ReferenceCollector",
    "ReferenceEdit",
    "collect_references",
    "quote_path",
    "resolve_edits",
    "rewrite_references",
]

logger = logging.getLogger(__name__)

_QUOTE_ESCAPES: tuple[tuple[str, str], ...] = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


def quote_path(file_id: str, path: str) -> str:
    """Render the qualified path as a double-quoted JS string literal.

    Example:
        >>> quote_path("a1b2c3d4", "menu.open")
        '"a1b2c3d4.menu.open"'
        >>> quote_path("a1b2c3d4", 'say "hi"')
        '"a1b2c3d4.say \\\\"hi\\\\""'
    """
    text = f"{file_id}.{path}"
    for char, replacement in _QUOTE_ESCAPES:
        text = text.replace(char, replacement)
    return f'"{text}"'


@dataclass(frozen=True, slots=True)
class ReferenceEdit:
    """Replacement of one path literal.

    Attributes:
        file_id: FileIdentifier of the file being rewritten
        path: Original literal value
        start: Offset of the literal's first character
        end: Offset just past the literal (exclusive)
        replacement: Replacement source text
    """

    file_id: str
    path: str
    start: int
    end: int
    replacement: str


@dataclass(frozen=True, slots=True)
class PathReference:
    """A literal translation path found in a file.

    Attributes:
        file_id: FileIdentifier of the file the reference is in
        path: Literal value
        start: Offset of the literal's first character
        end: Offset just past the literal (exclusive)
        shape: Reference shape the literal was found in
    """

    file_id: str
    path: str
    start: int
    end: int
    shape: ReferenceShape

    @classmethod
    def from_match(cls, file_id: str, match: PathMatch) -> PathReference:
        return cls(
            file_id=file_id,
            path=match.path,
            start=match.start,
            end=match.end,
            shape=match.shape,
        )

    def to_edit(self, registry: PathRegistry) -> ReferenceEdit | None:
        """Return the edit for this reference if its path is registered for its file."""
        if not registry.has_path(self.file_id, self.path):
            return None
        return ReferenceEdit(
            file_id=self.file_id,
            path=self.path,
            start=self.start,
            end=self.end,
            replacement=quote_path(self.file_id, self.path),
        )


class ReferenceCollector(ProgramVisitor):
    """Visitor that reports every literal translation reference of a program.

    Each CallExpression is tried against all reference shapes once. The walk
    reaches every node, so references nested in arguments are found as well.
    """

    def __init__(
        self,
        file_id: str,
        register: Callable[[PathReference], None],
        config: ScopeConfig,
    ) -> None:
        super().__init__(max_depth=config.max_depth)
        self.file_id = file_id
        self.register = register
        self.config = config

    def visit_CallExpression(self, node: Node) -> None:  # noqa: N802 - visitor convention
        for match in match_call(node, self.config):
            logger.debug(
                "Found %s reference '%s' at %d..%d in %s",
                match.shape,
                match.path,
                match.start,
                match.end,
                self.file_id,
            )
            self.register(PathReference.from_match(self.file_id, match))


def collect_references(
    program: Program,
    file_id: str,
    register: Callable[[PathReference], None],
    config: ScopeConfig | None = None,
) -> None:
    """Report each literal translation reference of program through register.

    References are reported in tree order, parents before children.
    """
    ReferenceCollector(file_id, register, config or ScopeConfig()).visit(program)


def resolve_edits(references: list[PathReference], registry: PathRegistry) -> list[ReferenceEdit]:
    """Turn references into edits, keeping only registered paths.

    A reference whose path is unknown for its file produces no edit, so it
    keeps its runtime lookup unchanged. Resolving before the file's block
    was registered yields no edits at all.
    """
    edits = [edit for ref in references if (edit := ref.to_edit(registry)) is not None]
    logger.debug("Resolved %d of %d reference(s) to edits", len(edits), len(references))
    return edits


def rewrite_references(
    program: Program,
    file_id: str,
    registry: PathRegistry,
    config: ScopeConfig | None = None,
) -> list[ReferenceEdit]:
    """Collect the references of program and resolve them immediately.

    Example:
        >>> registry = PathRegistry()
        >>> registry.add_paths("a1b2c3d4", ["test"])
        >>> program = parse_program("_vm.$t('test'); _vm.$t('unknown')")
        >>> [edit.replacement for edit in rewrite_references(program, "a1b2c3d4", registry)]
        ['"a1b2c3d4.test"']
    """
    references: list[PathReference] = []
    collect_references(program, file_id, references.append, config)
    return resolve_edits(references, registry)
