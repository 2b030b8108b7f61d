"""Build-lifetime registry of translation paths per file.

The block transform writes the LeafPaths declared by a file's translation
block; the reference rewriter reads them to decide which literals it may
qualify with the file's identifier.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

__all__ = ["PathRegistry"]

logger = logging.getLogger(__name__)


class PathRegistry:
    """Mapping of FileIdentifier to the ordered set of its known LeafPaths.

    Append-only: paths merge into an identifier's set, duplicates are
    suppressed, and nothing is ever removed. One instance lives for one
    build and is passed explicitly to every transform that needs it.

    Example:
        >>> registry = PathRegistry()
        >>> registry.add_paths("a1b2c3d4", ["title", "menu.open"])
        >>> registry.add_paths("a1b2c3d4", ["title", "menu.close"])
        >>> registry.get_paths("a1b2c3d4")
        ('title', 'menu.open', 'menu.close')
        >>> registry.get_paths("unknown")
        ()
    """

    __slots__ = ("_paths",)

    def __init__(self) -> None:
        # dict keys keep insertion order and give O(1) membership
        self._paths: dict[str, dict[str, None]] = {}

    def get_paths(self, file_id: str) -> tuple[str, ...]:
        """Return the known paths of file_id in first-registration order."""
        known = self._paths.get(file_id)
        if known is None:
            return ()
        return tuple(known)

    def add_paths(self, file_id: str, paths: Iterable[str]) -> None:
        """Merge paths into the set registered for file_id.

        Prior order is preserved; only paths not seen before are appended,
        in the order given.
        """
        known = self._paths.setdefault(file_id, {})
        before = len(known)
        for path in paths:
            known.setdefault(path, None)
        logger.debug(
            "Registered %d new path(s) for %s (%d known)",
            len(known) - before,
            file_id,
            len(known),
        )

    def has_path(self, file_id: str, path: str) -> bool:
        """Check whether path was declared by file_id's translation block."""
        known = self._paths.get(file_id)
        return known is not None and path in known

    def identifiers(self) -> tuple[str, ...]:
        """Return every registered FileIdentifier."""
        return tuple(self._paths)

    def __contains__(self, file_id: object) -> bool:
        return file_id in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __repr__(self) -> str:
        total = sum(len(paths) for paths in self._paths.values())
        return f"PathRegistry(files={len(self._paths)}, paths={total})"
