"""FileIdentifier computation.

A FileIdentifier is a short hash of a file's path relative to the project
root. The block transform and the reference rewriter both derive it from the
same (root, path) pair, which is how a reference finds the paths declared by
its own file's translation block.

Two files with the same relative path under different roots share an
identifier. Collisions between distinct paths are possible and accepted.

Python 3.13+.
"""

from __future__ import annotations

import hashlib
import posixpath
import re
from typing import TypeAlias

from i18nscope.constants import ID_LENGTH

__all__ = [
    "FileIdentifier",
    "identifier_for",
    "relative_resource_path",
]

FileIdentifier: TypeAlias = str

_PARENT_SEGMENTS = re.compile(r"^(?:\.\./)+")


def _canonical(path: str) -> str:
    return path.replace("\\", "/")


def relative_resource_path(root_path: str, file_path: str) -> str:
    """Return file_path relative to root_path in canonical form.

    Separators are canonicalized to '/' and leading '../' segments are
    stripped, so a file outside the root still maps to a stable name.

    Example:
        >>> relative_resource_path("/project", "/project/src/App.vue")
        'src/App.vue'
        >>> relative_resource_path("C:\\\\project", "C:\\\\project\\\\src\\\\App.vue")
        'src/App.vue'
        >>> relative_resource_path("/project/app", "/project/lib/Shared.vue")
        'lib/Shared.vue'
    """
    if not file_path:
        return ""
    relative = posixpath.relpath(_canonical(file_path), _canonical(root_path) or ".")
    return _PARENT_SEGMENTS.sub("", relative)


def identifier_for(root_path: str, file_path: str) -> FileIdentifier:
    """Compute the FileIdentifier of file_path under root_path.

    Deterministic and side-effect free.

    Args:
        root_path: Project root (build context directory)
        file_path: Path of the component file (query string excluded)

    Returns:
        Lowercase hex string of ID_LENGTH characters
    """
    relative = relative_resource_path(root_path, file_path)
    digest = hashlib.blake2b(relative.encode("utf-8"), digest_size=ID_LENGTH // 2)
    return digest.hexdigest()
