"""Translation reference rewriting.

Exports:
    rewrite_references: Edits for one program against the registry
    collect_references / resolve_edits: The two halves of the above
    PathReference / ReferenceEdit: Found reference and decided edit
    match_call: Shape dispatcher over one CallExpression

Python 3.13+.
"""

from .rewriter import (
    PathReference,
    ReferenceCollector,
    ReferenceEdit,
    collect_references,
    quote_path,
    resolve_edits,
    rewrite_references,
)
from .shapes import (
    MATCHERS,
    PathMatch,
    match_bound_call,
    match_call,
    match_component,
    match_directive,
    match_this_call,
)

__all__ = [
    "MATCHERS",
    "PathMatch",
    "PathReference",
    "ReferenceCollector",
    "ReferenceEdit",
    "collect_references",
    "match_bound_call",
    "match_call",
    "match_component",
    "match_directive",
    "match_this_call",
    "quote_path",
    "resolve_edits",
    "rewrite_references",
]
