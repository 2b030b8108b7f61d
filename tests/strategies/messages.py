"""Hypothesis strategies for translation blocks and component paths.

Provides reusable strategies for generating block test data:
- Key segments and message trees (locale -> nested mapping -> strings)
- Path literals, including characters that need escaping in JS strings
- Component file paths relative to a project root

Event-Emitting Strategies (HypoFuzz-Optimized):
- message_trees: Emits block_locales=N
- message_texts: Emits message_text=plain|quote|separator|backslash

Python 3.13+.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING, Any

from hypothesis import event
from hypothesis import strategies as st

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn, SearchStrategy

_LOCALE_POOL = [
    "en", "en_US", "en_GB", "en-GB",
    "de", "de_DE", "fr", "fr_CA",
    "ru", "ru_RU", "ja", "pt_BR",
]

_KEY_CHARS = string.ascii_letters + string.digits + "_-"

# Characters the payload and path escapers must handle.
_AWKWARD_CHARS = ["'", '"', "\\", "\n", "\r", "\u2028", "\u2029"]

locale_codes: SearchStrategy[str] = st.sampled_from(_LOCALE_POOL)

key_segments: SearchStrategy[str] = st.text(alphabet=_KEY_CHARS, min_size=1, max_size=12)


@st.composite
def message_texts(draw: DrawFn) -> str:
    """Generate message strings, often containing awkward characters.

    Events emitted:
    - message_text=plain|awkward
    """
    if draw(st.booleans()):
        event("message_text=plain")
        return draw(st.text(max_size=20))
    event("message_text=awkward")
    pieces = draw(
        st.lists(
            st.one_of(st.sampled_from(_AWKWARD_CHARS), st.text(max_size=4)),
            min_size=1,
            max_size=6,
        )
    )
    return "".join(pieces)


def message_nodes(max_leaves: int = 12) -> SearchStrategy[dict[str, Any]]:
    """Generate a nested mapping of key segments with string leaves."""
    return st.recursive(
        st.dictionaries(key_segments, message_texts(), min_size=1, max_size=4),
        lambda children: st.dictionaries(
            key_segments,
            st.one_of(message_texts(), children),
            min_size=1,
            max_size=4,
        ),
        max_leaves=max_leaves,
    )


@st.composite
def message_trees(draw: DrawFn) -> dict[str, Any]:
    """Generate a locale-keyed MessageTree.

    Events emitted:
    - block_locales=N
    """
    locales = draw(st.lists(locale_codes, min_size=1, max_size=3, unique=True))
    event(f"block_locales={len(locales)}")
    return {locale: draw(message_nodes()) for locale in locales}


path_literals: SearchStrategy[str] = st.one_of(
    st.lists(key_segments, min_size=1, max_size=3).map(".".join),
    st.text(alphabet=st.sampled_from([*_AWKWARD_CHARS, "a", "."]), min_size=1, max_size=8),
)

relative_component_paths: SearchStrategy[str] = st.lists(
    key_segments, min_size=1, max_size=4
).map(lambda parts: "/".join(parts) + ".vue")
