"""Translation block transform.

Turns a component's raw translation block into an installer module and, when
per-file scoping is on, records the block's LeafPaths in the PathRegistry
under the file's identifier so the reference rewriter can qualify them.

Python 3.13+.
"""

from __future__ import annotations

import logging

from i18nscope.locale_utils import is_known_locale
from i18nscope.registry import PathRegistry

from .codegen import prefix_messages, render_installer
from .decoding import load_messages
from .options import BlockIdentity, BlockOptions
from .paths import extract_leaf_paths
from .types import MessageTree

__all__ = ["transform_block"]

logger = logging.getLogger(__name__)


def _warn_unknown_locales(messages: MessageTree, identity: BlockIdentity) -> None:
    for locale in messages:
        if not is_known_locale(str(locale)):
            logger.warning(
                "Unknown locale '%s' in translation block of %s",
                locale,
                identity.file_path or identity.file_id or "<unscoped>",
            )


def transform_block(
    raw: str | bytes,
    options: BlockOptions,
    registry: PathRegistry | None,
    identity: BlockIdentity,
) -> str:
    """Compile a translation block into installer module source.

    The block is decoded first; only a successfully decoded block touches
    the registry, so a failed block leaves no partial state behind.

    Args:
        raw: Block content (text or bytes)
        options: Decode options (lang, locale)
        registry: Shared build registry (ignored when the identity is unscoped)
        identity: File identity and scoping flag

    Returns:
        Generated module source

    Raises:
        DecodeError: If the block is invalid for its lang
        DepthLimitExceededError: If the message tree is nested too deeply

    Example:
        >>> registry = PathRegistry()
        >>> source = transform_block(
        ...     '{"en": {"title": "Title"}}',
        ...     BlockOptions(),
        ...     registry,
        ...     BlockIdentity(file_id="a1b2c3d4"),
        ... )
        >>> registry.get_paths("a1b2c3d4")
        ('title',)
    """
    messages = load_messages(raw, options.lang, options.locale)
    _warn_unknown_locales(messages, identity)

    if identity.scoped and registry is not None:
        file_id = identity.file_id or ""
        paths = extract_leaf_paths(messages)
        registry.add_paths(file_id, paths)
        logger.info(
            "Compiled %s translation block for %s (%d locale(s), %d path(s))",
            options.lang,
            file_id,
            len(messages),
            len(paths),
        )
        return render_installer(prefix_messages(messages, file_id))

    logger.info(
        "Compiled unscoped %s translation block (%d locale(s))",
        options.lang,
        len(messages),
    )
    return render_installer(messages)
