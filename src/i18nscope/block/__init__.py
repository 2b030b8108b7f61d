"""Translation block compilation.

Exports:
    transform_block: Compile a raw block into installer module source
    BlockOptions / BlockIdentity: Decode options and file identity context
    load_messages / decode_block: Block decoding (JSON, JSON5, YAML)
    extract_leaf_paths: LeafPaths of a MessageTree
    render_installer / serialize_payload / prefix_messages: Code generation

Python 3.13+.
"""

from .codegen import escape_payload, prefix_messages, render_installer, serialize_payload
from .decoding import decode_block, decode_text, load_messages
from .options import BlockIdentity, BlockOptions, parse_query
from .paths import extract_leaf_paths, iter_leaf_paths
from .transform import transform_block
from .types import LeafPath, LocaleCode, MessageNode, MessageTree

__all__ = [
    "BlockIdentity",
    "BlockOptions",
    "LeafPath",
    "LocaleCode",
    "MessageNode",
    "MessageTree",
    "decode_block",
    "decode_text",
    "escape_payload",
    "extract_leaf_paths",
    "iter_leaf_paths",
    "load_messages",
    "parse_query",
    "prefix_messages",
    "render_installer",
    "serialize_payload",
    "transform_block",
]
