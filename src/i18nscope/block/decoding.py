"""Translation block decoding.

Decodes raw block content into a MessageTree according to the block's lang:
YAML 1.2 (PyYAML with core schema resolvers), JSON5 (json5) or strict JSON
(stdlib json, the default). Values are normalized to what JSON.parse accepts:
strict JSON rejects NaN and Infinity, JSON5 and YAML turn them into null.
Any decoder failure becomes a DecodeError; nothing is returned for a block
that does not decode.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

import json5
import yaml

from i18nscope.diagnostics import DecodeError, ErrorTemplate
from i18nscope.enums import BlockLang

from .types import MessageTree

__all__ = [
    "CoreSchemaLoader",
    "decode_block",
    "decode_text",
    "load_messages",
]

logger = logging.getLogger(__name__)


def decode_text(raw: str | bytes) -> str:
    """Return block content as text, decoding bytes as UTF-8 (BOM tolerated).

    Raises:
        DecodeError: If bytes are not valid UTF-8
    """
    if isinstance(raw, str):
        return raw
    try:
        return bytes(raw).decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise DecodeError(ErrorTemplate.block_encoding_invalid(str(e))) from e


_YAML_1_1_TAGS = frozenset({
    "tag:yaml.org,2002:bool",
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:timestamp",
})

# YAML 1.2 core schema: only true/false are booleans (no yes/no/on/off),
# no sexagesimal numbers, no implicit timestamps.
_CORE_RESOLVERS: tuple[tuple[str, str, str], ...] = (
    ("tag:yaml.org,2002:bool", r"^(?:true|True|TRUE|false|False|FALSE)$", "tTfF"),
    ("tag:yaml.org,2002:int", r"^(?:[-+]?(?:0|[1-9][0-9]*)|0o[0-7]+|0x[0-9a-fA-F]+)$", "-+0123456789"),
    (
        "tag:yaml.org,2002:float",
        r"""^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?
            |[-+]?\.(?:inf|Inf|INF)
            |\.(?:nan|NaN|NAN))$""",
        "-+0123456789.",
    ),
)


class CoreSchemaLoader(yaml.SafeLoader):
    """SafeLoader resolving plain scalars with the YAML 1.2 core schema.

    PyYAML implements YAML 1.1, where `yes`, `no`, `on` and `off` are
    booleans and `10:30` is a base-60 integer. Translation blocks are
    written against YAML 1.2, so those stay strings here.
    """


CoreSchemaLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _YAML_1_1_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
for _tag, _pattern, _first in _CORE_RESOLVERS:
    CoreSchemaLoader.add_implicit_resolver(_tag, re.compile(_pattern, re.VERBOSE), list(_first))


def _reject_constant(name: str) -> Any:
    msg = f"{name} is not valid JSON"
    raise ValueError(msg)


def _null_constant(name: str) -> None:
    """Map NaN and the infinities to null, as JSON.stringify does."""
    return None


def _json_default(value: object) -> str:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)


def _as_json_data(value: Any) -> Any:
    """Normalize YAML output to the JSON data model.

    YAML can produce dates, non-string keys and non-finite floats; a JSON
    round trip turns them into the strings and nulls the generated payload
    would carry anyway.
    """
    return json.loads(json.dumps(value, default=_json_default), parse_constant=_null_constant)


def decode_block(raw: str | bytes, lang: BlockLang | str | None = None) -> Any:
    """Decode raw block content with the decoder selected by lang.

    Args:
        raw: Block content as text or bytes
        lang: Block format; unknown or missing values mean strict JSON

    Returns:
        Decoded JSON-compatible value

    Raises:
        DecodeError: If the content is not valid for the selected format
    """
    block_lang = lang if isinstance(lang, BlockLang) else BlockLang.from_option(lang)
    text = decode_text(raw)

    try:
        match block_lang:
            case BlockLang.YAML | BlockLang.YML:
                return _as_json_data(yaml.load(text, Loader=CoreSchemaLoader))  # noqa: S506
            case BlockLang.JSON5:
                return json5.loads(text, parse_constant=_null_constant)
            case _:
                return json.loads(text, parse_constant=_reject_constant)
    except (yaml.YAMLError, ValueError, TypeError, RecursionError) as e:
        # json.JSONDecodeError and json5 errors are ValueError subclasses;
        # every decoder recurses into nested containers
        logger.debug("Decoding %s block failed: %s", block_lang, e)
        raise DecodeError(
            ErrorTemplate.block_decode_failed(str(block_lang), str(e)),
            lang=str(block_lang),
        ) from e


def load_messages(
    raw: str | bytes,
    lang: BlockLang | str | None = None,
    locale: str | None = None,
) -> MessageTree:
    """Decode a block into a locale-keyed MessageTree.

    When locale is given the block holds the messages of that single locale
    and is wrapped as {locale: content}.

    Raises:
        DecodeError: If decoding fails or the content is not a mapping
    """
    content = decode_block(raw, lang)
    block_lang = str(lang if isinstance(lang, BlockLang) else BlockLang.from_option(lang))

    if not isinstance(content, Mapping):
        raise DecodeError(
            ErrorTemplate.block_not_a_mapping(block_lang, type(content).__name__),
            lang=block_lang,
        )

    if locale:
        return {locale: dict(content)}
    return dict(content)
