"""Translation block options and file identity.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import parse_qs

from i18nscope.enums import BlockLang
from i18nscope.identity import identifier_for

__all__ = ["BlockIdentity", "BlockOptions", "parse_query"]


def parse_query(query: str | None) -> dict[str, str | list[str]]:
    """Parse a resource query string.

    Keys given once map to a string, repeated keys map to a list, and keys
    without a value map to ''. A leading '?' is ignored.

    Example:
        >>> parse_query("?vue&type=custom&blockType=i18n&lang=yaml")
        {'vue': '', 'type': 'custom', 'blockType': 'i18n', 'lang': 'yaml'}
    """
    if not query:
        return {}
    parsed = parse_qs(query.removeprefix("?"), keep_blank_values=True)
    return {key: values[0] if len(values) == 1 else values for key, values in parsed.items()}


@dataclass(frozen=True, slots=True)
class BlockOptions:
    """Recognized translation block options.

    Attributes:
        lang: Content format; JSON when absent or unrecognized
        locale: When set, the block holds a single locale's messages
    """

    lang: BlockLang = BlockLang.JSON
    locale: str | None = None

    @classmethod
    def from_query(cls, query: str | None) -> BlockOptions:
        """Build options from a resource query such as '?lang=yaml&locale=en'.

        Repeated lang or locale keys are ignored, as is an empty locale.
        """
        values = parse_query(query)
        lang = values.get("lang")
        locale = values.get("locale")
        return cls(
            lang=BlockLang.from_option(lang if isinstance(lang, str) else None),
            locale=locale if isinstance(locale, str) and locale else None,
        )


@dataclass(frozen=True, slots=True)
class BlockIdentity:
    """Identity context of the file a translation block belongs to.

    Attributes:
        file_id: FileIdentifier the block's paths are registered under
        scoped: Whether per-file scoping (registration and prefixing) is on
        root_path: Project root the identifier was computed from
        file_path: Component file path the identifier was computed from
    """

    file_id: str | None = None
    scoped: bool = True
    root_path: str | None = None
    file_path: str | None = None

    def __post_init__(self) -> None:
        """Validate that scoped identities carry a FileIdentifier.

        Raises:
            ValueError: If scoped is True and file_id is missing
        """
        if self.scoped and not self.file_id:
            msg = "scoped BlockIdentity requires a file_id"
            raise ValueError(msg)

    @classmethod
    def for_file(cls, root_path: str, file_path: str, *, scoped: bool = True) -> BlockIdentity:
        """Compute the identity of file_path under root_path."""
        return cls(
            file_id=identifier_for(root_path, file_path),
            scoped=scoped,
            root_path=root_path,
            file_path=file_path,
        )

    @classmethod
    def unscoped(cls) -> BlockIdentity:
        """Identity that disables registration and key prefixing."""
        return cls(scoped=False)
