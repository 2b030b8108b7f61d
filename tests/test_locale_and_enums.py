"""Tests for locale_utils.py and enums.py.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from i18nscope.enums import BlockLang, ModuleDialect, ReferenceShape
from i18nscope.locale_utils import get_babel_locale, is_known_locale, normalize_locale


class TestLocaleUtils:
    """Test Babel-backed locale recognition."""

    def test_normalize(self) -> None:
        """BCP-47 separators become POSIX separators."""
        assert normalize_locale("en-GB") == "en_GB"
        assert normalize_locale("ru_RU") == "ru_RU"

    @pytest.mark.parametrize("code", ["en", "en_GB", "en-GB", "ru_RU", "pt-BR", "zh_Hant_TW"])
    def test_known(self, code: str) -> None:
        """Real locales are recognized in either spelling."""
        assert is_known_locale(code)

    @pytest.mark.parametrize("code", ["", "xx_YY_ZZ", "not a locale", "qq"])
    def test_unknown(self, code: str) -> None:
        """Empty, malformed and unknown codes are rejected."""
        assert not is_known_locale(code)

    def test_babel_locale_cached(self) -> None:
        """Repeated lookups return the same Locale object."""
        assert get_babel_locale("en_GB") is get_babel_locale("en_GB")
        assert get_babel_locale("en_GB").territory == "GB"


class TestEnums:
    """Test enum values and conversions."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, BlockLang.JSON),
            ("json", BlockLang.JSON),
            ("JSON5", BlockLang.JSON5),
            (" yaml ", BlockLang.YAML),
            ("yml", BlockLang.YML),
            ("toml", BlockLang.JSON),
        ],
    )
    def test_block_lang_from_option(self, value: str | None, expected: BlockLang) -> None:
        """Unknown or missing lang options fall back to JSON."""
        assert BlockLang.from_option(value) is expected

    def test_str_values(self) -> None:
        """StrEnum members compare equal to their values."""
        assert str(BlockLang.YAML) == "yaml"
        assert ModuleDialect.ESM == "javascript/esm"
        assert ReferenceShape.DIRECTIVE == "directive"
