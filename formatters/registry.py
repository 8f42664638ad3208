"""Locale formatter lookup."""

from typing import Dict, Type

from .base import BaseFormatter
from .english_formatter import EnglishFormatter
from .german_formatter import GermanFormatter
from .korean_formatter import KoreanFormatter

_FORMATTER_CLASSES = [EnglishFormatter, GermanFormatter, KoreanFormatter]
_cache: Dict[str, BaseFormatter] = {}


def _language_of(locale: str) -> str:
    """Primary language subtag, e.g. "ko" for "ko-KR" or "ko_KR"."""
    return locale.replace("_", "-").split("-")[0].lower()


def register_formatter(formatter_class: Type[BaseFormatter]) -> None:
    """
    Make an additional locale variant available.

    Args:
        formatter_class: BaseFormatter subclass; later registrations win
    """
    _FORMATTER_CLASSES.insert(0, formatter_class)
    _cache.clear()


def get_formatter(locale: str) -> BaseFormatter:
    """
    Resolve the formatter for a locale tag.

    Unknown languages fall back to English.

    Args:
        locale: Locale tag such as "en", "de-CH" or "ko_KR"

    Returns:
        Shared formatter instance for the locale
    """
    key = locale or "default"
    if key not in _cache:
        language = _language_of(key)
        formatter_class = next(
            (cls for cls in _FORMATTER_CLASSES
             if language in cls(key).languages),
            EnglishFormatter,
        )
        _cache[key] = formatter_class(key)
    return _cache[key]
