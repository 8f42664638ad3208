"""Locale-dependent date name formatters."""

from .base import BaseFormatter
from .english_formatter import EnglishFormatter
from .german_formatter import GermanFormatter
from .korean_formatter import KoreanFormatter
from .registry import get_formatter, register_formatter

__all__ = [
    "BaseFormatter",
    "EnglishFormatter",
    "GermanFormatter",
    "KoreanFormatter",
    "get_formatter",
    "register_formatter",
]
