from datetime import date

import pytest

from formatters import (
    BaseFormatter,
    EnglishFormatter,
    GermanFormatter,
    KoreanFormatter,
    get_formatter,
    register_formatter,
)
from formatters import registry


class TestRegistry:

    @pytest.mark.parametrize("locale,expected", [
        ("en", EnglishFormatter),
        ("en-US", EnglishFormatter),
        ("default", EnglishFormatter),
        ("", EnglishFormatter),
        ("fr-FR", EnglishFormatter),
        ("de", GermanFormatter),
        ("de_CH", GermanFormatter),
        ("ko-KR", KoreanFormatter),
    ])
    def test_resolution(self, locale, expected):
        assert isinstance(get_formatter(locale), expected)

    def test_instances_are_shared(self):
        assert get_formatter("ko") is get_formatter("ko")

    def test_register_formatter(self, monkeypatch):
        monkeypatch.setattr(registry, "_FORMATTER_CLASSES", list(registry._FORMATTER_CLASSES))
        monkeypatch.setattr(registry, "_cache", {})

        class PigLatinFormatter(EnglishFormatter):
            @property
            def languages(self):
                return ("xx",)

            def month_name(self, value):
                return "archMay"

        register_formatter(PigLatinFormatter)

        assert get_formatter("xx").month_name(date(2024, 3, 1)) == "archMay"


class TestNames:

    def test_english(self):
        formatter = EnglishFormatter("en")
        value = date(2024, 3, 3)  # Sunday
        assert formatter.weekday_name(value) == "Sunday"
        assert formatter.weekday_short(value) == "Sun"
        assert formatter.month_name(value) == "March"
        assert formatter.month_short(value) == "Mar"
        assert formatter.year_short(value) == "24"

    def test_year_short_is_zero_padded(self):
        assert EnglishFormatter("en").year_short(date(2005, 1, 1)) == "05"

    def test_german(self):
        formatter = GermanFormatter("de")
        value = date(2024, 12, 1)  # Sunday
        assert formatter.weekday_name(value) == "Sonntag"
        assert formatter.month_name(value) == "Dezember"
        assert formatter.month_short(value) == "Dez"

    def test_korean(self):
        formatter = KoreanFormatter("ko")
        value = date(2024, 12, 1)  # Sunday
        assert formatter.weekday_name(value) == "일요일"
        assert formatter.weekday_short(value) == "일"
        assert formatter.month_name(value) == "12월"
        assert formatter.month_short(value) == "12월"
        assert formatter.year_short(value) == "24년"

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            BaseFormatter("en")
