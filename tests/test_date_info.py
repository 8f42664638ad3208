from datetime import date, datetime

from core import DateInfo


class TestConstruction:

    def test_derived_fields(self):
        day = DateInfo.from_date(date(2024, 3, 5))
        assert (day.year, day.month, day.day) == (2024, 3, 5)
        assert day.value == datetime(2024, 3, 5)
        assert day.weekday_name == "Tuesday"
        assert day.weekday_short == "Tue"
        assert day.weekday_number == 3
        assert day.month_name == "March"
        assert day.month_short == "Mar"
        assert day.year_short == "24"
        assert day.week == 10
        assert day.timestamp == int(datetime(2024, 3, 5).timestamp()) * 1000

    def test_sunday_is_weekday_one(self):
        day = DateInfo.from_date(date(2023, 1, 1))
        assert day.weekday_number == 1
        assert day.week == 1

    def test_keeps_time_of_day(self):
        day = DateInfo.from_date(datetime(2024, 3, 5, 8, 15))
        assert day.value.hour == 8
        assert day.timestamp > DateInfo.from_date(date(2024, 3, 5)).timestamp

    def test_from_timestamp(self):
        original = DateInfo.from_date(datetime(2024, 1, 5, 23, 59, 59, 999000))
        restored = DateInfo.from_timestamp(original.timestamp)
        assert restored.value == original.value
        assert restored.timestamp == original.timestamp

    def test_locale_names(self):
        korean = DateInfo.from_date(date(2024, 3, 5), "ko")
        assert korean.weekday_name == "화요일"
        assert korean.month_name == "3월"
        assert korean.year_short == "24년"

        german = DateInfo.from_date(date(2024, 3, 5), "de-DE")
        assert german.month_name == "März"
        assert german.weekday_short == "Di"


class TestEquality:

    def test_equal_by_calendar_date(self):
        midnight = DateInfo.from_date(date(2024, 1, 5))
        late = midnight.end_of_day()
        assert midnight == late
        assert midnight.timestamp != late.timestamp
        assert hash(midnight) == hash(late)

    def test_different_days(self):
        assert DateInfo.from_date(date(2024, 1, 5)) != DateInfo.from_date(date(2024, 1, 6))

    def test_equals_calendar_date_accepts_dates(self):
        day = DateInfo.from_date(date(2024, 1, 5))
        assert day.equals_calendar_date(date(2024, 1, 5))
        assert day.equals_calendar_date(datetime(2024, 1, 5, 17))
        assert not day.equals_calendar_date(date(2023, 1, 5))

    def test_is_today(self):
        day = DateInfo.from_date(date(2024, 3, 15))
        assert day.is_today(now=datetime(2024, 3, 15, 22, 0))
        assert not day.is_today(now=datetime(2024, 3, 16, 0, 0))
        assert DateInfo.now().is_today()

    def test_end_of_day(self):
        day = DateInfo.from_date(date(2024, 1, 5)).end_of_day()
        assert day.value == datetime(2024, 1, 5, 23, 59, 59, 999000)


class TestFormat:

    def test_iso_pattern(self):
        assert DateInfo.from_date(date(2024, 3, 5)).format("YYYY-MM-DD") == "2024-03-05"

    def test_default_pattern(self):
        assert DateInfo.from_date(date(2024, 3, 5)).format("MMM DD, YYY") == "Mar 05, 24"

    def test_long_names(self):
        day = DateInfo.from_date(date(2024, 3, 5))
        assert day.format("DDDD, MMMM D") == "Tuesday, March 5"
        assert day.format("DDD M/D") == "Tue 3/5"

    def test_week_tokens(self):
        assert DateInfo.from_date(date(2024, 1, 2)).format("Week WW") == "Week 01"
        assert DateInfo.from_date(date(2024, 1, 2)).format("Week W") == "Week 1"

    def test_tokens_only_match_whole_words(self):
        day = DateInfo.from_date(date(2024, 3, 5))
        assert day.format("Month: M") == "Month: 3"
        assert day.format("DAY D") == "DAY 5"

    def test_each_token_replaced_once(self):
        day = DateInfo.from_date(date(2024, 3, 5))
        assert day.format("MM/DD/YYYY MM") == "03/05/2024 MM"

    def test_substituted_text_is_not_reformatted(self):
        # "May" must not be read as a token by later substitutions
        day = DateInfo.from_date(date(2024, 5, 1))
        assert day.format("MMM D M") == "May 1 5"

    def test_unknown_text_passes_through(self):
        day = DateInfo.from_date(date(2024, 3, 5))
        assert day.format("Q1 YYYY") == "Q1 2024"
        assert day.format("") == ""

    def test_korean_short_year(self):
        day = DateInfo.from_date(date(2024, 3, 5), "ko")
        assert day.format("YYY MMMM D") == "24년 3월 5"

    def test_tokens_next_to_hangul(self):
        day = DateInfo.from_date(date(2024, 3, 5), "ko")
        assert day.format("YYYY년MM월DD일") == "2024년03월05일"

    def test_tokens_next_to_accented_letters(self):
        day = DateInfo.from_date(date(2024, 3, 5), "de")
        assert day.format("DD.MM.YYYYé") == "05.03.2024é"
