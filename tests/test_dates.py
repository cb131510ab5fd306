"""Tests for date formatting and calendar grid logic."""

from datetime import date, timedelta

import pytest

from dalryeok.core.dates import (
    fill_zero,
    format_date,
    format_month,
    format_week,
    get_days_in_month,
    get_events_for_day,
    get_week_dates,
    get_weeks_at_month,
    is_date_in_range,
)


class TestGetDaysInMonth:
    def test_january(self):
        assert get_days_in_month(2024, 1) == 31

    def test_april(self):
        assert get_days_in_month(2024, 4) == 30

    def test_leap_february(self):
        assert get_days_in_month(2024, 2) == 29

    def test_common_february(self):
        assert get_days_in_month(2023, 2) == 28

    def test_century_years(self):
        assert get_days_in_month(1900, 2) == 28
        assert get_days_in_month(2000, 2) == 29

    def test_out_of_range_months_roll_over(self):
        """Month 0 is the previous December, 13 the next January."""
        assert get_days_in_month(2024, 0) == 31
        assert get_days_in_month(2024, 13) == 31
        assert get_days_in_month(2024, 14) == 28  # February 2025

    def test_matches_next_month_minus_one_day(self):
        for month in range(1, 13):
            first = date(2024, month, 1)
            nxt = date(2025, 1, 1) if month == 12 else date(2024, month + 1, 1)
            assert get_days_in_month(2024, month) == (nxt - first).days


class TestGetWeekDates:
    def test_midweek(self):
        week = get_week_dates(date(2024, 7, 10))
        assert len(week) == 7
        assert week[6].day == 13

    def test_monday(self):
        week = get_week_dates(date(2024, 7, 8))
        assert [d.day for d in week] == [7, 8, 9, 10, 11, 12, 13]

    def test_sunday_starts_its_own_week(self):
        week = get_week_dates(date(2024, 7, 7))
        assert week[0] == date(2024, 7, 7)
        assert week[6] == date(2024, 7, 13)

    def test_crosses_year_end(self):
        week = get_week_dates(date(2024, 12, 29))
        assert week[0].year == 2024
        assert week[6].year == 2025

    def test_leap_day(self):
        week = get_week_dates(date(2024, 2, 29))
        assert week[0].day == 25
        assert week[4].day == 29
        assert week[6].day == 2

    def test_month_end(self):
        week = get_week_dates(date(2024, 7, 31))
        assert week[0].day == 28
        assert week[3].day == 31
        assert week[6].day == 3

    def test_ordered_and_starts_on_sunday(self):
        d = date(2024, 1, 1)
        for _ in range(40):
            week = get_week_dates(d)
            assert week[0] <= d <= week[6]
            assert week[0].weekday() == 6
            assert all(b - a == timedelta(days=1) for a, b in zip(week, week[1:]))
            d += timedelta(days=5)


class TestGetWeeksAtMonth:
    def test_july_2024(self):
        weeks = get_weeks_at_month(date(2024, 7, 1))
        assert len(weeks) == 5
        assert weeks[0][0] is None
        assert weeks[0][1] == 1
        assert weeks[4][2] == 30

    def test_six_row_month(self):
        # June 2024 starts on a Saturday
        weeks = get_weeks_at_month(date(2024, 6, 15))
        assert len(weeks) == 6
        assert weeks[0] == [None] * 6 + [1]
        assert weeks[5][0] == 30

    def test_four_row_month(self):
        # February 2015 starts on a Sunday and has 28 days
        weeks = get_weeks_at_month(date(2015, 2, 1))
        assert len(weeks) == 4
        assert weeks[0] == [1, 2, 3, 4, 5, 6, 7]

    @pytest.mark.parametrize("year,month", [(2024, 2), (2023, 2), (2024, 9), (2025, 3)])
    def test_rows_partition_month(self, year, month):
        weeks = get_weeks_at_month(date(year, month, 1))
        days = [d for week in weeks for d in week if d is not None]
        assert days == list(range(1, get_days_in_month(year, month) + 1))
        assert all(len(week) == 7 for week in weeks)


class TestGetEventsForDay:
    @pytest.fixture
    def events(self, make_event):
        return [
            make_event("1", date="2024-07-01", start_time="09:00"),
            make_event("2", date="2024-07-01", start_time="14:00"),
            make_event("3", date="2024-07-02", start_time="11:00"),
        ]

    def test_matching_day(self, events):
        assert [e.id for e in get_events_for_day(events, 1)] == ["1", "2"]

    def test_no_events(self, events):
        assert get_events_for_day(events, 3) == []

    def test_day_zero(self, events):
        assert get_events_for_day(events, 0) == []

    def test_day_32(self, events):
        assert get_events_for_day(events, 32) == []

    def test_ignores_unparseable_dates(self, make_event):
        events = [make_event("1", date="2024-13-01"), make_event("2", date="2024-08-01")]
        assert [e.id for e in get_events_for_day(events, 1)] == ["2"]


class TestFormatWeek:
    def test_middle_of_month(self):
        assert format_week(date(2024, 7, 15)) == "2024년 7월 3주"

    def test_first_week(self):
        assert format_week(date(2024, 7, 1)) == "2024년 7월 1주"

    def test_last_week_belongs_to_next_month(self):
        assert format_week(date(2024, 7, 31)) == "2024년 8월 1주"

    def test_year_boundary(self):
        assert format_week(date(2024, 12, 31)) == "2025년 1월 1주"

    def test_leap_february(self):
        assert format_week(date(2024, 2, 29)) == "2024년 2월 5주"

    def test_common_february(self):
        assert format_week(date(2023, 2, 23)) == "2023년 2월 4주"

    def test_same_label_for_whole_week(self):
        labels = {format_week(d) for d in get_week_dates(date(2024, 7, 31))}
        assert labels == {"2024년 8월 1주"}


class TestFormatMonth:
    def test_format(self):
        assert format_month(date(2024, 7, 10)) == "2024년 7월"


class TestFormatDate:
    def test_format(self):
        assert format_date(date(2024, 7, 15)) == "2024-07-15"

    def test_day_override(self):
        assert format_date(date(2024, 7, 15), 20) == "2024-07-20"

    def test_pads_month(self):
        assert format_date(date(2024, 6, 15)) == "2024-06-15"
        assert format_date(date(2024, 1, 15)) == "2024-01-15"

    def test_pads_day(self):
        assert format_date(date(2024, 7, 5)) == "2024-07-05"
        assert format_date(date(2024, 7, 1), 1) == "2024-07-01"


class TestFillZero:
    @pytest.mark.parametrize(
        "value,size,expected",
        [
            (5, 2, "05"),
            (10, 2, "10"),
            (3, 3, "003"),
            (100, 2, "100"),
            (0, 2, "00"),
            (1, 5, "00001"),
            (3.14, 5, "03.14"),
            (123, 2, "123"),
        ],
    )
    def test_fill_zero(self, value, size, expected):
        assert fill_zero(value, size) == expected

    def test_default_size(self):
        assert fill_zero(7) == "07"

    def test_integral_float(self):
        assert fill_zero(7.0) == "07"


class TestIsDateInRange:
    start = date(2024, 7, 1)
    end = date(2024, 7, 31)

    def test_inside(self):
        assert is_date_in_range(date(2024, 7, 10), self.start, self.end) is True

    def test_endpoints_inclusive(self):
        assert is_date_in_range(self.start, self.start, self.end) is True
        assert is_date_in_range(self.end, self.start, self.end) is True

    def test_before_and_after(self):
        assert is_date_in_range(date(2024, 6, 30), self.start, self.end) is False
        assert is_date_in_range(date(2024, 8, 1), self.start, self.end) is False

    def test_reversed_range_contains_nothing(self):
        assert is_date_in_range(date(2024, 7, 15), self.end, self.start) is False
