"""Pure date formatting and calendar grid logic - no I/O dependencies."""

import calendar
from datetime import date, timedelta

from .events import EventForm


def sunday_index(d: date) -> int:
    """Day of week with Sunday = 0 ... Saturday = 6."""
    return (d.weekday() + 1) % 7


def parse_event_date(value: str) -> date | None:
    """Parse a "YYYY-MM-DD" event date, or None if it is not a real date."""
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        return None


def fill_zero(value: int | float, size: int = 2) -> str:
    """
    Left-pad the decimal form of value with zeros to at least size characters.

    Strings already that long are returned unchanged, so 3.14 with size 5
    becomes "03.14" and 123 with size 2 stays "123".
    """
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).rjust(size, "0")


def format_date(d: date, day: int | None = None) -> str:
    """Format as YYYY-MM-DD, optionally replacing the day of month."""
    day = d.day if day is None else day
    return f"{d.year}-{fill_zero(d.month)}-{fill_zero(day)}"


def format_month(d: date) -> str:
    return f"{d.year}년 {d.month}월"


def format_week(d: date) -> str:
    """
    Label the Sunday-start week containing d, e.g. "2024년 7월 3주".

    A week belongs to the month holding its Thursday, and is numbered from
    that month's first Thursday. 2024-12-31 is therefore "2025년 1월 1주".
    """
    thursday = d + timedelta(days=4 - sunday_index(d))
    first_of_month = thursday.replace(day=1)
    first_thursday = first_of_month + timedelta(days=(4 - sunday_index(first_of_month)) % 7)
    week_number = (thursday - first_thursday).days // 7 + 1
    return f"{thursday.year}년 {thursday.month}월 {week_number}주"


def get_days_in_month(year: int, month: int) -> int:
    """
    Number of days in a 1-based month.

    Months outside 1-12 roll over into neighbouring years: month 0 is the
    previous December, month 13 the next January.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return calendar.monthrange(year, month)[1]


def get_week_dates(d: date) -> list[date]:
    """Sunday through Saturday of the week containing d."""
    sunday = d - timedelta(days=sunday_index(d))
    return [sunday + timedelta(days=i) for i in range(7)]


def get_weeks_at_month(d: date) -> list[list[int | None]]:
    """
    Week rows for the month containing d.

    Each row has 7 slots, Sunday first. Slots outside the month are None.
    """
    days_in_month = get_days_in_month(d.year, d.month)
    offset = sunday_index(d.replace(day=1))

    weeks = []
    week: list[int | None] = [None] * 7
    for day in range(1, days_in_month + 1):
        slot = (offset + day - 1) % 7
        week[slot] = day
        if slot == 6 or day == days_in_month:
            weeks.append(week)
            week = [None] * 7
    return weeks


def get_events_for_day(events: list[EventForm], day: int) -> list[EventForm]:
    """Events whose date falls on the given day of month, in input order."""
    result = []
    for event in events:
        event_date = parse_event_date(event.date)
        if event_date is not None and event_date.day == day:
            result.append(event)
    return result


def is_date_in_range(d: date, start: date, end: date) -> bool:
    """
    Inclusive range check.

    A reversed range (start after end) contains nothing.
    """
    return start <= d <= end
