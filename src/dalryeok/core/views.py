"""Month and week view assembly - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date

from .dates import format_date, format_month, format_week, get_events_for_day, get_week_dates, get_weeks_at_month
from .events import EventForm
from .search import View, get_filtered_events


@dataclass
class DayCell:
    """One day of a calendar view."""

    day: int
    date_str: str
    holiday: str | None = None
    events: list[EventForm] = field(default_factory=list)


@dataclass
class MonthView:
    label: str
    weeks: list[list[DayCell | None]]

    def days(self) -> list[DayCell]:
        return [cell for week in self.weeks for cell in week if cell is not None]


@dataclass
class WeekView:
    label: str
    days: list[DayCell]


def build_month_view(
    current_date: date,
    events: list[EventForm],
    holidays: dict[str, str],
    search_term: str = "",
) -> MonthView:
    """
    Lay out the month containing current_date.

    Pure function - no I/O. Events are searched and restricted to the month
    first, then attached to their day cell.
    """
    month_events = get_filtered_events(events, search_term, current_date, View.MONTH)

    weeks = []
    for row in get_weeks_at_month(current_date):
        cells: list[DayCell | None] = []
        for day in row:
            if day is None:
                cells.append(None)
                continue
            date_str = format_date(current_date, day)
            cells.append(
                DayCell(
                    day=day,
                    date_str=date_str,
                    holiday=holidays.get(date_str),
                    events=get_events_for_day(month_events, day),
                )
            )
        weeks.append(cells)

    return MonthView(label=format_month(current_date), weeks=weeks)


def build_week_view(
    current_date: date,
    events: list[EventForm],
    holidays: dict[str, str],
    search_term: str = "",
) -> WeekView:
    """Lay out the Sunday-start week containing current_date."""
    week_events = get_filtered_events(events, search_term, current_date, View.WEEK)

    days = []
    for d in get_week_dates(current_date):
        date_str = format_date(d)
        days.append(
            DayCell(
                day=d.day,
                date_str=date_str,
                holiday=holidays.get(date_str),
                events=[e for e in week_events if e.date == date_str],
            )
        )
    return WeekView(label=format_week(current_date), days=days)
