"""Event search and range filtering - no I/O dependencies."""

from datetime import date
from enum import Enum

from .dates import get_days_in_month, get_week_dates, is_date_in_range, parse_event_date
from .events import EventForm


class View(Enum):
    """Active calendar granularity."""

    WEEK = "week"
    MONTH = "month"


def contains_term(target: str, term: str) -> bool:
    return term.lower() in target.lower()


def search_events(events: list[EventForm], search_term: str) -> list[EventForm]:
    """Events whose title, description or location contains search_term."""
    if not search_term:
        return list(events)
    return [
        e
        for e in events
        if contains_term(e.title, search_term)
        or contains_term(e.description, search_term)
        or contains_term(e.location, search_term)
    ]


def filter_events_by_date_range(events: list[EventForm], start: date, end: date) -> list[EventForm]:
    """Events dated within [start, end]. Unparseable dates never match."""
    result = []
    for event in events:
        event_date = parse_event_date(event.date)
        if event_date is not None and is_date_in_range(event_date, start, end):
            result.append(event)
    return result


def view_range(current_date: date, view: View) -> tuple[date, date]:
    """First and last day shown by a view around current_date."""
    if view == View.WEEK:
        week = get_week_dates(current_date)
        return week[0], week[-1]
    last_day = get_days_in_month(current_date.year, current_date.month)
    return current_date.replace(day=1), current_date.replace(day=last_day)


def get_filtered_events(
    events: list[EventForm],
    search_term: str,
    current_date: date,
    view: View,
) -> list[EventForm]:
    """
    Events matching search_term inside the week or month around current_date.

    Pure function - no I/O. Input order is preserved.
    """
    start, end = view_range(current_date, View(view))
    return filter_events_by_date_range(search_events(events, search_term), start, end)
