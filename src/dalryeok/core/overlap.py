"""Event overlap detection - no I/O dependencies."""

import re
from datetime import datetime

from .events import DateRange, Event, EventForm, Instant, InvalidDateTime

_DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})")
_TIME_PATTERN = re.compile(r"(\d{2}):(\d{2})")


def parse_date_time(date_str: str, time_str: str) -> Instant:
    """
    Combine "YYYY-MM-DD" and "HH:MM" into a naive datetime.

    Returns InvalidDateTime instead of raising when either part is malformed
    or names a date/time that does not exist (2024-14-01, 25:00, "").
    """
    date_match = _DATE_PATTERN.fullmatch(date_str or "")
    time_match = _TIME_PATTERN.fullmatch(time_str or "")
    if not date_match or not time_match:
        return InvalidDateTime(date_str, time_str)

    year, month, day = (int(part) for part in date_match.groups())
    hour, minute = (int(part) for part in time_match.groups())
    try:
        return datetime(year, month, day, hour, minute)
    except ValueError:
        return InvalidDateTime(date_str, time_str)


def convert_event_to_date_range(event: EventForm) -> DateRange:
    return DateRange(
        start=parse_date_time(event.date, event.start_time),
        end=parse_date_time(event.date, event.end_time),
    )


def is_overlapping(a: EventForm, b: EventForm) -> bool:
    """
    Check whether two events' [start, end) intervals intersect.

    Events with an invalid start or end never overlap anything.
    """
    range_a = convert_event_to_date_range(a)
    range_b = convert_event_to_date_range(b)
    if not (range_a.is_valid and range_b.is_valid):
        return False
    return range_a.start < range_b.end and range_b.start < range_a.end


def find_overlapping_events(candidate: EventForm, existing: list[EventForm]) -> list[EventForm]:
    """
    Existing events that overlap candidate, in their original order.

    When candidate is a stored Event, entries with its id are skipped.
    """
    candidate_id = candidate.id if isinstance(candidate, Event) else None
    return [
        e
        for e in existing
        if not (isinstance(e, Event) and e.id == candidate_id) and is_overlapping(e, candidate)
    ]


def check_event_times(event: EventForm) -> str | None:
    """
    Describe why an event's date/time cannot be scheduled, or None if it can.

    Both instants must parse and the event must end after it starts.
    """
    date_range = convert_event_to_date_range(event)
    if not date_range.is_valid:
        return f"invalid date/time: {event.date} {event.start_time}-{event.end_time}"
    if date_range.start >= date_range.end:
        return f"end time {event.end_time} must be after start time {event.start_time}"
    return None
