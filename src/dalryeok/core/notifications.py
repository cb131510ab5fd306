"""Notification selection - no I/O dependencies."""

from collections.abc import Collection
from datetime import datetime, timedelta

from .events import Event, EventForm, is_valid_instant
from .overlap import parse_date_time


def is_in_notification_window(event: EventForm, now: datetime) -> bool:
    """True when now is in [start - notification_time, start)."""
    start = parse_date_time(event.date, event.start_time)
    if not is_valid_instant(start):
        return False
    threshold = start - timedelta(minutes=event.notification_time)
    return threshold <= now < start


def get_upcoming_events(
    events: list[Event],
    now: datetime,
    notified_ids: Collection[str],
) -> list[Event]:
    """
    Events whose notification time has arrived and that were not notified yet.

    Pure function - no I/O.
    """
    return [e for e in events if e.id not in notified_ids and is_in_notification_window(e, now)]


def create_notification_message(event: EventForm) -> str:
    return f"{event.notification_time}분 후 {event.title} 일정이 시작됩니다."
