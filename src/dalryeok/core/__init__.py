"""Functional core - pure date and event logic with no I/O."""

from .events import DateRange, Event, EventForm, InvalidDateTime, RepeatInfo, RepeatType, is_valid_instant
from .dates import (
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
from .search import View, get_filtered_events
from .overlap import convert_event_to_date_range, find_overlapping_events, is_overlapping, parse_date_time
from .notifications import create_notification_message, get_upcoming_events
from .navigation import Direction, navigate
from .views import DayCell, MonthView, WeekView, build_month_view, build_week_view

__all__ = [
    # Events
    "Event",
    "EventForm",
    "RepeatInfo",
    "RepeatType",
    "DateRange",
    "InvalidDateTime",
    "is_valid_instant",
    # Dates
    "fill_zero",
    "format_date",
    "format_month",
    "format_week",
    "get_days_in_month",
    "get_events_for_day",
    "get_week_dates",
    "get_weeks_at_month",
    "is_date_in_range",
    # Search
    "View",
    "get_filtered_events",
    # Overlap
    "parse_date_time",
    "convert_event_to_date_range",
    "is_overlapping",
    "find_overlapping_events",
    # Notifications
    "get_upcoming_events",
    "create_notification_message",
    # Views
    "Direction",
    "navigate",
    "DayCell",
    "MonthView",
    "WeekView",
    "build_month_view",
    "build_week_view",
]
