"""Ports - interfaces/protocols for external dependencies."""

from .event_repo import EventRepository
from .holiday_source import HolidaySource

__all__ = [
    "EventRepository",
    "HolidaySource",
]
