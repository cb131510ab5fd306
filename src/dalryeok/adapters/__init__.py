"""Adapters - I/O implementations of ports."""

from .file_events import FileEventStore, EventStoreError, EventNotFoundError
from .holidays import HolidayTable, fetch_holidays

__all__ = [
    "FileEventStore",
    "EventStoreError",
    "EventNotFoundError",
    "HolidayTable",
    "fetch_holidays",
]
