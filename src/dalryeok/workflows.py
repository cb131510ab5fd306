"""Shared workflow layer - wires config and adapters into the pure core.

Used by the CLI and the notification watcher.
"""

import logging
from dataclasses import dataclass, field
from datetime import date

from .adapters.file_events import FileEventStore
from .adapters.holidays import HolidayTable
from .config import Config
from .core.dates import get_week_dates
from .core.events import Event, EventForm
from .core.overlap import check_event_times, find_overlapping_events
from .core.search import View, get_filtered_events
from .core.views import MonthView, WeekView, build_month_view, build_week_view
from .ports import EventRepository, HolidaySource

logger = logging.getLogger(__name__)


class InvalidEventError(ValueError):
    """Raised when an event cannot be scheduled as given."""

    pass


def get_event_store(config: Config) -> EventRepository:
    return FileEventStore(config.events_path)


def get_holiday_source(config: Config) -> HolidaySource:
    if config.holidays_file:
        return HolidayTable.from_file(config.holidays_file)
    return HolidayTable()


def compile_month(config: Config, current_date: date, search_term: str = "") -> MonthView:
    """Month view with holidays and stored events."""
    events = get_event_store(config).fetch_all()
    holidays = get_holiday_source(config).fetch_holidays(current_date)
    return build_month_view(current_date, events, holidays, search_term)


def compile_week(config: Config, current_date: date, search_term: str = "") -> WeekView:
    """Week view with holidays and stored events.

    A week can straddle two months, so holidays are looked up for both ends.
    """
    holiday_source = get_holiday_source(config)
    week = get_week_dates(current_date)
    holidays: dict[str, str] = {}
    for d in (week[0], week[-1]):
        holidays.update(holiday_source.fetch_holidays(d))
    events = get_event_store(config).fetch_all()
    return build_week_view(current_date, events, holidays, search_term)


def search(config: Config, search_term: str, current_date: date, view: View) -> list[Event]:
    events = get_event_store(config).fetch_all()
    return get_filtered_events(events, search_term, current_date, view)


@dataclass
class SaveResult:
    """Outcome of trying to save an event."""

    event: Event | None
    overlaps: list[Event] = field(default_factory=list)

    @property
    def saved(self) -> bool:
        return self.event is not None


def save_event(config: Config, form: EventForm, force: bool = False) -> SaveResult:
    """
    Store form unless it overlaps an existing event.

    Raises InvalidEventError when the date/time is malformed or the event
    does not end after it starts.

    With force=True the event is stored anyway and the overlaps are still
    reported.
    """
    problem = check_event_times(form)
    if problem:
        raise InvalidEventError(problem)

    store = get_event_store(config)
    overlaps = find_overlapping_events(form, store.fetch_all())
    if overlaps and not force:
        logger.info(f"Not saving {form.title!r}: overlaps {len(overlaps)} event(s)")
        return SaveResult(event=None, overlaps=overlaps)
    return SaveResult(event=store.create(form), overlaps=overlaps)
