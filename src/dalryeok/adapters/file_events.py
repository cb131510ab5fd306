"""JSON file event storage adapter."""

import json
import logging
import uuid
from pathlib import Path

from dalryeok.core.events import Event, EventForm

logger = logging.getLogger(__name__)


class EventStoreError(Exception):
    """Raised when the event file cannot be read or written."""

    pass


class EventNotFoundError(EventStoreError):
    """Raised when an event id is not in the store."""

    def __init__(self, event_id: str):
        super().__init__(f"Event not found: {event_id}")
        self.event_id = event_id


class FileEventStore:
    """
    File-based event storage.

    Implements EventRepository protocol. All events live in one JSON array,
    using the same camelCase record shape as the calendar API.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def _load_raw(self) -> list[dict]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "[]")
        except json.JSONDecodeError as e:
            raise EventStoreError(f"Corrupt event file {self.path}: {e}") from e
        if isinstance(data, dict):
            # {"events": [...]} is what the calendar API returns
            data = data.get("events", [])
        if not isinstance(data, list):
            raise EventStoreError(f"Expected a list of events in {self.path}")
        return data

    def _save(self, events: list[Event]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps([e.to_dict() for e in events], ensure_ascii=False, indent=2)
        self.path.write_text(payload, encoding="utf-8")

    def fetch_all(self) -> list[Event]:
        """Load all events, skipping malformed records."""
        events = []
        for item in self._load_raw():
            try:
                events.append(Event.from_dict(item))
            except (KeyError, TypeError, ValueError) as e:
                logger.debug(f"Skipping malformed event record: {e}")
                continue
        return events

    def get(self, event_id: str) -> Event | None:
        for event in self.fetch_all():
            if event.id == event_id:
                return event
        return None

    def create(self, form: EventForm) -> Event:
        events = self.fetch_all()
        event = form.with_id(uuid.uuid4().hex)
        events.append(event)
        self._save(events)
        logger.info(f"Created event {event.id} ({event.title})")
        return event

    def update(self, event: Event) -> Event:
        events = self.fetch_all()
        for i, existing in enumerate(events):
            if existing.id == event.id:
                events[i] = event
                self._save(events)
                return event
        raise EventNotFoundError(event.id)

    def delete(self, event_id: str) -> None:
        events = self.fetch_all()
        remaining = [e for e in events if e.id != event_id]
        if len(remaining) == len(events):
            raise EventNotFoundError(event_id)
        self._save(remaining)
        logger.info(f"Deleted event {event_id}")
