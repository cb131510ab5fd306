"""Event repository interface."""

from typing import Protocol

from dalryeok.core.events import Event, EventForm


class EventRepository(Protocol):
    """Interface for storing and loading events from any backend."""

    def fetch_all(self) -> list[Event]:
        """Fetch every stored event."""
        ...

    def get(self, event_id: str) -> Event | None:
        """Fetch one event by id. Returns None if not found."""
        ...

    def create(self, form: EventForm) -> Event:
        """Store a new event and return it with its assigned id."""
        ...

    def update(self, event: Event) -> Event:
        """Replace the stored event with the same id."""
        ...

    def delete(self, event_id: str) -> None:
        """Remove the event with the given id."""
        ...
