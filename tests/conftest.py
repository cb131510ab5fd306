"""Shared fixtures."""

import pytest

from dalryeok.core.events import Event, EventForm, RepeatInfo


@pytest.fixture
def make_event():
    """Factory for creating stored events."""
    def _make(
        id: str,
        date: str = "2024-07-01",
        start_time: str = "09:00",
        end_time: str = "10:00",
        title: str | None = None,
        description: str = "",
        location: str = "",
        notification_time: int = 10,
    ) -> Event:
        return Event(
            id=id,
            title=title if title is not None else f"이벤트 {id}",
            date=date,
            start_time=start_time,
            end_time=end_time,
            description=description,
            location=location,
            category="",
            repeat=RepeatInfo(),
            notification_time=notification_time,
        )
    return _make


@pytest.fixture
def make_form():
    """Factory for creating events that have no id yet."""
    def _make(
        date: str = "2024-07-01",
        start_time: str = "14:00",
        end_time: str = "16:00",
        title: str = "새 이벤트",
    ) -> EventForm:
        return EventForm(
            title=title,
            date=date,
            start_time=start_time,
            end_time=end_time,
            notification_time=0,
        )
    return _make
