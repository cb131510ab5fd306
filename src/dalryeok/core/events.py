"""Event records and parsed date/time values - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class RepeatType(Enum):
    """How an event repeats."""

    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class RepeatInfo:
    """Repeat descriptor attached to every event."""

    type: RepeatType = RepeatType.NONE
    interval: int = 0
    end_date: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "RepeatInfo":
        return cls(
            type=RepeatType(data.get("type", "none")),
            interval=data.get("interval", 0),
            end_date=data.get("endDate"),
        )

    def to_dict(self) -> dict:
        data = {"type": self.type.value, "interval": self.interval}
        if self.end_date:
            data["endDate"] = self.end_date
        return data


@dataclass(frozen=True, kw_only=True)
class EventForm:
    """An event that has not been assigned an id yet."""

    title: str
    date: str
    start_time: str
    end_time: str
    description: str = ""
    location: str = ""
    category: str = ""
    repeat: RepeatInfo = field(default_factory=RepeatInfo)
    notification_time: int = 10

    def with_id(self, event_id: str) -> "Event":
        """Promote this form to a stored Event."""
        return Event(id=event_id, **self._fields())

    def _fields(self) -> dict:
        return {
            "title": self.title,
            "date": self.date,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "description": self.description,
            "location": self.location,
            "category": self.category,
            "repeat": self.repeat,
            "notification_time": self.notification_time,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "EventForm":
        """Create from the stored JSON shape (camelCase keys)."""
        return cls(**_fields_from_dict(data))

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "date": self.date,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "description": self.description,
            "location": self.location,
            "category": self.category,
            "repeat": self.repeat.to_dict(),
            "notificationTime": self.notification_time,
        }


@dataclass(frozen=True, kw_only=True)
class Event(EventForm):
    """A stored calendar event."""

    id: str

    def to_form(self) -> EventForm:
        return EventForm(**self._fields())

    @classmethod
    def from_dict(cls, data: dict) -> "Event":
        return cls(id=str(data["id"]), **_fields_from_dict(data))

    def to_dict(self) -> dict:
        return {"id": self.id, **super().to_dict()}


def _fields_from_dict(data: dict) -> dict:
    return {
        "title": data["title"],
        "date": data["date"],
        "start_time": data["startTime"],
        "end_time": data["endTime"],
        "description": data.get("description", ""),
        "location": data.get("location", ""),
        "category": data.get("category", ""),
        "repeat": RepeatInfo.from_dict(data.get("repeat") or {}),
        "notification_time": int(data.get("notificationTime", 10)),
    }


@dataclass(frozen=True)
class InvalidDateTime:
    """Result of parsing a date/time pair that is not a real instant."""

    date: str
    time: str

    def __str__(self) -> str:
        return "Invalid Date"


Instant = datetime | InvalidDateTime


def is_valid_instant(value: Instant) -> bool:
    return not isinstance(value, InvalidDateTime)


@dataclass(frozen=True)
class DateRange:
    """Start/end instants derived from an event."""

    start: Instant
    end: Instant

    @property
    def is_valid(self) -> bool:
        return is_valid_instant(self.start) and is_valid_instant(self.end)
