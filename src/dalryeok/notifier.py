"""Notification watcher - polls stored events and emits due reminders."""

import logging
from collections.abc import Callable
from datetime import datetime
from zoneinfo import ZoneInfo

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.interval import IntervalTrigger

from .config import Config
from .core.notifications import create_notification_message, get_upcoming_events
from .ports import EventRepository
from .workflows import get_event_store

logger = logging.getLogger(__name__)


class NotificationWatcher:
    """
    Tracks which events have been notified and reports newly due ones.

    Each event is announced at most once per watcher.
    """

    def __init__(
        self,
        repo: EventRepository,
        emit: Callable[[str], None] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.repo = repo
        self.emit = emit
        self.clock = clock
        self.notified_ids: set[str] = set()

    def check(self, now: datetime | None = None) -> list[str]:
        """Return (and emit) messages for events whose notification time has come."""
        now = now or self.clock()
        upcoming = get_upcoming_events(self.repo.fetch_all(), now, self.notified_ids)

        messages = []
        for event in upcoming:
            self.notified_ids.add(event.id)
            message = create_notification_message(event)
            logger.info(f"Notifying event {event.id}: {message}")
            if self.emit:
                self.emit(message)
            messages.append(message)
        return messages


def setup_scheduler(watcher: NotificationWatcher, config: Config) -> BlockingScheduler:
    """Schedule the watcher to run every notification_poll_seconds."""
    scheduler = BlockingScheduler(timezone=config.timezone)
    scheduler.add_job(
        watcher.check,
        IntervalTrigger(seconds=config.notification_poll_seconds),
        id="notification_check",
        next_run_time=datetime.now(ZoneInfo(config.timezone)),
    )
    return scheduler


def run_watcher(config: Config, emit: Callable[[str], None]) -> None:
    """Run the notification loop until interrupted."""
    watcher = NotificationWatcher(get_event_store(config), emit=emit, clock=config.local_now)
    scheduler = setup_scheduler(watcher, config)
    logger.info(f"Watching {config.events_path} every {config.notification_poll_seconds}s")
    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        logger.info("Notification watcher stopped")
