"""Configuration management for dalryeok."""

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

DALRYEOK_HOME = Path(os.environ.get("DALRYEOK_HOME", Path.home() / "dalryeok"))
CONFIG_FILE = DALRYEOK_HOME / "config" / "dalryeok.conf"
DATA_DIR = DALRYEOK_HOME / "data"


@dataclass
class Config:
    """dalryeok configuration."""

    events_file: str = ""
    holidays_file: str = ""
    default_view: str = "month"
    notification_poll_seconds: int = 60
    timezone: str = "Asia/Seoul"

    @property
    def events_path(self) -> Path:
        if self.events_file:
            return Path(self.events_file).expanduser()
        return DATA_DIR / "events.json"

    def to_local(self, dt: datetime) -> datetime:
        """Naive wall-clock time in the configured timezone.

        Event dates and times are naive local values, so aware datetimes are
        converted and stripped before comparing. Naive input is returned as is.
        """
        if dt.tzinfo is None:
            return dt
        return dt.astimezone(ZoneInfo(self.timezone)).replace(tzinfo=None)

    def local_now(self) -> datetime:
        return self.to_local(datetime.now(ZoneInfo(self.timezone)))


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline # comment from unquoted values."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from dalryeok.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "events_file":
                config.events_file = value
            case "holidays_file":
                config.holidays_file = value
            case "default_view":
                if value in ("week", "month"):
                    config.default_view = value
                else:
                    logger.warning(f"Ignoring unknown DEFAULT_VIEW: {value}")
            case "notification_poll_seconds":
                try:
                    config.notification_poll_seconds = max(1, int(value))
                except ValueError:
                    logger.warning(f"Invalid NOTIFICATION_POLL_SECONDS: {value}")
            case "timezone":
                config.timezone = value

    return config
