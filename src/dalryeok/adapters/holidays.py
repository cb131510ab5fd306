"""Table-backed holiday lookup adapter."""

import json
import logging
from datetime import date
from pathlib import Path

from dalryeok.core.dates import format_date

logger = logging.getLogger(__name__)

KOREAN_HOLIDAYS = {
    "2024-01-01": "신정",
    "2024-02-09": "설날",
    "2024-02-10": "설날",
    "2024-02-11": "설날",
    "2024-03-01": "삼일절",
    "2024-05-05": "어린이날",
    "2024-06-06": "현충일",
    "2024-08-15": "광복절",
    "2024-09-16": "추석",
    "2024-09-17": "추석",
    "2024-09-18": "추석",
    "2024-10-03": "개천절",
    "2024-10-09": "한글날",
    "2024-12-25": "크리스마스",
}


class HolidayTable:
    """
    Holiday lookup over a fixed date -> name table.

    Implements HolidaySource protocol.
    """

    def __init__(self, holidays: dict[str, str] | None = None):
        self.holidays = dict(KOREAN_HOLIDAYS if holidays is None else holidays)

    @classmethod
    def from_file(cls, path: Path | str) -> "HolidayTable":
        """Load a JSON object of {"YYYY-MM-DD": "name"}."""
        path = Path(path).expanduser()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load holidays from {path}: {e}")
            return cls()
        if not isinstance(data, dict):
            logger.warning(f"Expected a JSON object of holidays in {path}, using built-in table")
            return cls()
        return cls({str(k): str(v) for k, v in data.items()})

    def fetch_holidays(self, target_date: date) -> dict[str, str]:
        """Holidays in the month containing target_date."""
        prefix = format_date(target_date)[:8]
        return {d: name for d, name in self.holidays.items() if d.startswith(prefix)}


def fetch_holidays(target_date: date) -> dict[str, str]:
    """Built-in holidays in the month containing target_date."""
    return HolidayTable().fetch_holidays(target_date)
