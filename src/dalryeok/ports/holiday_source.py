"""Holiday lookup interface."""

from datetime import date
from typing import Protocol


class HolidaySource(Protocol):
    """Interface for looking up public holidays."""

    def fetch_holidays(self, target_date: date) -> dict[str, str]:
        """Holidays in the month containing target_date, keyed by ISO date."""
        ...
