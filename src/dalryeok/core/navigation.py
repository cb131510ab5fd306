"""Moving the current calendar date between weeks and months."""

from datetime import date, timedelta
from enum import Enum

from .search import View


class Direction(Enum):
    PREV = "prev"
    NEXT = "next"


def navigate(current: date, view: View, direction: Direction) -> date:
    """
    Step to the previous or next period of the view.

    Week view moves by 7 days. Month view lands on the 1st of the
    neighbouring month.
    """
    step = 1 if Direction(direction) == Direction.NEXT else -1
    if View(view) == View.WEEK:
        return current + timedelta(days=7 * step)

    month_index = current.year * 12 + (current.month - 1) + step
    return date(month_index // 12, month_index % 12 + 1, 1)
