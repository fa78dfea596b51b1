from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Optional

from quick_add.vocabulary import MONTHS, RELATIVE_DAYS, WEEKDAYS


def iso(d: date) -> str:
    return d.isoformat()


def rolled_date(year: int, month_index: int, day: int) -> date:
    """Build a date the way calendar arithmetic does, rolling overflow forward.

    ``month_index`` is zero-based. Month 12 becomes January of the next year and
    day 0 becomes the last day of the previous month. Raises ValueError or
    OverflowError when the result falls outside the supported year range.
    """
    y, m = divmod(year * 12 + month_index, 12)
    return date(y, m + 1, 1) + timedelta(days=day - 1)


def relative_day(word: str, today: date) -> date:
    return today + timedelta(days=RELATIVE_DAYS[word.lower()])


def next_weekday(name: str, today: date) -> date:
    """Next occurrence of the weekday strictly after today."""
    target = WEEKDAYS.index(name.lower())
    days = (target - today.weekday()) % 7 or 7
    return today + timedelta(days=days)


def relative_period(phrase: str, today: date) -> Optional[date]:
    phrase = " ".join(phrase.lower().split())
    if phrase == "next week":
        return today + timedelta(days=7)
    if phrase == "this week":
        return next_weekday("monday", today)
    if phrase == "next month":
        return rolled_date(today.year, today.month, 1)
    if phrase == "this month":
        last = calendar.monthrange(today.year, today.month)[1]
        return today.replace(day=last)
    return None


def expand_year(raw: Optional[str], today: date) -> int:
    if not raw:
        return today.year
    year = int(raw)
    if len(raw) == 2:
        year += 2000
    return year


def explicit_date(month: str, day: str, year: Optional[str], today: date) -> date:
    return rolled_date(expand_year(year, today), int(month) - 1, int(day))


def month_day(month_name: str, day: str, today: date) -> date:
    """``<Month> D`` in the current year, or next year if already past."""
    month_index = MONTHS.index(month_name.lower())
    d = rolled_date(today.year, month_index, int(day))
    if d < today:
        d = rolled_date(today.year + 1, month_index, int(day))
    return d
