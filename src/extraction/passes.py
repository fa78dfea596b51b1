"""Extraction passes for quick-add text.

Each pass is a callable ``(text, today) -> list[Extraction]`` that scans the
original input independently of the others. Passes never mutate anything;
resolving extractions into a ParseResult is done by the parser.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, List, Optional, Tuple

from extraction import dates
from quick_add.vocabulary import (
    CATEGORIES,
    MONTHS,
    PRIORITY_KEYWORDS,
    RELATIVE_DAYS,
    TIME_OF_DAY,
    WEEKDAYS,
)

logger = logging.getLogger(__name__)

_MERIDIEM = r"(?:\s*([ap]m)\b)?"

AT_TIME_RE = re.compile(r"\bat\s+(\d{1,2})(?::?(\d{2}))?(?![\d/])" + _MERIDIEM, re.IGNORECASE)
CLOCK_TIME_RE = re.compile(r"\b(\d{1,2}):(\d{2})(?!\d)" + _MERIDIEM, re.IGNORECASE)
MERIDIEM_TIME_RE = re.compile(r"(?<![:\d])\b(\d{1,2})\s*([ap]m)\b", re.IGNORECASE)
TIME_OF_DAY_RE = re.compile(r"\b(" + "|".join(TIME_OF_DAY) + r")\b", re.IGNORECASE)
RELATIVE_DATE_RE = re.compile(r"\b(" + "|".join(RELATIVE_DAYS) + r")\b", re.IGNORECASE)
WEEKDAY_RE = re.compile(r"\b(" + "|".join(WEEKDAYS) + r")\b", re.IGNORECASE)
RELATIVE_PERIOD_RE = re.compile(r"\b((?:next|this)\s+(?:week|month))\b", re.IGNORECASE)
EXPLICIT_DATE_RE = re.compile(r"\b(\d{1,2})/(\d{1,2})(?:/(\d{2,4}))?\b")
MONTH_DAY_RE = re.compile(r"\b(" + "|".join(MONTHS) + r")\s+(\d{1,2})\b", re.IGNORECASE)
HIGH_PRIORITY_RE = re.compile(r"\b(?:urgent|important|high\s+priority|asap)\b|!!", re.IGNORECASE)
LOW_PRIORITY_RE = re.compile(r"\b(?:low\s+priority|later|when\s+possible)\b", re.IGNORECASE)
DURATION_RE = re.compile(
    r"\b(?:for|takes?|duration)\s+(\d+)\s*(hours?|hrs?|minutes?|mins?)\b", re.IGNORECASE
)
# the lookahead keeps "at 3pm" / "at 14:00" out of the location field
LOCATION_RE = re.compile(
    r"(?<!\w)(?:at|in|@)\s+(?!\d{1,2}(?::\d{2})?\s*(?:am|pm)?\b)([a-z][a-z0-9\s]{1,30}?)(?=\s|$)",
    re.IGNORECASE,
)
HASHTAG_RE = re.compile(r"#(\w+)")
CATEGORY_RE = re.compile(r"\b(" + "|".join(CATEGORIES) + r")\b", re.IGNORECASE)


@dataclass(frozen=True)
class Extraction:
    kind: str
    field: str
    value: Any
    span: Tuple[int, int]
    fragment: str
    consumes: bool = True


ExtractionPass = Callable[[str, date], List[Extraction]]


def to_24h(hour: int, minute: int, meridiem: Optional[str]) -> str:
    meridiem = (meridiem or "").lower()
    if meridiem == "pm" and hour != 12:
        hour += 12
    elif meridiem == "am" and hour == 12:
        hour = 0
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise ValueError(f"time out of range: {hour}:{minute:02d}")
    return f"{hour:02d}:{minute:02d}"


def _scan(kind: str, field: str, pattern: re.Pattern, text: str, resolve, consumes: bool = True) -> List[Extraction]:
    out: List[Extraction] = []
    for m in pattern.finditer(text):
        try:
            value = resolve(m)
        except (ValueError, OverflowError) as e:
            logger.warning(f"Skipping {kind} match {m.group(0)!r}: {e}")
            continue
        if value is None:
            continue
        out.append(Extraction(kind, field, value, m.span(), m.group(0), consumes))
    return out


def explicit_time(text: str, today: date) -> List[Extraction]:
    def resolve(m):
        return to_24h(int(m.group(1)), int(m.group(2) or 0), m.group(3))

    found = _scan("explicit_time", "time", AT_TIME_RE, text, resolve)
    found += _scan("explicit_time", "time", CLOCK_TIME_RE, text, resolve)
    found += _scan(
        "explicit_time", "time", MERIDIEM_TIME_RE, text,
        lambda m: to_24h(int(m.group(1)), 0, m.group(2)),
    )
    return found


def time_of_day(text: str, today: date) -> List[Extraction]:
    return _scan("time_of_day", "time", TIME_OF_DAY_RE, text, lambda m: TIME_OF_DAY[m.group(1).lower()])


def relative_date(text: str, today: date) -> List[Extraction]:
    return _scan(
        "relative_date", "date", RELATIVE_DATE_RE, text,
        lambda m: dates.iso(dates.relative_day(m.group(1), today)),
    )


def weekday(text: str, today: date) -> List[Extraction]:
    return _scan(
        "weekday", "date", WEEKDAY_RE, text,
        lambda m: dates.iso(dates.next_weekday(m.group(1), today)),
    )


def relative_period(text: str, today: date) -> List[Extraction]:
    def resolve(m):
        d = dates.relative_period(m.group(1), today)
        return dates.iso(d) if d is not None else None

    return _scan("relative_period", "date", RELATIVE_PERIOD_RE, text, resolve)


def explicit_date(text: str, today: date) -> List[Extraction]:
    return _scan(
        "explicit_date", "date", EXPLICIT_DATE_RE, text,
        lambda m: dates.iso(dates.explicit_date(m.group(1), m.group(2), m.group(3), today)),
    )


def month_day(text: str, today: date) -> List[Extraction]:
    return _scan(
        "month_day", "date", MONTH_DAY_RE, text,
        lambda m: dates.iso(dates.month_day(m.group(1), m.group(2), today)),
    )


def _priority_level(m: re.Match) -> str:
    return PRIORITY_KEYWORDS[" ".join(m.group(0).lower().split())]


def high_priority(text: str, today: date) -> List[Extraction]:
    return _scan("high_priority", "priority", HIGH_PRIORITY_RE, text, _priority_level)


def low_priority(text: str, today: date) -> List[Extraction]:
    return _scan("low_priority", "priority", LOW_PRIORITY_RE, text, _priority_level)


def duration(text: str, today: date) -> List[Extraction]:
    def resolve(m):
        amount = int(m.group(1))
        unit = m.group(2).lower()
        if unit.startswith(("hour", "hr")):
            return amount * 60
        return amount

    return _scan("duration", "duration", DURATION_RE, text, resolve)


def location(text: str, today: date) -> List[Extraction]:
    return _scan("location", "location", LOCATION_RE, text, lambda m: m.group(1).strip() or None)


def hashtag(text: str, today: date) -> List[Extraction]:
    return _scan("hashtag", "tags", HASHTAG_RE, text, lambda m: m.group(1))


def category(text: str, today: date) -> List[Extraction]:
    # category words stay in the title ("Call John"), so they are not consumed
    return _scan(
        "category", "category", CATEGORY_RE, text,
        lambda m: m.group(1).lower(), consumes=False,
    )


EXTRACTION_PASSES: List[ExtractionPass] = [
    explicit_time,
    time_of_day,
    relative_date,
    weekday,
    relative_period,
    explicit_date,
    month_day,
    high_priority,
    low_priority,
    duration,
    location,
    hashtag,
    category,
]
