"""Advisory heuristics layered on top of a parse: suggestions and confidence."""
from __future__ import annotations

import re
from typing import List, Optional

from quick_add.models import Suggestion

_NEEDS_TIME_WORDS = ("meet", "call")
_EXPLICIT_DAY_RE = re.compile(r"today|tonight|this", re.IGNORECASE)
_PRESSING_RE = re.compile(r"deadline|due|urgent|important", re.IGNORECASE)


def generate_suggestions(
    original_text: str,
    residual_text: str,
    *,
    time: Optional[str],
    date: str,
    today: str,
    priority: str,
) -> List[Suggestion]:
    suggestions: List[Suggestion] = []

    lowered = residual_text.lower()
    if time is None and any(w in lowered for w in _NEEDS_TIME_WORDS):
        suggestions.append(
            Suggestion(type="time", prompt_text="Add a time?", options=["9:00 AM", "2:00 PM", "5:00 PM"])
        )

    if date == today and not _EXPLICIT_DAY_RE.search(original_text):
        suggestions.append(
            Suggestion(type="date", prompt_text="When?", options=["Today", "Tomorrow", "This Week"])
        )

    if _PRESSING_RE.search(original_text) and priority == "medium":
        suggestions.append(
            Suggestion(type="priority", prompt_text="Set priority?", options=["High Priority", "Normal"])
        )

    return suggestions


def calculate_confidence(
    *,
    time: Optional[str],
    date: str,
    today: str,
    priority: str,
    category: Optional[str],
    tags: List[str],
) -> float:
    """Score how much structure was recognised, 0.5 base, clamped to 1.0."""
    score = 0.5
    if time:
        score += 0.2
    if date != today:
        score += 0.1
    if priority != "medium":
        score += 0.1
    if category:
        score += 0.1
    if tags:
        score += 0.1
    return round(min(score, 1.0), 2)
