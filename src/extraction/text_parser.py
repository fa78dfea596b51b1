from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Dict, List, Optional, Sequence
from zoneinfo import ZoneInfo

from classification.heuristics import calculate_confidence, generate_suggestions
from extraction import dates
from extraction.passes import EXTRACTION_PASSES, Extraction, ExtractionPass
from quick_add.models import ParseResult
from quick_add.vocabulary import QUICK_EXAMPLES

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")

# an explicit clock time is never replaced by a vague word like "evening"
_FIELD_PRECEDENCE: Dict[str, Dict[str, int]] = {
    "time": {"time_of_day": 0, "explicit_time": 1},
}


class TextCommandParser:
    """Turns one line of quick-add text into a ParseResult.

    Stateless apart from the configured timezone, so a single instance can be
    shared between requests and threads.
    """

    def __init__(
        self,
        timezone: str = "UTC",
        passes: Optional[Sequence[ExtractionPass]] = None,
    ):
        self.timezone = ZoneInfo(timezone)
        self.passes = list(passes) if passes is not None else list(EXTRACTION_PASSES)

    def today(self) -> date:
        return datetime.now(self.timezone).date()

    def parse(self, text: str, today: Optional[date] = None) -> ParseResult:
        # read the clock once so every pass agrees on what "today" is
        today = today or self.today()
        text = text or ""
        original = text.strip()

        extractions = self._extract(original, today)
        fields = self._resolve(extractions)

        today_str = dates.iso(today)
        resolved_date = fields.get("date") or today_str
        residual = self._residual(original, extractions)

        suggestions = generate_suggestions(
            original,
            residual,
            time=fields.get("time"),
            date=resolved_date,
            today=today_str,
            priority=fields.get("priority", "medium"),
        )
        confidence = calculate_confidence(
            time=fields.get("time"),
            date=resolved_date,
            today=today_str,
            priority=fields.get("priority", "medium"),
            category=fields.get("category"),
            tags=fields.get("tags", []),
        )

        result = ParseResult(
            residual_text=residual,
            date=resolved_date,
            time=fields.get("time"),
            priority=fields.get("priority", "medium"),
            duration=fields.get("duration"),
            location=fields.get("location"),
            tags=fields.get("tags", []),
            category=fields.get("category"),
            suggestions=suggestions,
            confidence=confidence,
        )
        logger.debug(
            f"Parsed {original[:50]!r}: {len(extractions)} extractions, confidence {confidence}"
        )
        return result

    def _extract(self, text: str, today: date) -> List[Extraction]:
        found: List[Extraction] = []
        for extraction_pass in self.passes:
            found.extend(extraction_pass(text, today))
        return found

    @staticmethod
    def _resolve(extractions: List[Extraction]) -> dict:
        """Apply extractions in pass order; later ones win unless outranked."""
        fields: dict = {"tags": []}
        ranks: Dict[str, int] = {}

        for ex in extractions:
            if ex.field == "tags":
                fields["tags"].append(ex.value)
                continue

            rank = _FIELD_PRECEDENCE.get(ex.field, {}).get(ex.kind, 0)
            if rank < ranks.get(ex.field, 0):
                continue
            fields[ex.field] = ex.value
            ranks[ex.field] = rank

        return fields

    @staticmethod
    def _residual(original: str, extractions: List[Extraction]) -> str:
        # overlapping matches ("at 2pm" and "2pm") are merged before cutting
        merged: List[List[int]] = []
        for start, end in sorted(ex.span for ex in extractions if ex.consumes):
            if merged and start <= merged[-1][1]:
                merged[-1][1] = max(merged[-1][1], end)
            else:
                merged.append([start, end])

        working = original
        for start, end in reversed(merged):
            working = working[:start] + " " + working[end:]
        residual = _WHITESPACE_RE.sub(" ", working).strip()
        return residual or original

    @staticmethod
    def get_quick_examples() -> List[str]:
        return list(QUICK_EXAMPLES)


_default_parser = TextCommandParser()


def parse(text: str, today: Optional[date] = None) -> ParseResult:
    return _default_parser.parse(text, today=today)


def get_quick_examples() -> List[str]:
    return TextCommandParser.get_quick_examples()
