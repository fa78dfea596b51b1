import uuid
from datetime import date
from typing import Optional

from api import state
from extraction.text_parser import TextCommandParser
from quick_add.models import ParseResult, TaskRecord


class BackendAPI:
    """Central orchestration component: parse quick-add text, keep task records."""

    def __init__(self, parser: Optional[TextCommandParser] = None):
        self.parser = parser or TextCommandParser()

    def parse_text(self, text: str, today: Optional[date] = None) -> ParseResult:
        return self.parser.parse(text, today=today)

    def add_task(self, text: str, today: Optional[date] = None) -> dict:
        """Parse text into a task record and remember it (newest first)."""
        if not text.strip():
            raise ValueError("task text must not be blank")

        result = self.parse_text(text, today=today)
        task = TaskRecord.from_parse(uuid.uuid4().hex, result)
        state.recent_tasks.appendleft(task)

        return {"task": task, "parse": result}
