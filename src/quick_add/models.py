from __future__ import annotations

from datetime import date, datetime
from typing import Literal, Optional, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


Priority = Literal["high", "medium", "low"]
SuggestionType = Literal["time", "date", "priority"]

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


def _check_iso_date(v: str) -> str:
    # raises ValueError for anything that is not a real calendar date
    date.fromisoformat(v)
    return v


class Suggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: SuggestionType
    prompt_text: str
    options: List[str] = Field(default_factory=list)


class ParseResult(BaseModel):
    """Structured intent extracted from one line of quick-add text."""

    model_config = ConfigDict(frozen=True)

    residual_text: str
    date: str
    time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    priority: Priority = "medium"
    duration: Optional[int] = Field(default=None, ge=0)
    location: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    category: Optional[str] = None
    suggestions: List[Suggestion] = Field(default_factory=list)
    confidence: float = Field(0.5, ge=0.0, le=1.0)

    @field_validator("date")
    @classmethod
    def date_is_calendar_date(cls, v: str) -> str:
        return _check_iso_date(v)

    @field_validator("tags")
    @classmethod
    def tags_without_hash(cls, v: List[str]) -> List[str]:
        return [t.lstrip("#") for t in v]


class TaskRecord(BaseModel):
    """A task as the app stores it after quick add (text + parsed fields)."""

    id: str
    text: str = Field(..., min_length=1)
    date: str
    time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    priority: Priority = "medium"
    duration: Optional[int] = None
    location: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    category: Optional[str] = None
    completed: bool = False
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("text must not be blank")
        return v2

    @field_validator("date")
    @classmethod
    def date_is_calendar_date(cls, v: str) -> str:
        return _check_iso_date(v)

    @classmethod
    def from_parse(cls, task_id: str, result: ParseResult) -> "TaskRecord":
        return cls(
            id=task_id,
            text=result.residual_text,
            date=result.date,
            time=result.time,
            priority=result.priority,
            duration=result.duration,
            location=result.location,
            tags=list(result.tags),
            category=result.category,
        )
