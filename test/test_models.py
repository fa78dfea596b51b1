import pytest
from pydantic import ValidationError

from quick_add.models import ParseResult, Suggestion, TaskRecord


def test_parse_result_defaults():
    r = ParseResult(residual_text="Buy milk", date="2026-01-14")
    assert r.priority == "medium"
    assert r.time is None
    assert r.tags == []
    assert r.confidence == 0.5


def test_parse_result_is_frozen():
    r = ParseResult(residual_text="Buy milk", date="2026-01-14")
    with pytest.raises(ValidationError):
        r.priority = "high"


def test_parse_result_rejects_bad_values():
    with pytest.raises(ValidationError):
        ParseResult(residual_text="x", date="2026-02-30")
    with pytest.raises(ValidationError):
        ParseResult(residual_text="x", date="2026-01-14", priority="critical")
    with pytest.raises(ValidationError):
        ParseResult(residual_text="x", date="2026-01-14", time="25:00")
    with pytest.raises(ValidationError):
        ParseResult(residual_text="x", date="2026-01-14", confidence=1.2)


def test_tags_are_stored_without_hash():
    r = ParseResult(residual_text="x", date="2026-01-14", tags=["#work", "home"])
    assert r.tags == ["work", "home"]


def test_suggestion_shape():
    s = Suggestion(type="time", prompt_text="Add a time?", options=["9:00 AM"])
    assert s.model_dump() == {"type": "time", "prompt_text": "Add a time?", "options": ["9:00 AM"]}


def test_task_record_from_parse():
    r = ParseResult(
        residual_text="Call John",
        date="2026-01-15",
        time="14:00",
        category="call",
        tags=["work"],
    )
    task = TaskRecord.from_parse("abc", r)
    assert task.id == "abc"
    assert task.text == "Call John"
    assert task.date == "2026-01-15"
    assert task.time == "14:00"
    assert task.tags == ["work"]
    assert task.completed is False


def test_task_record_blank_text():
    with pytest.raises(ValidationError):
        TaskRecord(id="1", text="   ", date="2026-01-14")
