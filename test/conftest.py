from datetime import date

import pytest

from extraction.text_parser import TextCommandParser

# A Wednesday, so weekday and "this week" arithmetic is easy to follow
WEDNESDAY = date(2026, 1, 14)


@pytest.fixture
def today():
    return WEDNESDAY


@pytest.fixture
def parser(today, monkeypatch):
    p = TextCommandParser()
    monkeypatch.setattr(p, "today", lambda: today)
    return p
