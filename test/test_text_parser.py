import pytest

from extraction.text_parser import TextCommandParser, get_quick_examples, parse


def test_call_john_at_2pm_tomorrow(parser, today):
    r = parser.parse("Call John at 2pm tomorrow")
    assert r.time == "14:00"
    assert r.date == "2026-01-15"
    assert r.residual_text == "Call John"
    assert "at 2pm" not in r.residual_text
    assert "tomorrow" not in r.residual_text
    assert r.category == "call"
    assert r.confidence == pytest.approx(0.9)


def test_buy_groceries_urgent(parser):
    r = parser.parse("Buy groceries urgent")
    assert r.priority == "high"
    assert r.residual_text == "Buy groceries"
    assert r.category == "buy"


def test_meeting_this_friday(parser):
    r = parser.parse("Meeting with team this Friday at 10am")
    assert r.time == "10:00"
    assert r.date == "2026-01-16"
    assert r.category == "meeting"
    assert "Friday" not in r.residual_text


def test_workout_location_is_not_a_time(parser):
    r = parser.parse("Workout at gym 6pm #fitness")
    assert r.tags == ["fitness"]
    assert r.category == "workout"
    assert r.location == "gym"
    assert r.time == "18:00"
    assert r.residual_text == "Workout"


def test_empty_input(parser, today):
    r = parser.parse("")
    assert r.date == today.isoformat()
    assert r.priority == "medium"
    assert r.time is None
    assert r.tags == []
    assert r.confidence == 0.5
    assert r.residual_text == ""


def test_whitespace_input_is_trimmed(parser):
    assert parser.parse("   ").residual_text == ""


def test_unrecognised_text_keeps_defaults(parser, today):
    r = parser.parse("  water the plants  ")
    assert r.residual_text == "water the plants"
    assert r.date == today.isoformat()
    assert r.priority == "medium"
    assert r.duration is None
    assert r.location is None
    assert r.category is None


def test_fully_consumed_input_falls_back_to_original(parser):
    r = parser.parse("tomorrow")
    assert r.residual_text == "tomorrow"
    assert r.date == "2026-01-15"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Dentist at 9", "09:00"),
        ("Dentist at 9:45", "09:45"),
        ("Dentist at 12am", "00:00"),
        ("Dentist at 12pm", "12:00"),
        ("Dentist at 1030", "10:30"),
        ("Dentist 14:00", "14:00"),
        ("Dentist 7:15 PM", "19:15"),
        ("Dentist 5pm", "17:00"),
    ],
)
def test_explicit_times(parser, text, expected):
    r = parser.parse(text)
    assert r.time == expected
    assert r.residual_text == "Dentist"


@pytest.mark.parametrize(
    "word,expected",
    [("morning", "09:00"), ("afternoon", "14:00"), ("evening", "18:00"), ("night", "20:00")],
)
def test_time_of_day_words(parser, word, expected):
    assert parser.parse(f"Run {word}").time == expected


def test_explicit_time_beats_time_of_day(parser):
    assert parser.parse("Dinner evening at 7:30pm").time == "19:30"
    assert parser.parse("Standup at 9:15am morning").time == "09:15"


def test_tonight(parser):
    r = parser.parse("Watch movie tonight")
    assert r.time == "20:00"
    assert r.residual_text == "Watch movie"
    assert all(s.type != "date" for s in r.suggestions)


def test_priority_keywords(parser):
    assert parser.parse("Pay rent !!").priority == "high"
    assert parser.parse("Pay rent asap").priority == "high"
    assert parser.parse("Fix bike high priority").priority == "high"
    assert parser.parse("Clean garage later").priority == "low"
    assert parser.parse("Clean garage when possible").priority == "low"
    assert parser.parse("Hire a translater").priority == "medium"


def test_low_priority_pass_runs_after_high(parser):
    assert parser.parse("urgent but later").priority == "low"


def test_duration(parser):
    r = parser.parse("Read book for 30 minutes")
    assert r.duration == 30
    assert r.residual_text == "Read book"
    assert parser.parse("Study takes 2 hrs").duration == 120
    assert parser.parse("Deep work duration 1 hour").duration == 60


def test_location_prepositions(parser):
    assert parser.parse("Lunch @ cafe").location == "cafe"
    assert parser.parse("Sync in office").location == "office"
    assert parser.parse("Group chat room").location is None


def test_tags_keep_order_and_duplicates(parser):
    r = parser.parse("Plan trip #travel #Fun #travel")
    assert r.tags == ["travel", "Fun", "travel"]
    assert r.residual_text == "Plan trip"


def test_last_category_wins(parser):
    assert parser.parse("Review project deadline").category == "deadline"


def test_residual_reparse_does_not_extract_again(parser, today):
    first = parser.parse("Call John at 2pm tomorrow #work urgent for 30 minutes")
    assert first.time == "14:00"
    assert first.tags == ["work"]
    assert first.priority == "high"
    assert first.duration == 30

    second = parser.parse(first.residual_text)
    assert second.time is None
    assert second.date == today.isoformat()
    assert second.tags == []
    assert second.priority == "medium"
    assert second.duration is None


def test_today_is_read_once_from_the_clock(monkeypatch, today):
    p = TextCommandParser()
    calls = []

    def fake_today():
        calls.append(1)
        return today

    monkeypatch.setattr(p, "today", fake_today)
    r = p.parse("Call John tomorrow at 2pm, then again Friday")
    assert len(calls) == 1
    assert r.date == "2026-01-16"


def test_explicit_today_argument_overrides_clock(parser):
    from datetime import date

    r = parser.parse("Pay rent tomorrow", today=date(2026, 2, 28))
    assert r.date == "2026-03-01"


def test_module_level_helpers(today):
    r = parse("Buy milk tomorrow", today=today)
    assert r.date == "2026-01-15"
    examples = get_quick_examples()
    assert len(examples) == 8
    assert "Call John at 2pm tomorrow" in examples


def test_quick_examples_are_a_copy(parser):
    examples = parser.get_quick_examples()
    examples.clear()
    assert len(parser.get_quick_examples()) == 8


def test_timezone_parser_reports_a_date():
    from datetime import date

    p = TextCommandParser(timezone="Europe/Bratislava")
    assert isinstance(p.today(), date)


def test_residual_cuts_the_matched_keyword_not_an_earlier_lookalike(parser):
    r = parser.parse("Review collateral later")
    assert r.priority == "low"
    assert r.residual_text == "Review collateral"
    assert parser.parse(r.residual_text).priority == "medium"


def test_residual_keeps_words_that_contain_a_time_of_day(parser):
    r = parser.parse("nightly backup at night")
    assert r.time == "20:00"
    assert r.residual_text == "nightly backup"

    again = parser.parse(r.residual_text)
    assert again.time is None
    assert again.location is None


def test_overlapping_time_matches_are_removed_once(parser):
    r = parser.parse("Call John at 2pm at 2pm tomorrow")
    assert r.time == "14:00"
    assert r.residual_text == "Call John"


def test_date_after_at_is_not_a_time(parser):
    r = parser.parse("Dentist at 9/15")
    assert r.time is None
    assert r.date == "2026-09-15"
    assert "/15" not in r.residual_text
    assert r.confidence == pytest.approx(0.6)


def test_location_is_the_first_word_after_the_preposition(parser):
    # multi-word places keep only their first word; the rest stays in the title
    r = parser.parse("Lunch at the cafe")
    assert r.location == "the"
    assert r.residual_text == "Lunch cafe"
