import pytest
from pydantic import ValidationError

from app.timezones import format_clock_text, parse, requery
from models.time_conversion import ConvertedTime, QueryErrorKind


@pytest.mark.parametrize("hour", range(24))
def test_every_24h_time_parses_against_cet(hour):
    for minute in (0, 1, 30, 59):
        parsed = parse(f"{hour}:{minute:02d} CET")
        assert parsed.ok, parsed.error
        assert (parsed.hour, parsed.minute) == (hour, minute)
        assert parsed.source_zone == "Europe/Berlin"
        assert parsed.target_zone is None


def test_meridiem_with_target():
    parsed = parse("7pm PST to CET")
    assert parsed.ok
    assert parsed.hour == 19
    assert parsed.minute == 0
    assert parsed.time_text == "7pm"
    assert parsed.source_zone == "America/Los_Angeles"
    assert parsed.source_label == "PST"
    assert parsed.target_zone == "Europe/Berlin"


@pytest.mark.parametrize(
    "query, hour, minute, time_text",
    [
        ("7:22pm PST", 19, 22, "7:22pm"),
        ("7.22 CET", 7, 22, "7.22"),
        ("12am UTC", 0, 0, "12am"),
        ("12pm UTC", 12, 0, "12pm"),
        ("12 AM utc", 0, 0, "12 AM"),
        ("11 CET", 11, 0, "11"),
        ("  09:05   tokyo ", 9, 5, "09:05"),
    ],
)
def test_time_forms(query, hour, minute, time_text):
    parsed = parse(query)
    assert parsed.ok, parsed.error
    assert (parsed.hour, parsed.minute, parsed.time_text) == (hour, minute, time_text)


def test_multi_word_zones_and_uppercase_separator():
    parsed = parse("9am new york TO kuala lumpur")
    assert parsed.source_zone == "America/New_York"
    assert parsed.source_label == "new york"
    assert parsed.target_zone == "Asia/Kuala_Lumpur"


def test_separator_needs_word_boundaries():
    parsed = parse("9 Toronto")
    assert parsed.ok
    assert parsed.source_zone == "America/Toronto"
    assert parsed.target_zone is None


def test_trailing_separator_without_target():
    parsed = parse("10 CET to")
    assert parsed.ok
    assert parsed.target_zone is None


def test_ambiguous_source_uses_first_zone_and_keeps_label():
    parsed = parse("9am IST")
    assert parsed.source_zone == "Asia/Kolkata"
    assert parsed.source_label == "IST"


def test_ambiguous_target_uses_first_zone():
    assert parse("9am CET to CST").target_zone == "America/Chicago"


@pytest.mark.parametrize("query", ["", "   "])
def test_empty_query(query):
    parsed = parse(query)
    assert parsed.error_kind is QueryErrorKind.EMPTY_INPUT
    assert parsed.error.startswith("Empty query")
    assert parsed.source_zone == ""


@pytest.mark.parametrize("query", ["noon CET", "CET 7:22", ":30 CET"])
def test_malformed_time(query):
    parsed = parse(query)
    assert parsed.error_kind is QueryErrorKind.MALFORMED_TIME
    assert "HH:MM" in parsed.error


@pytest.mark.parametrize(
    "query, message",
    [
        ("25:00 CET", "Invalid time: hour must be 0-23"),
        ("7:60 CET", "Invalid time: minutes must be 0-59"),
        ("13pm CET", "Invalid time: hour must be 1-12 when using AM/PM"),
        ("0am CET", "Invalid time: hour must be 1-12 when using AM/PM"),
        ("25:60 CET", "Invalid time: hour must be 0-23"),
        ("13:99pm CET", "Invalid time: hour must be 1-12 when using AM/PM"),
    ],
)
def test_time_range_errors_report_first_failure(query, message):
    parsed = parse(query)
    assert parsed.error_kind is QueryErrorKind.TIME_RANGE
    assert parsed.error == message
    assert parsed.source_zone == ""


@pytest.mark.parametrize("query", ["7:22", "7:22 to CET", "7pm   "])
def test_missing_source(query):
    parsed = parse(query)
    assert parsed.error_kind is QueryErrorKind.MISSING_SOURCE
    assert parsed.error == "Missing source timezone. Try: 7:22 CET"


def test_unknown_source_leaves_source_zone_empty():
    parsed = parse("13:00 XX")
    assert parsed.error_kind is QueryErrorKind.UNKNOWN_SOURCE
    assert parsed.error == 'Unknown timezone: "XX". Try CET, Berlin, or Europe/Berlin'
    assert parsed.source_zone == ""
    assert parsed.source_label == "XX"
    assert not parsed.ok


def test_unknown_target_keeps_resolved_source():
    parsed = parse("7:22 CET to Mars")
    assert parsed.error_kind is QueryErrorKind.UNKNOWN_TARGET
    assert parsed.error.startswith('Unknown target timezone: "Mars"')
    assert parsed.source_zone == "Europe/Berlin"
    assert parsed.target_zone is None


def test_parsed_query_is_immutable():
    parsed = parse("7pm PST")
    with pytest.raises(ValidationError):
        parsed.hour = 3


@pytest.mark.parametrize(
    "hour, minute, expected",
    [(7, 5, "7:05"), (19, 30, "19:30"), (0, 0, "0:00"), (23, 59, "23:59")],
)
def test_format_clock_text(hour, minute, expected):
    assert format_clock_text(hour, minute) == expected


def test_requery_uses_numeric_fields_of_a_conversion():
    converted = ConvertedTime(
        zone_id="Asia/Kuala_Lumpur",
        abbreviation="GMT+8",
        formatted_time="3:00 PM",
        utc_offset_text="+08:00",
        day_offset=1,
        hour=15,
        minute=0,
    )
    parsed = requery(converted)
    assert parsed.ok
    assert parsed.time_text == "15:00"
    assert (parsed.hour, parsed.minute) == (15, 0)
    assert parsed.source_zone == "Asia/Kuala_Lumpur"
    assert parsed.target_zone is None


def test_meridiem_must_stand_alone():
    parsed = parse("9 America/New_York")
    assert parsed.ok, parsed.error
    assert parsed.hour == 9
    assert parsed.source_zone == "America/New_York"


@pytest.mark.parametrize(
    "query, hour, minute, zone, time_text",
    [
        ("7pmPST", 19, 0, "America/Los_Angeles", "7pm"),
        ("7:22pmCET", 19, 22, "Europe/Berlin", "7:22pm"),
        ("9amTokyo", 9, 0, "Asia/Tokyo", "9am"),
    ],
)
def test_meridiem_glued_to_zone(query, hour, minute, zone, time_text):
    parsed = parse(query)
    assert parsed.ok, parsed.error
    assert (parsed.hour, parsed.minute, parsed.time_text) == (hour, minute, time_text)
    assert parsed.source_zone == zone


@pytest.mark.parametrize(
    "query, hour, minute, zone",
    [
        ("9 Amsterdam", 9, 0, "Europe/Amsterdam"),
        ("13 America/New_York", 13, 0, "America/New_York"),
        ("9:30 Amsterdam to CET", 9, 30, "Europe/Amsterdam"),
    ],
)
def test_zone_starting_with_am_or_pm_is_not_a_meridiem(query, hour, minute, zone):
    parsed = parse(query)
    assert parsed.ok, parsed.error
    assert (parsed.hour, parsed.minute) == (hour, minute)
    assert parsed.source_zone == zone


def test_unresolvable_glued_text_keeps_the_meridiem_reading():
    parsed = parse("7pmXYZ")
    assert parsed.error_kind is QueryErrorKind.UNKNOWN_SOURCE
    assert parsed.source_label == "XYZ"
