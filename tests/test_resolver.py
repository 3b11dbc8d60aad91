import pytest

from app.timezones import disambiguation_label, resolve


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Europe/Berlin", ["Europe/Berlin"]),
        ("  Asia/Tokyo  ", ["Asia/Tokyo"]),
        ("europe/berlin", ["Europe/Berlin"]),
        ("AMERICA/NEW_YORK", ["America/New_York"]),
        ("america/argentina/buenos_aires", ["America/Argentina/Buenos_Aires"]),
        ("UTC", ["UTC"]),
        ("utc", ["UTC"]),
        ("NYC", ["America/New_York"]),
        ("kl", ["Asia/Kuala_Lumpur"]),
        ("CET", ["Europe/Berlin"]),
        ("pst", ["America/Los_Angeles"]),
        ("tokyo", ["Asia/Tokyo"]),
        ("Kuala Lumpur", ["Asia/Kuala_Lumpur"]),
    ],
)
def test_resolve_single_match(text, expected):
    assert resolve(text) == expected


def test_resolve_is_case_insensitive_for_cities():
    assert resolve("new york") == ["America/New_York"]
    assert resolve("New York") == ["America/New_York"]
    assert resolve("NEW YORK") == ["America/New_York"]


def test_ambiguous_abbreviation_keeps_every_candidate_in_order():
    assert resolve("IST") == ["Asia/Kolkata", "Asia/Jerusalem", "Europe/Dublin"]
    assert resolve("cst") == ["America/Chicago", "Asia/Shanghai"]


@pytest.mark.parametrize("text", ["", "   ", "Atlantis", "Mars/Base", "XX"])
def test_unresolvable_input_returns_empty_list(text):
    assert resolve(text) == []


def test_resolve_returns_a_fresh_list():
    first = resolve("IST")
    first.clear()
    assert len(resolve("IST")) == 3


def test_disambiguation_label_for_ambiguous_abbreviation():
    assert disambiguation_label("Asia/Kolkata", "IST") == "India Standard Time"
    assert disambiguation_label("Asia/Shanghai", "cst") == "China Standard Time"


def test_disambiguation_label_falls_back_to_zone_id():
    assert disambiguation_label("Asia/Tokyo", "IST") == "Asia/Tokyo"


@pytest.mark.parametrize("label", ["CET", "Tokyo", "Europe/Berlin", ""])
def test_no_disambiguation_for_unambiguous_labels(label):
    assert disambiguation_label("Europe/Berlin", label) is None
