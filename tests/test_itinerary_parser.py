import pytest
from core.itinerary_parser import parse_itinerary


def test_parses_headers_and_orphan_lines():
    text = "Day 1: Museum\nDay 2 - Hiking\nSwimming"

    assert parse_itinerary(text) == {1: ["Museum"], 2: ["Hiking", "Swimming"]}


def test_empty_input():
    assert parse_itinerary("") == {}
    assert parse_itinerary(None) == {}


def test_lines_before_first_header_and_blank_lines_dropped():
    text = "Packing notes\n\nDay 1\n\n   Walking tour  \n"

    assert parse_itinerary(text) == {1: ["Walking tour"]}


def test_header_variants():
    text = "  DAY3 Beach day\nday 4:Conference\nDay5-  Trek"

    assert parse_itinerary(text) == {3: ["Beach day"], 4: ["Conference"], 5: ["Trek"]}


def test_repeated_header_appends_to_same_day():
    assert parse_itinerary("Day 1: Museum\nDay 1: Dinner") == {1: ["Museum", "Dinner"]}


def test_word_day_without_number_is_not_a_header():
    text = "Day 1: Arrive\nDaytrip to Sintra"

    assert parse_itinerary(text) == {1: ["Arrive", "Daytrip to Sintra"]}


def test_orphans_go_to_highest_day_by_default():
    text = "Day 3: Beach\nDay 1: Museum\nLunch at market"

    assert parse_itinerary(text) == {3: ["Beach", "Lunch at market"], 1: ["Museum"]}


def test_orphans_go_to_latest_header_when_requested():
    text = "Day 3: Beach\nDay 1: Museum\nLunch at market"

    assert parse_itinerary(text, orphan_policy="latest") == {3: ["Beach"], 1: ["Museum", "Lunch at market"]}


def test_unknown_orphan_policy_rejected():
    with pytest.raises(ValueError):
        parse_itinerary("Day 1", orphan_policy="first")
