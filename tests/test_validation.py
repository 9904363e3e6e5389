import pytest

from pyroster.models import PlayerDraft
from pyroster.validation import (
    NAME_ERROR,
    POSITION_ERROR,
    RATING_ERROR,
    capitalize_name,
    validate_name,
    validate_player,
    validate_position,
    validate_rating,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Joe Burrow", True),
        ("   ", False),
        ("", False),
        ("x" * 100, True),
        ("x" * 101, False),
        ("  " + "x" * 100 + "  ", True),
    ],
)
def test_validate_name(raw, expected):
    assert validate_name(raw) is expected


def test_validate_position_requires_exact_code():
    assert validate_position("QB")
    assert not validate_position("qb")
    assert not validate_position("QB ")
    assert not validate_position("")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("0", True),
        ("99", True),
        ("100", False),
        ("-1", False),
        ("", False),
        ("abc", False),
        ("4.5", False),
        (" 42 ", True),
    ],
)
def test_validate_rating(raw, expected):
    assert validate_rating(raw) is expected


def test_validate_player_reports_every_failing_field():
    draft = PlayerDraft(name="", position="XX", year="FR", rating="120")
    assert validate_player(draft) == {
        "name": NAME_ERROR,
        "position": POSITION_ERROR,
        "rating": RATING_ERROR,
    }


def test_validate_player_ignores_year():
    draft = PlayerDraft(name="Sam", position="WR", year="", rating="70")
    assert validate_player(draft) == {}


def test_capitalize_name():
    assert capitalize_name("  joe   BURROW ") == "Joe Burrow"
    assert capitalize_name("o'neil") == "O'neil"


@pytest.mark.parametrize("raw", ["٤٢", "４２", "4٢"])
def test_validate_rating_rejects_non_ascii_digits(raw):
    assert not validate_rating(raw)
