import pytest

from pyroster.models import PlayerRecord
from pyroster.ordering import DEFAULT_SORT, SortConfig, SortDirection, SortField, request_sort, sort_players

YEARS = ["FR", "FR (RS)", "SO", "SO (RS)", "JR", "JR (RS)", "SR", "SR (RS)"]


def _player(player_id: int, *, name: str = "Player", position: str = "QB", year: str = "FR", rating: str = "50"):
    return PlayerRecord(id=player_id, name=name, position=position, year=year, rating=rating)


def test_year_ascending_uses_rank_table():
    shuffled = ["SR (RS)", "SO", "FR (RS)", "JR", "SR", "FR", "JR (RS)", "SO (RS)"]
    players = [_player(i, year=year) for i, year in enumerate(shuffled)]

    ordered = sort_players(players, SortField.YEAR, SortDirection.ASC)

    assert [player.year for player in ordered] == YEARS


def test_year_rank_beats_lexical_order():
    # Lexically "JR" < "SO", but sophomores rank before juniors.
    players = [_player(1, year="JR"), _player(2, year="SO")]
    ordered = sort_players(players, "year", "asc")
    assert [player.year for player in ordered] == ["SO", "JR"]


def test_unknown_years_sort_last_both_ways():
    players = [_player(1, year=""), _player(2, year="SO"), _player(3, year="FR")]
    assert [p.id for p in sort_players(players, "year", "asc")] == [3, 2, 1]
    assert [p.id for p in sort_players(players, "year", "desc")] == [2, 3, 1]


def test_rating_sorts_numerically():
    players = [_player(i, rating=rating) for i, rating in enumerate(["45", "92", "7", "99"])]

    descending = sort_players(players, SortField.RATING, SortDirection.DESC)
    ascending = sort_players(players, SortField.RATING, SortDirection.ASC)

    assert [p.rating for p in descending] == ["99", "92", "45", "7"]
    assert [p.rating for p in ascending] == ["7", "45", "92", "99"]


def test_unparsable_ratings_do_not_raise_and_sort_last():
    players = [_player(1, rating="abc"), _player(2, rating="10"), _player(3, rating=""), _player(4, rating="80")]

    ordered = sort_players(players, "rating", "desc")

    assert [p.id for p in ordered[:2]] == [4, 2]
    assert {p.id for p in ordered[2:]} == {1, 3}


def test_name_and_position_are_lexical():
    players = [_player(1, name="Zed", position="WR"), _player(2, name="Abe", position="CB")]
    assert [p.name for p in sort_players(players, "name", "asc")] == ["Abe", "Zed"]
    assert [p.position for p in sort_players(players, "position", "desc")] == ["WR", "CB"]


def test_sort_does_not_mutate_input():
    players = [_player(1, rating="10"), _player(2, rating="90")]
    snapshot = list(players)

    sort_players(players, "rating", "desc")

    assert players == snapshot


def test_sort_is_idempotent():
    players = [_player(i, name=name) for i, name in enumerate(["Cy", "Al", "Bo"])]
    once = sort_players(players, "name", "asc")
    assert sort_players(once, "name", "asc") == once


def test_unknown_field_rejected():
    with pytest.raises(ValueError):
        sort_players([], "height", "asc")


def test_request_sort_toggles_and_resets():
    config = request_sort(DEFAULT_SORT, "name")
    assert config == SortConfig(SortField.NAME, SortDirection.ASC)

    config = request_sort(config, "name")
    assert config == SortConfig(SortField.NAME, SortDirection.DESC)

    config = request_sort(config, "year")
    assert config == SortConfig(SortField.YEAR, SortDirection.ASC)


def test_request_sort_on_default_field_starts_ascending():
    assert request_sort(DEFAULT_SORT, "rating") == SortConfig(SortField.RATING, SortDirection.ASC)
