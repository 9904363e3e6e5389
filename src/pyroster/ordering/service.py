"""Sorted views over the roster."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple

from pyroster.config import RosterRules, get_rules
from pyroster.models import PlayerRecord
from pyroster.validation import parse_rating


class SortField(str, Enum):
    NAME = "name"
    POSITION = "position"
    YEAR = "year"
    RATING = "rating"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortConfig:
    field: SortField = SortField.RATING
    direction: SortDirection = SortDirection.DESC


DEFAULT_SORT = SortConfig()

# ``None`` keys are unrankable and always placed after the ranked players.
SortKey = Callable[[PlayerRecord], Optional[object]]


def _sort_key(field: SortField, rules: RosterRules) -> SortKey:
    if field is SortField.NAME:
        return lambda player: player.name
    if field is SortField.POSITION:
        return lambda player: player.position
    if field is SortField.YEAR:
        return lambda player: rules.year_rank(player.year)
    if field is SortField.RATING:
        return lambda player: parse_rating(player.rating)
    raise ValueError(f"Unsupported sort field: {field!r}")


def sort_players(
    players: Iterable[PlayerRecord],
    field: SortField | str,
    direction: SortDirection | str = SortDirection.ASC,
    rules: Optional[RosterRules] = None,
) -> List[PlayerRecord]:
    """Return a new list ordered by ``field``; the input is left untouched.

    Unparsable ratings and year labels outside the rank table sort last in
    both directions.
    """

    field = SortField(field)
    direction = SortDirection(direction)
    key = _sort_key(field, rules if rules is not None else get_rules())

    ranked: List[Tuple[object, PlayerRecord]] = []
    unranked: List[PlayerRecord] = []
    for player in players:
        value = key(player)
        if value is None:
            unranked.append(player)
        else:
            ranked.append((value, player))

    ranked.sort(key=lambda item: item[0], reverse=direction is SortDirection.DESC)
    return [player for _, player in ranked] + unranked


def request_sort(current: SortConfig, field: SortField | str) -> SortConfig:
    """Toggle direction on the active field, otherwise start ascending on ``field``."""

    field = SortField(field)
    if current.field is field and current.direction is SortDirection.ASC:
        return SortConfig(field=field, direction=SortDirection.DESC)
    return SortConfig(field=field, direction=SortDirection.ASC)
