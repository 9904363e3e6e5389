"""Roster configuration for supported sports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Optional, Tuple


@dataclass(frozen=True)
class RosterRules:
    sport: str
    positions: Tuple[str, ...]
    years: Tuple[str, ...]
    name_max_length: int = 100
    rating_min: int = 0
    rating_max: int = 99
    _year_ranks: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        ranks = {label: index for index, label in enumerate(self.years)}
        object.__setattr__(self, "_year_ranks", ranks)

    def year_rank(self, label: str) -> Optional[int]:
        """Rank of an eligibility year label, ``None`` when it is not in the table."""

        return self._year_ranks.get(label)


_ROSTER_RULES: Dict[str, RosterRules] = {
    "NCAAF": RosterRules(
        sport="NCAAF",
        positions=("QB", "RB", "WR", "TE", "OL", "DL", "LB", "CB", "S", "K", "P"),
        years=("FR", "FR (RS)", "SO", "SO (RS)", "JR", "JR (RS)", "SR", "SR (RS)"),
    ),
}

DEFAULT_SPORT = "NCAAF"


def iter_rules() -> Iterable[RosterRules]:
    """Return an iterator of all configured rule sets."""

    return _ROSTER_RULES.values()


def get_rules(sport: str = DEFAULT_SPORT) -> RosterRules:
    """Fetch rules for a sport, raising KeyError if missing."""

    key = sport.upper()
    if key not in _ROSTER_RULES:
        raise KeyError(f"No roster rules configured for sport={sport!r}")
    return _ROSTER_RULES[key]
