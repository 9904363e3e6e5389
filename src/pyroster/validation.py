"""Field validators for roster entries."""

from __future__ import annotations

import re
from typing import Dict, Optional, Union

from pyroster.config import RosterRules, get_rules
from pyroster.models import PlayerDraft, PlayerRecord


NAME_ERROR = "Invalid name. Please enter a non-empty name up to 100 characters."
POSITION_ERROR = "Invalid position. Please select a valid position."
RATING_ERROR = "Invalid rating. Please enter a number between 0 and 99."

_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")


def _rules(rules: Optional[RosterRules]) -> RosterRules:
    return rules if rules is not None else get_rules()


def parse_rating(raw: str) -> Optional[int]:
    """Parse a rating string, returning ``None`` when it is not an integer."""

    value = raw.strip()
    if not _INTEGER_RE.match(value):
        return None
    return int(value)


def validate_name(raw: str, rules: Optional[RosterRules] = None) -> bool:
    value = raw.strip()
    return 0 < len(value) <= _rules(rules).name_max_length


def validate_position(raw: str, rules: Optional[RosterRules] = None) -> bool:
    return raw in _rules(rules).positions


def validate_rating(raw: str, rules: Optional[RosterRules] = None) -> bool:
    value = parse_rating(raw)
    if value is None:
        return False
    active = _rules(rules)
    return active.rating_min <= value <= active.rating_max


def validate_player(
    candidate: Union[PlayerDraft, PlayerRecord],
    rules: Optional[RosterRules] = None,
) -> Dict[str, str]:
    """Return a field -> message mapping for every failing field.

    An empty mapping means the candidate is fully valid. Year is not checked.
    """

    errors: Dict[str, str] = {}
    if not validate_name(candidate.name, rules):
        errors["name"] = NAME_ERROR
    if not validate_position(candidate.position, rules):
        errors["position"] = POSITION_ERROR
    if not validate_rating(candidate.rating, rules):
        errors["rating"] = RATING_ERROR
    return errors


def capitalize_name(name: str) -> str:
    """Display form of a name: every word capitalized, whitespace collapsed."""

    return " ".join(word[:1].upper() + word[1:].lower() for word in name.split())
