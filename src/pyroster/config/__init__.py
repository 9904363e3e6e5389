"""Configuration helpers for roster rules and runtime settings."""

from .roster import DEFAULT_SPORT, RosterRules, get_rules, iter_rules
from .settings import Settings, load_settings

__all__ = [
    "DEFAULT_SPORT",
    "RosterRules",
    "Settings",
    "get_rules",
    "iter_rules",
    "load_settings",
]
