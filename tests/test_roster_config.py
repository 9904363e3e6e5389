import pytest

from pyroster.config import get_rules, iter_rules, load_settings


def test_get_rules_is_case_insensitive():
    rules = get_rules("ncaaf")
    assert rules.sport == "NCAAF"
    assert "QB" in rules.positions


def test_year_rank_follows_table_order():
    rules = get_rules()
    assert [rules.year_rank(label) for label in rules.years] == list(range(len(rules.years)))
    assert rules.year_rank("GR") is None


def test_get_rules_missing_raises():
    with pytest.raises(KeyError):
        get_rules("CURLING")


def test_iter_rules_lists_default():
    assert any(rules.sport == "NCAAF" for rules in iter_rules())


def test_load_settings_ignores_unknown_sport(monkeypatch):
    monkeypatch.setenv("PYROSTER_SPORT", "curling")
    monkeypatch.setenv("PYROSTER_STORAGE_KEY", "team")
    settings = load_settings("roster.sqlite")
    assert settings.sport == "NCAAF"
    assert settings.storage_key == "team"
    assert settings.db_path.name == "roster.sqlite"
