import pytest
from pydantic import ValidationError

from pyroster.models import PlayerDraft, PlayerRecord


def test_player_record_is_frozen():
    record = PlayerRecord(id=1, name="Test Player", position="QB", year="SO", rating="80")

    assert record.id == 1
    assert record.to_draft() == PlayerDraft(name="Test Player", position="QB", year="SO", rating="80")

    with pytest.raises((TypeError, ValidationError)):
        record.name = "Other"  # type: ignore[misc]


def test_draft_defaults_to_blank_fields():
    draft = PlayerDraft()
    assert (draft.name, draft.position, draft.year, draft.rating) == ("", "", "", "")
