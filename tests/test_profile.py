import pytest

from pyroster.models import PlayerRecord
from pyroster.persistence import MemoryBackingStore, PersistedCollection, PersistenceError
from pyroster.profile import CoachProfile, ProfileStore, reset_storage


def test_missing_profile_loads_blank():
    profile = ProfileStore(MemoryBackingStore()).load()
    assert profile == CoachProfile()
    assert not profile.is_complete


def test_profile_round_trip():
    backing = MemoryBackingStore()
    ProfileStore(backing).save(CoachProfile(coach_name="Zac Taylor", school_name="Cincinnati"))

    profile = ProfileStore(backing).load()
    assert profile.coach_name == "Zac Taylor"
    assert profile.is_complete
    assert backing.data == {"coachName": "Zac Taylor", "schoolName": "Cincinnati"}


def test_profile_save_failure_raises():
    with pytest.raises(PersistenceError):
        ProfileStore(MemoryBackingStore(fail_writes=True)).save(CoachProfile(coach_name="A", school_name="B"))


def test_reset_clears_all_keys():
    backing = MemoryBackingStore({"coachName": "A", "schoolName": "B", "other": "kept"})
    PersistedCollection(backing).write([PlayerRecord(id=1, name="X", position="QB", year="FR", rating="1")])

    reset_storage(backing)

    assert backing.data == {"other": "kept"}
    assert PersistedCollection(backing).read() == []


def test_profile_read_failure_loads_blank():
    backing = MemoryBackingStore({"coachName": "A", "schoolName": "B"}, fail_reads=True)
    assert ProfileStore(backing).load() == CoachProfile()
