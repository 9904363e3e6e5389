"""Coach/school profile stored next to the roster."""

from __future__ import annotations

import logging

from pydantic import BaseModel

from pyroster.persistence import (
    COACH_NAME_KEY,
    PLAYERS_KEY,
    SCHOOL_NAME_KEY,
    BackingStore,
    PersistenceError,
)


logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)


class CoachProfile(BaseModel):
    coach_name: str = ""
    school_name: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.coach_name) and bool(self.school_name)


class ProfileStore:
    def __init__(self, backing: BackingStore):
        self.backing = backing

    def load(self) -> CoachProfile:
        try:
            coach_name = self.backing.get(COACH_NAME_KEY)
            school_name = self.backing.get(SCHOOL_NAME_KEY)
        except PersistenceError as exc:
            logger.warning("Could not read coach profile (%s); using empty profile", exc)
            return CoachProfile()
        return CoachProfile(coach_name=coach_name or "", school_name=school_name or "")

    def save(self, profile: CoachProfile) -> CoachProfile:
        self.backing.set(COACH_NAME_KEY, profile.coach_name)
        self.backing.set(SCHOOL_NAME_KEY, profile.school_name)
        return profile


def reset_storage(backing: BackingStore, players_key: str = PLAYERS_KEY) -> None:
    """Clear the roster and the coach profile."""

    for key in (players_key, COACH_NAME_KEY, SCHOOL_NAME_KEY):
        backing.delete(key)
    logger.info("Cleared roster storage")
