from __future__ import annotations

from pydantic import BaseModel


class ProfilePayload(BaseModel):
    coach_name: str = ""
    school_name: str = ""


class ProfileResponse(ProfilePayload):
    is_complete: bool
