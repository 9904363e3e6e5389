"""Canonical player models shared across the store, controller and API layers."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


PlayerField = Literal["name", "position", "year", "rating"]

PLAYER_FIELDS: tuple[str, ...] = ("name", "position", "year", "rating")


class PlayerDraft(BaseModel):
    """Staging buffer for the add/edit form; values are raw user input."""

    name: str = ""
    position: str = ""
    year: str = ""
    rating: str = ""

    model_config = ConfigDict(validate_assignment=True)


class PlayerRecord(BaseModel):
    """Stored roster entry."""

    id: int
    name: str
    position: str
    year: str
    rating: str = Field(..., description="String-encoded integer rating")

    model_config = ConfigDict(frozen=True)

    def to_draft(self) -> PlayerDraft:
        return PlayerDraft(
            name=self.name,
            position=self.position,
            year=self.year,
            rating=self.rating,
        )
