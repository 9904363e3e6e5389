from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field

from pyroster.models import PlayerDraft, PlayerField, PlayerRecord
from pyroster.ordering import SortDirection, SortField


class FieldUpdateRequest(BaseModel):
    field: PlayerField
    value: str


class SortConfigResponse(BaseModel):
    field: SortField
    direction: SortDirection


class RosterResponse(BaseModel):
    players: List[PlayerRecord]
    sort: SortConfigResponse
    draft: PlayerDraft
    editing_id: int | None = None
    errors: Dict[str, str] = Field(default_factory=dict)


class OperationResponse(BaseModel):
    ok: bool
    message: str
    errors: Dict[str, str] = Field(default_factory=dict)
    player: PlayerRecord | None = None
    persisted: bool = True
