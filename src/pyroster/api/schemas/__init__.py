"""Pydantic models for API I/O."""

from .profile import ProfilePayload, ProfileResponse
from .roster import FieldUpdateRequest, OperationResponse, RosterResponse, SortConfigResponse

__all__ = [
    "FieldUpdateRequest",
    "OperationResponse",
    "ProfilePayload",
    "ProfileResponse",
    "RosterResponse",
    "SortConfigResponse",
]
