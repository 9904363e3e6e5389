"""Player models."""

from .player import PLAYER_FIELDS, PlayerDraft, PlayerField, PlayerRecord

__all__ = ["PLAYER_FIELDS", "PlayerDraft", "PlayerField", "PlayerRecord"]
