"""Lifecycle controller for roster entries (add, edit, update, remove)."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Literal, Optional

from pyroster.config import RosterRules, get_rules
from pyroster.models import PLAYER_FIELDS, PlayerDraft, PlayerRecord
from pyroster.ordering import DEFAULT_SORT, SortConfig, SortField, request_sort, sort_players
from pyroster.persistence import PersistedCollection, PersistenceError
from pyroster.validation import capitalize_name, validate_player


logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)

ADD_SUCCESS = "Player added successfully!"
ADD_INVALID = "Please correct the errors before adding the player."
UPDATE_SUCCESS = "Player updated successfully!"
UPDATE_INVALID = "Please correct the errors before updating the player."
REMOVE_SUCCESS = "Player removed."
SAVE_FAILED = "Failed to save roster. Changes are kept for this session only."


class RosterStateError(Exception):
    """Raised when an operation is not allowed in the current edit state."""


@dataclass(frozen=True)
class Notification:
    level: Literal["success", "error"]
    message: str


@dataclass(frozen=True)
class OperationResult:
    ok: bool
    message: str
    errors: Dict[str, str] = field(default_factory=dict)
    player: Optional[PlayerRecord] = None
    persisted: bool = True


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class RosterController:
    """Single-session state machine over the persisted roster.

    Idle when ``editing_id`` is ``None``, Editing otherwise. Every mutation
    validates the full candidate record before it reaches the collection.
    """

    def __init__(
        self,
        collection: PersistedCollection,
        rules: Optional[RosterRules] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        self.collection = collection
        self.rules = rules if rules is not None else get_rules()
        self._clock = clock or _now_ms
        self._last_id = 0
        self.draft = PlayerDraft()
        self.editing_id: Optional[int] = None
        self.errors: Dict[str, str] = {}
        self.notifications: List[Notification] = []
        self._sort_config = DEFAULT_SORT
        self._sort_version = collection.version

    @property
    def players(self) -> List[PlayerRecord]:
        return list(self.collection.read())

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    @property
    def sort_config(self) -> SortConfig:
        # A changed collection always snaps the view back to the default sort.
        if self.collection.version != self._sort_version:
            self._sort_version = self.collection.version
            self._sort_config = DEFAULT_SORT
        return self._sort_config

    def request_sort(self, sort_field: SortField | str) -> SortConfig:
        self._sort_config = request_sort(self.sort_config, sort_field)
        return self._sort_config

    def sorted_players(self) -> List[PlayerRecord]:
        config = self.sort_config
        return sort_players(self.collection.read(), config.field, config.direction, self.rules)

    def set_draft_field(self, name: str, value: str) -> PlayerDraft:
        if name not in PLAYER_FIELDS:
            raise ValueError(f"Unknown player field: {name!r}")
        setattr(self.draft, name, value)
        return self.draft

    def add(self, draft: Optional[PlayerDraft] = None) -> OperationResult:
        if self.is_editing:
            raise RosterStateError("Cannot add a player while another player is being edited")
        if draft is not None:
            self.draft = draft.model_copy()

        errors = self._validate(self.draft)
        if errors:
            return self._reject(ADD_INVALID, errors)

        player = PlayerRecord(
            id=self._next_id(),
            name=capitalize_name(self.draft.name),
            position=self.draft.position,
            year=self.draft.year,
            rating=self.draft.rating,
        )
        players = self.collection.read()
        self.draft = PlayerDraft()
        return self._commit([*players, player], ADD_SUCCESS, player)

    def update_field(self, player_id: int, name: str, value: str) -> OperationResult:
        if name not in PLAYER_FIELDS:
            raise ValueError(f"Unknown player field: {name!r}")
        players = self.collection.read()
        current = self._find(player_id)
        candidate = current.model_copy(update={name: value})

        errors = self._validate(candidate)
        if errors:
            return self._reject(UPDATE_INVALID, errors)
        if name == "name":
            candidate = candidate.model_copy(update={"name": capitalize_name(value)})

        updated = [candidate if player.id == player_id else player for player in players]
        return self._commit(updated, UPDATE_SUCCESS, candidate)

    def start_edit(self, player_id: int) -> PlayerDraft:
        player = self._find(player_id)
        self.editing_id = player.id
        self.draft = player.to_draft()
        self.errors = {}
        return self.draft

    def save_edit(self) -> OperationResult:
        if self.editing_id is None:
            raise RosterStateError("No player is being edited")

        errors = self._validate(self.draft)
        if errors:
            return self._reject(UPDATE_INVALID, errors)

        editing_id = self.editing_id
        players = self.collection.read()
        saved: Optional[PlayerRecord] = None
        updated: List[PlayerRecord] = []
        for player in players:
            if player.id == editing_id:
                saved = PlayerRecord(
                    id=player.id,
                    name=capitalize_name(self.draft.name),
                    position=self.draft.position,
                    year=self.draft.year,
                    rating=self.draft.rating,
                )
                updated.append(saved)
            else:
                updated.append(player)

        self._clear_edit()
        if saved is None:
            # The record disappeared underneath the session (external reset).
            logger.warning("Player %s vanished during edit; nothing saved", editing_id)
            return self._notify(False, f"Player {editing_id} no longer exists.")
        return self._commit(updated, UPDATE_SUCCESS, saved)

    def cancel_edit(self) -> None:
        self._clear_edit()

    def remove(self, player_id: int) -> OperationResult:
        players = self.collection.read()
        remaining = [player for player in players if player.id != player_id]
        if len(remaining) == len(players):
            return OperationResult(ok=True, message="")
        if self.editing_id == player_id:
            self._clear_edit()
        return self._commit(remaining, REMOVE_SUCCESS)

    def reset(self) -> None:
        """Drop session state after the backing store was cleared externally."""

        self._clear_edit()
        self.collection.reload()

    def _find(self, player_id: int) -> PlayerRecord:
        for player in self.collection.read():
            if player.id == player_id:
                return player
        raise KeyError(f"Player {player_id} not found")

    def _next_id(self) -> int:
        existing = max((player.id for player in self.collection.read()), default=0)
        candidate = max(self._clock(), existing + 1, self._last_id + 1)
        self._last_id = candidate
        return candidate

    def _validate(self, candidate: PlayerDraft | PlayerRecord) -> Dict[str, str]:
        self.errors = validate_player(candidate, self.rules)
        return self.errors

    def _reject(self, message: str, errors: Dict[str, str]) -> OperationResult:
        self.notifications.append(Notification("error", message))
        return OperationResult(ok=False, message=message, errors=dict(errors))

    def _notify(self, ok: bool, message: str) -> OperationResult:
        self.notifications.append(Notification("success" if ok else "error", message))
        return OperationResult(ok=ok, message=message)

    def _commit(
        self,
        players: List[PlayerRecord],
        message: str,
        player: Optional[PlayerRecord] = None,
    ) -> OperationResult:
        try:
            self.collection.write(players)
        except PersistenceError as exc:
            logger.error("Roster change kept in memory only: %s", exc)
            self.notifications.append(Notification("error", SAVE_FAILED))
            return OperationResult(ok=False, message=SAVE_FAILED, player=player, persisted=False)
        self.notifications.append(Notification("success", message))
        return OperationResult(ok=True, message=message, player=player)

    def _clear_edit(self) -> None:
        self.editing_id = None
        self.draft = PlayerDraft()
        self.errors = {}
