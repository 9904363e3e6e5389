"""REST API for the roster."""

from __future__ import annotations

from typing import NoReturn

from fastapi import FastAPI, HTTPException

from pyroster.api.schemas import (
    FieldUpdateRequest,
    OperationResponse,
    ProfilePayload,
    ProfileResponse,
    RosterResponse,
    SortConfigResponse,
)
from pyroster.config import Settings, load_settings
from pyroster.models import PlayerDraft
from pyroster.ordering import SortField
from pyroster.persistence import BackingStore, PersistedCollection, PersistenceError, SqliteBackingStore
from pyroster.profile import CoachProfile, ProfileStore, reset_storage
from pyroster.roster import OperationResult, RosterController, RosterStateError


def _roster_response(controller: RosterController) -> RosterResponse:
    config = controller.sort_config
    return RosterResponse(
        players=controller.sorted_players(),
        sort=SortConfigResponse(field=config.field, direction=config.direction),
        draft=controller.draft,
        editing_id=controller.editing_id,
        errors=controller.errors,
    )


def _result_to_response(result: OperationResult) -> OperationResponse:
    if result.errors:
        raise HTTPException(status_code=422, detail={"message": result.message, "errors": result.errors})
    if not result.persisted:
        raise HTTPException(status_code=503, detail=result.message)
    if not result.ok:
        raise HTTPException(status_code=409, detail=result.message)
    return OperationResponse(
        ok=result.ok,
        message=result.message,
        errors=result.errors,
        player=result.player,
        persisted=result.persisted,
    )


def _profile_response(profile: CoachProfile) -> ProfileResponse:
    return ProfileResponse(
        coach_name=profile.coach_name,
        school_name=profile.school_name,
        is_complete=profile.is_complete,
    )


def _not_found(player_id: int) -> NoReturn:
    raise HTTPException(status_code=404, detail=f"Player {player_id} not found")


def create_app(backing: BackingStore | None = None, settings: Settings | None = None) -> FastAPI:
    app = FastAPI(title="pyroster")
    settings = settings or load_settings()
    if backing is None:
        backing = SqliteBackingStore(settings.db_path)
    collection = PersistedCollection(backing, key=settings.storage_key)
    controller = RosterController(collection, rules=settings.rules)
    profiles = ProfileStore(backing)
    app.state.backing = backing
    app.state.controller = controller

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/players", response_model=RosterResponse)
    async def list_players():
        return _roster_response(controller)

    @app.post("/sort/{field}", response_model=RosterResponse)
    async def sort(field: SortField):
        controller.request_sort(field)
        return _roster_response(controller)

    @app.put("/draft", response_model=PlayerDraft)
    async def update_draft(payload: FieldUpdateRequest):
        return controller.set_draft_field(payload.field, payload.value)

    @app.post("/players", response_model=OperationResponse)
    async def add_player(draft: PlayerDraft | None = None):
        try:
            result = controller.add(draft)
        except RosterStateError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return _result_to_response(result)

    @app.patch("/players/{player_id}", response_model=OperationResponse)
    async def update_player(player_id: int, payload: FieldUpdateRequest):
        try:
            result = controller.update_field(player_id, payload.field, payload.value)
        except KeyError:
            _not_found(player_id)
        return _result_to_response(result)

    @app.delete("/players/{player_id}", response_model=OperationResponse)
    async def remove_player(player_id: int):
        return _result_to_response(controller.remove(player_id))

    @app.post("/players/{player_id}/edit", response_model=PlayerDraft)
    async def start_edit(player_id: int):
        try:
            return controller.start_edit(player_id)
        except KeyError:
            _not_found(player_id)

    @app.post("/edit/save", response_model=OperationResponse)
    async def save_edit():
        try:
            result = controller.save_edit()
        except RosterStateError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return _result_to_response(result)

    @app.post("/edit/cancel", response_model=RosterResponse)
    async def cancel_edit():
        controller.cancel_edit()
        return _roster_response(controller)

    @app.get("/profile", response_model=ProfileResponse)
    async def get_profile():
        return _profile_response(profiles.load())

    @app.put("/profile", response_model=ProfileResponse)
    async def save_profile(payload: ProfilePayload):
        profile = CoachProfile(coach_name=payload.coach_name, school_name=payload.school_name)
        try:
            profiles.save(profile)
        except PersistenceError as exc:
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        return _profile_response(profile)

    @app.post("/reset")
    async def reset():
        try:
            reset_storage(backing, players_key=collection.key)
        except PersistenceError as exc:
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        controller.reset()
        return {"status": "ok"}

    return app
