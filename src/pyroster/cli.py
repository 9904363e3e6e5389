"""Command-line interface for managing a roster."""

from __future__ import annotations

import argparse
import csv
import sys
from pathlib import Path
from typing import Sequence

import uvicorn

from pyroster.api import create_app
from pyroster.config import load_settings
from pyroster.models import PLAYER_FIELDS, PlayerDraft, PlayerRecord
from pyroster.ordering import SortDirection, SortField, sort_players
from pyroster.persistence import PersistedCollection, PersistenceError, SqliteBackingStore
from pyroster.profile import CoachProfile, ProfileStore, reset_storage
from pyroster.roster import OperationResult, RosterController


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage a team roster")
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="Path to the roster SQLite database (PYROSTER_DB_PATH, when set, takes precedence)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    list_cmd = commands.add_parser("list", help="Show the roster")
    list_cmd.add_argument(
        "--sort",
        choices=[field.value for field in SortField],
        default=None,
        help="Field to sort by (default: rating, descending)",
    )
    list_cmd.add_argument(
        "--direction",
        choices=[direction.value for direction in SortDirection],
        default=SortDirection.ASC.value,
        help="Sort direction when --sort is given",
    )
    list_cmd.add_argument("--output", type=Path, default=None, help="Also write the roster to a CSV file")

    add_cmd = commands.add_parser("add", help="Add a player")
    add_cmd.add_argument("name")
    add_cmd.add_argument("position")
    add_cmd.add_argument("year")
    add_cmd.add_argument("rating")

    update_cmd = commands.add_parser("update", help="Change one field of a player")
    update_cmd.add_argument("player_id", type=int)
    update_cmd.add_argument("field", choices=PLAYER_FIELDS)
    update_cmd.add_argument("value")

    remove_cmd = commands.add_parser("remove", help="Remove a player")
    remove_cmd.add_argument("player_id", type=int)

    profile_cmd = commands.add_parser("profile", help="Show or set the coach profile")
    profile_cmd.add_argument("--coach", default=None, help="Coach name")
    profile_cmd.add_argument("--school", default=None, help="School name")

    commands.add_parser("reset", help="Clear the roster and the coach profile")

    serve_cmd = commands.add_parser("serve", help="Run the REST API")
    serve_cmd.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    serve_cmd.add_argument("--port", type=int, default=8000, help="Port to listen on")
    return parser.parse_args(argv)


def _print_players(players: Sequence[PlayerRecord]) -> None:
    if not players:
        print("Roster is empty")
        return
    for player in players:
        print(f"{player.id}\t{player.name}\t{player.position}\t{player.year}\t{player.rating}")


def _write_csv(path: Path, players: Sequence[PlayerRecord]) -> None:
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["id", "name", "position", "year", "rating"])
        for player in players:
            writer.writerow([player.id, player.name, player.position, player.year, player.rating])


def _report(result: OperationResult) -> int:
    if result.message:
        print(result.message)
    for field, message in result.errors.items():
        print(f"  {field}: {message}")
    return 0 if result.ok else 1


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = load_settings(args.db)
    backing = SqliteBackingStore(settings.db_path)
    collection = PersistedCollection(backing, key=settings.storage_key)
    controller = RosterController(collection, rules=settings.rules)

    if args.command == "serve":
        uvicorn.run(create_app(backing=backing, settings=settings), host=args.host, port=args.port)
        return 0

    if args.command == "list":
        if args.sort:
            players = sort_players(collection.read(), args.sort, args.direction, settings.rules)
        else:
            players = controller.sorted_players()
        _print_players(players)
        if args.output:
            _write_csv(args.output, players)
            print(f"Wrote roster to {args.output}")
        return 0

    if args.command == "add":
        draft = PlayerDraft(name=args.name, position=args.position, year=args.year, rating=args.rating)
        return _report(controller.add(draft))

    if args.command == "update":
        try:
            result = controller.update_field(args.player_id, args.field, args.value)
        except KeyError:
            print(f"Player {args.player_id} not found", file=sys.stderr)
            return 1
        return _report(result)

    if args.command == "remove":
        result = controller.remove(args.player_id)
        if not result.message:
            print(f"Player {args.player_id} not found; roster unchanged")
            return 0
        return _report(result)

    profiles = ProfileStore(backing)
    try:
        if args.command == "profile":
            profile = profiles.load()
            if args.coach is not None or args.school is not None:
                profile = profiles.save(
                    CoachProfile(
                        coach_name=args.coach if args.coach is not None else profile.coach_name,
                        school_name=args.school if args.school is not None else profile.school_name,
                    )
                )
            if profile.is_complete:
                print(f"{profile.coach_name} - {profile.school_name}")
            else:
                print("Set Coach & School")
            return 0

        reset_storage(backing, players_key=collection.key)
        print("Roster storage cleared")
        return 0
    except PersistenceError as exc:
        print(f"Storage error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
