"""Persistence layer keeping the roster in a durable key-value store."""

from __future__ import annotations

import json
import logging
import os
import sqlite3
import tempfile
from contextlib import closing
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol

from pydantic import TypeAdapter, ValidationError

from pyroster.models import PlayerRecord


logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)

_DB_PATH_ENV = "PYROSTER_DB_PATH"

PLAYERS_KEY = "players"
COACH_NAME_KEY = "coachName"
SCHOOL_NAME_KEY = "schoolName"

_PLAYERS_ADAPTER = TypeAdapter(List[PlayerRecord])


class PersistenceError(Exception):
    """Raised when the backing store cannot be read or written."""


class MalformedStorageError(PersistenceError):
    """Raised when a stored value cannot be decoded as a player list."""


class BackingStore(Protocol):
    """Durable string key-value medium. A missing key reads as ``None``."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


class MemoryBackingStore:
    """Dict-backed store; ``fail_reads``/``fail_writes`` simulate an unavailable medium."""

    def __init__(
        self,
        initial: Optional[Dict[str, str]] = None,
        *,
        fail_writes: bool = False,
        fail_reads: bool = False,
    ):
        self.data: Dict[str, str] = dict(initial or {})
        self.fail_writes = fail_writes
        self.fail_reads = fail_reads

    def get(self, key: str) -> Optional[str]:
        if self.fail_reads:
            raise PersistenceError(f"Unable to read key {key!r}: storage unavailable")
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise PersistenceError(f"Unable to write key {key!r}: storage unavailable")
        self.data[key] = value

    def delete(self, key: str) -> None:
        if self.fail_writes:
            raise PersistenceError(f"Unable to delete key {key!r}: storage unavailable")
        self.data.pop(key, None)


class SqliteBackingStore:
    """Simple SQLite-backed key-value store.

    ``PYROSTER_DB_PATH`` takes precedence over the path given by the caller.
    """

    def __init__(self, db_path: Path | str):
        self._use_uri = False
        env_db = os.getenv(_DB_PATH_ENV)
        if env_db:
            if env_db.startswith("file:"):
                self.db_path: Path | str = env_db
                self._use_uri = True
            else:
                self.db_path = Path(env_db)
        elif isinstance(db_path, str) and db_path.startswith("file:"):
            self.db_path = db_path
            self._use_uri = True
        else:
            self.db_path = Path(db_path)
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        if isinstance(self.db_path, Path):
            try:
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
                conn = sqlite3.connect(self.db_path)
            except (OSError, sqlite3.OperationalError):
                conn = self._connect_fallback()
        else:
            try:
                conn = sqlite3.connect(self.db_path, uri=self._use_uri)
            except sqlite3.OperationalError:
                conn = self._connect_fallback()
        conn.row_factory = sqlite3.Row
        return conn

    def _connect_fallback(self) -> sqlite3.Connection:
        fallback_dir = Path(tempfile.gettempdir()) / "pyroster-runtime"
        fallback_dir.mkdir(parents=True, exist_ok=True)
        fallback = fallback_dir / "pyroster.sqlite"
        logger.warning("Cannot open roster database at %s; using %s", self.db_path, fallback)
        conn = sqlite3.connect(fallback)
        conn.row_factory = sqlite3.Row
        self.db_path = fallback
        self._use_uri = False
        self._create_schema(conn)
        return conn

    def _ensure_schema(self) -> None:
        try:
            with closing(self._connect()) as conn:
                self._create_schema(conn)
        except sqlite3.DatabaseError as exc:
            # Corrupt or foreign file at the configured path.
            logger.warning("Roster database at %s is unusable: %s", self.db_path, exc)
            with closing(self._connect_fallback()):
                pass

    def _create_schema(self, conn: sqlite3.Connection) -> None:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS kv (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
            """
        )
        conn.commit()

    def get(self, key: str) -> Optional[str]:
        try:
            with closing(self._connect()) as conn:
                row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Unable to read key {key!r}: {exc}") from exc
        if row is None:
            return None
        return row["value"]

    def set(self, key: str, value: str) -> None:
        try:
            with closing(self._connect()) as conn:
                conn.execute(
                    """
                    INSERT INTO kv (key, value) VALUES (?, ?)
                    ON CONFLICT(key) DO UPDATE SET value = excluded.value
                    """,
                    (key, value),
                )
                conn.commit()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Unable to write key {key!r}: {exc}") from exc

    def delete(self, key: str) -> None:
        try:
            with closing(self._connect()) as conn:
                conn.execute("DELETE FROM kv WHERE key = ?", (key,))
                conn.commit()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Unable to delete key {key!r}: {exc}") from exc


def encode_players(players: Iterable[PlayerRecord]) -> str:
    return json.dumps([player.model_dump() for player in players])


def decode_players(raw: str) -> List[PlayerRecord]:
    try:
        return _PLAYERS_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        raise MalformedStorageError(f"Stored roster is not a player list: {exc.error_count()} error(s)") from exc


class PersistedCollection:
    """In-memory player list mirrored to a single backing store key.

    The mirror is loaded lazily on first ``read``. ``write`` replaces the whole
    list before persisting it, so a failed write leaves the new list in memory
    and raises :class:`PersistenceError`.
    """

    def __init__(self, backing: BackingStore, key: str = PLAYERS_KEY):
        self.backing = backing
        self.key = key
        self._players: Optional[List[PlayerRecord]] = None
        self.version = 0

    def read(self) -> List[PlayerRecord]:
        if self._players is None:
            self._players = self._load()
        return self._players

    def write(self, players: Iterable[PlayerRecord]) -> None:
        self._players = list(players)
        self.version += 1
        payload = encode_players(self._players)
        try:
            self.backing.set(self.key, payload)
        except PersistenceError:
            logger.error("Failed to persist %d players under %r", len(self._players), self.key)
            raise

    def reload(self) -> None:
        """Forget the mirror so the next read goes back to the backing store."""

        self._players = None
        self.version += 1

    def _load(self) -> List[PlayerRecord]:
        try:
            raw = self.backing.get(self.key)
        except PersistenceError as exc:
            logger.warning("Could not read %r from storage (%s); starting empty", self.key, exc)
            return []
        if raw is None:
            return []
        try:
            return decode_players(raw)
        except MalformedStorageError as exc:
            logger.warning("Ignoring malformed value under %r: %s", self.key, exc)
            return []


__all__ = [
    "BackingStore",
    "COACH_NAME_KEY",
    "MalformedStorageError",
    "MemoryBackingStore",
    "PLAYERS_KEY",
    "PersistedCollection",
    "PersistenceError",
    "SCHOOL_NAME_KEY",
    "SqliteBackingStore",
    "decode_players",
    "encode_players",
]
