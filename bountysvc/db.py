"""Row types and SQL queries for the bounties table."""

from __future__ import annotations

import sqlite3
import uuid
from contextlib import closing
from dataclasses import dataclass
from typing import Any

_CREATE_BOUNTY = "INSERT INTO bounties (id, title, description, points) VALUES (?, ?, ?, ?)"
_GET_BOUNTIES = "SELECT id, title, description, points FROM bounties"
_GET_BOUNTY_BY_ID = "SELECT id, title, description, points FROM bounties WHERE id = ?"
_UPDATE_BOUNTY = "UPDATE bounties SET title = ?, description = ?, points = ? WHERE id = ?"


@dataclass(frozen=True)
class DbBounty:
    """A row of the bounties table."""

    id: uuid.UUID
    title: str
    description: str | None
    points: int


@dataclass(frozen=True)
class CreateBountyParams:
    """Arguments of the insert query."""

    id: uuid.UUID
    title: str
    description: str | None
    points: int


@dataclass(frozen=True)
class UpdateBountyParams:
    """Arguments of the update query."""

    title: str
    description: str | None
    points: int
    id: uuid.UUID


def _as_uuid(value: Any) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    if isinstance(value, bytes) and len(value) == 16:
        return uuid.UUID(bytes=value)
    return uuid.UUID(str(value))


def _row_to_bounty(row: Any) -> DbBounty:
    id_value, title, description, points = row
    return DbBounty(id=_as_uuid(id_value), title=title, description=description, points=int(points))


class Queries:
    """Runs the bounty queries against a DB-API connection."""

    def __init__(self, connection: Any) -> None:
        self._connection = connection
        self._placeholder = "?" if isinstance(connection, sqlite3.Connection) else "%s"

    def _sql(self, template: str) -> str:
        return template.replace("?", self._placeholder)

    def _execute(self, template: str, arguments: tuple[Any, ...]) -> None:
        with closing(self._connection.cursor()) as cursor:
            cursor.execute(self._sql(template), arguments)
        self._connection.commit()

    def get_bounties(self) -> list[DbBounty]:
        """Return every bounty row."""
        with closing(self._connection.cursor()) as cursor:
            cursor.execute(self._sql(_GET_BOUNTIES))
            return [_row_to_bounty(row) for row in cursor.fetchall()]

    def get_bounty_by_id(self, bounty_id: uuid.UUID) -> DbBounty:
        """Return the row with the given id; raise LookupError when there is none."""
        with closing(self._connection.cursor()) as cursor:
            cursor.execute(self._sql(_GET_BOUNTY_BY_ID), (str(bounty_id),))
            row = cursor.fetchone()
        if row is None:
            raise LookupError("no rows in result set")
        return _row_to_bounty(row)

    def create_bounty(self, params: CreateBountyParams) -> None:
        """Insert a bounty row."""
        self._execute(
            _CREATE_BOUNTY,
            (str(params.id), params.title, params.description, params.points),
        )

    def update_bounty(self, params: UpdateBountyParams) -> None:
        """Update the title, description and points of a bounty row."""
        self._execute(
            _UPDATE_BOUNTY,
            (params.title, params.description, params.points, str(params.id)),
        )