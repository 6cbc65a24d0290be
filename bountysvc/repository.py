"""Bounty storage backed by the database queries."""

from __future__ import annotations

import uuid
from typing import Protocol

from bountysvc.db import CreateBountyParams, DbBounty, UpdateBountyParams
from bountysvc.mapper import to_db_params, to_db_update_params, to_domain
from bountysvc.model import Bounty


class Repository(Protocol):
    """Storage of domain bounties."""

    def get_bounties(self) -> list[Bounty]: ...

    def get_bounty_by_id(self, bounty_id: str) -> Bounty: ...

    def create_bounty(self, bounty: Bounty) -> None: ...

    def update_bounty(self, bounty: Bounty) -> None: ...


class _Querier(Protocol):
    def get_bounties(self) -> list[DbBounty]: ...

    def get_bounty_by_id(self, bounty_id: uuid.UUID) -> DbBounty: ...

    def create_bounty(self, params: CreateBountyParams) -> None: ...

    def update_bounty(self, params: UpdateBountyParams) -> None: ...


class DBRepository:
    """Repository that maps domain bounties onto database queries."""

    def __init__(self, queries: _Querier | None) -> None:
        self._queries = queries

    def get_bounties(self) -> list[Bounty]:
        return [to_domain(row) for row in self._queries.get_bounties()]

    def get_bounty_by_id(self, bounty_id: str) -> Bounty:
        parsed = uuid.UUID(bounty_id)
        return to_domain(self._queries.get_bounty_by_id(parsed))

    def create_bounty(self, bounty: Bounty) -> None:
        params = to_db_params(bounty)
        self._queries.create_bounty(params)

    def update_bounty(self, bounty: Bounty) -> None:
        params = to_db_update_params(bounty)
        self._queries.update_bounty(params)