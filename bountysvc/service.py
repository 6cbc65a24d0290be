"""Bounty business operations."""

from __future__ import annotations

import uuid

from bountysvc.model import Bounty
from bountysvc.repository import Repository


class Service:
    """Operations on bounties over a repository."""

    def __init__(self, repository: Repository) -> None:
        self._repository = repository

    def get_bounties(self) -> list[Bounty]:
        return self._repository.get_bounties()

    def get_bounty_by_id(self, bounty_id: str) -> Bounty:
        return self._repository.get_bounty_by_id(bounty_id)

    def create_bounty(self, bounty: Bounty) -> None:
        """Assign a fresh id to the bounty and store it."""
        bounty.id = str(uuid.uuid4())
        self._repository.create_bounty(bounty)

    def update_bounty(self, bounty: Bounty) -> None:
        self._repository.update_bounty(bounty)