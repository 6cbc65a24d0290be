"""Conversions between domain bounties and database rows."""

from __future__ import annotations

import uuid

from bountysvc.db import CreateBountyParams, DbBounty, UpdateBountyParams
from bountysvc.model import Bounty


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range, as the column type does."""
    return (value + 2**31) % 2**32 - 2**31


def to_domain(db_bounty: DbBounty) -> Bounty:
    """Convert a database row into a domain bounty."""
    return Bounty(
        id=str(db_bounty.id),
        title=db_bounty.title,
        description=db_bounty.description or "",
        points=int(db_bounty.points),
    )


def to_db_params(bounty: Bounty) -> CreateBountyParams:
    """Build insert arguments; raise ValueError when the id is not a UUID."""
    return CreateBountyParams(
        id=uuid.UUID(bounty.id),
        title=bounty.title,
        description=bounty.description or None,
        points=_to_int32(bounty.points),
    )


def to_db_update_params(bounty: Bounty) -> UpdateBountyParams:
    """Build update arguments; raise ValueError when the id is not a UUID."""
    return UpdateBountyParams(
        title=bounty.title,
        description=bounty.description or None,
        points=_to_int32(bounty.points),
        id=uuid.UUID(bounty.id),
    )