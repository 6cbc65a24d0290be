"""Domain model for bounties."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

_FIELD_TYPES = {"id": str, "title": str, "description": str, "points": int}


@dataclass
class Bounty:
    """A bug bounty as exposed by the API."""

    id: str = ""
    title: str = ""
    description: str = ""
    points: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation of the bounty."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> Bounty:
        """Build a bounty from decoded JSON; missing or null members keep their defaults."""
        if not isinstance(data, dict):
            raise ValueError("bounty must be a JSON object")
        folded = {str(key).lower(): value for key, value in data.items()}
        values = {}
        for name, kind in _FIELD_TYPES.items():
            value = data[name] if name in data else folded.get(name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, kind):
                raise ValueError(f"field {name!r} must be of type {kind.__name__}")
            values[name] = value
        return cls(**values)