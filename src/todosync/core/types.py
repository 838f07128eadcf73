"""Shared types for todosync.

This module defines the todo record exchanged between the store, the
HTTP client and the collection server.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class Environment(str, Enum):
    """Deployment environment used to select a transport."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing 'Z' for UTC."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


@dataclass
class Todo:
    """A single todo record.

    Wire keys are camelCase (``timeCreated``, ``isComplete``) to stay
    compatible with the remote collection protocol.

    Attributes:
        text: User content. Not required to be non-empty.
        time_created: Creation time, set by the caller.
        id: Identifier assigned by the remote collection. ``None`` until
            the record has been created remotely.
        is_complete: Completion flag. ``None`` until explicitly set.
    """

    text: str
    time_created: datetime
    id: str | None = None
    is_complete: bool | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Todo:
        """Create from API response dictionary."""
        time_created = data["timeCreated"]
        if isinstance(time_created, str):
            time_created = parse_timestamp(time_created)
        return cls(
            id=data.get("id"),
            text=data["text"],
            time_created=time_created,
            is_complete=data.get("isComplete"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict using wire keys."""
        data: dict[str, Any] = {
            "text": self.text,
            "timeCreated": self.time_created.isoformat(),
        }
        if self.id is not None:
            data["id"] = self.id
        if self.is_complete is not None:
            data["isComplete"] = self.is_complete
        return data
