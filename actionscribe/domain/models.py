"""Domain data models — pure Python dataclasses."""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from actionscribe.domain.errors import InvalidAction


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Action:
    """A single to-do item owned by one user."""

    id: str
    text: str
    timestamp: datetime
    owner_id: str
    completed: bool = False

    @classmethod
    def new(cls, owner_id: str, text: str, now: Optional[datetime] = None) -> "Action":
        """Build a fresh, incomplete action with a generated id."""
        text = (text or "").strip()
        if not text:
            raise InvalidAction("Action text must not be empty")
        return cls(
            id=uuid.uuid4().hex,
            text=text,
            timestamp=now or utcnow(),
            owner_id=owner_id,
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON shape exposed over HTTP (owner is never serialized)."""
        return {
            "id": self.id,
            "text": self.text,
            "timestamp": self.timestamp.isoformat(),
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], owner_id: str = "") -> "Action":
        return cls(
            id=data["id"],
            text=data["text"],
            timestamp=datetime.fromisoformat(data["timestamp"]),
            owner_id=owner_id,
            completed=bool(data.get("completed", False)),
        )
