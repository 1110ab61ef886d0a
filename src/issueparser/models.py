from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Issue:
    """One record extracted from a pasted issue listing.

    Only ``id`` is required. String fields default to empty, ``assigned_to``
    stays ``None`` unless an "Assigned to" line was seen inside the block.
    """

    id: int
    title: str = ""
    created_by: str = ""
    created_at: str = ""
    updated_at: str = ""
    type: str = ""
    status: str = ""
    assigned_to: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "createdBy": self.created_by,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "type": self.type,
            "status": self.status,
        }
        if self.assigned_to is not None:
            data["assignedTo"] = self.assigned_to
        return data


__all__ = ["Issue"]
