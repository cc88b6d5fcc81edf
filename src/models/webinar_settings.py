"""Webinar settings data model."""
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class WebinarSettings:
    """The singleton `webinar_settings` row."""

    id: str
    next_webinar_date: Optional[str] = None  # ISO 8601 instant
    updated_at: Optional[str] = None

    def __post_init__(self):
        """Validate settings data."""
        if self.id is None or not str(self.id).strip():
            raise ValueError("Settings ID cannot be empty")

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "WebinarSettings":
        """Build settings from a table row."""
        return cls(
            id=str(row.get("id") or ""),
            next_webinar_date=row.get("next_webinar_date") or None,
            updated_at=row.get("updated_at") or None,
        )
