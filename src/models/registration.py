"""Registration data model for webinar sign-ups."""
from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class Registration:
    """Parent who registered for a webinar."""

    id: str
    parent_name: str
    whatsapp: str
    email: str
    location: str
    registered_at: str  # ISO 8601 format, assigned by the backend

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Registration":
        """
        Build a registration from a `registrations` table row.

        Values are kept verbatim; missing columns become empty strings.
        """
        def text(key: str) -> str:
            value = row.get(key)
            return "" if value is None else str(value)

        return cls(
            id=text("id"),
            parent_name=text("parent_name"),
            whatsapp=text("whatsapp"),
            email=text("email"),
            location=text("location"),
            registered_at=text("registered_at"),
        )

    def as_export_row(self) -> List[str]:
        """Fields in export column order."""
        return [
            self.id,
            self.parent_name,
            self.whatsapp,
            self.email,
            self.location,
            self.registered_at,
        ]
