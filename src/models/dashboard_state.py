"""View state held by the admin dashboard.

The registration list and the webinar settings are tracked separately. Each
container is written only by its own service module, so a completion on one
track never touches the other.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from src.models.registration import Registration


@dataclass
class RegistrationListState:
    """Registration list track: Loading -> Loaded."""

    registrations: List[Registration] = field(default_factory=list)
    is_loading: bool = False
    last_error: Optional[str] = None

    def start_loading(self) -> None:
        """Enter Loading. The held list stays in place until a result arrives."""
        self.is_loading = True

    def load_succeeded(self, registrations: List[Registration]) -> None:
        """Replace the held list with a fresh result (possibly empty)."""
        self.registrations = list(registrations)
        self.last_error = None
        self.is_loading = False

    def load_failed(self, message: str) -> None:
        """Keep the previously held list and record the failure."""
        self.last_error = message
        self.is_loading = False

    @property
    def is_empty(self) -> bool:
        return not self.registrations


@dataclass
class WebinarSettingsState:
    """Settings track: the editable local date value and the save flag."""

    webinar_date: str = ""  # YYYY-MM-DDTHH:MM in the viewer's timezone
    is_saving: bool = False
