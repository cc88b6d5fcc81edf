"""Registration service for reading webinar registrations."""
import logging
from typing import Callable, List

import httpx
from postgrest.exceptions import APIError

from src.models.dashboard_state import RegistrationListState
from src.models.registration import Registration
from src.services.supabase_client import REGISTRATIONS_TABLE, get_client
from src.utils.exceptions import BackendError

logger = logging.getLogger(__name__)

Notify = Callable[[str, str], None]


def fetch_registrations() -> List[Registration]:
    """
    Read every registration, newest first.

    Returns:
        List[Registration]: ordered by registered_at descending

    Raises:
        BackendError: If the query fails
    """
    logger.info("Fetching registrations from Supabase")
    try:
        response = (
            get_client()
            .table(REGISTRATIONS_TABLE)
            .select("*")
            .order("registered_at", desc=True)
            .execute()
        )
    except APIError as e:
        raise BackendError(e.message or str(e)) from e
    except httpx.HTTPError as e:
        raise BackendError(str(e)) from e

    rows = response.data or []
    logger.info("Fetched %d registrations", len(rows))
    return [Registration.from_row(row) for row in rows]


def begin_refresh(state: RegistrationListState) -> None:
    """Mark the list track as loading."""
    state.start_loading()


def complete_refresh(state: RegistrationListState, fetch: Callable[[], List[Registration]], notify: Notify) -> None:
    """
    Run one fetch and apply its outcome to the list track.

    Behavior:
        - Success replaces the held list; an empty result emits an info notice
        - Failure keeps the held list and emits an error notice
        - Whichever completion is applied last determines the held list
    """
    try:
        registrations = fetch()
    except BackendError as e:
        logger.error("Error fetching registrations: %s", e.message)
        state.load_failed(e.message)
        notify("error", f"Failed to fetch registrations: {e.message}")
        return

    state.load_succeeded(registrations)
    if not registrations:
        notify("info", "No registrations found in database")


def refresh_registrations(state: RegistrationListState, notify: Notify) -> None:
    """Reload the registration list (activation and Refresh)."""
    begin_refresh(state)
    complete_refresh(state, fetch_registrations, notify)
