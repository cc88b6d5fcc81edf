"""Webinar settings service: read and save the singleton settings row."""
import logging
from datetime import tzinfo
from typing import Optional, Tuple

import httpx
from postgrest.exceptions import APIError

from src.models.dashboard_state import WebinarSettingsState
from src.models.webinar_settings import WebinarSettings
from src.services.supabase_client import SETTINGS_TABLE, get_client
from src.utils.date_utils import from_local_input, to_local_input, utc_now_iso
from src.utils.exceptions import BackendError, ConcurrentUpdateError
from src.utils.validation import validate_webinar_date

logger = logging.getLogger(__name__)


def fetch_webinar_settings() -> Optional[WebinarSettings]:
    """
    Read the singleton settings row.

    Returns:
        WebinarSettings, or None if the table is empty

    Raises:
        BackendError: If the query fails
    """
    try:
        response = (
            get_client()
            .table(SETTINGS_TABLE)
            .select("*")
            .limit(1)
            .execute()
        )
    except APIError as e:
        raise BackendError(e.message or str(e)) from e
    except httpx.HTTPError as e:
        raise BackendError(str(e)) from e

    rows = response.data or []
    if not rows:
        return None
    return WebinarSettings.from_row(rows[0])


def load_webinar_settings(state: WebinarSettingsState, tz: tzinfo) -> None:
    """
    Initialise the editable date from the stored settings row.

    Behavior:
        - Stored instant is shown on the viewer's wall clock, minute precision
        - No row, no date or a failed read leaves the editable value untouched
        - Failures are logged only
    """
    try:
        settings = fetch_webinar_settings()
    except BackendError as e:
        logger.error("Error fetching webinar settings: %s", e.message)
        return

    if settings is None or not settings.next_webinar_date:
        return

    try:
        state.webinar_date = to_local_input(settings.next_webinar_date, tz)
    except ValueError:
        logger.error("Stored webinar date is malformed: %r", settings.next_webinar_date)


def _update_settings(existing: WebinarSettings, payload: dict) -> None:
    """Update the row by id, guarded by the updated_at value read just before."""
    query = get_client().table(SETTINGS_TABLE).update(payload).eq("id", existing.id)
    if existing.updated_at is None:
        query = query.is_("updated_at", "null")
    else:
        query = query.eq("updated_at", existing.updated_at)

    response = query.execute()
    if not response.data:
        raise ConcurrentUpdateError(
            "Settings were changed by another session, reload and try again"
        )


def _insert_settings(payload: dict) -> None:
    get_client().table(SETTINGS_TABLE).insert(payload).execute()


def save_webinar_date(state: WebinarSettingsState, tz: tzinfo) -> Tuple[bool, str]:
    """
    Persist the editable next-webinar date.

    Args:
        state: Settings track; its editable value is never modified here
        tz: Viewer timezone the editable value is expressed in

    Returns:
        Tuple of (success: bool, message: str)
        - (False, validation message) with no network call if the value is empty
        - (True, "Webinar date updated successfully!") on success
        - (False, "Failed to save webinar date: <reason>") on backend failure

    Behavior:
        - Re-reads the singleton row, then updates it by id or inserts one
        - The read and the write are not isolated; a concurrent insert from
          another session can still create a second row
    """
    is_valid, error_msg = validate_webinar_date(state.webinar_date)
    if not is_valid:
        return False, error_msg

    state.is_saving = True
    try:
        payload = {
            "next_webinar_date": from_local_input(state.webinar_date, tz),
            "updated_at": utc_now_iso(),
        }

        existing = fetch_webinar_settings()
        if existing is not None:
            logger.info("Updating webinar settings row %s", existing.id)
            _update_settings(existing, payload)
        else:
            logger.info("Inserting webinar settings row")
            _insert_settings(payload)

        return True, "Webinar date updated successfully!"

    except BackendError as e:
        logger.error("Error saving webinar date: %s", e.message)
        return False, f"Failed to save webinar date: {e.message}"
    except APIError as e:
        logger.error("Error saving webinar date: %s", e.message)
        return False, f"Failed to save webinar date: {e.message or e}"
    except httpx.HTTPError as e:
        logger.error("Error saving webinar date: %s", e)
        return False, f"Failed to save webinar date: {e}"
    finally:
        state.is_saving = False
