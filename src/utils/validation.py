"""Data validation utilities."""
from datetime import datetime
from typing import Tuple

from src.utils.date_utils import LOCAL_INPUT_FORMAT


def validate_webinar_date(value: str) -> Tuple[bool, str]:
    """
    Validate the editable next-webinar value before saving.

    Args:
        value: Local date/time in YYYY-MM-DDTHH:MM format

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "Please select a date and time") if empty
        - (False, "Invalid date/time format") if unparsable
    """
    if not value or not value.strip():
        return False, "Please select a date and time"

    try:
        datetime.strptime(value.strip(), LOCAL_INPUT_FORMAT)
    except ValueError:
        return False, "Invalid date/time format"

    return True, ""


def validate_credentials(username: str, password: str) -> Tuple[bool, str]:
    """
    Check that both login fields were filled in.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
    """
    if not username or not username.strip() or not password:
        return False, "Please enter username and password"
    return True, ""
