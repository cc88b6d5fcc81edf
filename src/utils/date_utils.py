"""Date and time utility functions."""
import logging
from datetime import date, datetime, time, timezone, tzinfo
from typing import Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

LOCAL_INPUT_FORMAT = "%Y-%m-%dT%H:%M"


def parse_instant(value: str) -> datetime:
    """
    Parse an ISO 8601 timestamp into an aware datetime.

    Args:
        value: Timestamp such as "2025-03-01T10:00:00.000Z" or
            "2025-03-01T10:00:00+00:00". Naive values are read as UTC.

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If the timestamp format is invalid
    """
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except (ValueError, AttributeError) as e:
        raise ValueError(f"Invalid timestamp format: {value}") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_instant(moment: datetime) -> str:
    """Format an aware datetime as a UTC instant with millisecond precision."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    """Current time as a UTC instant string."""
    return format_instant(datetime.now(timezone.utc))


def to_local_input(value: str, tz: tzinfo) -> str:
    """
    Convert a stored instant to the viewer's wall clock at minute precision.

    Args:
        value: ISO 8601 instant
        tz: Viewer timezone

    Returns:
        "YYYY-MM-DDTHH:MM" string

    Example:
        "2025-03-01T10:00:00.000Z" in UTC+05:30 -> "2025-03-01T15:30"
    """
    return parse_instant(value).astimezone(tz).strftime(LOCAL_INPUT_FORMAT)


def from_local_input(value: str, tz: tzinfo) -> str:
    """
    Convert a viewer wall-clock value back to a UTC instant string.

    Raises:
        ValueError: If value is not in YYYY-MM-DDTHH:MM format
    """
    try:
        local = datetime.strptime(value.strip(), LOCAL_INPUT_FORMAT)
    except (ValueError, AttributeError) as e:
        raise ValueError(f"Invalid date/time: {value}") from e
    return format_instant(local.replace(tzinfo=tz))


def split_local_input(value: str) -> Tuple[Optional[date], Optional[time]]:
    """Split a local input value into (date, time) for the picker widgets."""
    if not value:
        return None, None
    local = datetime.strptime(value, LOCAL_INPUT_FORMAT)
    return local.date(), local.time()


def join_local_input(day: Optional[date], moment: Optional[time]) -> str:
    """Join picker values into a local input value; empty if either is unset."""
    if day is None or moment is None:
        return ""
    return datetime.combine(day, moment).strftime(LOCAL_INPUT_FORMAT)


def _meridiem(moment: datetime) -> str:
    return "am" if moment.hour < 12 else "pm"


def format_registered_at(value: str, tz: tzinfo) -> str:
    """Short display form, e.g. "1 Mar 2025, 03:30 pm". Unparsable values pass through."""
    try:
        local = parse_instant(value).astimezone(tz)
    except ValueError:
        return value
    return f"{local.day} {local:%b %Y, %I:%M} {_meridiem(local)}"


def format_local_input(value: str) -> str:
    """Long display form of a local input value, e.g. "1 March 2025, 03:30 pm"."""
    local = datetime.strptime(value, LOCAL_INPUT_FORMAT)
    return f"{local.day} {local:%B %Y, %I:%M} {_meridiem(local)}"


def export_date_stamp(now: Optional[datetime] = None) -> str:
    """UTC calendar date (YYYY-MM-DD) used in export filenames."""
    moment = now or datetime.now(timezone.utc)
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%d")


def resolve_timezone(*names: Optional[str]) -> tzinfo:
    """
    Pick the viewer timezone from candidate IANA names.

    Args:
        names: Candidates in priority order (configured override, browser
            timezone). Empty or unknown names are skipped.

    Returns:
        The first valid zone, else the server's local timezone
    """
    for name in names:
        if not name:
            continue
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown timezone %r, ignoring", name)

    return datetime.now().astimezone().tzinfo
