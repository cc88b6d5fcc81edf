"""CSV export of the held registration list."""
import csv
import io
from datetime import datetime
from typing import Iterable, Optional

from src.models.registration import Registration
from src.utils.date_utils import export_date_stamp

EXPORT_HEADERS = ["ID", "Parent Name", "WhatsApp", "Email", "Location", "Registered At"]
EXPORT_PREFIX = "brainlit-registrations"
EXPORT_MIME = "text/csv"


def build_csv(registrations: Iterable[Registration]) -> str:
    """
    Serialize registrations to CSV text.

    The header line is unquoted; every data field is double-quoted. Lines are
    joined with "\\n" and there is no trailing newline, so an empty list
    yields the header line alone. Quote characters inside a field are doubled
    (`a"b` becomes `"a""b"`) so the file stays parseable; fields without
    quotes are written verbatim.
    """
    lines = [",".join(EXPORT_HEADERS)]
    for registration in registrations:
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="")
        writer.writerow(registration.as_export_row())
        lines.append(buffer.getvalue())
    return "\n".join(lines)


def export_filename(now: Optional[datetime] = None) -> str:
    """Download name, e.g. brainlit-registrations-2025-03-01.csv."""
    return f"{EXPORT_PREFIX}-{export_date_stamp(now)}.csv"


def export_bytes(registrations: Iterable[Registration]) -> bytes:
    """UTF-8 encoded CSV document."""
    return build_csv(registrations).encode("utf-8")
