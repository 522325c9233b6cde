# taskboard/utils/dates.py
"""
Conversions between persisted Unix timestamps and API-facing ISO-8601 strings.
"""

import time
from datetime import date, datetime, timezone
from typing import Optional, Union

Timestamp = Union[int, float, datetime]


def unix_now() -> int:
    """Current time as whole Unix seconds"""
    return int(time.time())


def parse_iso_datetime(value: Union[str, datetime, date]) -> datetime:
    """Parse an ISO-8601 date or datetime, assuming UTC when no offset is given.

    Raises ValueError for anything that is not a valid date.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("empty date string")
        # fromisoformat only learned the trailing "Z" in Python 3.11
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    else:
        raise ValueError(f"unsupported date value: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def to_unix(value: Optional[Timestamp]) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp())
    return int(value)


def to_iso(value: Optional[Timestamp]) -> Optional[str]:
    """Format a Unix timestamp (or datetime) as e.g. 2025-05-01T12:00:00.000Z"""
    if value is None:
        return None
    if isinstance(value, datetime):
        moment = value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    else:
        moment = datetime.fromtimestamp(value, tz=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
