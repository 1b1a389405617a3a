# trmnl_nfl/utils/time_utils.py
from datetime import datetime, timedelta, timezone
from typing import Optional

# ESPN times are shown at a fixed UTC-4 offset and always labelled "EST",
# regardless of daylight saving.
EASTERN_OFFSET = timezone(timedelta(hours=-4))
DISPLAY_FORMAT = "%A, %B %d, %Y at %I:%M %p EST"


def parse_timestamp(value: Optional[str]) -> datetime:
    """Parses an ESPN ISO-8601 timestamp (e.g. "2024-09-08T17:00Z") into an aware UTC datetime.

    Raises ValueError for missing or malformed input.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"missing timestamp: {value!r}")
    raw = value.strip()
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    dt = datetime.fromisoformat(raw)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_eastern(dt: datetime) -> str:
    """Renders a datetime like "Sunday, September 08, 2024 at 01:00 PM EST"."""
    return dt.astimezone(EASTERN_OFFSET).strftime(DISPLAY_FORMAT)
