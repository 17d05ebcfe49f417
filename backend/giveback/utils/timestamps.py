from datetime import datetime, timezone

# Microsecond precision keeps creation order stable for rows inserted in the
# same second; the fixed-width format sorts lexicographically.
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def utc_now() -> str:
    return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value: str) -> datetime:
    return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)


_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return f"{day}th"
    return f"{day}{_SUFFIXES.get(day % 10, 'th')}"


def humanize(value: str) -> str:
    """Format a stored timestamp as e.g. "October 19th 2026, 3:04:05 pm"."""
    dt = parse_timestamp(value)
    hour = dt.hour % 12 or 12
    meridiem = "am" if dt.hour < 12 else "pm"
    return f"{dt:%B} {_ordinal(dt.day)} {dt.year}, {hour}:{dt:%M:%S} {meridiem}"
