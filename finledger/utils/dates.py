import datetime as dt
from typing import Optional, Union


def utcnow() -> dt.datetime:
    """Timezone-aware UTC now, the way timestamps are stored."""
    return dt.datetime.now(dt.timezone.utc)


def normalize_dt(value: Optional[Union[dt.date, dt.datetime, str]]) -> dt.datetime:
    """Coerce a date, datetime or ISO string to an aware UTC datetime."""
    if value is None:
        return utcnow()

    if isinstance(value, dt.datetime):
        # naive values are taken as UTC already
        if value.tzinfo is None:
            return value.replace(tzinfo=dt.timezone.utc)
        return value.astimezone(dt.timezone.utc)

    if isinstance(value, dt.date):
        # bare dates land at noon so a timezone shift cannot change the day
        return dt.datetime.combine(value, dt.time(12, 0, 0), tzinfo=dt.timezone.utc)

    if isinstance(value, str):
        # ISO 8601 with a trailing Z or an explicit offset
        s = value.replace("Z", "+00:00")
        try:
            parsed = dt.datetime.fromisoformat(s)
        except ValueError:
            parsed = dt.datetime.strptime(value, "%Y-%m-%d")
        return normalize_dt(parsed)

    raise TypeError(f"Unsupported type for date: {type(value)!r}")
