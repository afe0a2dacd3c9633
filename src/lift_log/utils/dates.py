"""Date parsing and display helpers."""

from datetime import date, datetime, time, timedelta


def parse_timestamp(value: str | datetime) -> datetime:
    """Parse a stored timestamp into a naive local datetime.

    Accepts ISO-8601 strings, including the ``Z`` suffixed UTC form that
    browsers write for ``Date`` objects. Aware values are converted to local
    time so they compare cleanly with ``datetime.now()``.

    Raises:
        TypeError: If the value is neither a string nor a datetime
        ValueError: If the string is not a recognizable timestamp
    """
    if isinstance(value, datetime):
        parsed = value
    elif not isinstance(value, str):
        raise TypeError(f"Expected an ISO timestamp, got {type(value).__name__}")
    else:
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def subtract_month(moment: datetime) -> datetime:
    """Step back one calendar month, rolling day overflow forward.

    March 31 becomes "February 31", which normalizes to March 3
    (or March 2 in a leap year).
    """
    year, month = moment.year, moment.month - 1
    if month == 0:
        year, month = year - 1, 12
    first = moment.replace(year=year, month=month, day=1)
    return first + timedelta(days=moment.day - 1)


def start_of_day(value: date | datetime) -> datetime:
    """Midnight at the start of the given day; datetimes pass through."""
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def end_of_day(value: date | datetime) -> datetime:
    """Last representable instant of the given day; datetimes pass through."""
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.max)


def format_datetime(value: datetime | str) -> str:
    """Format as ``YYYY-MM-DD HH:MM``."""
    return parse_timestamp(value).strftime("%Y-%m-%d %H:%M")


def format_date_only(value: datetime | str) -> str:
    """Format as ``YYYY-MM-DD``."""
    return parse_timestamp(value).strftime("%Y-%m-%d")


def format_time_only(value: datetime | str) -> str:
    """Format as ``HH:MM``."""
    return parse_timestamp(value).strftime("%H:%M")
