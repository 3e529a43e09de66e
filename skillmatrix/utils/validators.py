from datetime import datetime, date, timezone


def utcnow() -> datetime:
    """Naive UTC timestamp, the form every DateTime column is stored in."""
    return datetime.now(tz=timezone.utc).replace(tzinfo=None)


def blank_to_none(value):
    # Forms post "" for untouched optional inputs
    if isinstance(value, str) and not value.strip():
        return None
    return value


def parse_date(value) -> date | None:
    """
    Accepts 'YYYY-MM-DD' or a full ISO 8601 timestamp
    ('YYYY-MM-DDTHH:MM:SS.sssZ' or with offset '+00:00') and keeps the date part.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    txt = str(value).strip()
    if not txt:
        return None
    # Normalize Z suffix to +00:00 for fromisoformat
    if txt.endswith("Z"):
        txt = txt[:-1] + "+00:00"

    try:
        return datetime.fromisoformat(txt).date()
    except ValueError as e:
        raise ValueError(f"Invalid date: {value}") from e


def to_naive_utc(value: datetime | None) -> datetime | None:
    # Offset-aware input is shifted to UTC before the offset is dropped
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value
