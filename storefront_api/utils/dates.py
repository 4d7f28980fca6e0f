from datetime import datetime, timezone
from dateutil import parser as date_parser


def parse_timestamp(value) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return as_utc(value)
    try:
        return as_utc(date_parser.parse(str(value)))
    except (ValueError, OverflowError):
        return None


def as_utc(value: datetime) -> datetime:
    # SQLite hands back naive timestamps; the store writes UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
