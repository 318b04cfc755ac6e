"""Shared Pydantic field validators."""

import datetime


def reject_null(v):
    """Reject an explicit JSON null for a field that may only be omitted."""
    if v is None:
        raise ValueError("may be omitted but not null")
    return v


def as_utc(v: datetime.datetime) -> datetime.datetime:
    """Attach UTC to naive timestamps (stored as UTC) and convert aware ones to UTC."""
    if v.tzinfo is None:
        return v.replace(tzinfo=datetime.timezone.utc)
    return v.astimezone(datetime.timezone.utc)
