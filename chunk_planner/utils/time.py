"""Time utilities for timestamps. All datetimes in UTC."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return current UTC datetime. Used for Document.created_at."""
    return datetime.now(timezone.utc)
