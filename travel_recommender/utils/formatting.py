"""
Display helpers for timeline entries.
"""

from datetime import datetime
from typing import Optional

TIMESTAMP_FORMAT = "%d/%m/%Y, %H:%M:%S"


def capitalize(text: str) -> str:
    """
    Uppercase the first character, leave the rest untouched.

    Unlike ``str.capitalize`` the remainder is not lowercased, so
    "new York" becomes "New York". An empty string is returned as is.
    """
    if not text:
        return text
    return text[0].upper() + text[1:]


def format_timestamp(created_at: Optional[datetime], now: Optional[datetime] = None) -> str:
    """
    Render a record's creation time as a local date/time string.

    Records whose timestamp has not been assigned yet (the insert is still
    propagating) show the current time instead.

    Args:
        created_at: Store-assigned creation time, or None
        now: Override for the fallback time (tests)

    Returns:
        str: e.g. "17/10/2026, 14:05:09"
    """
    if created_at is None:
        created_at = now or datetime.now()

    # Naive datetimes are taken as already local
    if created_at.tzinfo is not None:
        created_at = created_at.astimezone()

    return created_at.strftime(TIMESTAMP_FORMAT)
