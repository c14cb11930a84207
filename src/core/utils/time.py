"""Timestamp helpers.

Asset records are ordered by their ``date`` string, so every timestamp
must be UTC with a fixed offset suffix to keep string order equal to
chronological order.
"""

from datetime import datetime, timezone


def utc_now_iso() -> str:
    """Return the current UTC time as ISO-8601, e.g. ``2024-01-15T10:42:31.123456+00:00``."""
    return datetime.now(timezone.utc).isoformat()
