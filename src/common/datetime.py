"""Datetime utilities."""

from datetime import datetime, timezone


def parse_published_at(value) -> datetime | None:
    """Parse a publication timestamp from an ISO string or datetime.

    Naive values are taken to be UTC. Returns None when the value is missing
    or can't be parsed.
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except (TypeError, ValueError, AttributeError):
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
