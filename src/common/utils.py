"""Common utility functions."""

from typing import Any
from urllib.parse import urlparse


def get_value(obj: Any, key: str) -> Any:
    """Get value from dict or object attribute."""
    if isinstance(obj, dict):
        return obj.get(key)
    return getattr(obj, key, None)


def get_hostname(url: str | None) -> str:
    """Return the lower-cased host name of a URL, or "" if it has none."""
    if not url:
        return ""
    try:
        return (urlparse(url).hostname or "").lower()
    except ValueError:
        return ""
