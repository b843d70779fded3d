"""Normalize raw news-search records into article records."""

import logging
import re
from typing import Any, Optional

from common.utils import get_value

logger = logging.getLogger(__name__)

REMOVED_PLACEHOLDER = "[Removed]"
OUTLET_SUFFIX_SEPARATOR = " - "


def clean_text(text: Optional[str]) -> Optional[str]:
    """Clean text by stripping HTML, fixing escapes, and collapsing whitespace."""
    if not text:
        return None
    # Strip HTML tags (keep text content)
    text = re.sub(r"<[^>]+>", " ", text)
    text = text.replace('\\"', '"')
    text = re.sub(r"\s+", " ", text).strip()
    return text if text else None


def source_name(raw: Any) -> Optional[str]:
    """Outlet name from a record whose source is a string or a {"name": ...} object."""
    source = get_value(raw, "source")
    if isinstance(source, dict):
        source = source.get("name")
    if not source:
        return None
    return str(source).strip() or None


def strip_outlet_suffix(title: str) -> str:
    """Drop a trailing " - Outlet" from a headline."""
    head = title.split(OUTLET_SUFFIX_SEPARATOR, 1)[0].strip()
    return head or title


def normalize_articles(raw_articles: list[Any]) -> list[dict[str, Any]]:
    """
    Turn provider records into article records ready for classification.

    Records without a url, title or source name, and placeholder records for
    removed content, are dropped. Duplicate URLs are collapsed before that
    filtering: the last record for a URL wins, at the position of the first.
    """
    if not raw_articles:
        logger.warning("No articles to normalize")
        return []

    logger.info("Normalizing %d articles", len(raw_articles))

    by_url: dict[Any, Any] = {}
    for raw in raw_articles:
        by_url[get_value(raw, "url")] = raw
    if len(by_url) < len(raw_articles):
        logger.debug("Collapsed %d duplicate urls", len(raw_articles) - len(by_url))

    results = []
    for url, raw in by_url.items():
        title = clean_text(get_value(raw, "title"))
        source = source_name(raw)

        if not url or not title or not source or title == REMOVED_PLACEHOLDER:
            logger.warning("Skipping incomplete article: url=%s, source=%s, title=%s", url, source, title)
            continue

        results.append(
            {
                "url": url,
                "title": strip_outlet_suffix(title),
                "source": source,
                "publishedAt": get_value(raw, "publishedAt"),
                "description": clean_text(get_value(raw, "description")),
                "urlToImage": get_value(raw, "urlToImage"),
            }
        )

    logger.info("Normalized %d articles (%d dropped)", len(results), len(raw_articles) - len(results))
    return results
