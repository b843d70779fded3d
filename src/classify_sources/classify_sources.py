"""Assign political leanings to outlets and articles."""

import logging
import re
from typing import Any

from classify_sources.models import Article, Leaning
from classify_sources.sources import (
    CENTER_FRAGMENTS,
    LEFT_FRAGMENTS,
    RIGHT_FRAGMENTS,
    SOURCE_LEANINGS,
)

logger = logging.getLogger(__name__)

DEFAULT_LEANING: Leaning = "center"


def _word_pattern(fragments: tuple[str, ...]) -> re.Pattern:
    return re.compile(r"\b(?:" + "|".join(re.escape(f) for f in fragments) + r")\b")


_FRAGMENT_RULES: tuple[tuple[re.Pattern, Leaning], ...] = (
    (_word_pattern(RIGHT_FRAGMENTS), "right"),
    (_word_pattern(LEFT_FRAGMENTS), "left"),
    (_word_pattern(CENTER_FRAGMENTS), "center"),
)


def classify_source(source_name: str) -> Leaning:
    """
    Return the leaning of an outlet from its display name.

    Exact matches against the curated table win. Otherwise the lower-cased
    name is searched for known outlet words (right, then left, then
    center), matched at word edges, falling back to "center".
    """
    name = source_name.strip()
    leaning = SOURCE_LEANINGS.get(name)
    if leaning is not None:
        return leaning

    lower = name.lower()
    for pattern, fragment_leaning in _FRAGMENT_RULES:
        if pattern.search(lower):
            return fragment_leaning

    return DEFAULT_LEANING


def classify_article(raw: dict[str, Any]) -> Article:
    """Build a classified Article from a raw article record.

    Raises:
        KeyError: If url, title, source or publishedAt is missing.
    """
    source = raw["source"]
    return Article(
        url=raw["url"],
        title=raw["title"],
        source=source,
        published_at=raw["publishedAt"],
        description=raw.get("description"),
        image_url=raw.get("urlToImage"),
        leaning=classify_source(source),
    )


def classify_articles(raw_articles: list[dict[str, Any]]) -> list[Article]:
    """Classify raw article records by the leaning of their source."""
    if not raw_articles:
        logger.warning("No articles to classify")
        return []

    articles = [classify_article(raw) for raw in raw_articles]

    unknown = sorted({a.source for a in articles if a.source.strip() not in SOURCE_LEANINGS})
    if unknown:
        logger.info("Sources resolved by fallback: %s", ", ".join(unknown))

    logger.info("Classified %d articles", len(articles))
    return articles
