"""Group classified articles into story clusters.

Articles are scanned newest first and each one joins the first existing
cluster (in creation order) whose anchor is within the time window and whose
main headline matches, either on headline similarity alone or on a lower
similarity backed by a shared entity. Otherwise it starts a new cluster. The
scan order decides the outcome, so it must not change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from uuid import uuid4

from classify_sources.models import Article
from cluster_stories.config import ClusterConfig, get_config
from cluster_stories.models import StoryCluster, empty_distribution
from cluster_stories.text import extract_entities, jaccard, title_tokens
from common.datetime import parse_published_at
from common.utils import get_hostname

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Entry:
    article: Article
    published_at: datetime | None
    tokens: frozenset[str]
    entities: frozenset[str]


@dataclass
class _OpenCluster:
    """A cluster under construction plus its main headline's match signals."""
    cluster: StoryCluster
    anchor: datetime | None
    main_url: str
    tokens: frozenset[str]
    entities: frozenset[str]


def is_national_url(url: str | None, suffixes: list[str]) -> bool:
    """Whether the URL's host falls under one of the national domain suffixes."""
    host = get_hostname(url)
    if not host:
        return False
    for suffix in suffixes:
        suffix = suffix.lower().lstrip(".")
        if suffix and (host == suffix or host.endswith("." + suffix)):
            return True
    return False


def _to_entry(article: Article) -> _Entry:
    published_at = parse_published_at(article.published_at)
    if published_at is None:
        logger.warning(
            "Unparseable publish time %r for %s; it will not be grouped",
            article.published_at,
            article.url,
        )
    return _Entry(
        article=article,
        published_at=published_at,
        tokens=title_tokens(article.title),
        entities=extract_entities(article.title),
    )


def _scan_order(articles: list[Article]) -> list[_Entry]:
    """Newest first; articles without a usable timestamp go last, in input order."""
    entries = [_to_entry(article) for article in articles]
    dated = [e for e in entries if e.published_at is not None]
    undated = [e for e in entries if e.published_at is None]
    dated.sort(key=lambda e: e.published_at, reverse=True)
    return dated + undated


def _within_window(entry: _Entry, open_cluster: _OpenCluster, window: timedelta) -> bool:
    if entry.published_at is None or open_cluster.anchor is None:
        return False
    return abs(entry.published_at - open_cluster.anchor) < window


def _matches(entry: _Entry, open_cluster: _OpenCluster, config: ClusterConfig) -> bool:
    similarity = jaccard(entry.tokens, open_cluster.tokens)
    if similarity > config.similarity_threshold:
        return True
    if similarity > config.entity_similarity_threshold:
        shared = entry.entities & open_cluster.entities
        return len(shared) >= config.min_entity_overlap
    return False


def _summary_for(article: Article) -> str:
    return article.description or article.title


def _start_cluster(entry: _Entry) -> _OpenCluster:
    article = entry.article
    distribution = empty_distribution()
    distribution[article.leaning] = 1
    cluster = StoryCluster(
        id=uuid4().hex,
        main_title=article.title,
        summary=_summary_for(article),
        items=[article],
        first_published_at=article.published_at,
        bias_distribution=distribution,
    )
    return _OpenCluster(
        cluster=cluster,
        anchor=entry.published_at,
        main_url=article.url,
        tokens=entry.tokens,
        entities=entry.entities,
    )


def _attach(entry: _Entry, open_cluster: _OpenCluster, config: ClusterConfig) -> None:
    article = entry.article
    cluster = open_cluster.cluster
    cluster.items.append(article)
    cluster.bias_distribution[article.leaning] += 1

    suffixes = config.national_domain_suffixes
    if not is_national_url(open_cluster.main_url, suffixes) and is_national_url(article.url, suffixes):
        logger.debug("Promoting national headline %r in cluster %s", article.title, cluster.id)
        cluster.main_title = article.title
        cluster.summary = _summary_for(article)
        open_cluster.main_url = article.url
        open_cluster.tokens = entry.tokens
        open_cluster.entities = entry.entities


def cluster_articles(
    articles: list[Article],
    config: ClusterConfig | None = None,
) -> list[StoryCluster]:
    """
    Group articles about the same event into story clusters.

    Args:
        articles: Classified articles.
        config: Clustering thresholds (default: the loaded config).

    Returns:
        Clusters in creation order. Every article belongs to exactly one.
    """
    if not articles:
        logger.warning("No articles to cluster")
        return []

    config = config or get_config()
    window = timedelta(hours=config.time_window_hours)

    logger.info(
        "Clustering %d articles (window=%sh, similarity>%s, entity similarity>%s)",
        len(articles),
        config.time_window_hours,
        config.similarity_threshold,
        config.entity_similarity_threshold,
    )

    open_clusters: list[_OpenCluster] = []
    for entry in _scan_order(articles):
        for open_cluster in open_clusters:
            if _within_window(entry, open_cluster, window) and _matches(entry, open_cluster, config):
                _attach(entry, open_cluster, config)
                break
        else:
            open_clusters.append(_start_cluster(entry))

    clusters = [open_cluster.cluster for open_cluster in open_clusters]
    logger.info("Built %d clusters from %d articles", len(clusters), len(articles))
    return clusters
