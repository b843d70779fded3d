"""Raw articles in, display-ready story clusters out."""

import logging
from typing import Any

from classify_sources.classify_sources import classify_articles
from cluster_stories.cluster_stories import cluster_articles
from cluster_stories.config import ClusterConfig, get_config
from cluster_stories.coverage import detect_blindspots, filter_diverse_clusters
from cluster_stories.models import StoryCluster

logger = logging.getLogger(__name__)


def cluster(
    raw_articles: list[dict[str, Any]],
    config: ClusterConfig | None = None,
) -> list[StoryCluster]:
    """
    Classify, cluster, flag blindspots and filter a batch of articles.

    Args:
        raw_articles: Records with url, title, source, publishedAt and
            optional description and urlToImage.
        config: Clustering thresholds (default: the loaded config).

    Returns:
        Story clusters for display.

    Raises:
        KeyError: If a record is missing a required field.
    """
    config = config or get_config()

    articles = classify_articles(raw_articles)
    clusters = cluster_articles(articles, config)
    clusters = detect_blindspots(clusters)
    clusters = filter_diverse_clusters(clusters, config.min_cluster_articles)

    logger.info("Returning %d clusters for %d articles", len(clusters), len(raw_articles))
    return clusters
