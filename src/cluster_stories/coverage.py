"""Cross-leaning coverage checks on finished clusters."""

import logging

from cluster_stories.models import StoryCluster

logger = logging.getLogger(__name__)


def detect_blindspots(clusters: list[StoryCluster]) -> list[StoryCluster]:
    """
    Flag clusters covered by only one political block, in place.

    The left block is left + center-left and the right block is
    right + center-right; center counts for neither. The side names the
    block that is missing the story.
    """
    flagged = 0
    for cluster in clusters:
        left = cluster.left_block()
        right = cluster.right_block()
        if left > 0 and right == 0:
            cluster.blindspot = True
            cluster.blindspot_side = "right"
        elif right > 0 and left == 0:
            cluster.blindspot = True
            cluster.blindspot_side = "left"
        else:
            cluster.blindspot = False
            cluster.blindspot_side = None
        flagged += cluster.blindspot

    logger.info("Flagged %d of %d clusters as blindspots", flagged, len(clusters))
    return clusters


def filter_diverse_clusters(
    clusters: list[StoryCluster],
    min_articles: int = 2,
) -> list[StoryCluster]:
    """
    Keep clusters with at least `min_articles` articles.

    If that would leave nothing from a non-empty list, the unfiltered list is
    returned instead.
    """
    kept = [cluster for cluster in clusters if cluster.article_count >= min_articles]
    if clusters and not kept:
        logger.warning(
            "No cluster has %d or more articles; returning all %d clusters unfiltered",
            min_articles,
            len(clusters),
        )
        return clusters

    logger.info("Kept %d of %d clusters with >= %d articles", len(kept), len(clusters), min_articles)
    return kept
