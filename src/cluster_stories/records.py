"""Convert story clusters to the JSON records served to the front end."""

from typing import Any

from classify_sources.models import Article
from cluster_stories.models import StoryCluster


def serialize_article(article: Article) -> dict[str, Any]:
    return {
        "url": article.url,
        "title": article.title,
        "source": article.source,
        "publishedAt": article.published_at,
        "description": article.description,
        "urlToImage": article.image_url,
        "bias": article.leaning,
    }


def serialize_cluster(cluster: StoryCluster) -> dict[str, Any]:
    """Build a cluster record; blindspot fields are only present when flagged."""
    record = {
        "id": cluster.id,
        "mainTitle": cluster.main_title,
        "summary": cluster.summary,
        "items": [serialize_article(article) for article in cluster.items],
        "biasDistribution": dict(cluster.bias_distribution),
        "firstPublishedAt": cluster.first_published_at,
    }
    if cluster.blindspot:
        record["blindspot"] = True
        record["blindspotSide"] = cluster.blindspot_side
    return record
