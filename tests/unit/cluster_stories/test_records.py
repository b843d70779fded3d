"""Tests for cluster_stories.records module."""

from classify_sources.models import Article
from cluster_stories.models import StoryCluster, empty_distribution
from cluster_stories.records import serialize_article, serialize_cluster

ARTICLE = Article(
    url="https://www.emol.cl/1",
    title="Titular",
    source="Emol",
    published_at="2024-05-01T12:00:00Z",
    description="Bajada",
    image_url="https://img.example.com/1.jpg",
    leaning="right",
)


def _story(**kwargs) -> StoryCluster:
    distribution = empty_distribution()
    distribution["right"] = 1
    return StoryCluster(
        id="abc",
        main_title="Titular",
        summary="Bajada",
        items=[ARTICLE],
        first_published_at="2024-05-01T12:00:00Z",
        bias_distribution=distribution,
        **kwargs,
    )


class TestSerializeArticle:
    def test_fields(self) -> None:
        assert serialize_article(ARTICLE) == {
            "url": "https://www.emol.cl/1",
            "title": "Titular",
            "source": "Emol",
            "publishedAt": "2024-05-01T12:00:00Z",
            "description": "Bajada",
            "urlToImage": "https://img.example.com/1.jpg",
            "bias": "right",
        }


class TestSerializeCluster:
    def test_unflagged_cluster_has_no_blindspot_keys(self) -> None:
        record = serialize_cluster(_story())
        assert record == {
            "id": "abc",
            "mainTitle": "Titular",
            "summary": "Bajada",
            "items": [serialize_article(ARTICLE)],
            "biasDistribution": {
                "left": 0, "center-left": 0, "center": 0, "center-right": 0, "right": 1,
            },
            "firstPublishedAt": "2024-05-01T12:00:00Z",
        }

    def test_flagged_cluster(self) -> None:
        record = serialize_cluster(_story(blindspot=True, blindspot_side="left"))
        assert record["blindspot"] is True
        assert record["blindspotSide"] == "left"

    def test_distribution_is_copied(self) -> None:
        story = _story()
        record = serialize_cluster(story)
        record["biasDistribution"]["left"] = 5
        assert story.bias_distribution["left"] == 0
