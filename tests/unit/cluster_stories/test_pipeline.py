"""Tests for cluster_stories.pipeline module."""

import pytest

from cluster_stories.config import ClusterConfig
from cluster_stories.pipeline import cluster


def _raw(title: str, source: str, published_at: str, url: str) -> dict:
    return {
        "url": url,
        "title": title,
        "source": source,
        "publishedAt": published_at,
        "description": None,
        "urlToImage": None,
    }


class TestCluster:
    def test_left_and_right_coverage_merge_without_blindspot(self) -> None:
        raws = [
            _raw("Presidente anuncia reforma tributaria", "El Desconcierto",
                 "2024-05-01T12:00:00Z", "https://www.eldesconcierto.cl/1"),
            _raw("Gobierno presenta reforma tributaria al Congreso", "Emol",
                 "2024-05-01T11:00:00Z", "https://www.emol.cl/2"),
        ]
        result = cluster(raws)

        assert len(result) == 1
        story = result[0]
        assert story.bias_distribution["left"] == 1
        assert story.bias_distribution["right"] == 1
        assert story.blindspot is False
        assert story.blindspot_side is None

    def test_lone_article_is_dropped(self) -> None:
        raws = [
            _raw("Presidente anuncia reforma tributaria", "El Desconcierto",
                 "2024-05-01T12:00:00Z", "https://www.eldesconcierto.cl/1"),
            _raw("Gobierno presenta reforma tributaria al Congreso", "Emol",
                 "2024-05-01T11:00:00Z", "https://www.emol.cl/2"),
            _raw("Universidad lanza programa de becas", "The Clinic",
                 "2024-05-01T10:00:00Z", "https://www.theclinic.cl/3"),
        ]
        result = cluster(raws)

        assert len(result) == 1
        assert all(article.source != "The Clinic" for article in result[0].items)

    def test_lone_article_distribution(self) -> None:
        raws = [
            _raw("Universidad lanza programa de becas", "The Clinic",
                 "2024-05-01T10:00:00Z", "https://www.theclinic.cl/3"),
        ]
        result = cluster(raws)

        assert len(result) == 1
        assert result[0].bias_distribution == {
            "left": 1, "center-left": 0, "center": 0, "center-right": 0, "right": 0,
        }

    def test_right_and_center_coverage_is_blind_on_the_left(self) -> None:
        raws = [
            _raw("Boric anuncia nuevo plan de seguridad en Santiago", "Emol",
                 "2024-05-01T12:00:00Z", "https://www.emol.cl/1"),
            _raw("Boric presenta plan de seguridad para Santiago", "La Tercera",
                 "2024-05-01T11:00:00Z", "https://www.latercera.cl/2"),
            _raw("Chile: Boric lanza plan de seguridad en Santiago", "Reuters",
                 "2024-05-01T10:00:00Z", "https://www.reuters.com/3"),
        ]
        result = cluster(raws)

        assert len(result) == 1
        story = result[0]
        assert story.article_count == 3
        assert story.blindspot is True
        assert story.blindspot_side == "left"

    def test_unparseable_timestamp_is_kept_apart(self) -> None:
        raws = [
            _raw("Presidente anuncia reforma tributaria", "El Desconcierto",
                 "2024-05-01T12:00:00Z", "https://www.eldesconcierto.cl/1"),
            _raw("Presidente anuncia reforma tributaria", "Emol",
                 "ayer por la tarde", "https://www.emol.cl/2"),
        ]
        result = cluster(raws)

        # Both clusters are singletons, so the fallback keeps them.
        assert [story.article_count for story in result] == [1, 1]
        assert result[1].first_published_at == "ayer por la tarde"

    def test_non_empty_input_never_yields_empty_output(self) -> None:
        raws = [
            _raw(title, "Reuters", f"2024-05-0{i + 1}T12:00:00Z", f"https://www.reuters.com/{i}")
            for i, title in enumerate(["Sismo en Arica", "Paro portuario", "Elección municipal"])
        ]
        assert cluster(raws)

    def test_empty_input(self) -> None:
        assert cluster([]) == []

    def test_missing_field_propagates(self) -> None:
        with pytest.raises(KeyError):
            cluster([{"url": "u", "title": "T", "source": "Emol"}])

    def test_uses_given_config(self) -> None:
        raws = [
            _raw("Presidente anuncia reforma tributaria", "El Desconcierto",
                 "2024-05-01T12:00:00Z", "https://www.eldesconcierto.cl/1"),
            _raw("Gobierno presenta reforma tributaria al Congreso", "Emol",
                 "2024-05-01T11:00:00Z", "https://www.emol.cl/2"),
        ]
        result = cluster(raws, ClusterConfig(similarity_threshold=0.5))
        assert [story.article_count for story in result] == [1, 1]
