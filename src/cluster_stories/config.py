"""Configuration loader for cluster_stories."""

from dataclasses import dataclass, field

from common.config import ConfigSingleton, find_config_path, load_yaml


@dataclass
class ClusterConfig:
    time_window_hours: float = 72
    # Headline Jaccard above which two articles match on text alone
    similarity_threshold: float = 0.20
    # Lower Jaccard bar that applies when the headlines share a named entity
    entity_similarity_threshold: float = 0.08
    min_entity_overlap: int = 1
    min_cluster_articles: int = 2
    # Host suffixes of outlets preferred as a cluster's main headline
    national_domain_suffixes: list[str] = field(default_factory=lambda: [".cl"])


def load_config(config_name: str | None = None) -> ClusterConfig:
    """Load configuration from YAML file.

    Args:
        config_name: Name of config file (without .yaml extension).
                    If None, uses CONFIG_ENV env var or "prod".

    Returns:
        Loaded ClusterConfig object
    """
    data = load_yaml(find_config_path(config_name))
    return _parse_config(data)


def _parse_config(data: dict) -> ClusterConfig:
    """Parse config dictionary into ClusterConfig object."""
    clustering = data.get("clustering", {})
    filtering = data.get("filtering", {})
    locality = data.get("locality", {})
    defaults = ClusterConfig()

    return ClusterConfig(
        time_window_hours=clustering.get("time_window_hours", defaults.time_window_hours),
        similarity_threshold=clustering.get("similarity_threshold", defaults.similarity_threshold),
        entity_similarity_threshold=clustering.get(
            "entity_similarity_threshold", defaults.entity_similarity_threshold
        ),
        min_entity_overlap=clustering.get("min_entity_overlap", defaults.min_entity_overlap),
        min_cluster_articles=filtering.get("min_cluster_articles", defaults.min_cluster_articles),
        national_domain_suffixes=list(
            locality.get("national_domain_suffixes", defaults.national_domain_suffixes)
        ),
    )


_manager = ConfigSingleton(load_config)
get_config = _manager.get
set_config = _manager.set
reset_config = _manager.reset
