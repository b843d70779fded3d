"""Shared fixtures."""

import pytest

from cluster_stories.config import ClusterConfig, reset_config, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Use the default clustering config unless a test sets its own."""
    config = ClusterConfig()
    set_config(config)
    yield config
    reset_config()
