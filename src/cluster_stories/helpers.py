"""Helper functions for cluster_stories CLI."""

from __future__ import annotations

import argparse

from common.cli_helpers import parse_existing_path


def parse_cluster_stories_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for cluster_stories."""

    parser = argparse.ArgumentParser()

    # Input options
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--input",
        type=lambda v: parse_existing_path(v, "input"),
        help="Local JSONL file of raw article records",
    )
    source.add_argument(
        "--input-s3-key",
        help="S3 key of a JSONL file of raw article records (bucket from S3_BUCKET_NAME)",
    )
    parser.add_argument(
        "--normalize",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Clean, filter and deduplicate raw provider records first (default: True)",
    )

    # Clustering options
    parser.add_argument(
        "--config",
        default=None,
        help="Config name under configs/ (default: CONFIG_ENV or prod)",
    )

    # Output options
    parser.add_argument("--load-s3", action="store_true", help="Upload clusters to S3")
    parser.add_argument("--load-local", action="store_true", help="Save clusters to local file")

    return parser.parse_args(argv)
