"""CLI for clustering articles into stories."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

from cluster_stories.config import load_config, set_config
from cluster_stories.helpers import parse_cluster_stories_args
from cluster_stories.pipeline import cluster
from cluster_stories.records import serialize_cluster
from common.aws import read_jsonl_from_s3, upload_jsonl_records_to_s3
from common.cli_helpers import setup_logging
from common.local_io import read_jsonl_local, save_jsonl_records_local
from ingest_articles.normalize import normalize_articles

load_dotenv()

setup_logging()
logger = logging.getLogger(__name__)


def _load_raw_articles(args) -> list[dict]:
    if args.input is not None:
        logger.info("Reading articles from %s", args.input)
        return list(read_jsonl_local(args.input))

    bucket = os.environ["S3_BUCKET_NAME"]
    logger.info("Reading articles from s3://%s/%s", bucket, args.input_s3_key)
    return list(read_jsonl_from_s3(bucket, args.input_s3_key))


def main(argv: list[str] | None = None) -> None:
    args = parse_cluster_stories_args(argv)
    set_config(load_config(args.config))

    raw_articles = _load_raw_articles(args)
    if args.normalize:
        raw_articles = normalize_articles(raw_articles)

    if not raw_articles:
        logger.warning("No articles to cluster")
        return

    clusters = cluster(raw_articles)

    for story in clusters:
        logger.info(
            "  %s | %d articles | %s%s",
            story.main_title,
            story.article_count,
            story.bias_distribution,
            f" | blindspot: {story.blindspot_side}" if story.blindspot else "",
        )

    records = [serialize_cluster(story) for story in clusters]

    if args.load_s3:
        upload_jsonl_records_to_s3(records, "story_clusters")

    if args.load_local:
        save_jsonl_records_local(records, "story_clusters")


if __name__ == "__main__":
    main()
