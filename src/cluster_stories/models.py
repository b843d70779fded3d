"""Data models for cluster_stories pipeline stage."""

from dataclasses import dataclass, field
from typing import Literal, Optional

from classify_sources.models import LEANINGS, Article

BlindspotSide = Literal["left", "right"]


def empty_distribution() -> dict[str, int]:
    return {leaning: 0 for leaning in LEANINGS}


@dataclass
class StoryCluster:
    """Articles grouped as coverage of the same event."""
    id: str
    main_title: str
    summary: str
    items: list[Article]
    first_published_at: str
    bias_distribution: dict[str, int] = field(default_factory=empty_distribution)
    blindspot: bool = False
    blindspot_side: Optional[BlindspotSide] = None

    @property
    def article_count(self) -> int:
        return len(self.items)

    def left_block(self) -> int:
        return self.bias_distribution["left"] + self.bias_distribution["center-left"]

    def right_block(self) -> int:
        return self.bias_distribution["right"] + self.bias_distribution["center-right"]
