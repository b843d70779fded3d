"""Data models for classify_sources pipeline stage."""

from dataclasses import dataclass
from typing import Literal, Optional

Leaning = Literal["left", "center-left", "center", "center-right", "right"]

# Ordered left to right.
LEANINGS: tuple[Leaning, ...] = ("left", "center-left", "center", "center-right", "right")


@dataclass(frozen=True)
class Article:
    """News article with the leaning of its outlet assigned."""
    url: str
    title: str
    source: str
    published_at: str
    description: Optional[str]
    image_url: Optional[str]
    leaning: Leaning
