"""Data models used throughout SeedVault."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class IdeaRecord:
    """An idea note owned by the record store."""
    id: str
    content: Any
    created_at: datetime | None = None
    properties: dict[str, Any] = field(default_factory=dict)


@dataclass
class ClusterAnalysis:
    """Theme, strength and shared keywords derived for one cluster."""
    theme: str
    strength: int
    common_keywords: list[str] = field(default_factory=list)


@dataclass
class Cluster:
    """Result of clustering."""
    cluster_id: str
    theme: str
    ideas: list[IdeaRecord]
    strength: int
    common_keywords: list[str] = field(default_factory=list)

    @property
    def record_ids(self) -> list[str]:
        return [idea.id for idea in self.ideas]


@dataclass
class MergeOpportunity:
    """A pair of ideas similar enough to be merged."""
    record_a: str
    record_b: str
    reason: str
    similarity: int  # percentage
    score: float = 0.0
