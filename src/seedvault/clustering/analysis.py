"""Theme and strength scoring for idea clusters."""

from collections import Counter
from datetime import date, datetime, timezone
from typing import Any

from ..models import ClusterAnalysis, IdeaRecord
from .similarity import round_half_up

MAX_COMMON_KEYWORDS = 5
IDEA_SCORE_CAP = 50
KEYWORD_SCORE_CAP = 30
RECENCY_WINDOW_DAYS = 20


def generate_theme(keyword_occurrences: list[str], member_count: int) -> str:
    """Label a cluster by its two most frequent keywords."""
    top = [kw for kw, _ in Counter(keyword_occurrences).most_common(2)]

    if not top:
        return f"{member_count} grouped ideas"
    if len(top) == 1:
        return f"{top[0]} related"
    return f"{top[0]} & {top[1]}"


def common_keywords(keyword_occurrences: list[str]) -> list[str]:
    """Deduplicate keyword occurrences in first-seen order, capped."""
    return list(dict.fromkeys(keyword_occurrences))[:MAX_COMMON_KEYWORDS]


def _as_utc(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    return None


def recency_score(members: list[IdeaRecord], now: datetime | None = None) -> float:
    """Average of ``max(0, 20 - days since creation)`` over all members.

    Members without a timestamp add nothing but still count in the average.
    """
    if not members:
        return 0.0

    now = _as_utc(now) or datetime.now(timezone.utc)
    total = 0.0
    for member in members:
        created = _as_utc(member.created_at)
        if created is None:
            continue
        days_since = (now - created).total_seconds() / 86400
        total += max(0.0, RECENCY_WINDOW_DAYS - days_since)

    return total / len(members)


def cluster_strength(
    members: list[IdeaRecord],
    keyword_occurrences: list[str],
    now: datetime | None = None,
) -> int:
    """Composite strength: size + keyword cohesion + recency.

    Not capped at 100.
    """
    idea_score = min(len(members) * 10, IDEA_SCORE_CAP)
    keyword_score = min(len(set(keyword_occurrences)) * 5, KEYWORD_SCORE_CAP)
    return round_half_up(idea_score + keyword_score + recency_score(members, now))


def analyze(
    members: list[IdeaRecord],
    keyword_occurrences: list[str],
    now: datetime | None = None,
) -> ClusterAnalysis:
    """Derive theme, strength and common keywords for a cluster.

    Args:
        members: Cluster members, base record first.
        keyword_occurrences: Keywords accumulated while the cluster was built,
            repeats included.
        now: Reference time for recency scoring (defaults to current UTC).
    """
    return ClusterAnalysis(
        theme=generate_theme(keyword_occurrences, len(members)),
        strength=cluster_strength(members, keyword_occurrences, now),
        common_keywords=common_keywords(keyword_occurrences),
    )
