"""Pairwise merge suggestions for near-duplicate ideas."""

import logging
from itertools import combinations

from ..models import IdeaRecord, MergeOpportunity
from .keywords import extract_keywords
from .similarity import jaccard_similarity, round_half_up

logger = logging.getLogger(__name__)

DEFAULT_MERGE_THRESHOLD = 0.6
DEFAULT_MERGE_LIMIT = 5


def suggest_merges(
    records: list[IdeaRecord],
    pair_threshold: float = DEFAULT_MERGE_THRESHOLD,
    limit: int = DEFAULT_MERGE_LIMIT,
) -> list[MergeOpportunity]:
    """Find idea pairs whose keyword similarity exceeds ``pair_threshold``.

    Every unordered pair is compared, independent of any clustering run.
    Returns at most ``limit`` opportunities, most similar first.
    """
    keywords = [extract_keywords(record.content) for record in records]
    opportunities = []

    for (i, rec_a), (j, rec_b) in combinations(enumerate(records), 2):
        score = jaccard_similarity(keywords[i], keywords[j])
        if score <= pair_threshold:
            continue

        shared = [kw for kw in dict.fromkeys(keywords[i]) if kw in keywords[j]]
        opportunities.append(MergeOpportunity(
            record_a=rec_a.id,
            record_b=rec_b.id,
            reason=f"Shared keywords: {', '.join(shared)}",
            similarity=round_half_up(score * 100),
            score=score,
        ))

    logger.debug(f"Found {len(opportunities)} merge candidate(s) among {len(records)} record(s)")

    opportunities.sort(key=lambda o: o.score, reverse=True)
    return opportunities[:limit]
