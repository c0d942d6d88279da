"""Greedy keyword clustering of idea records."""

import logging
import time
import uuid
from datetime import datetime

from ..models import Cluster, IdeaRecord
from .analysis import analyze
from .keywords import extract_keywords
from .similarity import jaccard_similarity, overlapping_keywords

logger = logging.getLogger(__name__)

DEFAULT_SIMILARITY_THRESHOLD = 0.3
DEFAULT_MIN_CLUSTER_SIZE = 2


def new_cluster_id() -> str:
    return f"cluster-{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}"


def build_clusters(
    records: list[IdeaRecord],
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    min_size: int = DEFAULT_MIN_CLUSTER_SIZE,
    now: datetime | None = None,
) -> list[Cluster]:
    """Partition idea records into keyword clusters.

    Each unclaimed record is tried once as a base. Candidates join when their
    similarity to the base alone reaches ``threshold``; members are never
    compared with each other, so the grouping is not transitive and depends
    on input order. A base that gathers fewer than ``min_size`` members stays
    unclaimed and can still join a later base.

    Returns clusters sorted by strength, strongest first.
    """
    keywords = [extract_keywords(record.content) for record in records]
    processed: set[int] = set()
    clusters: list[Cluster] = []

    for base_idx, base in enumerate(records):
        if base_idx in processed:
            continue

        base_keywords = keywords[base_idx]
        member_idxs = [base_idx]
        occurrences = list(base_keywords)

        for idx, candidate_keywords in enumerate(keywords):
            if idx == base_idx or idx in processed:
                continue
            if jaccard_similarity(base_keywords, candidate_keywords) >= threshold:
                member_idxs.append(idx)
                occurrences.extend(overlapping_keywords(base_keywords, candidate_keywords))

        if len(member_idxs) < min_size:
            continue

        members = [records[i] for i in member_idxs]
        analysis = analyze(members, occurrences, now)
        clusters.append(Cluster(
            cluster_id=new_cluster_id(),
            theme=analysis.theme,
            ideas=members,
            strength=analysis.strength,
            common_keywords=analysis.common_keywords,
        ))
        processed.update(member_idxs)

    logger.debug(f"Built {len(clusters)} cluster(s) from {len(records)} record(s)")

    # Stable: ties keep emission order
    clusters.sort(key=lambda c: c.strength, reverse=True)
    return clusters
