"""Run clustering and merge suggestions against a record store."""

import logging
from typing import Any

from ..config import DEFAULT_CONFIG
from ..models import Cluster, IdeaRecord, MergeOpportunity
from ..storage.base import RecordStoreBase, StoreUnavailableError
from .cluster import DEFAULT_MIN_CLUSTER_SIZE, DEFAULT_SIMILARITY_THRESHOLD, build_clusters
from .merges import DEFAULT_MERGE_LIMIT, DEFAULT_MERGE_THRESHOLD, suggest_merges

logger = logging.getLogger(__name__)


def cluster_label(cluster: Cluster) -> str:
    """Wikilink label written back to member records."""
    return f"[[Cluster: {cluster.theme}]]"


async def _snapshot(fetch, *args) -> list[IdeaRecord]:
    try:
        return list(await fetch(*args))
    except StoreUnavailableError:
        raise
    except Exception as e:
        raise StoreUnavailableError(f"Record snapshot failed: {e}") from e


def _cluster(records: list[IdeaRecord], config: dict[str, Any]) -> list[Cluster]:
    cluster_cfg = config.get("clustering", {})
    clusters = build_clusters(
        records,
        threshold=cluster_cfg.get("similarity_threshold", DEFAULT_SIMILARITY_THRESHOLD),
        min_size=cluster_cfg.get("min_cluster_size", DEFAULT_MIN_CLUSTER_SIZE),
    )
    logger.info(f"Clustered {len(records)} idea(s) into {len(clusters)} cluster(s)")
    return clusters


async def cluster_all_ideas(
    store: RecordStoreBase,
    config: dict[str, Any] | None = None,
) -> list[Cluster]:
    """Cluster every eligible idea in the store."""
    config = config or DEFAULT_CONFIG
    exclude = set(config.get("exclude_statuses", []))
    records = await _snapshot(store.fetch_eligible_records, exclude)
    return _cluster(records, config)


async def cluster_collection(
    store: RecordStoreBase,
    collection_id: str,
    config: dict[str, Any] | None = None,
) -> list[Cluster]:
    """Cluster the ideas of a single collection."""
    config = config or DEFAULT_CONFIG
    records = await _snapshot(store.fetch_records_in_collection, collection_id)
    return _cluster(records, config)


async def suggest_merge_opportunities(
    store: RecordStoreBase,
    config: dict[str, Any] | None = None,
) -> list[MergeOpportunity]:
    """Suggest merges among all eligible ideas in the store."""
    config = config or DEFAULT_CONFIG
    exclude = set(config.get("exclude_statuses", []))
    records = await _snapshot(store.fetch_eligible_records, exclude)

    merge_cfg = config.get("merging", {})
    return suggest_merges(
        records,
        pair_threshold=merge_cfg.get("similarity_threshold", DEFAULT_MERGE_THRESHOLD),
        limit=merge_cfg.get("limit", DEFAULT_MERGE_LIMIT),
    )


async def annotate_clusters(store: RecordStoreBase, clusters: list[Cluster]) -> int:
    """Write each member's cluster label back to the store.

    Failed writes are logged and skipped. Returns the number of records annotated.
    """
    written = 0
    for cluster in clusters:
        label = cluster_label(cluster)
        for idea in cluster.ideas:
            try:
                await store.persist_cluster_reference(idea.id, label)
                written += 1
            except Exception as e:
                logger.warning(f"Cluster reference write failed for {idea.id}: {e}")
    return written
