"""In-memory record store."""

from ..models import IdeaRecord
from .base import RecordStoreBase


class InMemoryRecordStore(RecordStoreBase):
    """Holds idea records in a list; useful for embedding and tests."""

    def __init__(
        self,
        records: list[IdeaRecord] | None = None,
        collections: dict[str, str] | None = None,
        status_key: str = "seed-status",
    ):
        self.records = list(records or [])
        self.collections = dict(collections or {})
        self.status_key = status_key
        self.cluster_references: dict[str, str] = {}

    def add(self, record: IdeaRecord, collection_id: str | None = None) -> None:
        self.records.append(record)
        if collection_id is not None:
            self.collections[record.id] = collection_id

    async def fetch_eligible_records(self, exclude_statuses: set[str]) -> list[IdeaRecord]:
        return [
            r for r in self.records
            if r.properties.get(self.status_key) not in exclude_statuses
        ]

    async def fetch_records_in_collection(self, collection_id: str) -> list[IdeaRecord]:
        return [r for r in self.records if self.collections.get(r.id) == collection_id]

    async def persist_cluster_reference(self, record_id: str, cluster_label: str) -> None:
        if not any(r.id == record_id for r in self.records):
            raise KeyError(record_id)
        self.cluster_references[record_id] = cluster_label
