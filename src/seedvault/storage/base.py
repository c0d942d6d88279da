"""Abstract base class for idea record stores and factory function."""

from abc import ABC, abstractmethod
from typing import Any

from ..models import IdeaRecord


class StoreUnavailableError(RuntimeError):
    """The record store could not provide a snapshot."""


class RecordStoreBase(ABC):
    """Common interface for idea record backends."""

    @abstractmethod
    async def fetch_eligible_records(self, exclude_statuses: set[str]) -> list[IdeaRecord]:
        """Return all idea records whose status is not in ``exclude_statuses``.

        Raises StoreUnavailableError if the snapshot cannot be read."""

    @abstractmethod
    async def fetch_records_in_collection(self, collection_id: str) -> list[IdeaRecord]:
        """Return the idea records of one collection.

        Raises StoreUnavailableError if the snapshot cannot be read."""

    @abstractmethod
    async def persist_cluster_reference(self, record_id: str, cluster_label: str) -> None:
        """Annotate a record with the label of the cluster it belongs to."""


def get_record_store(config: dict[str, Any]) -> RecordStoreBase:
    """Factory: return the right record store based on config."""
    backend = config.get("store_backend", "vault")

    if backend == "vault":
        from .vault import VaultRecordStore
        return VaultRecordStore(config["vault_path"], properties=config.get("properties"))
    elif backend == "memory":
        from .memory import InMemoryRecordStore
        props = config.get("properties") or {}
        return InMemoryRecordStore(status_key=props.get("status", "seed-status"))
    else:
        raise ValueError(f"Unknown store_backend: {backend}")
