"""Storage abstraction for idea record backends."""

from .base import RecordStoreBase, StoreUnavailableError, get_record_store

__all__ = ["RecordStoreBase", "StoreUnavailableError", "get_record_store"]
