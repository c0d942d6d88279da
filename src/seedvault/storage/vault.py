"""Markdown vault record store.

Each note carrying a seed status in its YAML frontmatter is an idea record.
The note's vault-relative folder is its collection.
"""

import asyncio
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any

import yaml

from ..models import IdeaRecord
from ..vault.notes import render_note, split_frontmatter
from .base import RecordStoreBase, StoreUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_PROPERTIES = {
    "id": "id",
    "status": "seed-status",
    "created": "seed-created",
    "cluster": "seed-cluster",
}


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a frontmatter timestamp (datetime, date, or ISO string)."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


class VaultRecordStore(RecordStoreBase):
    """Reads idea records from markdown notes under a vault directory."""

    def __init__(self, vault_path: str, properties: dict[str, str] | None = None):
        self.vault_path = Path(vault_path)
        self.properties = {**DEFAULT_PROPERTIES, **(properties or {})}
        self._paths: dict[str, Path] = {}

    async def fetch_eligible_records(self, exclude_statuses: set[str]) -> list[IdeaRecord]:
        notes = await asyncio.to_thread(self._scan)
        status_key = self.properties["status"]
        return [
            record for record, _ in notes
            if record.properties.get(status_key) not in exclude_statuses
        ]

    async def fetch_records_in_collection(self, collection_id: str) -> list[IdeaRecord]:
        notes = await asyncio.to_thread(self._scan)
        wanted = collection_id.strip("/")
        return [record for record, collection in notes if collection == wanted]

    async def persist_cluster_reference(self, record_id: str, cluster_label: str) -> None:
        await asyncio.to_thread(self._write_reference, record_id, cluster_label)

    def _scan(self) -> list[tuple[IdeaRecord, str]]:
        """Read every idea note in the vault, in sorted path order."""
        if not self.vault_path.is_dir():
            raise StoreUnavailableError(f"Vault not found: {self.vault_path}")

        notes = []
        paths: dict[str, Path] = {}
        try:
            for md_file in sorted(self.vault_path.rglob("*.md")):
                rel = md_file.relative_to(self.vault_path)
                if any(part.startswith(".") for part in rel.parts):
                    continue
                record = self._read_note(md_file, rel)
                if record is None:
                    continue
                if record.id in paths:
                    logger.warning(f"Skipping {rel}: duplicate id {record.id!r}")
                    continue
                paths[record.id] = md_file
                collection = "" if rel.parent == Path(".") else rel.parent.as_posix()
                notes.append((record, collection))
        except OSError as e:
            raise StoreUnavailableError(f"Failed to read vault {self.vault_path}: {e}") from e

        self._paths = paths
        logger.debug(f"Scanned {len(notes)} idea note(s) in {self.vault_path}")
        return notes

    def _read_note(self, md_file: Path, rel: Path) -> IdeaRecord | None:
        text = md_file.read_text(encoding="utf-8", errors="replace")
        try:
            fm, body = split_frontmatter(text)
        except yaml.YAMLError as e:
            logger.warning(f"Skipping {rel}: invalid frontmatter ({e})")
            return None

        if self.properties["status"] not in fm:
            return None

        record_id = fm.get(self.properties["id"]) or rel.with_suffix("").as_posix()
        return IdeaRecord(
            id=str(record_id),
            content=body.strip(),
            created_at=parse_timestamp(fm.get(self.properties["created"])),
            properties=fm,
        )

    def _write_reference(self, record_id: str, cluster_label: str) -> None:
        if record_id not in self._paths:
            self._scan()
        path = self._paths.get(record_id)
        if path is None:
            raise KeyError(record_id)

        fm, body = split_frontmatter(path.read_text(encoding="utf-8", errors="replace"))
        fm[self.properties["cluster"]] = cluster_label
        path.write_text(render_note(fm, body), encoding="utf-8")
