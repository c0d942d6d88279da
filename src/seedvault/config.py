"""Configuration management for SeedVault."""

import copy
import os
from pathlib import Path
from typing import Any

import yaml


DEFAULT_CONFIG = {
    "vault_path": "~/.seedvault/vault",
    "store_backend": "vault",
    "exclude_statuses": ["project"],
    "properties": {
        "id": "id",
        "status": "seed-status",
        "created": "seed-created",
        "cluster": "seed-cluster",
    },
    "clustering": {"similarity_threshold": 0.3, "min_cluster_size": 2},
    "merging": {"similarity_threshold": 0.6, "limit": 5},
}


def _find_config_file() -> Path | None:
    """Look for config.yaml in standard locations."""
    candidates = [
        Path.cwd() / "config" / "config.yaml",
        Path.cwd() / "config.yaml",
        Path.home() / ".seedvault" / "config.yaml",
    ]
    for p in candidates:
        if p.exists():
            return p
    return None


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration, merging defaults with file and env vars."""
    cfg = copy.deepcopy(DEFAULT_CONFIG)

    path = Path(config_path) if config_path else _find_config_file()
    if path and path.exists():
        with open(path, encoding="utf-8") as f:
            file_cfg = yaml.safe_load(f) or {}
        _deep_merge(cfg, file_cfg)

    # Env overrides
    if vault_path := os.environ.get("SEEDVAULT_VAULT_PATH"):
        cfg["vault_path"] = vault_path

    cfg["vault_path"] = str(Path(cfg["vault_path"]).expanduser().resolve())

    return cfg


def _deep_merge(base: dict, override: dict) -> None:
    """Merge override into base in-place."""
    for k, v in override.items():
        if k in base and isinstance(base[k], dict) and isinstance(v, dict):
            _deep_merge(base[k], v)
        else:
            base[k] = v
