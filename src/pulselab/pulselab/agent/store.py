from datetime import datetime, timezone
from typing import List, Optional

from pulselab.schema import HardwareParams, SavedConfig


class ConfigStore:
    """
    In-memory store of named hardware configurations.

    The store is owned by the caller (one per session) and passed by reference
    to the tool layer; nothing in pulselab keeps configurations globally.
    """

    def __init__(self, configs: Optional[List[SavedConfig]] = None):
        self._configs: List[SavedConfig] = list(configs or [])

    def save(self, name: str, params: HardwareParams, created_at: Optional[str] = None) -> SavedConfig:
        if not name:
            raise ValueError("Configuration name must not be empty.")
        if created_at is None:
            created_at = datetime.now(timezone.utc).isoformat()
        config = SavedConfig(name=name, params=params, created_at=created_at)
        self._configs.append(config)
        return config

    def list(self) -> List[SavedConfig]:
        """Saved configurations in insertion order."""
        return list(self._configs)

    def get(self, name: str) -> Optional[SavedConfig]:
        """Most recently saved configuration with this name."""
        for config in reversed(self._configs):
            if config.name == name:
                return config
        return None

    def __len__(self):
        return len(self._configs)
