"""
Sync status of calendar items.

Tracks how the local copy of an item relates to the copy on the server.
Every state except NOT_SYNCED refers to a server version, identified by the
version tag (ETag) the server returned for it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SyncState(Enum):
    """Reconciliation state of an item."""
    NOT_SYNCED = "not_synced"              # Created locally, never sent to the server
    SYNCED = "synced"                      # Identical to the server version
    LOCALLY_MODIFIED = "locally_modified"  # Changed locally since the server version
    LOCALLY_DELETED = "locally_deleted"    # Deleted locally, still on the server


@dataclass(frozen=True)
class SyncStatus:
    """A sync state, plus the server version tag it refers to."""
    state: SyncState
    version_tag: Optional[str] = None

    def __post_init__(self):
        if self.state is SyncState.NOT_SYNCED and self.version_tag is not None:
            raise ValueError("A NOT_SYNCED item has no server version tag")
        if self.state is not SyncState.NOT_SYNCED and self.version_tag is None:
            raise ValueError(f"{self.state.name} requires a server version tag")

    @classmethod
    def not_synced(cls) -> 'SyncStatus':
        return cls(SyncState.NOT_SYNCED)

    @classmethod
    def synced(cls, version_tag: str) -> 'SyncStatus':
        return cls(SyncState.SYNCED, version_tag)

    @classmethod
    def locally_modified(cls, version_tag: str) -> 'SyncStatus':
        return cls(SyncState.LOCALLY_MODIFIED, version_tag)

    @classmethod
    def locally_deleted(cls, version_tag: str) -> 'SyncStatus':
        return cls(SyncState.LOCALLY_DELETED, version_tag)

    @property
    def is_synced(self) -> bool:
        return self.state is SyncState.SYNCED

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "state": self.state.value,
            "version_tag": self.version_tag,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'SyncStatus':
        """Create from dictionary (JSON deserialization)."""
        return cls(
            state=SyncState(data["state"]),
            version_tag=data.get("version_tag"),
        )
