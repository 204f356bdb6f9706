"""Saved snapshots of the property record and repair budgets."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from core.models import PropertyRecord, VersionSnapshot
from core.presets import MAX_VERSIONS

logger = logging.getLogger(__name__)


class VersionHistory:
    """Bounded in-memory version list; the oldest snapshot is evicted first."""

    def __init__(self, max_versions: int = MAX_VERSIONS) -> None:
        self.max_versions = max_versions
        self.entries: List[VersionSnapshot] = []

    @classmethod
    def from_dicts(cls, rows, max_versions: int = MAX_VERSIONS) -> "VersionHistory":
        """Rebuild from persisted rows, skipping any that no longer validate."""
        history = cls(max_versions)
        for row in rows or []:
            try:
                history.entries.append(VersionSnapshot.model_validate(row))
            except ValidationError:
                logger.warning("Dropping malformed version snapshot")
        history.entries = history.entries[-max_versions:]
        return history

    def save(
        self,
        property_data: PropertyRecord,
        budgets: Mapping[str, float],
        client_id: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> Tuple[VersionSnapshot, bool]:
        """Append a deep copy of the current state.

        Returns the new snapshot and whether an older one was evicted.
        """
        now = now or datetime.now()
        last_id = self.entries[-1].id if self.entries else 0
        snapshot = VersionSnapshot(
            id=max(int(now.timestamp() * 1000), last_id + 1),
            timestamp=now,
            property_data=property_data.model_copy(deep=True),
            repair_budgets=dict(budgets),
            client_id=client_id,
            user_note=f"Version saved at {now.strftime('%m/%d/%Y, %I:%M:%S %p')}",
        )
        self.entries.append(snapshot)
        evicted = False
        while len(self.entries) > self.max_versions:
            self.entries.pop(0)
            evicted = True
        return snapshot, evicted

    def recent(self, limit: int) -> List[VersionSnapshot]:
        """Newest first."""
        return list(reversed(self.entries[-limit:]))

    def delete(self, version_id: int) -> bool:
        before = len(self.entries)
        self.entries = [e for e in self.entries if e.id != version_id]
        return len(self.entries) < before

    def get(self, version_id: int) -> Optional[VersionSnapshot]:
        return next((e for e in self.entries if e.id == version_id), None)

    def as_dict(self) -> List[Dict]:
        """Return snapshots as JSON-ready dictionaries for persistence."""
        return [e.model_dump(mode="json") for e in self.entries]

    def __len__(self) -> int:
        return len(self.entries)
