from typing import List, Optional
from ..models import MonitoringSnapshot


class HistoryStore:
    """Append-only, in-memory list of snapshots in collection order"""

    def __init__(self):
        # Unbounded; nothing is evicted for the lifetime of the process
        self._snapshots: List[MonitoringSnapshot] = []

    def append(self, snapshot: MonitoringSnapshot):
        self._snapshots.append(snapshot)

    def recent(self, n: Optional[int] = None) -> List[MonitoringSnapshot]:
        """Last ``n`` snapshots, oldest first; all of them when ``n`` is None"""
        if n is None:
            return list(self._snapshots)
        if n <= 0:
            return []
        return self._snapshots[-n:]

    def latest(self) -> Optional[MonitoringSnapshot]:
        return self._snapshots[-1] if self._snapshots else None

    def __len__(self) -> int:
        return len(self._snapshots)
