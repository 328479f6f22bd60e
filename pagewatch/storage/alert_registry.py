import logging
from typing import Dict, Iterable, List, Optional
from ..models import Alert

logger = logging.getLogger(__name__)


class AlertRegistry:
    """Keeps every raised alert and tracks which are still active

    Alerts are never removed; resolving only flips their flag.
    """

    def __init__(self):
        self._alerts: List[Alert] = []
        self._by_id: Dict[str, Alert] = {}

    def append(self, alerts: Iterable[Alert]):
        """Add newly raised alerts"""
        for alert in alerts:
            if alert.id in self._by_id:
                logger.warning(f"Ignoring alert with duplicate id: {alert.id}")
                continue
            self._alerts.append(alert)
            self._by_id[alert.id] = alert

    def get_active(self) -> List[Alert]:
        return [alert for alert in self._alerts if not alert.resolved]

    def resolve(self, alert_id: str) -> bool:
        """Mark an alert resolved

        Unknown ids are ignored. Returns True when the call changed state.
        """
        alert = self._by_id.get(alert_id)
        if alert is None or alert.resolved:
            return False
        alert.resolved = True
        return True

    def get(self, alert_id: str) -> Optional[Alert]:
        return self._by_id.get(alert_id)

    def all(self) -> List[Alert]:
        return list(self._alerts)

    def __len__(self) -> int:
        return len(self._alerts)
