from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Any
from .alert import Alert
from .core_web_vitals import CoreWebVitalsSample
from .lighthouse_metrics import LighthouseMetrics
from .seo_metrics import SEOSnapshotMetrics


@dataclass
class MonitoringSnapshot:
    """One measurement-plus-analysis result for a page view

    ``alerts`` holds only the alerts raised for this snapshot.
    """
    url: str
    timestamp: datetime
    core_web_vitals: CoreWebVitalsSample
    seo_metrics: SEOSnapshotMetrics
    lighthouse_metrics: Optional[LighthouseMetrics] = None
    alerts: List[Alert] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'url': self.url,
            'timestamp': self.timestamp.isoformat(),
            'core_web_vitals': self.core_web_vitals.to_dict(),
            'seo_metrics': self.seo_metrics.to_dict(),
            'lighthouse_metrics': self.lighthouse_metrics.to_dict() if self.lighthouse_metrics else None,
            'alerts': [alert.to_dict() for alert in self.alerts]
        }
