"""
Monitoring data models
"""

from .alert import Alert, AlertType
from .core_web_vitals import CoreWebVitalsSample
from .lighthouse_metrics import LighthouseMetrics
from .report import PerformanceReport, ReportSummary, ReportTrends
from .seo_metrics import SEOSnapshotMetrics
from .snapshot import MonitoringSnapshot

__all__ = [
    'Alert',
    'AlertType',
    'CoreWebVitalsSample',
    'LighthouseMetrics',
    'PerformanceReport',
    'ReportSummary',
    'ReportTrends',
    'SEOSnapshotMetrics',
    'MonitoringSnapshot'
]
