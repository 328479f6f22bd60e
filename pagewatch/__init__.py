"""
Page performance and SEO monitoring
"""

from .builder import MonitorBuilder
from .config import MonitorConfig, Thresholds, DEFAULT_THRESHOLDS
from .log_manager import LogManager
from .monitor import PageMonitor

__all__ = [
    'MonitorBuilder',
    'MonitorConfig',
    'Thresholds',
    'DEFAULT_THRESHOLDS',
    'LogManager',
    'PageMonitor'
]
