"""
Monitor Builder - Fluent API for configuring page monitors
"""

from dataclasses import replace
from typing import List
from .config import MonitorConfig, Thresholds
from .monitor import PageMonitor
from .pages import PageContext


class MonitorBuilder:
    """Builder for creating monitors with custom settings"""

    def __init__(self, page: PageContext):
        self.page = page
        self._thresholds = None
        self._keywords = None
        self._timeout = 1.0
        self._window = 10
        self._min_alt_coverage = 0.9

    def thresholds(self, thresholds: Thresholds = None, **overrides):
        """Set thresholds, either whole or as field overrides of the defaults"""
        base = thresholds or Thresholds()
        if overrides:
            base = replace(base, **overrides)
        self._thresholds = base
        return self

    def keywords(self, keywords: List[str]):
        """Set the tracked keyword vocabulary"""
        self._keywords = list(keywords)
        return self

    def measurement_timeout(self, seconds: float):
        """Set the bound on a single vitals measurement"""
        self._timeout = seconds
        return self

    def report_window(self, size: int):
        """Set how many recent snapshots a report covers"""
        self._window = size
        return self

    def min_alt_coverage(self, ratio: float):
        self._min_alt_coverage = ratio
        return self

    def build(self) -> PageMonitor:
        """Build the configured monitor"""
        config = MonitorConfig(
            keywords=self._keywords,
            measurement_timeout=self._timeout,
            report_window=self._window,
            min_alt_coverage=self._min_alt_coverage
        )
        if self._thresholds is not None:
            config.thresholds = self._thresholds

        return PageMonitor(self.page, config)
