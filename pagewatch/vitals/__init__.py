"""
Core Web Vitals measurement
"""

from .instrumentation import PerformanceInstrumentation, Observation
from .null_instrumentation import NullInstrumentation
from .playwright_instrumentation import PlaywrightInstrumentation
from .collector import VitalsCollector

__all__ = [
    'PerformanceInstrumentation',
    'Observation',
    'NullInstrumentation',
    'PlaywrightInstrumentation',
    'VitalsCollector'
]
