"""
Utility modules for page monitoring
"""

from .latch import CountdownLatch

__all__ = [
    'CountdownLatch'
]
