"""
In-memory alert and snapshot storage
"""

from .alert_registry import AlertRegistry
from .history_store import HistoryStore

__all__ = [
    'AlertRegistry',
    'HistoryStore'
]
