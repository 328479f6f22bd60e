from enum import Enum
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Any


class AlertType(Enum):
    """Severity of an alert"""
    WARNING = 'warning'
    ERROR = 'error'
    INFO = 'info'


@dataclass
class Alert:
    """A threshold violation raised for one page

    Only ``resolved`` ever changes after creation.
    """
    id: str
    type: AlertType
    message: str
    page: str
    timestamp: datetime
    resolved: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'type': self.type.value,
            'message': self.message,
            'page': self.page,
            'timestamp': self.timestamp.isoformat(),
            'resolved': self.resolved
        }
