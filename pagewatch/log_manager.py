import json
import logging
from pathlib import Path
from datetime import datetime
from typing import Optional

EVENTS_LOGGER = 'pagewatch.events'


class LogManager:
    """Logging setup with console, file and structured event output"""

    def __init__(self, log_dir: Optional[str] = None, log_level: str = "INFO"):
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.setup_logging(log_level)

    def setup_logging(self, log_level: str):
        """Set up logging handlers on the root and event loggers"""
        detailed_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
        )
        simple_formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s'
        )

        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, log_level.upper()))
        root_logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, log_level.upper()))
        console_handler.setFormatter(simple_formatter)
        root_logger.addHandler(console_handler)

        self.events_logger = logging.getLogger(EVENTS_LOGGER)
        self.events_logger.setLevel(logging.INFO)
        self.events_logger.handlers.clear()
        self.events_logger.propagate = False

        if not self.log_dir:
            return

        date_suffix = datetime.now().strftime('%Y%m%d')

        file_handler = logging.FileHandler(self.log_dir / f"monitor_{date_suffix}.log")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

        error_handler = logging.FileHandler(self.log_dir / f"errors_{date_suffix}.log")
        error_handler.setLevel(logging.WARNING)
        error_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(error_handler)

        self.events_handler = logging.FileHandler(self.log_dir / f"events_{date_suffix}.log")
        self.events_logger.addHandler(self.events_handler)


def log_event(event_type: str, **fields):
    """Write one monitoring event as a JSON line on the events logger"""
    event_data = {
        'timestamp': datetime.now().isoformat(),
        'event_type': event_type,
        **fields
    }
    logging.getLogger(EVENTS_LOGGER).info(json.dumps(event_data, default=str))
