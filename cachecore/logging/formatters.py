"""
JSON log lines for cache loggers.

Enabled through `LOG_JSON_FORMAT`; each record becomes one JSON object with
timestamp, level, logger name and message. Extra fields are dropped.
"""

import json
import logging
from datetime import datetime


class JsonFormatter(logging.Formatter):
    """One JSON object per record, for log shippers that parse structured lines."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(
            {
                "timestamp": datetime.fromtimestamp(record.created).isoformat(),
                "level": record.levelname,
                "logger": record.name,
                "message": record.getMessage(),
            }
        )
