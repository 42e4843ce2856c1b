"""JSON logging for the Lambda functions

Every handler package calls `initialize_logging()` from its `__init__.py`, so
the root logger is configured before the handler module logs anything. Records
go to stdout as one JSON object per line, which CloudWatch stores as-is.

Anything passed through `extra={...}` becomes a top-level field. A redirect, for
instance, is logged as:
{
    "timestamp": "2025-10-15T08:30:00.125Z",
    "level": "INFO",
    "logger": "shortlinks.lambdas.redirect_url.app",
    "message": "Redirecting client to original URL. Responding with 302.",
    "shortcode": "abc123XY",
    "event": "REDIRECT_SUCCESS"
}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from shortlinks.constants import ENV


# Attributes every LogRecord carries, plus the ones Formatter.format() adds
RESERVED_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {'message', 'asctime'}


class JsonFormatter(logging.Formatter):
    """Render a LogRecord, its `extra` fields and any traceback as a JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        created_at = datetime.fromtimestamp(record.created, tz=UTC)
        log = {
            'timestamp': created_at.isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        log.update(
            (key, value) for key, value in vars(record).items() if key not in RESERVED_RECORD_ATTRS and key not in log
        )
        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


def initialize_logging() -> None:
    """Send JSON logs to stdout at the level named by the LOG_LEVEL variable."""
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {'json': {'()': JsonFormatter}},
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {
                'level': os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper(),
                'handlers': ['stdout'],
            },
        }
    )
