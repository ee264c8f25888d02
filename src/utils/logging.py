"""
Shared logger for the cycle API.

Log level and deployment keys come from Settings once the API is built, so
the module-level logger starts with Powertools defaults.
"""
import os
import sys
import json
import traceback
from functools import partial

from aws_lambda_powertools import Logger

from src.utils.config import Settings

def format_exception(exc_info):
    """Format exception info into a single line."""
    if exc_info is True:
        exc_info = sys.exc_info()

    if exc_info and isinstance(exc_info, tuple) and len(exc_info) == 3:
        trace = ''.join(traceback.format_exception(*exc_info))
        return trace.replace('\n', ' | ').strip()
    return None

class SingleLineLogger(Logger):
    """Logger that keeps tracebacks on the same log line as the message."""

    def exception(self, message, *args, **kwargs):
        exc_info = kwargs.pop('exc_info', True)
        extra = kwargs.pop('extra', None) or {}
        extra['exception'] = format_exception(exc_info)
        kwargs['exc_info'] = False
        kwargs['extra'] = extra
        super().exception(message, *args, **kwargs)

logger = SingleLineLogger(
    service=os.environ.get('POWERTOOLS_SERVICE_NAME', 'cycle_api'),
    json_serializer=partial(json.dumps, default=str),
    use_rfc3339=True
)

def configure_logger(settings: Settings) -> None:
    """Apply the configured level and tag every log line with the deployment."""
    logger.setLevel(settings.log_level.upper())
    logger.append_keys(
        stage=settings.stage,
        table_name=settings.table_name,
        function=os.environ.get('AWS_LAMBDA_FUNCTION_NAME')
    )
