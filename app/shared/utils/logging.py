# 📄 File: app/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# Keeps the marketplace's diary: every request, database call and AI question is written down
# with the same labels, so when a seller or farmer reports a problem we can find what happened.

# 🧪 Purpose (Technical Summary):
# Structured logging on the standard library: JSON or text output chosen by LOG_FORMAT, the
# request id from a context variable stamped on every record, timing helpers for HTTP requests,
# MongoDB operations and Gemini calls, and business events for listing/prompt lifecycle.

# 🔗 Dependencies:
# - logging: Python standard logging
# - contextvars: request id set by the error handling middleware
# - json: JSON record rendering

# 🔄 Connected Modules / Calls From:
# Used by: app.main (setup), request logging middleware, repositories (database timings),
# the shared API client (external API timings), command handlers (business events)

import json
import logging
import os
import sys
import traceback
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from app.shared.config.settings import get_settings

SERVICE_NAME = "plant-medicine-api"

TEXT_FORMAT = "%(timestamp)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"

# Set per request by ErrorHandlingMiddleware
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

_logging_configured = False
_loggers_cache: Dict[str, "StructuredLogger"] = {}


class ContextualFormatter(logging.Formatter):
    """Text formatter that stamps the request id, host and service on each record."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.hostname = os.uname().nodename if hasattr(os, 'uname') else 'unknown'

    def format(self, record):
        record.request_id = request_id_var.get() or '-'
        record.hostname = self.hostname
        record.service = SERVICE_NAME
        record.timestamp = datetime.now(timezone.utc).isoformat()
        return super().format(record)


class JSONFormatter(ContextualFormatter):
    """
    One JSON object per line.

    Structured fields passed through ``extra`` end up under ``"extra"``;
    exceptions are rendered with their traceback.
    """

    def format(self, record):
        entry: Dict[str, Any] = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'function': record.funcName,
            'line': record.lineno,
            'service': SERVICE_NAME,
            'hostname': self.hostname,
        }

        request_id = request_id_var.get()
        if request_id:
            entry['request_id'] = request_id

        if record.exc_info:
            entry['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info),
            }

        extra_fields = getattr(record, 'extra_fields', None)
        if extra_fields:
            entry['extra'] = extra_fields

        return json.dumps(entry, default=str, ensure_ascii=False)


class PerformanceLogger:
    """Timing records for requests, MongoDB operations and upstream API calls."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def log_request(
        self,
        method: str,
        path: str,
        status_code: int,
        duration_ms: float,
        extra: Dict = None
    ):
        fields = {
            'event_type': 'http_request',
            'method': method,
            'path': path,
            'status_code': status_code,
            'duration_ms': round(duration_ms, 2),
            **(extra or {})
        }
        level = logging.INFO if status_code < 500 else logging.ERROR
        self.logger.log(
            level,
            f"HTTP {method} {path} - {status_code} - {duration_ms:.2f}ms",
            extra={'extra_fields': fields}
        )

    def log_database_operation(
        self,
        operation: str,
        collection: str,
        duration_ms: float,
        documents: Optional[int] = None
    ):
        fields = {
            'event_type': 'database_operation',
            'operation': operation,
            'collection': collection,
            'duration_ms': round(duration_ms, 2),
        }
        if documents is not None:
            fields['documents'] = documents

        self.logger.debug(
            f"DB {operation} on {collection} - {duration_ms:.2f}ms",
            extra={'extra_fields': fields}
        )

    def log_external_api_call(
        self,
        api_name: str,
        endpoint: str,
        method: str,
        status_code: int,
        duration_ms: float,
        success: bool
    ):
        fields = {
            'event_type': 'external_api_call',
            'api_name': api_name,
            'endpoint': endpoint,
            'method': method,
            'status_code': status_code,
            'duration_ms': round(duration_ms, 2),
            'success': success,
        }
        self.logger.log(
            logging.INFO if success else logging.WARNING,
            f"API {api_name} {method} {endpoint} - {status_code} - {duration_ms:.2f}ms",
            extra={'extra_fields': fields}
        )


class StructuredLogger:
    """
    Thin wrapper over ``logging.Logger``.

    Keyword arguments other than the standard logging ones are collected
    into structured fields, so ``logger.info("Saved", entity_id=x)`` works.
    """

    _LOGGING_KWARGS = ('exc_info', 'stack_info', 'stacklevel')

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)
        self.performance = PerformanceLogger(self.logger)

    def debug(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.DEBUG, message, extra, **kwargs)

    def info(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.INFO, message, extra, **kwargs)

    def warning(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.WARNING, message, extra, **kwargs)

    def error(self, message: str, extra: Dict = None, exc_info: bool = False, **kwargs):
        self._log(logging.ERROR, message, extra, exc_info=exc_info, **kwargs)

    def _log(self, level: int, message: str, extra: Dict = None, **kwargs):
        fields = dict(extra or {})
        log_kwargs = {}
        for key, value in kwargs.items():
            if key in self._LOGGING_KWARGS:
                log_kwargs[key] = value
            else:
                fields[key] = value

        if fields:
            log_kwargs['extra'] = {'extra_fields': fields}

        self.logger.log(level, message, **log_kwargs)

    def log_business_event(
        self,
        event_type: str,
        description: str,
        entity_id: str = None,
        entity_type: str = None
    ):
        """Marketplace and advisor lifecycle events (medicine_created, prompt_saved, ...)."""
        fields = {'event_type': 'business_event', 'business_event_type': event_type}
        if entity_id:
            fields['entity_id'] = entity_id
        if entity_type:
            fields['entity_type'] = entity_type

        self.info(description, extra=fields)


def setup_logging(log_level: str = None, log_format: str = None) -> logging.Logger:
    """
    Configure the root logger once per process.

    Args:
        log_level: Overrides LOG_LEVEL from settings
        log_format: 'json' or 'text', overrides LOG_FORMAT

    Returns:
        logging.Logger: The "startup" logger
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger("startup")

    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format.lower() == 'json':
        formatter = JSONFormatter()
    else:
        formatter = ContextualFormatter(TEXT_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Driver chatter
    for noisy in ('pymongo', 'aiohttp', 'asyncio'):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    _logging_configured = True
    return logging.getLogger("startup")


def get_logger(name: str) -> StructuredLogger:
    """Cached StructuredLogger for a module (pass ``__name__``)."""
    if name not in _loggers_cache:
        _loggers_cache[name] = StructuredLogger(name)
    return _loggers_cache[name]
