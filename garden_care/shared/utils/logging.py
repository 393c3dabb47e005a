# 📄 File: garden_care/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# This file sets up a logging system that records what happens inside the garden care core in a
# structured way, so it is easy to see which care profiles came from the cache, which were freshly
# generated, and which database writes quietly failed.

# 🧪 Purpose (Technical Summary):
# Structured logging for the core: JSON records via python-json-logger or a contextual text
# format, request/owner/correlation IDs bound through contextvars, keyword-argument extra
# fields, and timing events for the record store, caches, HTTP calls and generation.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging / contextvars (stdlib)
# - garden_care.shared.config.settings: default level, format and file

# 🔄 Connected Modules / Calls From:
# Used by: profile cache, generation orchestrator, identification cache, HTTP client,
# repositories and application handlers

import logging
import socket
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterator, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

from garden_care.shared.config.settings import get_settings

SERVICE_NAME = 'garden-care-core'
HOSTNAME = socket.gethostname()

# Bound per unit of work by log_context()
request_id_var: ContextVar[str] = ContextVar('request_id', default='')
owner_id_var: ContextVar[str] = ContextVar('owner_id', default='')
correlation_id_var: ContextVar[str] = ContextVar('correlation_id', default='')

_CONTEXT_VARS = (
    ('request_id', request_id_var),
    ('owner_id', owner_id_var),
    ('correlation_id', correlation_id_var),
)

# Keyword arguments the stdlib logger understands; anything else becomes an extra field
_LOGGING_KWARGS = frozenset({'exc_info', 'stack_info', 'stacklevel'})

NOISY_LOGGERS = ('aiohttp', 'asyncio', 'sqlalchemy.engine', 'aiosqlite')

_logging_configured = False
_loggers_cache: Dict[str, "StructuredLogger"] = {}


def current_context() -> Dict[str, str]:
    """The bound request/owner/correlation IDs, omitting unset ones."""
    return {name: var.get() for name, var in _CONTEXT_VARS if var.get()}


class ContextualFormatter(logging.Formatter):
    """Text formatter; records gain timestamp, service and the bound context IDs."""

    def format(self, record):
        record.timestamp = datetime.now(timezone.utc).isoformat()
        record.service = SERVICE_NAME
        record.hostname = HOSTNAME
        for name, var in _CONTEXT_VARS:
            setattr(record, name, var.get())
        return super().format(record)


class JSONFormatter(JsonFormatter):
    """
    One JSON object per record.

    Fields passed through StructuredLogger land under ``extra``; the bound
    context IDs are top-level keys and only appear when set.
    """

    def __init__(self):
        super().__init__('%(levelname)s %(name)s %(message)s')

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = log_record.pop('levelname', record.levelname)
        log_record['logger'] = log_record.pop('name', record.name)
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno
        log_record['service'] = SERVICE_NAME
        log_record['hostname'] = HOSTNAME
        log_record.update(current_context())

        extra_fields = log_record.pop('extra_fields', None)
        if extra_fields:
            log_record['extra'] = extra_fields


class PerformanceLogger:
    """
    Timing events for the record store, the profile caches, outbound HTTP
    calls and care profile generation. Every event carries an
    ``event_type`` so log queries can pick them out.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def _emit(self, level: int, event_type: str, message: str, fields: Dict, extra: Dict = None):
        extra_fields = {'event_type': event_type}
        extra_fields.update({k: v for k, v in fields.items() if v is not None})
        extra_fields.update(extra or {})
        self.logger.log(level, message, extra={'extra_fields': extra_fields})

    def log_database_query(
        self,
        query_type: str,
        table: str,
        duration_ms: float,
        rows_affected: int = None,
        extra: Dict = None
    ):
        self._emit(
            logging.DEBUG,
            'database_query',
            f"DB {query_type} on {table} - {duration_ms:.2f}ms",
            {'query_type': query_type, 'table': table, 'duration_ms': duration_ms,
             'rows_affected': rows_affected},
            extra
        )

    def log_external_api_call(
        self,
        api_name: str,
        endpoint: str,
        method: str,
        status_code: int,
        duration_ms: float,
        success: bool,
        extra: Dict = None
    ):
        """Failed calls surface at WARNING."""
        self._emit(
            logging.INFO if success else logging.WARNING,
            'external_api_call',
            f"API {api_name} {method} {endpoint} - {status_code} - {duration_ms:.2f}ms",
            {'api_name': api_name, 'endpoint': endpoint, 'method': method,
             'status_code': status_code, 'duration_ms': duration_ms, 'success': success},
            extra
        )

    def log_cache_operation(
        self,
        operation: str,
        cache_type: str,
        key: str,
        hit: bool = None,
        duration_ms: float = None,
        extra: Dict = None
    ):
        outcome = '' if hit is None else (' hit' if hit else ' miss')
        self._emit(
            logging.DEBUG,
            'cache_operation',
            f"Cache {operation}{outcome} {cache_type} - {key}",
            {'operation': operation, 'cache_type': cache_type, 'cache_key': key,
             'cache_hit': hit, 'duration_ms': duration_ms},
            extra
        )

    def log_generation(
        self,
        provider: str,
        plant_name: str,
        duration_ms: float,
        success: bool,
        extra: Dict = None
    ):
        """One care profile generation attempt (cache misses only)."""
        self._emit(
            logging.INFO if success else logging.WARNING,
            'care_profile_generation',
            f"Generation by {provider} for {plant_name} - {'ok' if success else 'failed'} - {duration_ms:.2f}ms",
            {'provider': provider, 'plant_name': plant_name, 'duration_ms': duration_ms,
             'success': success},
            extra
        )


class StructuredLogger:
    """
    Thin wrapper over a stdlib logger.

    ``logger.info("Profile cache hit", cache_key=key)`` records
    ``cache_key`` as an extra field; an explicit ``extra`` dict is merged
    in first.
    """

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
        if not self.logger.isEnabledFor(level):
            return

        options = {k: v for k, v in kwargs.items() if k in _LOGGING_KWARGS}
        extra_fields = dict(extra or {})
        extra_fields.update((k, v) for k, v in kwargs.items() if k not in _LOGGING_KWARGS)

        if extra_fields:
            options['extra'] = {'extra_fields': extra_fields}
        self.logger.log(level, message, **options)


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format.lower() == 'json':
        return JSONFormatter()
    return ContextualFormatter('%(timestamp)s - %(name)s - %(levelname)s - %(message)s')


def setup_logging(
    log_level: str = None,
    log_format: str = None,
    log_file: str = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Configure the root logger once per process.

    Arguments left as None fall back to LOG_LEVEL, LOG_FORMAT and LOG_FILE
    from settings. A second call changes nothing and returns the startup
    logger.
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger("startup")

    settings = get_settings()
    level = getattr(logging, (log_level or settings.LOG_LEVEL).upper(), logging.INFO)
    formatter = _build_formatter(log_format or settings.LOG_FORMAT)
    log_file = log_file or settings.LOG_FILE

    handlers = []
    if enable_console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _logging_configured = True
    return logging.getLogger("startup")


def get_logger(name: str) -> StructuredLogger:
    """Cached StructuredLogger for a module (pass ``__name__``)."""
    if name not in _loggers_cache:
        _loggers_cache[name] = StructuredLogger(name)
    return _loggers_cache[name]


@contextmanager
def log_context(
    request_id: Optional[str] = None,
    owner_id: Optional[str] = None,
    correlation_id: Optional[str] = None
) -> Iterator[Dict[str, Optional[str]]]:
    """
    Bind IDs to every record logged inside the block.

    Args:
        request_id: Unit-of-work identifier; a UUID4 is generated when omitted
        owner_id: Gardener the work is done for
        correlation_id: Identifier shared with the calling service
    """
    bound = {
        'request_id': request_id or str(uuid4()),
        'owner_id': owner_id,
        'correlation_id': correlation_id,
    }
    tokens = [(var, var.set(bound[name] or '')) for name, var in _CONTEXT_VARS]

    try:
        yield bound
    finally:
        for var, token in reversed(tokens):
            var.reset(token)
