"""rowcursor - Lazy, random-access iteration over database query results."""

from rowcursor.backends import MemoryResultHandle, SQLiteResultHandle
from rowcursor.config import Config
from rowcursor.exceptions import (
    BackendNotFoundError,
    ConfigError,
    FieldError,
    ResultIndexError,
    ResultReleasedError,
    RowCursorError,
)
from rowcursor.iterator import RowIterator
from rowcursor.observability import (
    LogLevel,
    QueryContext,
    StructuredLogger,
    Timer,
    configure_logging,
    emit_counter,
    emit_metric,
    emit_timer,
    get_logger,
    register_metric_callback,
)
from rowcursor.plugins import create_result_handle
from rowcursor.protocols import ResultHandle, Row
from rowcursor.session import SQLiteSession

__version__ = "0.1.0"
__all__ = [
    # Core
    "RowIterator",
    "ResultHandle",
    "Row",
    # Backends
    "MemoryResultHandle",
    "SQLiteResultHandle",
    "SQLiteSession",
    "create_result_handle",
    # Configuration
    "Config",
    # Errors
    "BackendNotFoundError",
    "ConfigError",
    "FieldError",
    "ResultIndexError",
    "ResultReleasedError",
    "RowCursorError",
    # Observability
    "LogLevel",
    "QueryContext",
    "StructuredLogger",
    "Timer",
    "configure_logging",
    "emit_counter",
    "emit_metric",
    "emit_timer",
    "get_logger",
    "register_metric_callback",
]
