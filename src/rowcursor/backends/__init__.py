"""Built-in result handle backends."""

from rowcursor.backends.memory import MemoryResultHandle
from rowcursor.backends.sqlite import SQLiteResultHandle

__all__ = [
    "MemoryResultHandle",
    "SQLiteResultHandle",
]
