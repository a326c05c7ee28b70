"""SQLite result handle."""

import sqlite3
from typing import Any

from rowcursor.backends.memory import MemoryResultHandle


class SQLiteResultHandle(MemoryResultHandle):
    """Result handle over an executed sqlite3 cursor.

    sqlite3 cursors are forward only, so the rows are buffered once on
    construction and the cursor is closed. Indexed and column access then
    read from the buffer.
    """

    def __init__(self, cursor: sqlite3.Cursor, **kwargs: Any) -> None:
        """Initialize SQLite result handle.

        Args:
            cursor: A cursor on which a query has been executed
            **kwargs: Ignored (for compatibility with other backends)
        """
        description = cursor.description or ()
        try:
            rows = cursor.fetchall() if description else []
        finally:
            cursor.close()
        super().__init__([column[0] for column in description], rows)
