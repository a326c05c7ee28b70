"""SQLite session producing row iterators."""

import sqlite3
import uuid
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from rowcursor.backends.sqlite import SQLiteResultHandle
from rowcursor.config import Config
from rowcursor.exceptions import ConfigError
from rowcursor.iterator import RowIterator
from rowcursor.observability import QueryContext, Timer, emit_timer, get_logger

logger = get_logger(__name__)

Params = Sequence[Any] | dict[str, Any] | None


class SQLiteSession:
    """Synchronous SQLite session.

    Every ``query`` returns a :class:`RowIterator` that owns its result;
    close it, or use it in a ``with`` block, once done.

    Example:
        with SQLiteSession() as session:
            session.execute("CREATE TABLE users (id INTEGER, name TEXT)")
            with session.query("SELECT * FROM users") as rows:
                names = rows.slice("name")
    """

    def __init__(
        self,
        path: str | Path = ":memory:",
        session_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize SQLite session.

        Args:
            path: Path to SQLite database file. Use ":memory:" for in-memory database.
            session_id: Identifier carried by this session's logs and metrics,
                generated when omitted
            **kwargs: Ignored (for compatibility with other backends)
        """
        if path != ":memory:":
            path = Path(path)
            path.parent.mkdir(parents=True, exist_ok=True)
        self.path = path
        self.session_id = session_id or str(uuid.uuid4())
        self._conn: sqlite3.Connection | None = None

    @classmethod
    def from_config(cls, config: Config) -> "SQLiteSession":
        """Create a session from the ``database`` section of a Config."""
        if config.database.backend != "sqlite":
            raise ConfigError(
                f"SQLiteSession cannot serve database backend '{config.database.backend}'"
            )
        return cls(path=config.database.path)

    def _get_connection(self) -> sqlite3.Connection:
        """Get or create the database connection."""
        if self._conn is None:
            self._conn = sqlite3.connect(str(self.path))
        return self._conn

    def query(self, sql: str, params: Params = None) -> RowIterator:
        """Execute a query and return an iterator over its rows.

        Logs and metrics of the query carry a fresh query id and this
        session's id.
        """
        conn = self._get_connection()
        with QueryContext(session_id=self.session_id):
            with Timer() as t:
                cursor = conn.execute(sql, params or ())
                handle = SQLiteResultHandle(cursor)
            emit_timer("rowcursor.query.duration_ms", t.duration_ms)
            logger.debug(
                "Query executed",
                context={"rows": handle.count_rows()},
                duration_ms=t.duration_ms,
            )
        return RowIterator(handle)

    def execute(self, sql: str, params: Params = None) -> int:
        """Execute a statement without a result set and commit.

        Returns:
            The number of rows modified
        """
        conn = self._get_connection()
        cursor = conn.execute(sql, params or ())
        conn.commit()
        try:
            return cursor.rowcount
        finally:
            cursor.close()

    def execute_many(self, sql: str, params_list: Sequence[Params]) -> None:
        """Execute a statement once per parameter set and commit."""
        conn = self._get_connection()
        conn.executemany(sql, [params or () for params in params_list])
        conn.commit()

    def close(self) -> None:
        """Close the database connection."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "SQLiteSession":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
