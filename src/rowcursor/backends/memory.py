"""In-memory result handle."""

from collections.abc import Sequence
from typing import Any

from rowcursor.exceptions import FieldError, ResultIndexError, ResultReleasedError
from rowcursor.protocols.result_handle import Row


class MemoryResultHandle:
    """Result handle over rows already held in memory.

    Suitable for tests and for drivers that return the whole result at once.
    Rows are sequences aligned with ``columns``.
    """

    def __init__(
        self,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize memory result handle.

        Args:
            columns: Column names in result order
            rows: Row values aligned with ``columns``
            **kwargs: Ignored (for compatibility with other backends)

        Raises:
            ValueError: If a row does not have one value per column
        """
        self.columns = list(columns)
        # Duplicate names resolve to the last column, as in a row mapping
        self._positions = {name: i for i, name in enumerate(self.columns)}
        self._rows: list[tuple[Any, ...]] | None = []
        for i, row in enumerate(rows or []):
            if len(row) != len(self.columns):
                raise ValueError(
                    f"Row {i} has {len(row)} values, expected {len(self.columns)}"
                )
            self._rows.append(tuple(row))
        self.release_count = 0

    @staticmethod
    def from_dicts(records: Sequence[dict[str, Any]]) -> "MemoryResultHandle":
        """Build a handle from dictionaries sharing the first record's keys."""
        columns = list(records[0].keys()) if records else []
        return MemoryResultHandle(columns, [[record[c] for c in columns] for record in records])

    @property
    def released(self) -> bool:
        """Whether the buffer has been freed."""
        return self._rows is None

    def _buffer(self) -> list[tuple[Any, ...]]:
        if self._rows is None:
            raise ResultReleasedError("Result buffer has been released")
        return self._rows

    def fetch_row(self, index: int) -> Row:
        """Return the row at ``index``."""
        rows = self._buffer()
        if not 0 <= index < len(rows):
            raise ResultIndexError(index, len(rows))
        return Row(zip(self.columns, rows[index]))

    def fetch_column(self, field: str) -> list[Any]:
        """Return the values of one column across all rows."""
        rows = self._buffer()
        position = self._positions.get(field)
        if position is None:
            raise FieldError(field, self.columns)
        return [row[position] for row in rows]

    def count_rows(self) -> int:
        """Return the number of buffered rows."""
        return len(self._buffer())

    def release(self) -> None:
        """Drop the buffer. Subsequent calls are no-ops."""
        if self._rows is None:
            return
        self._rows = None
        self.release_count += 1
