"""Random-access, lazily materializing iterator over one query result."""

import base64
import json
from collections.abc import Iterator
from datetime import date, datetime, time
from decimal import Decimal
from types import TracebackType
from typing import Any
from uuid import UUID

from rowcursor.exceptions import ResultReleasedError
from rowcursor.observability import emit_counter, emit_metric, get_logger
from rowcursor.protocols.result_handle import ResultHandle, Row

logger = get_logger(__name__)


def _json_default(value: Any) -> Any:
    """Encode values json does not know about."""
    if isinstance(value, Row):
        return value.to_dict()
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (Decimal, UUID)):
        return str(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(value)).decode("ascii")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class RowIterator:
    """Iterator over the rows of a single fetched result.

    Owns the result handle it wraps and releases it exactly once, on
    ``close()``, on leaving a ``with`` block, or when garbage collected.
    Rows are fetched from the handle on demand; nothing is loaded until asked.

    Two ways to walk the result:

    - Native iteration. ``for row in rows`` starts a fresh pass from row 0
      each time and leaves the cursor alone.
    - The cursor. ``rewind()``, ``current()``, ``key()``, ``next()`` and
      ``valid()`` move an explicit position, which also drives
      ``is_first()``, ``is_last()`` and the parity helpers.

    Example:
        with RowIterator(handle) as rows:
            while rows.valid():
                print(rows.key(), rows.current(), rows.get_odd_even())
                rows.next()

    Not safe for concurrent use.
    """

    def __init__(self, handle: ResultHandle) -> None:
        self._handle = handle
        self._position = 0
        self._count: int | None = None
        self._closed = False

    def __del__(self) -> None:
        # __init__ may have failed before the handle was assigned
        if getattr(self, "_closed", True):
            return
        try:
            self.close()
        except Exception as e:
            logger.warning("Failed to release result on collection", error=e)

    def __enter__(self) -> "RowIterator":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc is None:
            self.close()
            return
        try:
            self.close()
        except Exception as e:
            logger.error("Failed to release result while unwinding", error=e)

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<RowIterator {state} position={self._position} count={self._count}>"

    @property
    def closed(self) -> bool:
        """Whether the underlying handle has been released."""
        return self._closed

    @property
    def position(self) -> int:
        """Current cursor position."""
        return self._position

    def close(self) -> None:
        """Release the underlying handle.

        Only the first call reaches the handle. A failing release still
        leaves the iterator closed and the error propagates.
        """
        if self._closed:
            return
        self._closed = True
        self._handle.release()
        emit_counter("rowcursor.handle.released")
        logger.debug("Result released", context={"count": self._count})

    def _open_handle(self) -> ResultHandle:
        if self._closed:
            raise ResultReleasedError("RowIterator is closed")
        return self._handle

    def count(self) -> int:
        """Return the number of rows in the result.

        The handle is asked once; the answer is kept for the iterator's
        lifetime, including a count of zero.
        """
        if self._count is None:
            self._count = self._open_handle().count_rows()
            logger.debug("Row count computed", context={"count": self._count})
        return self._count

    def has(self, index: int) -> bool:
        """Return True if ``index`` addresses a row of the result.

        Negative indices are never present.
        """
        return 0 <= index < self.count()

    def get(self, index: int) -> Row:
        """Return the row at ``index``.

        No bounds check is made here; the handle raises ResultIndexError.
        """
        return self._open_handle().fetch_row(index)

    def seek(self, index: int) -> Row:
        """Alias of :meth:`get` for seekable-iterator callers."""
        return self.get(index)

    def rewind(self) -> None:
        self._position = 0

    def current(self) -> Row | None:
        """Return the row under the cursor, or None if the result is empty."""
        if (self._count is not None and self._count > 0) or not self.is_empty():
            return self.get(self._position)
        return None

    def key(self) -> int:
        return self._position

    def next(self) -> None:
        """Advance the cursor. The position is not bounded by the row count."""
        self._position += 1

    def valid(self) -> bool:
        return self.has(self._position)

    def is_first(self) -> bool | None:
        """Is the cursor on the first row? None if the result is empty."""
        if self.is_empty():
            return None
        return self._position == 0

    def is_last(self) -> bool | None:
        """Is the cursor on the last row? None if the result is empty."""
        if self.is_empty():
            return None
        return self._position == self.count() - 1

    def is_empty(self) -> bool:
        return (self._count is not None and self._count == 0) or self.count() == 0

    def is_even(self) -> bool:
        return self._position % 2 == 0

    def is_odd(self) -> bool:
        return self._position % 2 == 1

    def get_odd_even(self) -> str:
        """Return 'odd' or 'even' for the cursor position, e.g. for row styling."""
        return "odd" if self._position % 2 == 1 else "even"

    def slice(self, field: str) -> list[Any]:
        """Return the values of one column, in row order.

        Returns an empty list for an empty result without asking the handle.

        Raises:
            FieldError: If the result has no such column
        """
        if self.is_empty():
            return []
        return list(self._open_handle().fetch_column(field))

    def extract(self) -> list[Row]:
        """Return every row as a list.

        This loads the whole result into memory. The cursor is untouched.
        """
        rows = list(self)
        emit_metric("rowcursor.extract.rows", float(len(rows)))
        return rows

    def serialize(self) -> list[Row]:
        """Return the serializable form of the result, which is :meth:`extract`."""
        return self.extract()

    def to_json(self, **kwargs: Any) -> str:
        """Return the result as a JSON array of objects.

        Args:
            **kwargs: Passed through to ``json.dumps``
        """
        kwargs.setdefault("default", _json_default)
        return json.dumps(self.serialize(), **kwargs)

    def __iter__(self) -> Iterator[Row]:
        for index in range(self.count()):
            yield self.get(index)

    def __len__(self) -> int:
        return self.count()

    def __getitem__(self, index: int) -> Row:
        return self.get(index)

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and not isinstance(index, bool) and self.has(index)
