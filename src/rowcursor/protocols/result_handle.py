"""Result handle protocol for driver-level query results."""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Protocol, runtime_checkable


class Row(Mapping[str, Any]):
    """One result record: an ordered, read-only mapping of column name to value.

    Supports item access, attribute-style access and comparison with any
    other mapping, so ``Row({"id": 1}) == {"id": 1}``.
    """

    __slots__ = ("_data",)

    def __init__(
        self,
        data: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        values = dict(data or {})
        values.update(kwargs)
        object.__setattr__(self, "_data", values)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._data[name]
        except KeyError:
            raise AttributeError(f"Row has no column '{name}'") from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Row is read-only")

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Row({self._data!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (Row, (self._data,))

    def to_dict(self) -> dict[str, Any]:
        """Convert row to dictionary."""
        return dict(self._data)


@runtime_checkable
class ResultHandle(Protocol):
    """Protocol for a fetched query result owned by a driver session.

    The result is immutable once fetched: ``count_rows`` is stable for the
    handle's lifetime. ``release`` frees the native buffer and is safe to
    call more than once.
    """

    def fetch_row(self, index: int) -> Row:
        """Return the row at ``index``. Raises ResultIndexError when out of range."""
        ...

    def fetch_column(self, field: str) -> list[Any]:
        """Return one column across all rows. Raises FieldError for unknown names."""
        ...

    def count_rows(self) -> int:
        """Return the total number of rows in the result."""
        ...

    def release(self) -> None:
        """Free the result buffer."""
        ...
