"""rowcursor exceptions."""


class RowCursorError(Exception):
    """Base exception for rowcursor."""

    pass


class ConfigError(RowCursorError):
    """Configuration error."""

    pass


class ResultIndexError(RowCursorError, IndexError):
    """Row index is outside the result's valid range."""

    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(f"Row index {index} out of range for result of {count} rows")


class FieldError(RowCursorError, KeyError):
    """Column name is not part of the result."""

    def __init__(self, field: str, available: list[str] | None = None) -> None:
        self.field = field
        self.available = list(available or [])
        super().__init__(field)

    def __str__(self) -> str:
        columns = ", ".join(self.available) or "(none)"
        return f"Unknown column '{self.field}'. Available: {columns}"


class ResultReleasedError(RowCursorError):
    """The result buffer has already been released."""

    pass


class BackendNotFoundError(RowCursorError, LookupError):
    """No result handle backend registered under the requested name."""

    pass
