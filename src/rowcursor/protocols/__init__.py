"""Protocol interfaces for pluggable result handles."""

from rowcursor.protocols.result_handle import ResultHandle, Row

__all__ = [
    "ResultHandle",
    "Row",
]
