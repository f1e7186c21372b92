from __future__ import annotations

from typing import Optional


class MalformedDateError(ValueError):
    """
    Raised when a row's release date cannot be parsed into a calendar date.

    The row is rejected as a whole; callers choose whether to skip it or
    abort the load (see ``normalize_rows(on_error=...)``).
    """

    def __init__(self, text: object, row_number: Optional[int] = None) -> None:
        self.text = text
        self.row_number = row_number
        where = f" (row {row_number})" if row_number is not None else ""
        super().__init__(f"Unparsable release date {text!r}{where}")


class EmptyDatasetDomainError(ValueError):
    """
    Raised when an axis domain is requested for an empty record set.

    Callers should check for records first and supply a fallback domain.
    """
