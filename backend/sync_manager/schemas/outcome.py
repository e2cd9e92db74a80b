"""
Normalized result of one remote invocation.
"""

from typing import Any, Literal

from pydantic import BaseModel

ErrorKind = Literal["transport", "http_status", "application"]


class Outcome(BaseModel):
    """Success-with-payload or failure-with-reason, independent of the transport."""

    ok: bool
    message: str
    records_processed: int | None = None
    error_kind: ErrorKind | None = None
    status_code: int | None = None
    data: Any = None

    @classmethod
    def success(cls, message: str, records_processed: int = 0, data: Any = None) -> "Outcome":
        return cls(ok=True, message=message, records_processed=records_processed, data=data)

    @classmethod
    def failure(
        cls,
        message: str,
        error_kind: ErrorKind,
        status_code: int | None = None,
    ) -> "Outcome":
        return cls(ok=False, message=message, error_kind=error_kind, status_code=status_code)
