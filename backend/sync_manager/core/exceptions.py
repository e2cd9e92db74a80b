"""
Error taxonomy for sync operations, log sources and the auth gate.
"""

from typing import Any


class SyncManagerError(Exception):
    """Base class for every error raised by sync_manager."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class IntegrationError(SyncManagerError):
    """A remote invocation failed. Converted to a failed Outcome by the invoker."""

    kind = "integration"


class TransportError(IntegrationError):
    """The request never reached the backend (connection refused, DNS, timeout)."""

    kind = "transport"

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.cause = cause
        super().__init__(message)


class HttpStatusError(IntegrationError):
    """The backend answered with a non-2xx status."""

    kind = "http_status"

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP {status_code}: {reason}")


class ApplicationError(IntegrationError):
    """HTTP succeeded but the envelope reported success = false."""

    kind = "application"

    def __init__(self, message: str, detail: Any = None) -> None:
        self.detail = detail
        super().__init__(message)


class UnknownOperationError(SyncManagerError):
    """A trigger or state update named an id that is not in the catalog."""

    def __init__(self, operation_id: str) -> None:
        self.operation_id = operation_id
        super().__init__(f"Unknown sync operation: {operation_id}")


class OperationAlreadyRunningError(SyncManagerError):
    """A trigger arrived while the same operation was still running."""

    def __init__(self, operation_id: str) -> None:
        self.operation_id = operation_id
        super().__init__(f"Sync operation already running: {operation_id}")


class LogSourceError(SyncManagerError):
    """Fetching, decoding or downloading an external log file failed."""

    def __init__(self, message: str, source: str | None = None, cause: Exception | None = None) -> None:
        self.source = source
        self.cause = cause
        super().__init__(message)


class AuthenticationError(SyncManagerError):
    """Wrong password at the auth gate."""
