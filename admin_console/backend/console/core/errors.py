from typing import Any, Optional


class ConsoleError(Exception):
    """Base class for failures raised by the console core."""


class TransportFailure(ConsoleError):
    """A remote collection call could not be completed."""

    def __init__(
        self,
        operation: str,
        resource: str,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
    ):
        self.operation = operation
        self.resource = resource
        self.status_code = status_code
        self.detail = detail

        message = f"{resource}.{operation} failed"
        if status_code is not None:
            message += f" (HTTP {status_code})"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class ReconciliationFailure(ConsoleError):
    """A mutation's remote call failed after its optimistic effect was applied.

    By the time this reaches the caller the store has already been rolled back.
    The underlying failure is available as ``__cause__``.
    """

    def __init__(self, operation: str, key: Any, reason: str = ""):
        self.operation = operation
        self.key = key
        self.reason = reason
        message = f"{operation} of {key!r} was rolled back"
        if reason:
            message += f": {reason}"
        super().__init__(message)
