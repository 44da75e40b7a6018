"""Custom exception hierarchy for the Zoho Reports client."""
from __future__ import annotations

from typing import Any


class ReportsError(RuntimeError):
    """Base error for Zoho Reports failures."""

    def __init__(
        self,
        message: str,
        *,
        action: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.action = action
        self.status_code = status_code


class TransportError(ReportsError):
    """Raised when the HTTP exchange itself fails (DNS, connect, TLS, timeout)."""

    def __init__(
        self,
        message: str,
        *,
        action: str | None = None,
        status_code: int | None = None,
        reason: str | None = None,
    ) -> None:
        super().__init__(message, action=action, status_code=status_code)
        self.reason = reason


class ParseError(ReportsError):
    """Raised when a response cannot be interpreted.

    Usually signals a version mismatch between this client and the service.
    """

    def __init__(
        self,
        message: str,
        *,
        action: str | None = None,
        status_code: int | None = None,
        content: Any | None = None,
    ) -> None:
        super().__init__(message, action=action, status_code=status_code)
        self.content = content


class ServerError(ReportsError):
    """Raised when the service answers with an error envelope."""

    def __init__(
        self,
        code: int | str | None,
        message: str,
        *,
        action: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(
            f"Zoho Reports error {code} for {action} (HTTP {status_code}): {message}",
            action=action,
            status_code=status_code,
        )
        self.code = code
        self.error_message = message
