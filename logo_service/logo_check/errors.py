"""
Exception types for the logo check trigger.

`InputUnavailable` belongs to the host: it is raised when no usable record
id exists and it is never caught by the trigger. Every
`ServiceInvocationFailure` is absorbed by the trigger and only shows up on
the diagnostic log.
"""

from __future__ import annotations

from typing import Optional


class LogoCheckError(Exception):
    """Base class for errors raised by this package."""


class InputUnavailable(LogoCheckError):
    """The host surface could not supply a usable record id."""


class ServiceInvocationFailure(LogoCheckError):
    """The remote logo-match call did not produce a usable result."""


class ServiceUnavailable(ServiceInvocationFailure):
    """Transport error, timeout or 5xx from the logo-match service."""


class ServiceRejected(ServiceInvocationFailure):
    """The logo-match service refused the request (4xx)."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
