"""
Tagged outcome of one logo-match call.

The remote service either returns an opaque payload or raises. `capture`
turns that into a `Success` or `Failure` value so callers branch on a type
instead of wrapping every call site in try/except.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union


@dataclass(frozen=True)
class Success:
    payload: Any = None


@dataclass(frozen=True)
class Failure:
    message: str
    cause: Optional[BaseException] = None

    @property
    def error_type(self) -> str:
        if self.cause is None:
            return "Failure"
        return type(self.cause).__name__


VerificationOutcome = Union[Success, Failure]


async def capture(call: Callable[[], Any]) -> VerificationOutcome:
    """
    Invoke `call`, await its result if needed, and wrap it.

    `call` runs inside the guard, so a service that raises before handing
    back an awaitable is caught as well. Any `Exception` becomes a
    `Failure`. Cancellation and other `BaseException`s still propagate.
    """
    try:
        payload = call()
        if inspect.isawaitable(payload):
            payload = await payload
    except Exception as exc:
        return Failure(message=str(exc) or type(exc).__name__, cause=exc)
    return Success(payload=payload)
