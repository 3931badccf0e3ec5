"""
LogoMatchService Port
=====================

Abstract interface for the remote operation that compares a model
record's logo with its expected reference.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

RecordIdentifier = str


class LogoMatchService(ABC):
    """
    Port for the logo-match check.

    How a match is computed is up to the implementation. The trigger
    only needs the call to complete or raise.
    """

    @abstractmethod
    async def check_logo_match(self, record_id: RecordIdentifier) -> Any:
        """
        Compare the logo of `record_id` against its reference.

        Args:
            record_id: Opaque, non-empty id of the model record.

        Returns:
            An opaque result payload.

        Raises:
            ServiceInvocationFailure (or any other exception) when the
            check could not be performed.
        """
        ...
