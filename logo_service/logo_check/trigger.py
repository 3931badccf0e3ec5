"""
Activation-bound logo check.

A `VerificationTrigger` is handed a record id each time a model record
surface becomes active. It issues exactly one logo-match call for that
activation and absorbs whatever the call does: a success payload is
dropped, a failure is written to the diagnostic log. Nothing is raised
back to the host.

Each activation walks its own `idle -> pending -> settled` cycle. There
is no retry, no dedupe and no cache, so activating the same record again
issues a fresh call.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Set

from .outcome import Failure, capture
from .ports import LogoMatchService, RecordIdentifier

logger = logging.getLogger(__name__)


class ActivationState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SETTLED = "settled"


_TRANSITIONS = {
    ActivationState.IDLE: ActivationState.PENDING,
    ActivationState.PENDING: ActivationState.SETTLED,
}


@dataclass
class Activation:
    """One activation of a record surface. The outcome itself is not kept."""

    record_id: RecordIdentifier
    state: ActivationState = ActivationState.IDLE

    def advance(self, target: ActivationState) -> None:
        if _TRANSITIONS.get(self.state) is not target:
            raise RuntimeError(
                f"activation for {self.record_id!r} cannot move from "
                f"{self.state.value} to {target.value}"
            )
        self.state = target


class VerificationTrigger:
    """Runs one contained logo-match check per activation."""

    def __init__(
        self,
        service: LogoMatchService,
        diagnostics: Optional[logging.Logger] = None,
    ) -> None:
        self._service = service
        self._diagnostics = diagnostics or logger
        # Strong refs for fire-and-forget tasks until they finish.
        self._in_flight: Set[asyncio.Task] = set()

    @property
    def service(self) -> LogoMatchService:
        return self._service

    @property
    def in_flight(self) -> int:
        return len(self._in_flight)

    async def on_activate(self, record_id: RecordIdentifier) -> Activation:
        """
        Check the logo of `record_id` and settle.

        The record id is passed through untouched; validating it is the
        job of the host and the service. Returns the settled activation.
        """
        activation = Activation(record_id=record_id)

        activation.advance(ActivationState.PENDING)
        outcome = await capture(lambda: self._service.check_logo_match(record_id))
        activation.advance(ActivationState.SETTLED)

        if isinstance(outcome, Failure):
            self._diagnostics.error(
                "Error checking logo match for record %s: %s: %s",
                record_id,
                outcome.error_type,
                outcome.message,
                exc_info=outcome.cause,
            )
        else:
            logger.debug("Logo match check settled for record %s", record_id)

        return activation

    def activate(self, record_id: RecordIdentifier) -> "asyncio.Task[Activation]":
        """
        Schedule `on_activate` on the running loop and return at once.

        The service call is not made before this returns: it starts on the
        task's first step, at the next turn of the loop. A coroutine cannot
        run eagerly on every supported Python, so only the scheduling is
        synchronous with the activation.

        Must be called from inside a running event loop. The task is kept
        alive until it settles even if the caller drops it.
        """
        task = asyncio.get_running_loop().create_task(self.on_activate(record_id))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        return task
