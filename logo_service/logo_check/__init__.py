"""
Top-level package for the model logo check trigger.

When a model record page becomes active, the host (see `main.py`) hands
the record id to a `VerificationTrigger`, which issues one background
logo-match request and contains any failure:

- GET /health
- GET /models/{record_id}
"""

from .outcome import Failure, Success, VerificationOutcome
from .ports import LogoMatchService
from .trigger import Activation, ActivationState, VerificationTrigger

__all__ = [
    "Activation",
    "ActivationState",
    "Failure",
    "LogoMatchService",
    "Success",
    "VerificationOutcome",
    "VerificationTrigger",
]
