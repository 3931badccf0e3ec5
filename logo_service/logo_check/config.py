"""
Configuration helpers for the logo check trigger.

Everything is read from environment variables at import time:

- LOGO_CHECK_SERVICE_URL: base URL of the remote logo-match service
- LOGO_CHECK_TIMEOUT_SECONDS: timeout for one remote call
- LOGO_CHECK_LOG_LEVEL: level for the diagnostic log
- LOGO_CHECK_HOST / LOGO_CHECK_PORT: bind address used by `main.run()`
"""

from __future__ import annotations

import logging
import os
from typing import Optional

SERVICE_URL: str = os.environ.get("LOGO_CHECK_SERVICE_URL", "http://localhost:8081").rstrip("/")

TIMEOUT_SECONDS: float = float(os.environ.get("LOGO_CHECK_TIMEOUT_SECONDS", "10.0"))

LOG_LEVEL: str = os.environ.get("LOGO_CHECK_LOG_LEVEL", "INFO").upper()

HOST: str = os.environ.get("LOGO_CHECK_HOST", "0.0.0.0")
PORT: int = int(os.environ.get("LOGO_CHECK_PORT", "8080"))


def configure_logging(level: Optional[str] = None) -> None:
    """Route the diagnostic channel to stderr at the configured level."""
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
