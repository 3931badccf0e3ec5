import asyncio
from typing import Any, Dict, List, Optional

import pytest

from logo_check.errors import ServiceUnavailable
from logo_check.ports import LogoMatchService


class FakeLogoService(LogoMatchService):
    """Records every call; fails for ids listed in `failures`."""

    def __init__(self, failures: Optional[Dict[str, Exception]] = None) -> None:
        self.calls: List[str] = []
        self.failures = dict(failures or {})
        self.gates: Dict[str, asyncio.Event] = {}

    async def check_logo_match(self, record_id: str) -> Any:
        self.calls.append(record_id)
        gate = self.gates.get(record_id)
        if gate is not None:
            await gate.wait()
        if record_id in self.failures:
            raise self.failures[record_id]
        return {"match": True}


@pytest.fixture
def fake_service() -> FakeLogoService:
    return FakeLogoService()


@pytest.fixture
def failing_service() -> FakeLogoService:
    return FakeLogoService(failures={"M-1002": ServiceUnavailable("logo-match service returned 503")})
