"""
HTTP adapter for the remote logo-match service.

Posts `{"modeloId": <record id>}` to `<base_url>/check-logo-match` and
parses the reply into a `CheckLogoResponse`. Library and HTTP errors are
translated into the `ServiceInvocationFailure` family; nothing is retried
here.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from .config import SERVICE_URL, TIMEOUT_SECONDS
from .errors import ServiceInvocationFailure, ServiceRejected, ServiceUnavailable
from .ports import LogoMatchService, RecordIdentifier
from .schemas import CheckLogoRequest, CheckLogoResponse

logger = logging.getLogger(__name__)

CHECK_PATH = "/check-logo-match"


class HttpLogoMatchService(LogoMatchService):
    """Calls the logo-match service over HTTP with httpx."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = TIMEOUT_SECONDS,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._base_url = (base_url or SERVICE_URL).rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def url(self) -> str:
        return f"{self._base_url}{CHECK_PATH}"

    async def check_logo_match(self, record_id: RecordIdentifier) -> CheckLogoResponse:
        body = CheckLogoRequest(modelo_id=record_id).model_dump(by_alias=True)
        logger.debug("POST %s for record %s", self.url, record_id)

        try:
            response = await self._client.post(self.url, json=body)
        except httpx.TimeoutException as exc:
            raise ServiceUnavailable(f"timed out calling {self.url}") from exc
        except httpx.TransportError as exc:
            raise ServiceUnavailable(f"could not reach {self.url}: {exc}") from exc

        if response.status_code >= 500:
            raise ServiceUnavailable(
                f"logo-match service returned {response.status_code}"
            )
        if response.status_code >= 400:
            raise ServiceRejected(
                f"logo-match service rejected record {record_id}: "
                f"{response.status_code} {response.text}",
                status_code=response.status_code,
            )

        try:
            return CheckLogoResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise ServiceInvocationFailure(
                f"unexpected response body from {self.url}"
            ) from exc

    async def aclose(self) -> None:
        """Close the underlying client if this adapter created it."""
        if self._owns_client:
            await self._client.aclose()
