"""
Pydantic schemas for the logo check.

`CheckLogoRequest` / `CheckLogoResponse` are the wire shapes of the
remote logo-match operation, which takes the record id under the
`modeloId` key. `RecordView` and `HealthResponse` are returned by the
host app in `main.py`.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CheckLogoRequest(BaseModel):
    """
    Request payload for POST /check-logo-match.

    - modelo_id: id of the model record whose logo is checked,
      sent as `modeloId`
    """

    model_config = ConfigDict(populate_by_name=True)

    modelo_id: str = Field(alias="modeloId", min_length=1)


class CheckLogoResponse(BaseModel):
    """
    Response payload for POST /check-logo-match.

    - match: whether the stored logo matches the reference
    - detail: optional free-form explanation from the service

    Unknown fields are kept as-is.
    """

    model_config = ConfigDict(extra="allow")

    match: bool
    detail: Optional[str] = None


class RecordView(BaseModel):
    """What the host returns when a model record surface is activated."""

    record_id: str
    verification: str = "scheduled"


class HealthResponse(BaseModel):
    """Simple health check response."""

    status: str
