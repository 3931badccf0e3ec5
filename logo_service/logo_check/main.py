"""
FastAPI host for model record surfaces.

Endpoints:
- GET /health
- GET /models/{record_id}

Opening a model record activates it: the view is returned straight away
and the logo-match check for that record runs as a background task. The
check never changes the response.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import BackgroundTasks, FastAPI, Request
from fastapi.responses import JSONResponse

from .client import HttpLogoMatchService
from .config import HOST, PORT, SERVICE_URL, configure_logging
from .errors import InputUnavailable
from .schemas import HealthResponse, RecordView
from .trigger import VerificationTrigger

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("Logo checks go to %s", SERVICE_URL)
    yield
    service = app.state.trigger.service
    if isinstance(service, HttpLogoMatchService):
        await service.aclose()


app = FastAPI(
    title="Model Logo Check",
    version="0.1.0",
    description="Triggers a background logo-match check whenever a model record is opened.",
    lifespan=lifespan,
)

# Attach the trigger to app state so tests can swap the service.
app.state.trigger = VerificationTrigger(HttpLogoMatchService())


@app.exception_handler(InputUnavailable)
async def input_unavailable_handler(request: Request, exc: InputUnavailable) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Simple health-check endpoint."""
    return HealthResponse(status="ok")


@app.get("/models/{record_id}", response_model=RecordView)
async def open_model(record_id: str, background_tasks: BackgroundTasks) -> RecordView:
    """
    Activate the surface for one model record.

    A blank id is the host's problem and is rejected with 422 before
    anything is scheduled. Otherwise exactly one logo check is queued.
    """
    if not record_id.strip():
        raise InputUnavailable("model record id is missing")

    trigger: VerificationTrigger = app.state.trigger
    background_tasks.add_task(trigger.on_activate, record_id)

    return RecordView(record_id=record_id)


def run() -> None:
    """
    Convenience entrypoint if you want to run via:

        python -m logo_check.main

    or via the `logo-check` console_script defined in pyproject.toml.
    """
    import uvicorn

    uvicorn.run(
        "logo_check.main:app",
        host=HOST,
        port=PORT,
        reload=False,
    )


if __name__ == "__main__":
    run()
