"""FastAPI application entrypoint for the production calendar API."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from api.routes.calendar import router as calendar_router
from api.services.calendar_store import calendar_store
from core.settings import get_settings
from directory.roster import roster

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Textile ERP Calendar",
    version="0.1.0",
    description=(
        "APIs for scheduling production, delivery and review items on the "
        "textile ERP calendar."
    ),
)

app.include_router(calendar_router)

if settings.autoseed:
    calendar_store.generate(departments=roster.departments())
    logger.info("Seeded calendar with demo data")


@app.get("/health")
def healthcheck() -> dict[str, str]:
    """Simple readiness probe used by deployment tooling."""

    return {"status": "ok"}
