from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from agenda.logging_config import configure_logging
from agenda_api.routes import calendar, events


def create_app() -> FastAPI:
    configure_logging("AGENDA_API_LOG_LEVEL")
    app = FastAPI(title="Agenda API", version="0.1.0")

    app.include_router(calendar.router)
    app.include_router(events.router)

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logging.getLogger("agenda_api").exception("Unhandled exception: %s", exc)
        return JSONResponse(status_code=500, content={"detail": "Internal error"})

    @app.get("/health")
    async def health():
        return {"ok": True}

    return app


app = create_app()
