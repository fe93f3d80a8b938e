"""Tarot reading backend.

Run with:
    uvicorn app.main:app
"""

import asyncio
import contextlib
import logging
import os
import random
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles

from app.config import Settings, get_settings
from app.deck import load_deck_or_fallback
from app.errors import ErrorKind, ReadingError
from app.models import Card
from app.routes.tarot_routes import router as tarot_router
from app.sessions import SessionStore, run_sweeper
from app.utils.rng import system_random
from app.voice import VoiceEngine

log = logging.getLogger("tarot.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    sweeper = asyncio.create_task(
        run_sweeper(app.state.sessions, app.state.settings.sweep_interval_seconds)
    )
    log.info(
        "serving %d cards; sessions expire after %ss, swept every %ss",
        len(app.state.deck),
        app.state.settings.session_ttl_seconds,
        app.state.settings.sweep_interval_seconds,
    )
    try:
        yield
    finally:
        sweeper.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await sweeper


def create_app(
    settings: Optional[Settings] = None,
    deck: Optional[List[Card]] = None,
    rng: Optional[random.Random] = None,
    sessions: Optional[SessionStore] = None,
) -> FastAPI:
    if settings is None:
        settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if deck is None:
        deck = load_deck_or_fallback(settings.deck_path)
    if rng is None:
        rng = system_random()

    app = FastAPI(title="Tarot Reading", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.deck = deck
    app.state.rng = rng
    if sessions is None:
        sessions = SessionStore(ttl_seconds=settings.session_ttl_seconds)
    app.state.sessions = sessions
    app.state.engine = VoiceEngine(rng)

    app.include_router(tarot_router)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ReadingError)
    async def reading_error_handler(request: Request, exc: ReadingError):
        log.info("%s %s rejected: %s", request.method, request.url.path, exc.kind.value)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def invalid_body_handler(request: Request, exc: RequestValidationError):
        err = ReadingError(ErrorKind.INVALID_BODY)
        log.info("%s %s rejected: %s (%d validation errors)", request.method, request.url.path, err.kind.value, len(exc.errors()))
        return JSONResponse(status_code=err.status_code, content=err.to_dict())

    @app.get("/")
    def index():
        return RedirectResponse(url=f"/{settings.index_page}")

    @app.get("/health")
    def health():
        return {"ok": True, "cards": len(app.state.deck), "sessions": len(app.state.sessions)}

    # Static frontend (tarot-pro.html, card images) served from settings.static_dir
    if os.path.isdir(settings.static_dir):
        app.mount("/", StaticFiles(directory=settings.static_dir), name="frontend_static")

    return app


app = create_app()


# For running directly: python -m app.main
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_settings().host, port=get_settings().port)
