"""FastAPI routes for the shuffle -> pick -> reading flow.

Endpoints:
- GET  /api/shuffle  -> { shuffleId, pool: [8 unique card indices] }
- POST /api/reading  -> { cards: [{name, en, img, voice, desc}], closing }

Handlers are async so they run on the event loop alongside the session
sweeper and never race it.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from fastapi import APIRouter, Depends, Request

from app.errors import ErrorKind, ReadingError
from app.models import Card, ErrorResponse, ReadingRequest, ReadingResult, ShuffleResponse
from app.picks import validate_picks
from app.reading import build_reading
from app.sessions import SessionStore
from app.utils.rng import sample_indices
from app.voice import VoiceEngine

log = logging.getLogger("tarot.api")
router = APIRouter(prefix="/api", tags=["tarot"])


def get_deck(request: Request) -> List[Card]:
    return request.app.state.deck


def get_sessions(request: Request) -> SessionStore:
    return request.app.state.sessions


def get_engine(request: Request) -> VoiceEngine:
    return request.app.state.engine


def get_rng(request: Request) -> random.Random:
    return request.app.state.rng


@router.get("/shuffle", response_model=ShuffleResponse, responses={500: {"model": ErrorResponse}})
async def shuffle(
    request: Request,
    deck: List[Card] = Depends(get_deck),
    sessions: SessionStore = Depends(get_sessions),
    rng: random.Random = Depends(get_rng),
) -> ShuffleResponse:
    if not deck:
        raise ReadingError(ErrorKind.EMPTY_CATALOG)

    pool = sample_indices(len(deck), request.app.state.settings.pool_size, rng)
    shuffle_id = sessions.create(pool)
    log.info("shuffle %s pool=%s", shuffle_id, pool)
    return ShuffleResponse(shuffleId=shuffle_id, pool=pool)


@router.post("/reading", response_model=ReadingResult, responses={400: {"model": ErrorResponse}})
async def reading(
    request: Request,
    req: Optional[ReadingRequest] = None,
    deck: List[Card] = Depends(get_deck),
    sessions: SessionStore = Depends(get_sessions),
    engine: VoiceEngine = Depends(get_engine),
) -> ReadingResult:
    if req is None:
        req = ReadingRequest()
    shuffle_id = req.shuffleId
    question = req.question
    picks = req.picks

    if not shuffle_id or not isinstance(shuffle_id, str):
        raise ReadingError(ErrorKind.MISSING_SESSION_ID)
    session = sessions.get(shuffle_id)

    q = question.strip() if isinstance(question, str) else ""
    if not q:
        raise ReadingError(ErrorKind.MISSING_QUESTION)

    ids = validate_picks(session, picks, request.app.state.settings.pick_count)

    result = build_reading(deck, ids, q, engine)
    log.info("reading %s picks=%s", shuffle_id, ids)
    return result
