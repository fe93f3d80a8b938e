"""Tarot deck loader + card normalization.

- Loads deck JSON (a top-level array of card objects)
- Normalizes loosely named fields into `Card` records indexed 0..N-1
- Falls back to a single-card deck when the file is unusable, so the
  server still starts
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from app.models import Card

log = logging.getLogger("tarot.deck")

# Major Arcana only, or the full deck.
STANDARD_DECK_SIZES = (22, 78)
FALLBACK_IMG = "RWS_Tarot_00_Fool.jpg"


class DeckError(RuntimeError):
    pass


def _to_str(v: Any) -> str:
    if v is None:
        return ""
    return str(v)


def normalize_img(img: Any) -> str:
    if not img or not isinstance(img, str):
        return FALLBACK_IMG
    # Older decks store "9/90/RWS_Tarot_00_Fool.jpg"; keep the file name.
    if "/" in img:
        return img.split("/")[-1] or FALLBACK_IMG
    return img


def normalize_card(raw: Dict[str, Any], idx: int) -> Card:
    keywords = raw.get("keywords")
    return Card(
        id=idx,
        name=_to_str(raw.get("name") or raw.get("cn") or raw.get("title") or f"Card {idx}"),
        en=_to_str(raw.get("en") or raw.get("enName") or raw.get("english") or ""),
        img=normalize_img(raw.get("img") or raw.get("image") or raw.get("pic") or ""),
        desc=_to_str(raw.get("desc") or raw.get("description") or ""),
        text=_to_str(raw.get("text") or raw.get("meaning") or raw.get("voice") or ""),
        keywords=[_to_str(k) for k in keywords] if isinstance(keywords, list) else [],
    )


def load_deck(path: Union[str, Path]) -> List[Card]:
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8").strip()
    except FileNotFoundError as e:
        raise DeckError(f"Deck file not found at: {p}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise DeckError(f"Cannot read deck file {p}: {e}") from e

    if not raw:
        raise DeckError(f"Deck file is empty: {p}")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DeckError(f"Invalid JSON in {p}: {e}") from e

    if not isinstance(data, list):
        raise DeckError(f"Deck file must contain a top-level array: {p}")

    return [normalize_card(c if isinstance(c, dict) else {}, i) for i, c in enumerate(data)]


def fallback_deck() -> List[Card]:
    return [
        normalize_card(
            {
                "name": "愚人",
                "en": "The Fool",
                "img": FALLBACK_IMG,
                "desc": "画面上的人<span class='highlight'>走向悬崖</span>，代表你愿意开始；小狗像是提醒：别忽略直觉与边界。",
                "text": "你正站在一个新起点。",
                "keywords": ["开始", "冒险", "直觉", "勇气"],
            },
            0,
        )
    ]


def load_deck_or_fallback(path: Union[str, Path]) -> List[Card]:
    """Load the deck, degrading to the one-card deck instead of failing."""
    try:
        deck = load_deck(path)
    except DeckError as e:
        log.error("failed to load deck: %s", e)
        log.error("continuing with the single-card fallback deck; fix %s to get a full draw", path)
        return fallback_deck()

    if len(deck) not in STANDARD_DECK_SIZES:
        log.warning("deck has %d cards (expected one of %s); continuing", len(deck), STANDARD_DECK_SIZES)
    log.info("loaded deck from %s: %d cards", path, len(deck))
    return deck
