from typing import List, Sequence

from app.deck import normalize_img
from app.models import Card, ReadingResult, RenderedCard
from app.voice import VoiceEngine


def card_desc(card: Card) -> str:
    if card.desc:
        return card.desc
    if card.text:
        return f"这张牌的画面主题可以理解为：{card.text}"
    return "（暂无画面解码）"


def render_card(card: Card, question: str, engine: VoiceEngine) -> RenderedCard:
    return RenderedCard(
        name=card.name,
        en=card.en,
        img=normalize_img(card.img),
        voice=engine.compose(card, question),
        desc=card_desc(card),
    )


def build_reading(deck: Sequence[Card], picks: List[int], question: str, engine: VoiceEngine) -> ReadingResult:
    """Render validated picks in the order chosen, plus one closing line.

    `picks` must already be validated against the session pool.
    """
    cards = [render_card(deck[i], question, engine) for i in picks]
    return ReadingResult(cards=cards, closing=engine.compose_closing())
