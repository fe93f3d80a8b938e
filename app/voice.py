"""Card voice generator.

Classifies the question's topic and the card's tone, then stitches a
reading together from the phrasebank. Output is random on purpose: the
same card and question read differently from call to call.
"""

from __future__ import annotations

import random
import re
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from app import phrasebank
from app.models import Card
from app.utils.rng import system_random

MAX_QUESTION_CHARS = 16
ELLIPSIS = "…"


class Topic(str, Enum):
    RELATIONSHIP = "关系"
    CAREER = "事业"
    MONEY = "金钱"
    GROWTH = "成长"
    EMOTIONAL = "情绪"
    DIRECTION = "方向"


class Tone(str, Enum):
    SUPPORT = "support"
    CHALLENGE = "challenge"
    NEUTRAL = "neutral"


# Evaluated top to bottom, first match wins. Plain containment, no word
# boundaries: "她" matches anywhere in the question.
TOPIC_RULES: List[Tuple[re.Pattern, Topic]] = [
    (re.compile(r"爱|恋|他|她|感情|关系|暧昧|复合|分手|婚|伴侣"), Topic.RELATIONSHIP),
    (re.compile(r"工作|老板|同事|职业|跳槽|转行|事业|offer|面试|裁员"), Topic.CAREER),
    (re.compile(r"钱|财|收入|投资|债|花销|存款|副业"), Topic.MONEY),
    (re.compile(r"学习|考试|考研|论文|读书|课程|学校"), Topic.GROWTH),
    (re.compile(r"焦虑|内耗|自卑|情绪|抑郁|压力|失眠|恐惧|拖延|迷茫"), Topic.EMOTIONAL),
]

# Challenge is checked before support.
TONE_RULES: List[Tuple[Sequence[str], Tone]] = [
    (
        (
            "death", "tower", "devil", "3 of swords", "ten of swords", "five of cups", "moon", "7 of swords",
            "宝剑三", "宝剑十", "圣杯五", "月亮", "恶魔", "塔", "死神",
        ),
        Tone.CHALLENGE,
    ),
    (
        (
            "sun", "star", "world", "ten of cups", "ace of cups", "temperance", "justice",
            "太阳", "星星", "世界", "圣杯十", "圣杯一", "节制", "正义",
        ),
        Tone.SUPPORT,
    ),
]


def detect_topic(question: Optional[str]) -> Topic:
    q = question or ""
    for pattern, topic in TOPIC_RULES:
        if pattern.search(q):
            return topic
    return Topic.DIRECTION


def card_tone(name: Optional[str], en: Optional[str]) -> Tone:
    key = f"{name or ''} {en or ''}".lower()
    for keywords, tone in TONE_RULES:
        if any(k in key for k in keywords):
            return tone
    return Tone.NEUTRAL


def shorten_question(question: Optional[str]) -> str:
    s = (question or "").strip()
    if len(s) <= MAX_QUESTION_CHARS:
        return s
    return s[:MAX_QUESTION_CHARS] + ELLIPSIS


class VoiceEngine:
    """Composes the per-card "voice" paragraph."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else system_random()

    def _pick(self, options: Sequence[str]) -> str:
        return self.rng.choice(options)

    def compose(self, card: Card, question: Optional[str]) -> str:
        topic = detect_topic(question)
        tone = card_tone(card.name, card.en)
        q_short = shorten_question(question)

        opener = self._pick(phrasebank.OPENERS).replace("{Q}", q_short)
        frame = self._pick(phrasebank.FRAMES[tone.value])
        hints = phrasebank.TOPIC_HINTS.get(topic.value) or phrasebank.TOPIC_HINTS[Topic.DIRECTION.value]
        hint = self._pick(hints)
        action = self._pick(phrasebank.ACTIONS[tone.value])
        closer = self._pick(phrasebank.CLOSERS)

        flavor = ""
        if card.keywords:
            flavor = phrasebank.KEYWORD_CLAUSE.format(keyword=self._pick(card.keywords))

        bridge = phrasebank.TOPIC_BRIDGE.format(topic=topic.value)
        return f"{opener} {frame} {bridge}{flavor} {hint} {action} {closer}"

    def compose_closing(self) -> str:
        """Standalone closing line, unrelated to any card or question."""
        return (
            self._pick(phrasebank.CLOSING_A)
            + self._pick(phrasebank.CLOSING_B)
            + " "
            + self._pick(phrasebank.CLOSING_C)
            + " "
            + self._pick(phrasebank.CLOSING_D)
        )
