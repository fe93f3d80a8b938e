"""Tests for topic/tone classification and voice composition."""

import pytest

from app import phrasebank
from app.models import Card
from app.utils.rng import seeded_random
from app.voice import ELLIPSIS, Tone, Topic, VoiceEngine, card_tone, detect_topic, shorten_question


def make_card(name="隐士", en="The Hermit", keywords=None):
    return Card(id=0, name=name, en=en, keywords=keywords or [])


class TestDetectTopic:

    @pytest.mark.parametrize(
        "question,topic",
        [
            ("他还爱我吗", Topic.RELATIONSHIP),
            ("我们会复合吗", Topic.RELATIONSHIP),
            ("要不要跳槽", Topic.CAREER),
            ("这个offer能接吗", Topic.CAREER),
            ("投资会亏吗", Topic.MONEY),
            ("考研能上岸吗", Topic.GROWTH),
            ("最近总是失眠焦虑", Topic.EMOTIONAL),
            ("接下来该怎么走", Topic.DIRECTION),
            ("", Topic.DIRECTION),
            (None, Topic.DIRECTION),
        ],
    )
    def test_topics(self, question, topic):
        assert detect_topic(question) is topic

    def test_relationship_wins_over_money(self):
        assert detect_topic("和伴侣一起存款买房") is Topic.RELATIONSHIP

    def test_career_wins_over_emotional(self):
        assert detect_topic("工作压力太大") is Topic.CAREER

    def test_containment_not_word_boundary(self):
        # "她" inside an unrelated word still counts.
        assert detect_topic("其他事情") is Topic.RELATIONSHIP


class TestCardTone:

    @pytest.mark.parametrize(
        "name,en,tone",
        [
            ("塔", "The Tower", Tone.CHALLENGE),
            ("死神", "", Tone.CHALLENGE),
            ("", "Three of Swords 3 of swords", Tone.CHALLENGE),
            ("太阳", "The Sun", Tone.SUPPORT),
            ("", "TEMPERANCE", Tone.SUPPORT),
            ("圣杯一", "", Tone.SUPPORT),
            ("隐士", "The Hermit", Tone.NEUTRAL),
            ("", "", Tone.NEUTRAL),
            (None, None, Tone.NEUTRAL),
        ],
    )
    def test_tones(self, name, en, tone):
        assert card_tone(name, en) is tone

    def test_challenge_checked_before_support(self):
        # "moon" and "sun" both present; challenge wins.
        assert card_tone("月亮", "The Sun and Moon") is Tone.CHALLENGE


class TestShortenQuestion:

    def test_short_question_unchanged(self):
        assert shorten_question("  我该换工作吗  ") == "我该换工作吗"

    def test_exactly_sixteen_not_truncated(self):
        q = "一" * 16
        assert shorten_question(q) == q

    def test_long_question_truncated(self):
        assert shorten_question("一" * 20) == "一" * 16 + ELLIPSIS

    def test_none(self):
        assert shorten_question(None) == ""


class TestVoiceEngine:

    def test_compose_never_fails_on_empty_input(self):
        engine = VoiceEngine(seeded_random("empty"))
        voice = engine.compose(make_card(keywords=[]), "")
        assert voice
        assert "「方向」" in voice
        assert "关键词" not in voice

    def test_topic_interpolated_once(self):
        engine = VoiceEngine(seeded_random("topic"))
        voice = engine.compose(make_card(), "他还爱我吗")
        assert voice.count("「关系」") == 1

    def test_keyword_clause(self):
        engine = VoiceEngine(seeded_random("kw"))
        voice = engine.compose(make_card(keywords=["独处"]), "接下来呢")
        assert "我还注意到一个关键词：独处。" in voice

    def test_fragments_follow_tone_and_topic(self):
        engine = VoiceEngine(seeded_random("frames"))
        for _ in range(30):
            voice = engine.compose(make_card("塔", "The Tower"), "要不要跳槽")
            assert any(f in voice for f in phrasebank.FRAMES["challenge"])
            assert any(a in voice for a in phrasebank.ACTIONS["challenge"])
            assert any(h in voice for h in phrasebank.TOPIC_HINTS["事业"])
            assert any(c in voice for c in phrasebank.CLOSERS)

    def test_question_placeholder_always_filled(self):
        engine = VoiceEngine(seeded_random("placeholder"))
        question = "这是一个非常非常非常长的问题，关于未来的方向"
        for _ in range(50):
            voice = engine.compose(make_card(), question)
            assert "{Q}" not in voice
            assert question not in voice

    def test_seeded_engines_agree(self):
        card = make_card(keywords=["a", "b", "c"])
        one = VoiceEngine(seeded_random("same"))
        two = VoiceEngine(seeded_random("same"))
        assert [one.compose(card, "q") for _ in range(5)] == [two.compose(card, "q") for _ in range(5)]

    def test_voice_varies_between_calls(self):
        engine = VoiceEngine(seeded_random("vary"))
        card = make_card(keywords=["a", "b", "c"])
        assert len({engine.compose(card, "方向") for _ in range(20)}) > 1


class TestClosing:

    def test_closing_shape(self):
        engine = VoiceEngine(seeded_random("closing"))
        for _ in range(20):
            closing = engine.compose_closing()
            head, c, d = closing.split(" ")
            assert any(head.startswith(a) for a in phrasebank.CLOSING_A)
            assert any(head.endswith(b) for b in phrasebank.CLOSING_B)
            assert c in phrasebank.CLOSING_C
            assert d in phrasebank.CLOSING_D
