"""Tests for combining keyword and classifier signals."""

from types import MappingProxyType

from voicebot.core.types import Intent
from voicebot.nlp.intent_resolver import resolve_intent
from voicebot.nlp.keyword_scorer import KeywordMatch


def _match(intent, score):
    return KeywordMatch(intent=intent, score=score, scores=MappingProxyType({}))


NO_MATCH = _match(None, 0)


def test_strong_keyword_overrides_classifier():
    decision = resolve_intent(Intent.GREETING, _match(Intent.PRICING, 2), confidence=0.9)

    assert decision.intent is Intent.PRICING
    assert decision.source == "keyword"
    assert decision.classifier_intent is Intent.GREETING
    assert decision.confidence == 0.9


def test_weak_keyword_defers_to_classifier():
    decision = resolve_intent(Intent.LOCATION, _match(Intent.PRICING, 1), confidence=0.6)

    assert decision.intent is Intent.LOCATION
    assert decision.source == "classifier"
    assert decision.keyword_intent is Intent.PRICING
    assert decision.keyword_score == 1


def test_weak_keyword_wins_without_classifier_signal():
    decision = resolve_intent(None, _match(Intent.CHECKOUT, 1))

    assert decision.intent is Intent.CHECKOUT
    assert decision.source == "keyword"


def test_no_signal_falls_back_to_default():
    decision = resolve_intent(None, NO_MATCH)

    assert decision.intent is Intent.DEFAULT
    assert decision.source == "fallback"
    assert decision.confidence == 0.0


def test_custom_threshold_is_honoured():
    strong = _match(Intent.BOOKING, 2)

    assert resolve_intent(Intent.HELP, strong, threshold=3).intent is Intent.HELP
    assert resolve_intent(Intent.HELP, strong, threshold=1).intent is Intent.BOOKING


def test_resolution_is_deterministic():
    first = resolve_intent(Intent.HELP, _match(Intent.AMENITIES, 1), confidence=0.4)
    second = resolve_intent(Intent.HELP, _match(Intent.AMENITIES, 1), confidence=0.4)

    assert first == second
