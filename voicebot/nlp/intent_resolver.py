"""Intent resolver combining classifier and keyword signals.

Decision rules (hard gate, no score blending):
1. Keyword candidate with score >= threshold (default 2) wins outright.
2. Otherwise the classifier's top label wins.
3. Without classifier signal, any keyword candidate (score >= 1) wins.
4. Otherwise `default`.

Determinism:
- Fully deterministic for identical inputs.
"""

from voicebot.config import KEYWORD_OVERRIDE_THRESHOLD
from voicebot.core.types import Intent, IntentDecision
from voicebot.nlp.keyword_scorer import KeywordMatch


def resolve_intent(
    classifier_intent: Intent | None,
    keyword_match: KeywordMatch,
    confidence: float = 0.0,
    threshold: int = KEYWORD_OVERRIDE_THRESHOLD,
) -> IntentDecision:
    """Resolve the final intent from the two independent signals."""

    keyword_intent = keyword_match.intent
    keyword_score = keyword_match.score

    if keyword_intent is not None and keyword_score >= threshold:
        intent, source = keyword_intent, "keyword"
    elif classifier_intent is not None:
        intent, source = classifier_intent, "classifier"
    elif keyword_intent is not None and keyword_score >= 1:
        intent, source = keyword_intent, "keyword"
    else:
        intent, source = Intent.DEFAULT, "fallback"

    return IntentDecision(
        intent=intent,
        source=source,
        keyword_intent=keyword_intent,
        keyword_score=keyword_score,
        classifier_intent=classifier_intent,
        confidence=confidence,
    )
