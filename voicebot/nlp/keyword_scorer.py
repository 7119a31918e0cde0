"""Rule-based keyword scorer over a fixed intent rule table.

Intent classification logic:
- Each intent owns a set of lower-case keywords/phrases.
- An intent's score is the number of its keywords that occur as substrings of
  the lower-cased utterance; repeats in the text do not add more.
- The candidate is the intent with the strictly highest score. Ties keep the
  intent declared first in the table.

Determinism:
- Fully deterministic for identical input and the immutable rule table.

Edge cases:
- Substring matching: "check in" matches across tokens, and
  "rate" also matches inside "rates".
- All-zero scores yield no candidate.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from voicebot.core.errors import RuleTableError
from voicebot.core.types import Intent
from voicebot.nlp.normalizer import normalize_text


# =========================================================
# RULE TABLE (declaration order is the tie-break order)
# =========================================================

INTENT_KEYWORDS: dict[Intent, tuple[str, ...]] = {
    Intent.BOOKING: (
        "book", "reserve", "reservation", "booking", "room", "check in", "checkin",
    ),
    Intent.AVAILABILITY: (
        "available", "availability", "vacant", "free", "rooms available",
    ),
    Intent.PRICING: (
        "price", "cost", "rate", "rates", "charge", "how much", "pricing",
    ),
    Intent.AMENITIES: (
        "amenities", "facilities", "services", "features", "offer", "provide",
    ),
    Intent.CANCELLATION: (
        "cancel", "cancellation", "refund", "policy",
    ),
    Intent.LOCATION: (
        "location", "address", "where", "directions", "nearby", "distance",
    ),
    Intent.CHECKOUT: (
        "checkout", "check out", "leaving", "departure",
    ),
    Intent.GREETING: (
        "hello", "hi", "hey", "greetings", "good morning", "good evening",
    ),
    Intent.HELP: (
        "help", "assist", "support", "guidance",
    ),
    Intent.ROOM_TYPES: (
        "deluxe room", "executive suite", "family room", "presidential suite",
    ),
}


@dataclass(frozen=True)
class KeywordMatch:
    """Keyword candidate and the full per-intent score table."""

    intent: Intent | None
    score: int
    scores: Mapping[Intent, int]


class KeywordRuleTable:
    """Immutable, validated intent -> keywords table."""

    def __init__(self, rules: Mapping[Intent, tuple[str, ...]]):
        self._rules = MappingProxyType(_validate_rules(rules))

    @property
    def rules(self) -> Mapping[Intent, tuple[str, ...]]:
        return self._rules

    def score(self, text: str) -> KeywordMatch:
        """
        Score every intent against `text` and pick the keyword candidate.

        Returns:
        - `KeywordMatch` with `intent=None` and `score=0` when nothing matched.
        """
        lowered = normalize_text(text)

        scores: dict[Intent, int] = {}
        best_intent = None
        best_score = 0

        for intent, keywords in self._rules.items():
            score = sum(1 for keyword in keywords if keyword in lowered)
            scores[intent] = score
            if score > best_score:
                best_score = score
                best_intent = intent

        return KeywordMatch(
            intent=best_intent,
            score=best_score,
            scores=MappingProxyType(scores),
        )


def _validate_rules(rules: Mapping[Intent, tuple[str, ...]]) -> dict[Intent, tuple[str, ...]]:
    """Copy and validate a rule mapping, raising `RuleTableError` on defects."""
    if not rules:
        raise RuleTableError("Keyword rule table is empty")

    validated: dict[Intent, tuple[str, ...]] = {}

    for key, keywords in rules.items():
        try:
            intent = Intent(key)
        except ValueError:
            raise RuleTableError(f"Unknown intent in rule table: {key!r}") from None

        if intent is Intent.DEFAULT:
            raise RuleTableError("The default intent cannot carry keywords")

        if isinstance(keywords, str) or not keywords:
            raise RuleTableError(f"Intent {intent.value!r} needs a non-empty keyword collection")

        cleaned = []
        for keyword in keywords:
            if not isinstance(keyword, str) or not keyword.strip():
                raise RuleTableError(f"Blank keyword for intent {intent.value!r}")
            cleaned.append(keyword.lower())

        # Distinct keywords only; each contributes at most 1 to the score.
        validated[intent] = tuple(dict.fromkeys(cleaned))

    return validated


def build_rule_table(rules: Mapping[Intent, tuple[str, ...]] | None = None) -> KeywordRuleTable:
    return KeywordRuleTable(INTENT_KEYWORDS if rules is None else rules)
