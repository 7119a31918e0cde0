"""Utterance normalization shared by the scoring components.

Normalization steps:
- Lower-casing only; whitespace and punctuation are preserved so keyword
  phrases such as "check in" still match as substrings.
- Regex word tokenization (`\\w+`) for the statistical classifier's features.

Determinism:
- Fully deterministic; no vocabulary or model state.

Edge cases:
- Empty input yields an empty string and no tokens.
"""

import re
from dataclasses import dataclass


_TOKEN_PATTERN = re.compile(r"\b\w+\b")


def normalize_text(text: str) -> str:
    """Lower-case an utterance for substring matching."""
    if not text:
        return ""
    return text.lower()


def tokenize(text: str) -> list[str]:
    """Tokenize text into lower-cased word tokens."""
    return _TOKEN_PATTERN.findall(normalize_text(text))


@dataclass(frozen=True)
class NormalizedUtterance:
    """One utterance in the three forms the pipeline consumes.

    Attributes:
        original: Raw text, used for entity extraction and echo responses.
        lowered: Lower-cased text, used for keyword and classifier scoring.
        tokens: Word tokens of `lowered`.
    """

    original: str
    lowered: str
    tokens: tuple[str, ...]


def normalize(text: str) -> NormalizedUtterance:
    lowered = normalize_text(text)
    return NormalizedUtterance(
        original=text,
        lowered=lowered,
        tokens=tuple(_TOKEN_PATTERN.findall(lowered)),
    )
