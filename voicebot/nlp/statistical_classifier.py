"""Supervised statistical intent classifier (multinomial naive Bayes).

Intent classification logic:
- Token counts over the shared normalizer tokenizer, English stop words
  removed, every remaining token Porter-stemmed (`analyze_text`), so
  "rooms"/"room" and "amenity"/"amenities" share one feature.
- Multinomial naive Bayes with Laplace smoothing and uniform class priors.
- `rank` returns every trained intent by descending posterior probability; the
  top probability is reported as the pipeline confidence.

Training:
- Happens exactly once in `train_classifier`, before the pipeline serves any
  request. The returned `ClassifierModel` exposes no training entry point.

Determinism:
- Fitting and scoring are deterministic for a fixed corpus.

Failure handling:
- Empty or mislabeled corpora raise `TrainingError` at build time.
- Text sharing no vocabulary with the corpus produces no signal: `rank`
  returns `[]` and `classify` returns `None`. Scoring never raises.
"""

import logging
from collections.abc import Iterable

import numpy as np
from nltk.stem import PorterStemmer
from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS, CountVectorizer
from sklearn.naive_bayes import MultinomialNB

from voicebot.core.errors import TrainingError
from voicebot.core.types import Intent
from voicebot.nlp.normalizer import normalize_text, tokenize


logger = logging.getLogger(__name__)

SMOOTHING_ALPHA = 1.0

_STEMMER = PorterStemmer()


def analyze_text(text: str) -> list[str]:
    """Tokenize, drop English stop words and stem what remains."""
    return [
        _STEMMER.stem(token)
        for token in tokenize(text)
        if token not in ENGLISH_STOP_WORDS
    ]


class ClassifierModel:
    """Trained, read-only intent classifier."""

    def __init__(self, vectorizer: CountVectorizer, estimator: MultinomialNB):
        self._vectorizer = vectorizer
        self._estimator = estimator
        self._labels = tuple(Intent(label) for label in estimator.classes_)

    @property
    def labels(self) -> tuple[Intent, ...]:
        return self._labels

    @property
    def vocabulary_size(self) -> int:
        return len(self._vectorizer.vocabulary_)

    def rank(self, text: str) -> list[tuple[Intent, float]]:
        """
        Rank trained intents for `text` by descending posterior probability.

        Edge cases:
        - Empty text or text without any known token returns `[]`.
        """
        if not text:
            return []

        features = self._vectorizer.transform([normalize_text(text)])
        if features.nnz == 0:
            return []

        probabilities = self._estimator.predict_proba(features)[0]
        order = np.argsort(-probabilities, kind="stable")

        return [(self._labels[i], float(probabilities[i])) for i in order]

    def classify(self, text: str) -> Intent | None:
        """Return the most probable intent, or `None` without signal."""
        ranking = self.rank(text)
        if not ranking:
            return None
        return ranking[0][0]


def train_classifier(corpus: Iterable[tuple[str, Intent]]) -> ClassifierModel:
    """
    Fit a `ClassifierModel` over a labeled corpus.

    Validation:
    - Corpus must be non-empty, with non-blank texts.
    - Labels must be `Intent` members other than `Intent.DEFAULT`.
    - At least two distinct labels are required.

    Raises:
    - `TrainingError` on any validation failure or when no token survives
      stop-word removal.
    """
    examples = list(corpus or [])
    if not examples:
        raise TrainingError("Training corpus is empty")

    texts: list[str] = []
    labels: list[str] = []

    for position, example in enumerate(examples):
        try:
            text, label = example
        except (TypeError, ValueError):
            raise TrainingError(f"Malformed training example at position {position}") from None

        if not isinstance(text, str) or not text.strip():
            raise TrainingError(f"Blank training text at position {position}")

        try:
            intent = Intent(label)
        except ValueError:
            raise TrainingError(f"Unknown intent label {label!r} at position {position}") from None

        if intent is Intent.DEFAULT:
            raise TrainingError("The default intent cannot be trained")

        texts.append(normalize_text(text))
        labels.append(intent.value)

    if len(set(labels)) < 2:
        raise TrainingError("Training corpus needs at least two intents")

    vectorizer = CountVectorizer(analyzer=analyze_text)

    try:
        features = vectorizer.fit_transform(texts)
    except ValueError as exc:
        raise TrainingError(f"Training corpus has no usable vocabulary: {exc}") from exc

    estimator = MultinomialNB(alpha=SMOOTHING_ALPHA, fit_prior=False)
    estimator.fit(features, labels)

    logger.info(
        "Intent classifier trained: examples=%d intents=%d vocabulary=%d",
        len(texts),
        len(estimator.classes_),
        len(vectorizer.vocabulary_),
    )

    return ClassifierModel(vectorizer, estimator)
