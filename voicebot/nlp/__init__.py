"""NLU components for intent detection and entity extraction.

Module scope:
- Text normalization and tokenization (`normalizer`).
- Regex entity extraction (`entity_extractor`).
- Keyword rule scoring (`keyword_scorer`) and the statistical classifier
  (`statistical_classifier`, trained on `training_corpus`).
- Final intent decision from both signals (`intent_resolver`).

Determinism profile:
- Fully deterministic once the classifier has been trained.
"""
