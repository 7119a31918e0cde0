"""Core NLU orchestration for one utterance.

Architectural role:
    Provides the pipeline used by the HTTP and CLI adapters to turn one user
    utterance into `{intent, entities, confidence, response}`.

Control-flow model:
    1. Normalize the utterance.
    2. Run entity extraction, keyword scoring and statistical classification
       independently over it.
    3. Resolve the final intent (`voicebot.nlp.intent_resolver`).
    4. Read a fresh `DomainSnapshot` from the data collaborator and synthesize
       the reply (`voicebot.responses.response_builder`).

Initialization barrier:
    `build_pipeline` trains the classifier, validates the keyword rule table
    and compiles entity patterns before returning. Afterwards every component
    is read-only, so `NLUPipeline.process` may run on many threads at once
    without locking.

Error handling strategy:
    Boot failures raise `PipelineInitError`. Per-call extraction and scoring
    cannot fail; a failing response builder is logged and replaced by the
    default reply. Collaborator failures (snapshot reads) propagate to the
    caller.

Determinism:
    For a fixed model and snapshot, identical utterances yield identical
    results.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Protocol

from voicebot.config import (
    DEBUG_ROUTING,
    DEFAULT_RESPONSE_SETTINGS,
    KEYWORD_OVERRIDE_THRESHOLD,
    ResponseSettings,
)
from voicebot.core.types import (
    DomainSnapshot,
    ExtractedEntities,
    HotelProfile,
    Intent,
    IntentDecision,
    PipelineResult,
    Room,
)
from voicebot.nlp.entity_extractor import EntityExtractor
from voicebot.nlp.intent_resolver import resolve_intent
from voicebot.nlp.keyword_scorer import KeywordRuleTable, build_rule_table
from voicebot.nlp.normalizer import normalize
from voicebot.nlp.statistical_classifier import ClassifierModel, train_classifier
from voicebot.nlp.training_corpus import TRAINING_EXAMPLES
from voicebot.responses.response_builder import (
    ResponseContext,
    build_default,
    build_response,
)


logger = logging.getLogger(__name__)


class SnapshotProvider(Protocol):
    """Read-only data collaborator consumed by the pipeline."""

    def get_hotel_info(self) -> HotelProfile:
        ...

    def get_rooms(self) -> list[Room]:
        ...


def read_snapshot(provider: SnapshotProvider) -> DomainSnapshot:
    """Take a point-in-time snapshot from `provider`.

    Important behavior:
        - Uses `provider.get_snapshot()` when available so profile and rooms
          come from one consistent read.
        - Falls back to the two-call collaborator contract otherwise.
    """
    get_snapshot = getattr(provider, "get_snapshot", None)
    if callable(get_snapshot):
        return get_snapshot()

    return DomainSnapshot(
        hotel=provider.get_hotel_info(),
        rooms=tuple(provider.get_rooms()),
    )


class NLUPipeline:
    """Immutable intent/entity/response pipeline.

    Args:
        model: Trained statistical classifier.
        rules: Validated keyword rule table.
        extractor: Entity extractor with compiled patterns.
        data: Collaborator supplying hotel profile and rooms per call.
        settings: Response configuration data.
        threshold: Keyword score that overrides the classifier.
    """

    def __init__(
        self,
        model: ClassifierModel,
        rules: KeywordRuleTable,
        extractor: EntityExtractor,
        data: SnapshotProvider,
        settings: ResponseSettings = DEFAULT_RESPONSE_SETTINGS,
        threshold: int = KEYWORD_OVERRIDE_THRESHOLD,
    ):
        self._model = model
        self._rules = rules
        self._extractor = extractor
        self._data = data
        self._settings = settings
        self._threshold = threshold

    @property
    def model(self) -> ClassifierModel:
        return self._model

    @property
    def rules(self) -> KeywordRuleTable:
        return self._rules

    def extract_entities(self, text: str) -> ExtractedEntities:
        return self._extractor.extract(text)

    def detect_intent(self, text: str) -> IntentDecision:
        """
        Resolve the intent of `text` from keyword and classifier signals.

        Edge cases:
        - Without classifier signal `confidence` is `0.0`.
        """
        utterance = normalize(text)

        ranking = self._model.rank(utterance.lowered)
        classifier_intent = ranking[0][0] if ranking else None
        confidence = ranking[0][1] if ranking else 0.0

        keyword_match = self._rules.score(utterance.lowered)

        decision = resolve_intent(
            classifier_intent,
            keyword_match,
            confidence=confidence,
            threshold=self._threshold,
        )

        if DEBUG_ROUTING:
            print(
                "[INTENT DEBUG] "
                f"tokens={list(utterance.tokens)}, "
                f"classifier={classifier_intent}, "
                f"confidence={confidence:.4f}, "
                f"keyword={keyword_match.intent}, "
                f"keyword_score={keyword_match.score}, "
                f"final={decision.intent.value} ({decision.source})"
            )

        return decision

    def respond(
        self,
        intent: Intent,
        text: str,
        entities: ExtractedEntities,
        snapshot: DomainSnapshot,
    ) -> str:
        """Synthesize the reply, degrading to the default reply on builder failure."""
        context = ResponseContext(
            snapshot=snapshot,
            utterance=text,
            entities=entities,
            settings=self._settings,
        )

        try:
            response = build_response(intent, context)
        except Exception:
            logger.exception("Response builder failed for intent=%s", intent.value)
            response = ""

        if not response:
            response = build_default(context)

        return response

    def process(self, text: str) -> PipelineResult:
        """Process one utterance into a `PipelineResult`.

        Args:
            text: Non-empty utterance. Validation is the caller's concern.

        Returns:
            Intent, entities, classifier confidence and reply text.

        Side effects:
            Reads one snapshot from the data collaborator. Nothing is written.
        """
        decision = self.detect_intent(text)
        entities = self.extract_entities(text)
        snapshot = read_snapshot(self._data)

        response = self.respond(decision.intent, text, entities, snapshot)

        logger.info(
            "nlu intent=%s source=%s confidence=%.4f entities=%s",
            decision.intent.value,
            decision.source,
            decision.confidence,
            sorted(entities),
        )

        return PipelineResult(
            intent=decision.intent,
            entities=entities,
            confidence=decision.confidence,
            response=response,
        )


def build_pipeline(
    data: SnapshotProvider,
    corpus: Iterable[tuple[str, Intent]] = TRAINING_EXAMPLES,
    rules: Mapping[Intent, tuple[str, ...]] | None = None,
    settings: ResponseSettings = DEFAULT_RESPONSE_SETTINGS,
    threshold: int = KEYWORD_OVERRIDE_THRESHOLD,
) -> NLUPipeline:
    """Train, validate and assemble the pipeline.

    Raises:
        `TrainingError` / `RuleTableError` when the corpus or rule table is
        unusable. No pipeline is returned in that case.
    """
    model = train_classifier(corpus)
    rule_table = build_rule_table(rules)
    extractor = EntityExtractor()

    logger.info(
        "NLU pipeline ready: intents=%d keyword_rules=%d threshold=%d",
        len(model.labels),
        len(rule_table.rules),
        threshold,
    )

    return NLUPipeline(
        model=model,
        rules=rule_table,
        extractor=extractor,
        data=data,
        settings=settings,
        threshold=threshold,
    )
