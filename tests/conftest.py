import pytest

from voicebot.core.engine import NLUPipeline
from voicebot.nlp.entity_extractor import EntityExtractor
from voicebot.nlp.keyword_scorer import build_rule_table
from voicebot.nlp.statistical_classifier import train_classifier
from voicebot.nlp.training_corpus import TRAINING_EXAMPLES
from voicebot.store.hotel_store import HotelStore


@pytest.fixture(scope="session")
def trained_model():
    return train_classifier(TRAINING_EXAMPLES)


@pytest.fixture(scope="session")
def rule_table():
    return build_rule_table()


@pytest.fixture
def store():
    """Freshly seeded store; bookings and availability never leak between tests."""
    return HotelStore()


@pytest.fixture
def pipeline(store, trained_model, rule_table):
    return NLUPipeline(
        model=trained_model,
        rules=rule_table,
        extractor=EntityExtractor(),
        data=store,
    )
