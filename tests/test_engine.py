"""End-to-end tests for the NLU pipeline."""

import pytest

from voicebot.core.engine import build_pipeline, read_snapshot
from voicebot.core.errors import PipelineInitError, RuleTableError, TrainingError
from voicebot.core.types import Intent
from voicebot.responses import response_builder
from voicebot.store.seed_data import SAMPLE_HOTEL, SAMPLE_ROOMS


class TestScenarios:
    def test_room_rates_resolve_to_pricing_listing_all_rooms(self, pipeline):
        result = pipeline.process("What are your room rates?")

        assert result.intent is Intent.PRICING
        for room in SAMPLE_ROOMS:
            assert room.type in result.response

    def test_hello_resolves_to_greeting_naming_hotel(self, pipeline):
        result = pipeline.process("Hello")

        assert result.intent is Intent.GREETING
        assert SAMPLE_HOTEL.name in result.response
        assert result.confidence > 0

    def test_gibberish_falls_back_to_default(self, pipeline):
        result = pipeline.process("asdf qwerty")

        assert result.intent is Intent.DEFAULT
        assert result.confidence == 0.0
        assert '"asdf qwerty"' in result.response

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("I want to book a room", Intent.BOOKING),
            ("Do you have rooms available", Intent.AVAILABILITY),
            ("Where is the hotel located", Intent.LOCATION),
            ("When is check out, I am leaving tomorrow", Intent.CHECKOUT),
            ("What is your cancellation policy", Intent.CANCELLATION),
        ],
    )
    def test_common_questions(self, pipeline, text, expected):
        assert pipeline.process(text).intent is expected

    def test_entities_are_returned_with_the_reply(self, pipeline):
        result = pipeline.process(
            "Contact me at test@example.com or 98765-43210 on 12/05/2024"
        )

        assert result.entities["email"] == "test@example.com"
        assert result.entities["date"] == "12/05/2024"
        assert result.to_dict()["intent"] == result.intent.value


class TestResolution:
    def test_tied_strong_keywords_keep_declaration_order(self, pipeline):
        decision = pipeline.detect_intent("I cancelled my booking, do I get refunds?")

        assert decision.keyword_score == 2
        assert decision.intent is Intent.BOOKING
        assert decision.source == "keyword"

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Which amenity is best", Intent.AMENITIES),
            ("I am reserving tonight", Intent.BOOKING),
        ],
    )
    def test_inflected_words_reach_the_classifier(self, pipeline, text, expected):
        decision = pipeline.detect_intent(text)

        assert decision.intent is expected
        assert decision.source == "classifier"

    def test_keyword_score_of_two_overrides_classifier(self, pipeline):
        decision = pipeline.detect_intent("How much is the price")

        assert decision.keyword_score >= 2
        assert decision.intent is Intent.PRICING
        assert decision.source == "keyword"

    def test_checkout_is_reachable_only_through_keywords(self, pipeline):
        decision = pipeline.detect_intent("checkout departure")

        assert Intent.CHECKOUT not in pipeline.model.labels
        assert decision.intent is Intent.CHECKOUT
        assert decision.source == "keyword"

    def test_identical_input_gives_identical_result(self, pipeline):
        first = pipeline.process("Tell me about the deluxe room")
        second = pipeline.process("Tell me about the deluxe room")

        assert first == second


class TestTotality:
    @pytest.mark.parametrize("text", ["   ", "\t\n", "🙂🙂", "?!...", "@#$%"])
    def test_signal_free_utterances_still_get_a_reply(self, pipeline, text):
        result = pipeline.process(text)

        assert result.intent in set(Intent)
        assert result.intent is Intent.DEFAULT
        assert result.response.strip()


class TestDomainData:
    def test_availability_reply_follows_store_changes(self, pipeline, store):
        for room in store.get_rooms():
            store.update_room_availability(room.id, 0)

        result = pipeline.process("Do you have rooms available")

        assert result.intent is Intent.AVAILABILITY
        assert "fully booked" in result.response

    def test_booking_reply_reflects_new_availability(self, pipeline, store):
        store.add_booking("R004", guest_name="Asha")

        reply = pipeline.process("I want to book a room").response

        assert "Presidential Suite" not in reply
        assert "Deluxe Room" in reply

    def test_read_snapshot_accepts_two_call_provider(self):
        class Provider:
            def get_hotel_info(self):
                return SAMPLE_HOTEL

            def get_rooms(self):
                return list(SAMPLE_ROOMS)

        snapshot = read_snapshot(Provider())

        assert snapshot.hotel is SAMPLE_HOTEL
        assert snapshot.rooms == SAMPLE_ROOMS


class TestFailureHandling:
    def test_failing_builder_degrades_to_default_reply(self, pipeline, monkeypatch, caplog):
        def broken(context):
            raise KeyError("missing")

        monkeypatch.setitem(response_builder.RESPONSE_BUILDERS, Intent.GREETING, broken)

        result = pipeline.process("Hello")

        assert result.intent is Intent.GREETING
        assert '"Hello"' in result.response
        assert "Response builder failed" in caplog.text

    def test_collaborator_failure_propagates(self, pipeline, store, monkeypatch):
        def unavailable():
            raise ConnectionError("store offline")

        monkeypatch.setattr(store, "get_snapshot", unavailable)

        with pytest.raises(ConnectionError):
            pipeline.process("Hello")

    def test_empty_corpus_aborts_build(self, store):
        with pytest.raises(TrainingError):
            build_pipeline(store, corpus=[])

    def test_empty_rule_table_aborts_build(self, store):
        with pytest.raises(RuleTableError):
            build_pipeline(store, rules={})

    def test_build_errors_share_a_base_class(self, store):
        with pytest.raises(PipelineInitError):
            build_pipeline(store, corpus=[("Hello", Intent.GREETING)])

    def test_build_pipeline_serves_requests(self, store):
        assert build_pipeline(store).process("Hello").intent is Intent.GREETING
