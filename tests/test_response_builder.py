"""Tests for per-intent reply synthesis."""

from dataclasses import replace

import pytest

from voicebot.config import ResponseSettings
from voicebot.core.types import DomainSnapshot, Intent
from voicebot.responses.response_builder import (
    RESPONSE_BUILDERS,
    ResponseContext,
    build_availability,
    build_default,
    build_pricing,
    build_response,
)
from voicebot.store.seed_data import SAMPLE_HOTEL, SAMPLE_ROOMS


@pytest.fixture
def snapshot():
    return DomainSnapshot(hotel=SAMPLE_HOTEL, rooms=SAMPLE_ROOMS)


def _sold_out(rooms, *room_ids):
    return tuple(replace(r, available=0) if r.id in room_ids else r for r in rooms)


def test_every_intent_has_a_builder():
    assert set(RESPONSE_BUILDERS) == set(Intent)


@pytest.mark.parametrize("intent", list(Intent))
def test_every_builder_returns_text(snapshot, intent):
    reply = build_response(intent, ResponseContext(snapshot=snapshot, utterance="hi"))

    assert isinstance(reply, str)
    assert reply.strip()


def test_pricing_lists_every_room_even_when_sold_out(snapshot):
    sold_out = replace(snapshot, rooms=_sold_out(snapshot.rooms, "R004"))
    reply = build_pricing(ResponseContext(snapshot=sold_out))

    for room in SAMPLE_ROOMS:
        assert room.type in reply
        assert f"₹{room.price}" in reply


def test_availability_omits_sold_out_rooms(snapshot):
    partial = replace(snapshot, rooms=_sold_out(snapshot.rooms, "R002"))
    reply = build_availability(ResponseContext(snapshot=partial))

    assert "Executive Suite" not in reply
    assert "Deluxe Room: 5 rooms available at ₹3500/night" in reply


def test_availability_fully_booked_branch(snapshot):
    all_ids = [room.id for room in snapshot.rooms]
    booked = replace(snapshot, rooms=_sold_out(snapshot.rooms, *all_ids))
    reply = build_availability(ResponseContext(snapshot=booked))

    assert "fully booked" in reply
    assert "waitlist" in reply


def test_default_echoes_the_utterance(snapshot):
    reply = build_default(ResponseContext(snapshot=snapshot, utterance="asdf qwerty"))

    assert '"asdf qwerty"' in reply
    assert SAMPLE_HOTEL.phone in reply
    assert SAMPLE_HOTEL.email in reply


def test_greeting_names_the_hotel(snapshot):
    reply = build_response(Intent.GREETING, ResponseContext(snapshot=snapshot))

    assert SAMPLE_HOTEL.name in reply


def test_currency_symbol_comes_from_settings(snapshot):
    context = ResponseContext(snapshot=snapshot, settings=ResponseSettings(currency_symbol="$"))
    reply = build_pricing(context)

    assert "$6500" in reply
    assert "₹" not in reply


def test_checkout_uses_hotel_checkout_time(snapshot):
    hotel = replace(SAMPLE_HOTEL, check_out_time="10:30 AM")
    context = ResponseContext(snapshot=replace(snapshot, hotel=hotel))

    reply = build_response(Intent.CHECKOUT, context)

    assert "10:30 AM" in reply
    assert "2:00 PM" in reply


def test_location_lists_configured_proximity(snapshot):
    settings = ResponseSettings(proximity=(("Tech park", "4 km"),))
    reply = build_response(Intent.LOCATION, ResponseContext(snapshot=snapshot, settings=settings))

    assert "- Tech park: 4 km" in reply
    assert SAMPLE_HOTEL.address in reply


def test_same_context_gives_same_text(snapshot):
    context = ResponseContext(snapshot=snapshot, utterance="rooms?")

    assert build_response(Intent.ROOM_TYPES, context) == build_response(Intent.ROOM_TYPES, context)
