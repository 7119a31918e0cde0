"""Response synthesis from a resolved intent and a domain snapshot.

This module is intentionally narrow: it only builds reply strings from already
resolved inputs. Intent resolution, entity extraction and data access happen
outside this module.

Design constraints:
    - One pure builder function per intent, dispatched through
      `RESPONSE_BUILDERS`.
    - Every builder is total and returns a non-empty string.
    - Inventory, prices and hotel details are read from the snapshot at call
      time; currency symbol, proximity figures and discount tiers come from
      `ResponseSettings`. Only policy prose is fixed here.

Determinism:
    Identical `ResponseContext` values always yield identical text.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from voicebot.config import DEFAULT_RESPONSE_SETTINGS, ResponseSettings
from voicebot.core.types import DomainSnapshot, ExtractedEntities, Intent


@dataclass(frozen=True)
class ResponseContext:
    """Inputs available to every response builder.

    Attributes:
        snapshot: Point-in-time hotel profile and room inventory.
        utterance: Original utterance text, echoed by the default reply.
        entities: Entities extracted from the utterance.
        settings: Response configuration data.
    """

    snapshot: DomainSnapshot
    utterance: str = ""
    entities: ExtractedEntities = field(default_factory=dict)
    settings: ResponseSettings = DEFAULT_RESPONSE_SETTINGS


def _contact_block(context: ResponseContext) -> str:
    hotel = context.snapshot.hotel
    return f"📞 {hotel.phone}\n📧 {hotel.email}"


# =========================================================
# GREETING
# =========================================================

def build_greeting(context: ResponseContext) -> str:
    return (
        f"Hello! Welcome to {context.snapshot.hotel.name}. "
        "I'm your virtual assistant. How can I help you today? "
        "You can ask about room bookings, availability, pricing, amenities, or our location."
    )


# =========================================================
# BOOKING
# =========================================================
# Lists rooms that still have inventory; sold-out rooms are omitted.

def build_booking(context: ResponseContext) -> str:
    hotel = context.snapshot.hotel
    settings = context.settings

    lines = [
        f"I'd be happy to help you book a room at {hotel.name}! "
        "We have several room types available:\n"
    ]
    for room in context.snapshot.available_rooms:
        lines.append(
            f"{room.type} - {settings.format_price(room.price)} per night "
            f"({room.available} available)"
        )

    return (
        "\n".join(lines)
        + "\n\nTo complete your booking, please provide:\n"
        "- Check-in and check-out dates\n"
        "- Number of guests\n"
        "- Room preference\n\n"
        f"You can also call us at {hotel.phone} or email {hotel.email}"
    )


# =========================================================
# AVAILABILITY
# =========================================================
# Two branches: listing when any room has inventory, fully-booked otherwise.

def build_availability(context: ResponseContext) -> str:
    available_rooms = context.snapshot.available_rooms

    if not available_rooms:
        return (
            "I apologize, but we're currently fully booked. However, I can help you with:\n"
            "- Joining our waitlist\n"
            "- Checking availability for alternative dates\n"
            "- Recommending nearby partner hotels\n\n"
            "When would you like to visit?"
        )

    listing = "\n".join(
        f"✓ {room.type}: {room.available} rooms available at "
        f"{context.settings.format_price(room.price)}/night"
        for room in available_rooms
    )
    return (
        "Yes! We currently have the following rooms available:\n\n"
        + listing
        + "\n\nWould you like to make a reservation?"
    )


# =========================================================
# PRICING
# =========================================================

def build_pricing(context: ResponseContext) -> str:
    settings = context.settings

    room_blocks = "".join(
        f"{room.type}:\n- {settings.format_price(room.price)} per night\n- {room.description}\n\n"
        for room in context.snapshot.rooms
    )
    discounts = "\n".join(f"- {tier}" for tier in settings.discount_tiers)

    return (
        f"Here are our current room rates at {context.snapshot.hotel.name}:\n\n"
        + room_blocks
        + "Note: Rates may vary based on season and availability. "
        "Special discounts available for:\n"
        + discounts
        + "\n\nWould you like to know more about any specific room type?"
    )


# =========================================================
# AMENITIES
# =========================================================

def build_amenities(context: ResponseContext) -> str:
    hotel = context.snapshot.hotel

    amenities = "\n".join(f"✓ {amenity}" for amenity in hotel.amenities)
    inclusions = "\n".join(f"- {item}" for item in context.settings.room_inclusions)

    return (
        f"{hotel.name} offers a wide range of amenities to make your stay comfortable:\n\n"
        + amenities
        + "\n\nAll rooms include:\n"
        + inclusions
        + "\n\nIs there a specific amenity you'd like to know more about?"
    )


# =========================================================
# CANCELLATION
# =========================================================

def build_cancellation(context: ResponseContext) -> str:
    hotel = context.snapshot.hotel
    return (
        f"Our cancellation policy at {hotel.name}:\n\n"
        "✓ Free cancellation up to 48 hours before check-in\n"
        "✓ 50% refund for cancellations between 24-48 hours\n"
        "✓ No refund for cancellations within 24 hours of check-in\n"
        "✓ Full refund in case of emergencies (documentation required)\n\n"
        "To cancel your booking:\n"
        f"1. Call us at {hotel.phone}\n"
        f"2. Email us at {hotel.email}\n"
        "3. Use the booking reference number\n\n"
        "Need to cancel a booking?"
    )


# =========================================================
# LOCATION
# =========================================================

def build_location(context: ResponseContext) -> str:
    hotel = context.snapshot.hotel
    nearby = "\n".join(
        f"- {place}: {distance}" for place, distance in context.settings.proximity
    )
    return (
        f"{hotel.name} is located at:\n\n"
        f"📍 {hotel.address}\n\n"
        "We're conveniently located near:\n"
        + nearby
        + "\n\nContact us:\n"
        + _contact_block(context)
        + "\n\nWould you like directions or transportation assistance?"
    )


# =========================================================
# CHECKOUT
# =========================================================

def build_checkout(context: ResponseContext) -> str:
    hotel = context.snapshot.hotel
    return (
        f"Check-out information for {hotel.name}:\n\n"
        f"⏰ Standard check-out time: {hotel.check_out_time}\n"
        f"⏰ Late check-out available until {context.settings.late_checkout_time} "
        "(subject to availability, additional charges may apply)\n\n"
        "Before check-out:\n"
        "✓ Return all room keys\n"
        "✓ Clear any outstanding bills\n"
        "✓ Check for personal belongings\n\n"
        "Express check-out available! Just drop your key at the reception.\n\n"
        "Need a late check-out or have questions about your bill?"
    )


# =========================================================
# HELP
# =========================================================

def build_help(context: ResponseContext) -> str:
    return (
        "I'm here to help! I can assist you with:\n\n"
        "🏨 Room Bookings & Reservations\n"
        "📅 Check Availability\n"
        "💰 Pricing & Special Offers\n"
        "🎯 Hotel Amenities & Services\n"
        "📍 Location & Directions\n"
        "❌ Cancellation Policy\n"
        "⏰ Check-in/Check-out Times\n\n"
        "Simply ask me anything, or choose a topic you'd like to know more about!"
    )


# =========================================================
# ROOM TYPES
# =========================================================

def build_room_types(context: ResponseContext) -> str:
    settings = context.settings

    room_blocks = "".join(
        f"🏨 *{room.type}*\n"
        f"• Price: {settings.format_price(room.price)} per night\n"
        f"• Capacity: {room.capacity} guests\n"
        f"• Size: {room.size}\n"
        f"• Description: {room.description}\n"
        f"• Available: {room.available} rooms\n\n"
        for room in context.snapshot.rooms
    )

    return (
        f"Here are the room types available at {context.snapshot.hotel.name}:\n\n"
        + room_blocks
        + "If you'd like details about a specific room, you can ask:\n"
        '- "Tell me about the Deluxe Room"\n'
        '- "How much is the Executive Suite?"\n'
        '- "What facilities does the Family Room have?"\n\n'
        "Which room would you like to know more about?"
    )


# =========================================================
# DEFAULT (terminal fallback)
# =========================================================
# Must never fail: only string interpolation of the utterance and contacts.

def build_default(context: ResponseContext) -> str:
    return (
        f'Thank you for your query! I understand you\'re asking about "{context.utterance}". '
        "While I can help with bookings, availability, pricing, amenities, and general hotel information, "
        "I'd be happy to connect you with our staff for more specific requests.\n\n"
        "You can reach us at:\n"
        + _contact_block(context)
        + "\n\nIs there anything else I can help you with?"
    )


ResponseBuilder = Callable[[ResponseContext], str]

RESPONSE_BUILDERS: dict[Intent, ResponseBuilder] = {
    Intent.GREETING: build_greeting,
    Intent.BOOKING: build_booking,
    Intent.AVAILABILITY: build_availability,
    Intent.PRICING: build_pricing,
    Intent.AMENITIES: build_amenities,
    Intent.CANCELLATION: build_cancellation,
    Intent.LOCATION: build_location,
    Intent.CHECKOUT: build_checkout,
    Intent.HELP: build_help,
    Intent.ROOM_TYPES: build_room_types,
    Intent.DEFAULT: build_default,
}


def build_response(intent: Intent, context: ResponseContext) -> str:
    """Dispatch to the builder registered for `intent`, or the default builder."""
    builder = RESPONSE_BUILDERS.get(intent, build_default)
    return builder(context)
