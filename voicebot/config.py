"""Runtime configuration for the voice bot.

Architectural role:
    Centralizes environment-driven settings for the HTTP adapter, the intent
    resolver threshold, and the configuration data used by the response
    synthesizer (currency symbol, proximity figures, policy constants).

Determinism:
    Values are resolved once at import time for a fixed process environment.
    `ResponseSettings` instances are frozen and safe to share across threads.

Failure behavior:
    Malformed numeric environment values raise `ValueError` at import, which
    aborts startup before any request is served.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


APP_NAME = "Simplotel Voice Bot API"
APP_VERSION = "1.0.0"

# =========================================================
# SERVER
# =========================================================

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Sensitive request/response debug output is opt-in.
DEBUG = os.getenv("DEBUG") == "true"
DEBUG_ROUTING = os.getenv("DEBUG_ROUTING") == "true"

ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:5173,https://simplotel-voicebot.vercel.app",
    ).split(",")
    if origin.strip()
]
ALLOWED_ORIGIN_REGEX = os.getenv("ALLOWED_ORIGIN_REGEX", r"https://.*\.vercel\.app")

# =========================================================
# INTENT RESOLUTION
# =========================================================

# Keyword candidates scoring at least this many distinct keywords override
# the statistical classifier.
KEYWORD_OVERRIDE_THRESHOLD = int(os.getenv("KEYWORD_OVERRIDE_THRESHOLD", "2"))

# =========================================================
# RESPONSE DATA
# =========================================================

CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "₹")
LATE_CHECKOUT_TIME = os.getenv("LATE_CHECKOUT_TIME", "2:00 PM")


@dataclass(frozen=True)
class ResponseSettings:
    """Configuration data consumed by the response synthesizer.

    Attributes:
        currency_symbol: Prefix used for every rendered price.
        proximity: Ordered `(place, distance)` pairs for the location reply.
        discount_tiers: Lines of the pricing discount note.
        room_inclusions: Items every room includes, listed under amenities.
        late_checkout_time: Latest late check-out offered in the checkout reply.
    """

    currency_symbol: str = CURRENCY_SYMBOL
    proximity: tuple[tuple[str, str], ...] = (
        ("City center", "2 km"),
        ("Airport", "15 km"),
        ("Railway station", "3 km"),
        ("Major shopping areas", "1 km"),
    )
    discount_tiers: tuple[str, ...] = (
        "Extended stays (7+ nights)",
        "Corporate bookings",
        "Advance bookings (30+ days)",
    )
    room_inclusions: tuple[str, ...] = (
        "Complimentary WiFi",
        "Air conditioning",
        "24/7 room service",
        "Daily housekeeping",
    )
    late_checkout_time: str = field(default=LATE_CHECKOUT_TIME)

    def format_price(self, amount: int | float) -> str:
        """Render a price with the configured currency symbol."""
        return f"{self.currency_symbol}{amount}"


DEFAULT_RESPONSE_SETTINGS = ResponseSettings()
