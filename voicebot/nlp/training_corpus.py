"""Fixed labeled corpus for the statistical intent classifier.

The corpus is loaded once at pipeline build time and never extended at
runtime. `checkout` and `default` have no examples, so the classifier can never
emit them; `checkout` is reachable only through the keyword scorer.
"""

from voicebot.core.types import Intent


TRAINING_EXAMPLES: tuple[tuple[str, Intent], ...] = (

    # -------------------------
    # Booking
    # -------------------------
    ("I want to book a room", Intent.BOOKING),
    ("Make a reservation", Intent.BOOKING),
    ("Reserve a room for two nights", Intent.BOOKING),
    ("Book a suite", Intent.BOOKING),

    # -------------------------
    # Availability
    # -------------------------
    ("Do you have rooms available", Intent.AVAILABILITY),
    ("Are there any vacant rooms", Intent.AVAILABILITY),
    ("Check availability", Intent.AVAILABILITY),

    # -------------------------
    # Pricing
    # -------------------------
    ("What are your room rates", Intent.PRICING),
    ("How much does a room cost", Intent.PRICING),
    ("What is the price", Intent.PRICING),
    ("Room pricing", Intent.PRICING),

    # -------------------------
    # Amenities
    # -------------------------
    ("What amenities do you offer", Intent.AMENITIES),
    ("What facilities are available", Intent.AMENITIES),
    ("Tell me about your services", Intent.AMENITIES),

    # -------------------------
    # Cancellation
    # -------------------------
    ("How can I cancel my booking", Intent.CANCELLATION),
    ("Cancellation policy", Intent.CANCELLATION),
    ("Can I get a refund", Intent.CANCELLATION),

    # -------------------------
    # Location
    # -------------------------
    ("Where is the hotel located", Intent.LOCATION),
    ("Hotel address", Intent.LOCATION),
    ("How to reach", Intent.LOCATION),

    # -------------------------
    # Greeting
    # -------------------------
    ("Hello", Intent.GREETING),
    ("Hi there", Intent.GREETING),
    ("Good morning", Intent.GREETING),

    # -------------------------
    # Help
    # -------------------------
    ("Can you help me", Intent.HELP),
    ("I need assistance", Intent.HELP),
    ("I need some guidance", Intent.HELP),

    # -------------------------
    # Room types
    # -------------------------
    ("Tell me about the deluxe room", Intent.ROOM_TYPES),
    ("Give me details of the deluxe room", Intent.ROOM_TYPES),
    ("What is the price of the deluxe room", Intent.ROOM_TYPES),

    ("Tell me about the executive suite", Intent.ROOM_TYPES),
    ("Give me details of the executive suite", Intent.ROOM_TYPES),
    ("What is the cost of the executive suite", Intent.ROOM_TYPES),

    ("Tell me about the family room", Intent.ROOM_TYPES),
    ("Give me details of the family room", Intent.ROOM_TYPES),
    ("How much is the family room", Intent.ROOM_TYPES),

    ("Tell me about the presidential suite", Intent.ROOM_TYPES),
    ("Give me details of the presidential suite", Intent.ROOM_TYPES),
    ("What is the price of the presidential suite", Intent.ROOM_TYPES),
)
