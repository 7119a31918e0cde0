"""Data contracts shared by the NLU core and its collaborators.

Architectural role:
    Defines the closed intent vocabulary, the entity mapping produced by the
    extractor, the read-only domain snapshot consumed by the response
    synthesizer, and the structured result returned by
    `voicebot.core.engine.NLUPipeline.process`.

Immutability:
    Domain records are frozen dataclasses holding tuples, so a snapshot taken
    from the store can be read concurrently without coordination. Per-call
    results are plain dataclasses built fresh for every utterance.

Determinism:
    Purely structural; no behavior beyond serialization helpers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TypedDict


class Intent(str, Enum):
    """Closed set of intent tags. Values are the wire representation."""

    GREETING = "greeting"
    BOOKING = "booking"
    AVAILABILITY = "availability"
    PRICING = "pricing"
    AMENITIES = "amenities"
    CANCELLATION = "cancellation"
    LOCATION = "location"
    CHECKOUT = "checkout"
    HELP = "help"
    ROOM_TYPES = "roomTypes"
    DEFAULT = "default"


class ExtractedEntities(TypedDict, total=False):
    """Entities found in one utterance. A missing key means no match."""

    date: str
    numbers: list[str]
    email: str
    phone: str


@dataclass(frozen=True)
class HotelProfile:
    name: str
    address: str
    phone: str
    email: str
    website: str = ""
    description: str = ""
    amenities: tuple[str, ...] = ()
    check_in_time: str = "2:00 PM"
    check_out_time: str = "11:00 AM"


@dataclass(frozen=True)
class Room:
    id: str
    type: str
    price: int
    capacity: int
    size: str
    description: str
    amenities: tuple[str, ...] = ()
    available: int = 0


@dataclass(frozen=True)
class DomainSnapshot:
    """Point-in-time read of hotel profile and room inventory."""

    hotel: HotelProfile
    rooms: tuple[Room, ...] = ()

    @property
    def available_rooms(self) -> tuple[Room, ...]:
        return tuple(room for room in self.rooms if room.available > 0)


@dataclass(frozen=True)
class IntentDecision:
    """Outcome of intent resolution.

    Attributes:
        intent: Final intent tag.
        source: Which signal decided it: `keyword`, `classifier` or `fallback`.
        keyword_intent: Keyword candidate, if any keyword matched.
        keyword_score: Score of the keyword candidate.
        classifier_intent: Top classifier label, or `None` without signal.
        confidence: Classifier top score (`0.0` without signal).
    """

    intent: Intent
    source: str
    keyword_intent: Intent | None = None
    keyword_score: int = 0
    classifier_intent: Intent | None = None
    confidence: float = 0.0


@dataclass
class PipelineResult:
    intent: Intent
    entities: ExtractedEntities = field(default_factory=dict)
    confidence: float = 0.0
    response: str = ""

    def to_dict(self) -> dict:
        return {
            "intent": self.intent.value,
            "entities": dict(self.entities),
            "confidence": self.confidence,
            "response": self.response,
        }
