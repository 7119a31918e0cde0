"""Thread-safe in-memory store for hotel data, bookings and query logs.

Purpose of this abstraction:
    Hold the mutable domain state the NLU core reads from (hotel profile and
    room inventory) together with the booking and query records written by
    the HTTP adapter. All mutations go through one `threading.Lock`.

Snapshot semantics:
    Room, hotel and booking records are frozen dataclasses. Updates replace
    records instead of mutating them, so a `DomainSnapshot` handed to the pipeline
    stays a consistent point-in-time read even while bookings change
    availability concurrently.

Identifiers:
    Booking and query ids combine a millisecond stamp with a per-store
    sequence taken under the lock, so ids never repeat within one store.

Persistence boundary:
    None. Everything lives in process memory and is lost on restart; `reset`
    restores the seed data.
"""

import itertools
import logging
import threading
import time
from collections import Counter
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any

from voicebot.core.types import DomainSnapshot, HotelProfile, Room
from voicebot.store.seed_data import SAMPLE_HOTEL, SAMPLE_ROOMS


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Booking:
    id: str
    room_id: str
    guest_name: str = ""
    check_in: str | None = None
    check_out: str | None = None
    guests: int = 1
    status: str = "confirmed"
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    cancelled_at: datetime | None = None


@dataclass(frozen=True)
class QueryRecord:
    """One processed utterance as logged for analytics."""

    id: str
    message: str
    intent: str
    entities: dict[str, Any]
    response_time: float
    timestamp: datetime
    success: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "message": self.message,
            "intent": self.intent,
            "entities": self.entities,
            "responseTime": self.response_time,
            "timestamp": self.timestamp.isoformat(),
            "success": self.success,
        }


class HotelStore:
    """In-memory hotel database seeded with the sample property."""

    def __init__(
        self,
        hotel: HotelProfile = SAMPLE_HOTEL,
        rooms: tuple[Room, ...] = SAMPLE_ROOMS,
    ):
        self._lock = threading.Lock()
        self._seed_hotel = hotel
        self._seed_rooms = tuple(rooms)
        self._hotel = hotel
        self._rooms: list[Room] = []
        self._bookings: list[Booking] = []
        self._queries: list[QueryRecord] = []
        self._sequence = itertools.count(1)
        self.initialize()

    # =====================================================
    # LIFECYCLE
    # =====================================================

    def initialize(self) -> None:
        """Load seed hotel data. Existing bookings and queries are kept."""
        with self._lock:
            self._hotel = self._seed_hotel
            self._rooms = list(self._seed_rooms)
        logger.info("Hotel store initialized with %d room types", len(self._seed_rooms))

    def reset(self) -> None:
        with self._lock:
            self._bookings = []
            self._queries = []
        self.initialize()

    # =====================================================
    # HOTEL INFO
    # =====================================================

    def get_hotel_info(self) -> HotelProfile:
        with self._lock:
            return self._hotel

    def update_hotel_info(self, **changes: Any) -> HotelProfile:
        """Merge field changes into the hotel profile; unknown fields raise `TypeError`."""
        if "amenities" in changes:
            changes["amenities"] = tuple(changes["amenities"])
        with self._lock:
            self._hotel = replace(self._hotel, **changes)
            return self._hotel

    # =====================================================
    # ROOMS
    # =====================================================

    def get_rooms(self) -> list[Room]:
        with self._lock:
            return list(self._rooms)

    def get_room_by_id(self, room_id: str) -> Room | None:
        with self._lock:
            return next((r for r in self._rooms if r.id == room_id), None)

    def get_room_by_type(self, room_type: str) -> Room | None:
        wanted = room_type.lower()
        with self._lock:
            return next((r for r in self._rooms if r.type.lower() == wanted), None)

    def get_available_rooms(self) -> list[Room]:
        with self._lock:
            return [r for r in self._rooms if r.available > 0]

    def update_room_availability(self, room_id: str, available: int) -> Room | None:
        with self._lock:
            return self._replace_room(room_id, available=available)

    def _next_id(self, prefix: str = "") -> str:
        # Caller holds the lock. Millisecond stamp plus a per-store sequence.
        return f"{prefix}{time.time_ns() // 1_000_000}-{next(self._sequence)}"

    def next_query_id(self) -> str:
        with self._lock:
            return self._next_id()

    def get_snapshot(self) -> DomainSnapshot:
        """Return hotel profile and rooms read under a single lock."""
        with self._lock:
            return DomainSnapshot(hotel=self._hotel, rooms=tuple(self._rooms))

    def _replace_room(self, room_id: str, **changes: Any) -> Room | None:
        # Caller holds the lock.
        for position, room in enumerate(self._rooms):
            if room.id == room_id:
                updated = replace(room, **changes)
                self._rooms[position] = updated
                return updated
        return None

    # =====================================================
    # BOOKINGS
    # =====================================================

    def add_booking(
        self,
        room_id: str,
        guest_name: str = "",
        check_in: str | None = None,
        check_out: str | None = None,
        guests: int = 1,
    ) -> Booking:
        """
        Record a booking and take one unit of the room's availability.

        Edge cases:
        - Unknown rooms or rooms with no availability still get a booking
          record; availability is only decremented when above zero.
        """
        with self._lock:
            booking = Booking(
                id=self._next_id("BK"),
                room_id=room_id,
                guest_name=guest_name,
                check_in=check_in,
                check_out=check_out,
                guests=guests,
            )
            self._bookings.append(booking)
            room = next((r for r in self._rooms if r.id == room_id), None)
            if room is not None and room.available > 0:
                self._replace_room(room_id, available=room.available - 1)

        return booking

    def get_bookings(self) -> list[Booking]:
        with self._lock:
            return list(self._bookings)

    def get_booking_by_id(self, booking_id: str) -> Booking | None:
        with self._lock:
            return next((b for b in self._bookings if b.id == booking_id), None)

    def cancel_booking(self, booking_id: str) -> Booking | None:
        """Mark a booking cancelled and return its unit to the room inventory."""
        with self._lock:
            position = next(
                (i for i, b in enumerate(self._bookings) if b.id == booking_id), None
            )
            if position is None:
                return None

            booking = self._bookings[position]
            if booking.status == "cancelled":
                return booking

            booking = replace(
                booking,
                status="cancelled",
                cancelled_at=datetime.now(timezone.utc),
            )
            self._bookings[position] = booking

            room = next((r for r in self._rooms if r.id == booking.room_id), None)
            if room is not None:
                self._replace_room(room.id, available=room.available + 1)

            return booking

    def clear_bookings(self) -> None:
        with self._lock:
            self._bookings = []

    # =====================================================
    # QUERIES
    # =====================================================

    def add_query(self, query: QueryRecord) -> None:
        with self._lock:
            self._queries.append(query)

    def get_queries(self) -> list[QueryRecord]:
        with self._lock:
            return list(self._queries)

    def get_query_by_id(self, query_id: str) -> QueryRecord | None:
        with self._lock:
            return next((q for q in self._queries if q.id == query_id), None)

    def get_query_statistics(self) -> dict[str, Any]:
        queries = self.get_queries()

        if not queries:
            return {"total": 0, "avgResponseTime": 0, "intentDistribution": {}}

        total = len(queries)
        avg_response_time = round(sum(q.response_time for q in queries) / total)
        distribution = Counter(q.intent for q in queries if q.intent)

        return {
            "total": total,
            "avgResponseTime": avg_response_time,
            "intentDistribution": dict(distribution),
        }

    def clear_queries(self) -> None:
        with self._lock:
            self._queries = []
