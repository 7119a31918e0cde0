"""In-memory hotel data store.

- `hotel_store`: profile, room inventory, bookings and query log.
- `seed_data`: sample property loaded at startup and on reset.
"""
