"""Query logging and analytics aggregation over `HotelStore` query records.

Aggregates:
- `totalQueries`, rounded `avgResponseTime` (milliseconds), `successRate`
  (percent), `commonIntents` (top five by count), and for the full report the
  ten most recent queries.

Determinism:
- Aggregation is deterministic for a fixed set of records. Intent ties in
  `commonIntents` keep first-seen order.

Failure handling:
- Empty logs report zero totals and a 100% success rate.
"""

import logging
from collections import Counter
from datetime import datetime, timezone
from typing import Any

from voicebot.store.hotel_store import HotelStore, QueryRecord


logger = logging.getLogger(__name__)

COMMON_INTENTS_LIMIT = 5
RECENT_QUERIES_LIMIT = 10


def log_query(
    store: HotelStore,
    message: str,
    intent: str,
    entities: dict[str, Any],
    response_time: float,
    timestamp: datetime | None = None,
    success: bool = True,
) -> QueryRecord:
    """Build a `QueryRecord` and append it to the store."""
    record = QueryRecord(
        id=store.next_query_id(),
        message=message,
        intent=intent,
        entities=dict(entities),
        response_time=response_time,
        timestamp=timestamp or datetime.now(timezone.utc),
        success=success,
    )
    store.add_query(record)
    logger.debug("Logged query id=%s intent=%s", record.id, intent)
    return record


def calculate_analytics(queries: list[QueryRecord]) -> dict[str, Any]:
    """Aggregate totals, average latency, success rate and top intents."""
    if not queries:
        return {
            "totalQueries": 0,
            "avgResponseTime": 0,
            "successRate": 100,
            "commonIntents": [],
        }

    total = len(queries)
    avg_response_time = round(sum(q.response_time for q in queries) / total)
    successful = sum(1 for q in queries if q.success)
    success_rate = round(successful / total * 100)

    intent_counts = Counter(q.intent for q in queries if q.intent)
    common_intents = [
        {"intent": intent, "count": count}
        for intent, count in intent_counts.most_common(COMMON_INTENTS_LIMIT)
    ]

    return {
        "totalQueries": total,
        "avgResponseTime": avg_response_time,
        "successRate": success_rate,
        "commonIntents": common_intents,
    }


def _newest_first(queries: list[QueryRecord]) -> list[QueryRecord]:
    return sorted(queries, key=lambda q: q.timestamp, reverse=True)


def get_analytics(store: HotelStore) -> dict[str, Any]:
    """Full analytics report including the most recent queries."""
    queries = store.get_queries()
    report = calculate_analytics(queries)

    report["recentQueries"] = [
        {
            "message": q.message,
            "intent": q.intent,
            "responseTime": q.response_time,
            "timestamp": q.timestamp.isoformat(),
        }
        for q in _newest_first(queries)[:RECENT_QUERIES_LIMIT]
    ]
    return report


def get_history(store: HotelStore) -> list[dict[str, Any]]:
    """Every logged query, newest first."""
    return [q.to_dict() for q in _newest_first(store.get_queries())]


def get_analytics_by_date_range(
    store: HotelStore,
    start: datetime,
    end: datetime,
) -> dict[str, Any]:
    """Aggregate only queries with `start <= timestamp <= end` (inclusive)."""
    queries = [q for q in store.get_queries() if start <= q.timestamp <= end]
    return calculate_analytics(queries)
