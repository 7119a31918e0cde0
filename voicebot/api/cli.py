"""
Interactive CLI adapter for the hotel voice bot.

Architectural role:
- Provides terminal interaction over the same pipeline and store the HTTP
  adapter uses.
- Prints inventory status at startup for operator visibility.

Request lifecycle (per user turn, CLI):
1. Read one line from stdin.
2. Handle local commands (`exit`/`quit`, `/analytics`, `/history`).
3. Run other text through `NLUPipeline.process` and log the query.
4. Print intent, confidence, entities and the reply.

Input validation behavior:
- Empty input is ignored and does not reach the pipeline.

Error handling strategy:
- EOF and keyboard interrupts end the loop without traceback output.
- Pipeline initialization errors abort startup with a message.
"""

import json
import logging
import sys
import time

from voicebot import config
from voicebot.analytics.query_log import get_analytics, get_history, log_query
from voicebot.core.engine import NLUPipeline, build_pipeline
from voicebot.core.errors import PipelineInitError
from voicebot.store.hotel_store import HotelStore


# =========================================================
# UTF-8 SAFE OUTPUT
# =========================================================

if hasattr(sys.stdout, "reconfigure"):
    try:
        sys.stdout.reconfigure(encoding="utf-8", errors="ignore")
    except (OSError, ValueError):
        pass


def format_turn(pipeline: NLUPipeline, store: HotelStore, question: str) -> str:
    """Process one question, log it, and return the printable turn output."""
    started = time.perf_counter()
    result = pipeline.process(question)
    response_time = round((time.perf_counter() - started) * 1000, 3)

    log_query(
        store,
        message=question,
        intent=result.intent.value,
        entities=dict(result.entities),
        response_time=response_time,
    )

    return (
        f"Intent: {result.intent.value} (confidence {result.confidence:.2f})\n"
        f"Entities: {json.dumps(dict(result.entities))}\n\n"
        f"{result.response}"
    )


def handle_command(store: HotelStore, command: str) -> str | None:
    """Return output for local slash commands, or `None` for normal text."""
    if command == "/analytics":
        return json.dumps(get_analytics(store), indent=2, ensure_ascii=False)

    if command == "/history":
        history = get_history(store)
        if not history:
            return "No queries logged yet."
        return "\n".join(f"[{h['intent']}] {h['message']}" for h in history)

    return None


# =========================================================
# MAIN
# =========================================================

def main():
    logging.basicConfig(level=config.LOG_LEVEL)

    store = HotelStore()
    try:
        pipeline = build_pipeline(store)
    except PipelineInitError as e:
        print(f"Pipeline initialization error: {e}")
        return

    hotel = store.get_hotel_info()
    print(f"{hotel.name} assistant started. (Type 'exit' to quit)\n")
    print("-" * 60)

    print("ROOM INVENTORY:\n")
    for room in store.get_rooms():
        print(f"{room.type}: {room.available} available")
    print("-" * 60)

    while True:

        try:
            question = input("Question: ").strip()

        except EOFError:
            print("\nSession ended (EOF received).")
            break

        except KeyboardInterrupt:
            print("\nOperation cancelled by user.")
            break

        if not question:
            continue

        if question.lower() in ("exit", "quit"):
            print("Shutting down.")
            break

        command_output = handle_command(store, question.lower())
        if command_output is not None:
            print(f"\n{command_output}\n")
            continue

        print("\nResponse:\n")
        print(format_turn(pipeline, store, question))
        print("\n" + "-" * 60 + "\n")


if __name__ == "__main__":
    main()
