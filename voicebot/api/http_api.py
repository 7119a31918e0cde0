"""
HTTP API adapter for the hotel voice bot.

Architectural role:
- Expose the NLU pipeline and analytics over JSON endpoints.
- Enforce adapter-level input validation.
- Delegate intent/entity/response work to `voicebot.core.engine.NLUPipeline`.
- Log every processed message into the analytics query log.

Endpoint responsibilities:
- `GET /`: service metadata and endpoint listing.
- `GET /api/health`: liveness probe.
- `POST /api/process`: validate `message`, run the pipeline, log the query.
- `GET /api/analytics`: aggregated query analytics.
- `GET /api/history`: every logged query, newest first.

Input validation behavior:
- Unparseable JSON, missing `message`, empty or non-string `message` -> HTTP 400.

Error handling strategy:
- Unknown routes -> JSON 404 listing the available endpoints.
- Pipeline or analytics failures are logged and returned as JSON 500 with
  the exception message in `details`.

Initialization:
- `create_app` builds the pipeline (training the classifier) before the app
  object is returned, so no request can reach an untrained model.
"""

import logging
import time
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from voicebot import config
from voicebot.analytics.query_log import get_analytics, get_history, log_query
from voicebot.core.engine import NLUPipeline, build_pipeline
from voicebot.store.hotel_store import HotelStore


logger = logging.getLogger(__name__)

AVAILABLE_ENDPOINTS = {
    "process": "POST /api/process",
    "analytics": "GET /api/analytics",
    "history": "GET /api/history",
    "health": "GET /api/health",
}


# ============================================================
# Response Schema
# ============================================================

class ProcessResponse(BaseModel):
    """Wire shape of `POST /api/process` (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True)

    response: str
    intent: str
    entities: dict
    confidence: float
    response_time: float = Field(alias="responseTime")


# ============================================================
# App Factory
# ============================================================

def create_app(
    store: HotelStore | None = None,
    pipeline: NLUPipeline | None = None,
) -> FastAPI:
    """
    Build the FastAPI application with its store and trained pipeline.

    Args:
    - store: Hotel data store; a freshly seeded one when omitted.
    - pipeline: Prebuilt pipeline; trained over `store` when omitted.
    """
    store = store or HotelStore()
    pipeline = pipeline or build_pipeline(store)

    app = FastAPI(title=config.APP_NAME, version=config.APP_VERSION)
    app.state.store = store
    app.state.pipeline = pipeline

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_origin_regex=config.ALLOWED_ORIGIN_REGEX,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ============================================================
    # Error Handlers
    # ============================================================

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(
                status_code=404,
                content={
                    "error": "Endpoint not found",
                    "availableEndpoints": AVAILABLE_ENDPOINTS,
                },
            )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(Exception)
    async def server_error_handler(request: Request, exc: Exception):
        logger.exception("Server error on %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "message": str(exc)},
        )

    # ============================================================
    # Routes
    # ============================================================

    @app.get("/")
    def root():
        return {
            "message": f"{config.APP_NAME} is running",
            "version": config.APP_VERSION,
            "endpoints": AVAILABLE_ENDPOINTS,
        }

    @app.get("/api/health")
    def health():
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "database": "connected",
        }

    @app.post("/api/process", response_model=ProcessResponse)
    async def process(request: Request):
        """
        Run one message through the NLU pipeline.

        Lifecycle:
        1. Parse JSON body and validate `message`.
        2. Run `NLUPipeline.process` and time it.
        3. Append the query to the analytics log.
        4. Return reply, intent, entities, confidence and latency (ms).
        """
        try:
            body = await request.json()
        except ValueError:
            body = None

        message = body.get("message") if isinstance(body, dict) else None

        if not message or not isinstance(message, str):
            return JSONResponse(
                status_code=400,
                content={"error": "Invalid request. Message is required."},
            )

        if config.DEBUG:
            print("Incoming message:", repr(message))

        try:
            started = time.perf_counter()
            result = request.app.state.pipeline.process(message)
            response_time = round((time.perf_counter() - started) * 1000, 3)

            log_query(
                request.app.state.store,
                message=message,
                intent=result.intent.value,
                entities=dict(result.entities),
                response_time=response_time,
            )
        except Exception as exc:
            logger.exception("Error processing message")
            return JSONResponse(
                status_code=500,
                content={
                    "error": "An error occurred while processing your message.",
                    "details": str(exc),
                },
            )

        return ProcessResponse(
            response=result.response,
            intent=result.intent.value,
            entities=dict(result.entities),
            confidence=result.confidence,
            response_time=response_time,
        )

    @app.get("/api/analytics")
    def analytics(request: Request):
        try:
            return get_analytics(request.app.state.store)
        except Exception as exc:
            logger.exception("Error fetching analytics")
            return JSONResponse(
                status_code=500,
                content={
                    "error": "An error occurred while fetching analytics.",
                    "details": str(exc),
                },
            )

    @app.get("/api/history")
    def history(request: Request):
        try:
            return get_history(request.app.state.store)
        except Exception as exc:
            logger.exception("Error fetching history")
            return JSONResponse(
                status_code=500,
                content={
                    "error": "An error occurred while fetching history.",
                    "details": str(exc),
                },
            )

    return app


app = create_app()
