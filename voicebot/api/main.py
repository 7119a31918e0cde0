"""
HTTP server entrypoint.

Runs `voicebot.api.http_api:app` under uvicorn with host, port and log level
taken from `voicebot.config`. Importing the app module trains the classifier,
so the server only starts listening once the pipeline is ready.
"""

import logging

import uvicorn

from voicebot import config


def main():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print(f"{config.APP_NAME} starting on port {config.PORT}")
    print(f"API documentation: http://localhost:{config.PORT}/docs")
    print(f"Health check: http://localhost:{config.PORT}/api/health")

    uvicorn.run(
        "voicebot.api.http_api:app",
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
