from __future__ import annotations

import logging

import uvicorn

from .application.publisher import Publisher
from .env import get_settings


def main() -> None:
    """Main entry point for the publisher callback service."""

    settings = get_settings()
    # Fail fast on bad credentials before binding the port.
    Publisher.from_settings(settings)

    logging.basicConfig(level=logging.INFO)
    print(f"Starting {settings.app_name} v{settings.app_version}")
    print(f"Reward center host: {settings.host}")
    print(f"API will be available at: http://{settings.api_host}:{settings.api_port}")
    print(f"API Documentation: http://{settings.api_host}:{settings.api_port}/docs")

    # Uvicorn doesn't support multiple workers with reload.
    reload = settings.api_debug
    workers = 1 if reload else settings.api_workers

    uvicorn.run(
        "plpublisher.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=reload,
        workers=workers,
        log_level="info",
    )


if __name__ == "__main__":
    main()
