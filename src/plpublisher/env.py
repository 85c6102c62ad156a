from __future__ import annotations

import os

from pydantic import BaseModel

from .domain.entities import DEFAULT_HOST


class Settings(BaseModel):
    """Typed application settings built from environment variables."""

    # Publisher credentials issued by the rewards network
    application_id: int
    security_key: str
    transaction_key: str
    host: str = DEFAULT_HOST

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_workers: int = 1

    # Application settings
    app_name: str = "PL Publisher"
    app_version: str = "1.0.0"


def get_settings() -> Settings:
    """Return typed settings instance sourced from env vars."""
    return Settings(
        application_id=int(os.environ.get("PL_APPLICATION_ID", "0")),
        security_key=os.environ.get("PL_SECURITY_KEY", ""),
        transaction_key=os.environ.get("PL_TRANSACTION_KEY", ""),
        host=os.environ.get("PL_HOST", DEFAULT_HOST),
        api_host=os.environ.get("PL_API_HOST", "0.0.0.0"),
        api_port=int(os.environ.get("PL_API_PORT", "8000")),
        api_debug=os.environ.get("PL_API_DEBUG", "false").lower() == "true",
        api_workers=int(os.environ.get("PL_API_WORKERS", "1")),
        app_name=os.environ.get("PL_APP_NAME", "PL Publisher"),
        app_version=os.environ.get("PL_APP_VERSION", "1.0.0"),
    )
