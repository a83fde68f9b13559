"""Web layer for the Global Country Explorer."""

from .app import create_app, create_app_from_config

__all__ = ["create_app", "create_app_from_config"]
