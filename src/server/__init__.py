"""Inbound HTTP surface — webhook endpoint and credential resolution."""

from src.server.app import create_web_app, start_web_server
from src.server.auth import resolve_credential

__all__ = [
    "create_web_app",
    "resolve_credential",
    "start_web_server",
]
