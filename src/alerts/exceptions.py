"""Exception hierarchy for inbound alert handling."""

from __future__ import annotations


class AlertError(Exception):
    """Base exception for all alert errors."""


class MalformedPayloadError(AlertError):
    """Webhook body does not match the Alertmanager schema."""
