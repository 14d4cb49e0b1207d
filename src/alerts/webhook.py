"""Webhook body decoding — raw request bytes to a validated AlertBatch."""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from src.alerts.exceptions import MalformedPayloadError
from src.alerts.types import AlertBatch


def parse_batch(raw: bytes | str | dict[str, Any]) -> AlertBatch:
    """Decode and validate a webhook body into an AlertBatch.

    Raises:
        MalformedPayloadError: The body is not JSON or does not match the schema.
    """
    data: object = raw
    if isinstance(raw, (bytes, str)):
        try:
            data = json.loads(raw)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise MalformedPayloadError(f"body is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise MalformedPayloadError("body must be a JSON object")

    try:
        return AlertBatch.model_validate(data)
    except ValidationError as exc:
        raise MalformedPayloadError(_describe(exc)) from exc


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)
