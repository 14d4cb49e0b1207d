"""Webhook server — receives Alertmanager deliveries and updates Cachet.

Runs as an ``aiohttp`` web server. Exposes:
- ``POST /``       → Alertmanager webhook; responds with one outcome per component
- ``GET /health``  → empty 200
"""

from __future__ import annotations

import time
from typing import Any

import structlog
from aiohttp import web

from src.alerts.aggregator import reduce_batch
from src.alerts.exceptions import MalformedPayloadError
from src.alerts.webhook import parse_batch
from src.cachet.client import CachetClient
from src.cachet.dispatcher import StatusDispatcher, serialize_outcomes
from src.cachet.exceptions import MissingCredentialError, OutcomeSerializationError
from src.core.config import Settings
from src.server.auth import resolve_credential

logger = structlog.get_logger(__name__)

SETTINGS_KEY = web.AppKey("settings", Settings)
CLIENT_KEY = web.AppKey("client", CachetClient)
DISPATCHER_KEY = web.AppKey("dispatcher", StatusDispatcher)


@web.middleware
async def _access_log_middleware(request: web.Request, handler: Any) -> web.StreamResponse:
    """Log every request with its final status and duration."""
    start = time.monotonic()
    status = 500
    try:
        response = await handler(request)
        status = response.status
        return response
    except web.HTTPException as exc:
        status = exc.status
        raise
    finally:
        logger.info(
            "http_request",
            method=request.method,
            path=request.path,
            status=status,
            duration_ms=round((time.monotonic() - start) * 1000, 2),
        )


async def _handle_hook(request: web.Request) -> web.Response:
    settings = request.app[SETTINGS_KEY]
    dispatcher = request.app[DISPATCHER_KEY]

    try:
        batch = parse_batch(await request.read())
    except MalformedPayloadError as exc:
        logger.warning("malformed_payload", error=str(exc))
        return web.Response(status=400, text=str(exc))

    logger.info(
        "alert_batch_received",
        group_key=batch.group_key,
        status=batch.status.value,
        receiver=batch.receiver,
        alerts=len(batch.alerts),
    )

    severities = reduce_batch(batch, settings.aggregation.resolution_policy)
    if not severities:
        return web.Response(status=200, text="[]", content_type="application/json")

    try:
        token = resolve_credential(
            request.headers.get("Authorization"),
            settings.cachet.fallback_token,
        )
        outcomes = await dispatcher.apply(severities, token)
    except MissingCredentialError as exc:
        logger.error("unauthorized", error=str(exc), components=len(severities))
        return web.Response(status=401)

    try:
        body = serialize_outcomes(outcomes)
    except OutcomeSerializationError as exc:
        logger.error("outcome_serialization_failed", error=str(exc))
        return web.Response(status=500, text="Couldn't serialize cachet responses.")

    return web.Response(status=200, text=body, content_type="application/json")


async def _handle_health(request: web.Request) -> web.Response:
    return web.Response(status=200, text="")


async def _close_client(app: web.Application) -> None:
    await app[CLIENT_KEY].close()


def create_web_app(
    settings: Settings,
    client: CachetClient | None = None,
) -> web.Application:
    """Create the aiohttp web application."""
    cachet = client or CachetClient(settings.cachet)
    app = web.Application(middlewares=[_access_log_middleware])
    app[SETTINGS_KEY] = settings
    app[CLIENT_KEY] = cachet
    app[DISPATCHER_KEY] = StatusDispatcher(cachet)
    app.router.add_post("/", _handle_hook)
    app.router.add_get("/health", _handle_health)
    app.on_cleanup.append(_close_client)
    return app


async def start_web_server(
    settings: Settings,
    client: CachetClient | None = None,
) -> web.AppRunner:
    """Start the webhook server. Returns the runner for cleanup."""
    app = create_web_app(settings, client)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, settings.server.host, settings.server.port)
    await site.start()
    logger.info("server_listening", bind_address=settings.server.bind_address)
    return runner
