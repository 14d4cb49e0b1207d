#!/usr/bin/env python3
"""Main entrypoint — serves the Alertmanager → Cachet webhook.

Usage::

    # Run with default config (environment variables still apply)
    python scripts/run.py

    # Custom config file
    python scripts/run.py --config config/settings.yaml

    # Override log level and bind address
    python scripts/run.py --log-level DEBUG --bind 127.0.0.1:9000
"""

from __future__ import annotations

import argparse
import asyncio
import signal
import sys

import structlog
from pydantic import ValidationError

from src.core.config import ServerConfig, load_settings
from src.core.logging import setup_logging
from src.server.app import start_web_server

logger = structlog.get_logger(__name__)


async def run(args: argparse.Namespace) -> int:
    """Start the webhook server and run until interrupted."""
    try:
        settings = load_settings(args.config)
        if args.bind:
            settings.server = ServerConfig(bind_address=args.bind)
    except ValidationError as exc:
        print(f"Invalid configuration:\n{exc}", file=sys.stderr)
        return 1

    setup_logging(settings.logging, level=args.log_level)

    logger.info(
        "adapter_starting",
        cachet_base_url=settings.cachet.base_url,
        fallback_token=settings.cachet.fallback_token is not None,
        resolution_policy=settings.aggregation.resolution_policy.value,
    )

    try:
        runner = await start_web_server(settings)
    except OSError as exc:
        logger.error("server_start_failed", error=str(exc))
        return 1

    # ── Wait for shutdown signal ─────────────────────────────────
    stop_event = asyncio.Event()

    def _signal_handler() -> None:
        logger.info("shutdown_signal_received")
        stop_event.set()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, _signal_handler)
        except NotImplementedError:
            # Windows: signal handlers not supported on ProactorEventLoop
            pass

    try:
        await stop_event.wait()
    except KeyboardInterrupt:
        logger.info("keyboard_interrupt")

    # ── Graceful shutdown ────────────────────────────────────────
    logger.info("adapter_shutting_down")
    await runner.cleanup()
    logger.info("adapter_stopped")
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Forward Alertmanager webhooks to Cachet component statuses.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to settings YAML (default: config/settings.yaml)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level override: DEBUG, INFO, WARNING, ERROR",
    )
    parser.add_argument(
        "--bind",
        default=None,
        help="Bind address override as host:port (default: 0.0.0.0:8888)",
    )
    args = parser.parse_args()

    code = asyncio.run(run(args))
    sys.exit(code)


if __name__ == "__main__":
    main()
