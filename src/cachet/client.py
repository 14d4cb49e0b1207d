"""Async client for the Cachet component API."""

from __future__ import annotations

import asyncio
from types import TracebackType

import aiohttp
import structlog

from src.cachet.exceptions import CachetTransportError
from src.core.config import CachetConfig

logger = structlog.get_logger(__name__)

TOKEN_HEADER = "X-Cachet-Token"


class CachetClient:
    """Issues component status updates against a Cachet instance.

    Usage::

        async with CachetClient(config) as client:
            code = await client.update_component(5, 3, token)
    """

    def __init__(self, config: CachetConfig) -> None:
        self._base_url = config.base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=config.timeout_secs)
        self._session: aiohttp.ClientSession | None = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session

    def component_url(self, component: int) -> str:
        return f"{self._base_url}/api/v1/components/{component}"

    async def update_component(self, component: int, status: int, token: str) -> int:
        """PUT the new status of *component*. Returns the remote HTTP status.

        Raises:
            CachetTransportError: The request failed before a response arrived.
        """
        url = self.component_url(component)
        try:
            session = self._get_session()
            async with session.put(
                url,
                json={"status": status},
                headers={TOKEN_HEADER: token},
            ) as resp:
                if resp.status >= 400:
                    # Error bodies may not be text; log raw bytes.
                    body = await resp.read()
                    logger.warning(
                        "cachet_update_rejected",
                        component=component,
                        status=resp.status,
                        body=repr(body[:200]),
                    )
                return resp.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise CachetTransportError(component, exc) from exc

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> CachetClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()
