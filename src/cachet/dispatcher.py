"""Status dispatcher — turns a severity map into Cachet component updates."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Mapping
from typing import Protocol

import structlog

from src.cachet.exceptions import (
    CachetTransportError,
    MissingCredentialError,
    OutcomeSerializationError,
)
from src.cachet.types import (
    INTERNAL_ERROR_STATUS,
    DeliveryState,
    DirectiveOutcome,
    StatusDirective,
)

logger = structlog.get_logger(__name__)


class ComponentUpdater(Protocol):
    async def update_component(self, component: int, status: int, token: str) -> int: ...


class StatusDispatcher:
    """Sends one status update per component and accounts for every one.

    - A missing credential rejects the whole map before anything is sent.
    - Updates for different components run concurrently.
    - A transport failure is recorded as an outcome with code 500 and
      never affects its siblings.
    """

    def __init__(self, client: ComponentUpdater) -> None:
        self._client = client

    async def apply(
        self,
        severities: Mapping[int, int],
        token: str | None,
    ) -> list[DirectiveOutcome]:
        """Dispatch every (component, severity) entry.

        Returns:
            One outcome per entry, ordered by component id.

        Raises:
            MissingCredentialError: *token* is None or empty.
        """
        if not token:
            raise MissingCredentialError("no bearer token available")

        directives = [
            StatusDirective(component=component, severity=severity)
            for component, severity in sorted(severities.items())
        ]
        outcomes = await asyncio.gather(
            *(self._send(directive, token) for directive in directives)
        )

        logger.info(
            "status_outcomes",
            total=len(outcomes),
            failed=sum(1 for o in outcomes if not o.delivered),
            outcomes=[o.model_dump(by_alias=True) for o in outcomes],
        )
        return list(outcomes)

    async def _send(self, directive: StatusDirective, token: str) -> DirectiveOutcome:
        try:
            code = await self._client.update_component(
                directive.component, directive.severity, token,
            )
        except CachetTransportError as exc:
            logger.error(
                "cachet_transport_error",
                component=directive.component,
                severity=directive.severity,
                error=str(exc.cause),
            )
            return DirectiveOutcome(
                http_status=INTERNAL_ERROR_STATUS,
                status=directive,
                state=DeliveryState.TRANSPORT_FAILURE,
            )
        except Exception:
            logger.exception(
                "cachet_update_error",
                component=directive.component,
                severity=directive.severity,
            )
            return DirectiveOutcome(
                http_status=INTERNAL_ERROR_STATUS,
                status=directive,
                state=DeliveryState.TRANSPORT_FAILURE,
            )
        return DirectiveOutcome(http_status=code, status=directive)


def serialize_outcomes(outcomes: list[DirectiveOutcome]) -> str:
    """Encode outcomes as the JSON response body.

    Raises:
        OutcomeSerializationError: The outcomes could not be encoded.
    """
    try:
        return json.dumps([o.model_dump(mode="json", by_alias=True) for o in outcomes])
    except (TypeError, ValueError) as exc:
        raise OutcomeSerializationError(str(exc)) from exc
