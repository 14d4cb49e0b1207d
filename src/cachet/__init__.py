"""Cachet status API — client, dispatcher, outcome types."""

from src.cachet.client import TOKEN_HEADER, CachetClient
from src.cachet.dispatcher import StatusDispatcher, serialize_outcomes
from src.cachet.exceptions import (
    CachetError,
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

__all__ = [
    "INTERNAL_ERROR_STATUS",
    "TOKEN_HEADER",
    "CachetClient",
    "CachetError",
    "CachetTransportError",
    "DeliveryState",
    "DirectiveOutcome",
    "MissingCredentialError",
    "OutcomeSerializationError",
    "StatusDirective",
    "serialize_outcomes",
]
