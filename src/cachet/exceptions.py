"""Exception hierarchy for the Cachet status API side."""

from __future__ import annotations


class CachetError(Exception):
    """Base exception for all Cachet errors."""


class MissingCredentialError(CachetError):
    """No bearer token could be resolved for the request."""


class CachetTransportError(CachetError):
    """A component update failed at the network layer."""

    def __init__(self, component: int, cause: BaseException) -> None:
        super().__init__(f"component {component}: {cause}")
        self.component = component
        self.cause = cause


class OutcomeSerializationError(CachetError):
    """The outcome list could not be encoded as the response body."""
