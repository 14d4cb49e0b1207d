"""Domain types for status updates sent to Cachet."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# Code recorded for a directive whose PUT never got a response.
INTERNAL_ERROR_STATUS = 500


class DeliveryState(StrEnum):
    """How a single directive ended."""

    DELIVERED = "DELIVERED"
    TRANSPORT_FAILURE = "TRANSPORT_FAILURE"


class StatusDirective(BaseModel):
    """Intended status update for one component."""

    model_config = ConfigDict(frozen=True)

    component: int
    severity: int


class DirectiveOutcome(BaseModel):
    """Result of one directive, as reported back to Alertmanager."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    http_status: int = Field(alias="httpStatus")
    status: StatusDirective
    state: DeliveryState = Field(default=DeliveryState.DELIVERED, exclude=True)

    @property
    def delivered(self) -> bool:
        return self.state == DeliveryState.DELIVERED
