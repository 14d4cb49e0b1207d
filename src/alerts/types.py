"""Domain types for Alertmanager webhook deliveries."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from src.alerts.codec import NumericString

# Severity written for a component whose alerts have resolved ("operational").
BASELINE_SEVERITY = 1


class AlertStatus(StrEnum):
    """Firing/resolved state of an alert or an alert group."""

    FIRING = "firing"
    RESOLVED = "resolved"


class ComponentAnnotation(BaseModel):
    """The annotations that tie an alert to a status page component."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    component: NumericString
    severity: NumericString


class Alert(BaseModel):
    """Individual alert within an Alertmanager notification."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: AlertStatus
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: ComponentAnnotation
    starts_at: str = Field(default="", alias="startsAt")
    ends_at: str = Field(default="", alias="endsAt")
    generator_url: str = Field(default="", alias="generatorURL")
    fingerprint: str = ""

    @property
    def component(self) -> int:
        return self.annotations.component

    @property
    def severity(self) -> int:
        return self.annotations.severity


class AlertBatch(BaseModel):
    """One webhook delivery: a group of alerts sharing a group key."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: str = "4"
    group_key: str = Field(default="", alias="groupKey")
    status: AlertStatus
    receiver: str = ""
    group_labels: dict[str, str] = Field(default_factory=dict, alias="groupLabels")
    common_labels: dict[str, str] = Field(default_factory=dict, alias="commonLabels")
    common_annotations: dict[str, str] = Field(
        default_factory=dict, alias="commonAnnotations",
    )
    external_url: str = Field(default="", alias="externalURL")
    alerts: list[Alert] = Field(default_factory=list)
