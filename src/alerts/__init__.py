"""Inbound alerts — webhook schema, codec, severity aggregation."""

from src.alerts.aggregator import (
    SeverityMap,
    effective_severity,
    fold_severities,
    reduce_batch,
)
from src.alerts.codec import NumericString, parse_numeric
from src.alerts.exceptions import AlertError, MalformedPayloadError
from src.alerts.types import (
    BASELINE_SEVERITY,
    Alert,
    AlertBatch,
    AlertStatus,
    ComponentAnnotation,
)
from src.alerts.webhook import parse_batch

__all__ = [
    "BASELINE_SEVERITY",
    "Alert",
    "AlertBatch",
    "AlertError",
    "AlertStatus",
    "ComponentAnnotation",
    "MalformedPayloadError",
    "NumericString",
    "SeverityMap",
    "effective_severity",
    "fold_severities",
    "parse_batch",
    "parse_numeric",
    "reduce_batch",
]
