"""Severity aggregation — folds an alert batch into one target per component.

The fold is upgrade-only: every alert proposes an effective severity
(its declared severity while firing, ``BASELINE_SEVERITY`` once resolved)
and each component keeps the highest proposal seen in the batch. Because
the fold is a plain max, the result does not depend on alert order, and a
firing alert always outranks a resolved one for the same component.
"""

from __future__ import annotations

from collections.abc import Iterable

from src.alerts.types import BASELINE_SEVERITY, Alert, AlertBatch, AlertStatus
from src.core.config import ResolutionPolicy

SeverityMap = dict[int, int]


def effective_severity(alert: Alert, status: AlertStatus | None = None) -> int:
    """Severity an alert asks for; *status* overrides the alert's own status."""
    governing = status or alert.status
    if governing == AlertStatus.FIRING:
        return alert.severity
    return BASELINE_SEVERITY


def fold_severities(pairs: Iterable[tuple[int, int]]) -> SeverityMap:
    """Keep the maximum severity per component from (component, severity) pairs."""
    result: SeverityMap = {}
    for component, severity in pairs:
        # Unseen components compare against 0, which is never written out.
        if severity > result.get(component, 0):
            result[component] = severity
    return result


def reduce_batch(
    batch: AlertBatch,
    policy: ResolutionPolicy = ResolutionPolicy.ALERT,
) -> SeverityMap:
    """Reduce *batch* to the target severity of every component it names.

    Args:
        batch: Parsed webhook delivery. May be empty.
        policy: ``ALERT`` resolves each alert by its own status; ``BATCH``
            applies the group-level status to every alert.

    Returns:
        Mapping of component id → target severity. Components absent from
        the batch are absent from the mapping.
    """
    override = batch.status if policy == ResolutionPolicy.BATCH else None
    return fold_severities(
        (alert.component, effective_severity(alert, override))
        for alert in batch.alerts
    )
