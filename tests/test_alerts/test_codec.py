"""Tests for the webhook codec — numeric annotations, schema validation, errors."""

from __future__ import annotations

import json

import pytest

from src.alerts.codec import parse_numeric
from src.alerts.exceptions import MalformedPayloadError
from src.alerts.types import AlertStatus
from src.alerts.webhook import parse_batch


# ── Helpers ─────────────────────────────────────────────────────


def _alert(**kw: object) -> dict[str, object]:
    defaults: dict[str, object] = {
        "status": "firing",
        "labels": {"alertname": "HighLatency", "instance": "api-1"},
        "annotations": {"component": "5", "severity": "3", "summary": "slow"},
        "startsAt": "2024-05-01T10:00:00Z",
        "endsAt": "0001-01-01T00:00:00Z",
        "generatorURL": "http://prometheus/graph",
    }
    defaults.update(kw)
    return defaults


def _payload(alerts: list[dict[str, object]] | None = None, **kw: object) -> dict[str, object]:
    defaults: dict[str, object] = {
        "version": "4",
        "groupKey": '{}:{alertname="HighLatency"}',
        "status": "firing",
        "receiver": "cachet",
        "groupLabels": {"alertname": "HighLatency"},
        "commonLabels": {},
        "commonAnnotations": {},
        "externalURL": "http://alertmanager:9093",
        "alerts": [_alert()] if alerts is None else alerts,
    }
    defaults.update(kw)
    return defaults


# ── parse_numeric ───────────────────────────────────────────────


class TestParseNumeric:
    def test_numeric_string(self) -> None:
        assert parse_numeric("42") == 42

    def test_signed_string(self) -> None:
        assert parse_numeric("-3") == -3
        assert parse_numeric("+7") == 7

    def test_plain_int(self) -> None:
        assert parse_numeric(4) == 4

    @pytest.mark.parametrize("value", ["", "abc", "3.5", " 3", "3 ", "0x10", None, 2.0])
    def test_rejects_non_integers(self, value: object) -> None:
        with pytest.raises(ValueError):
            parse_numeric(value)

    def test_rejects_bool(self) -> None:
        with pytest.raises(ValueError):
            parse_numeric(True)


# ── parse_batch ─────────────────────────────────────────────────


class TestParseBatch:
    def test_full_payload(self) -> None:
        batch = parse_batch(json.dumps(_payload()))
        assert batch.status == AlertStatus.FIRING
        assert batch.group_key == '{}:{alertname="HighLatency"}'
        assert batch.receiver == "cachet"
        assert len(batch.alerts) == 1
        alert = batch.alerts[0]
        assert alert.component == 5
        assert alert.severity == 3
        assert alert.labels["instance"] == "api-1"
        assert alert.starts_at == "2024-05-01T10:00:00Z"

    def test_bytes_input(self) -> None:
        batch = parse_batch(json.dumps(_payload()).encode())
        assert batch.alerts[0].component == 5

    def test_dict_input(self) -> None:
        batch = parse_batch(_payload(status="resolved"))
        assert batch.status == AlertStatus.RESOLVED

    def test_minimal_payload(self) -> None:
        raw = {
            "status": "resolved",
            "alerts": [
                {"status": "resolved", "annotations": {"component": "1", "severity": "2"}},
            ],
        }
        batch = parse_batch(raw)
        assert batch.alerts[0].status == AlertStatus.RESOLVED
        assert batch.alerts[0].labels == {}

    def test_empty_alerts(self) -> None:
        batch = parse_batch(_payload(alerts=[]))
        assert batch.alerts == []

    def test_numeric_annotations_accepted(self) -> None:
        alert = _alert(annotations={"component": 9, "severity": 2})
        batch = parse_batch(_payload(alerts=[alert]))
        assert batch.alerts[0].component == 9

    def test_models_are_frozen(self) -> None:
        batch = parse_batch(_payload())
        with pytest.raises(Exception):
            batch.alerts[0].status = AlertStatus.RESOLVED  # type: ignore[misc]


class TestMalformedPayload:
    def test_invalid_json(self) -> None:
        with pytest.raises(MalformedPayloadError, match="not valid JSON"):
            parse_batch(b"{not json")

    def test_non_object_body(self) -> None:
        with pytest.raises(MalformedPayloadError, match="JSON object"):
            parse_batch("[1, 2]")

    def test_missing_batch_status(self) -> None:
        raw = _payload()
        del raw["status"]
        with pytest.raises(MalformedPayloadError, match="status"):
            parse_batch(raw)

    def test_unknown_status(self) -> None:
        with pytest.raises(MalformedPayloadError):
            parse_batch(_payload(alerts=[_alert(status="pending")]))

    def test_non_numeric_severity(self) -> None:
        alert = _alert(annotations={"component": "5", "severity": "high"})
        with pytest.raises(MalformedPayloadError, match="severity"):
            parse_batch(_payload(alerts=[alert]))

    def test_missing_component(self) -> None:
        alert = _alert(annotations={"severity": "2"})
        with pytest.raises(MalformedPayloadError, match="component"):
            parse_batch(_payload(alerts=[alert]))

    def test_invalid_utf8(self) -> None:
        with pytest.raises(MalformedPayloadError):
            parse_batch(b"\xff\xfe\x00")
