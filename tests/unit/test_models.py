from __future__ import annotations

import pytest
from pydantic import ValidationError

from telemetry.models import InvocationEvent, LogEvent, LogRecord, OutboundPayload, TelemetryRequest


def test_invocation_event_from_api_ignores_unknown_fields() -> None:
    event = InvocationEvent.from_api(
        {
            "eventType": "INVOKE",
            "deadlineMs": 1_700_000_003_000,
            "requestId": "req-1",
            "invokedFunctionArn": "arn:aws:lambda:us-east-1:123456789012:function:f",
            "somethingNew": True,
        }
    )

    assert event.event_type == "INVOKE"
    assert event.deadline_ms == 1_700_000_003_000
    assert event.request_id == "req-1"
    assert event.invoked_function_arn == "arn:aws:lambda:us-east-1:123456789012:function:f"
    assert event.tracing is None


def test_invocation_event_requires_arn() -> None:
    with pytest.raises(ValidationError):
        InvocationEvent.from_api({"eventType": "INVOKE"})


def test_log_record_accepts_wire_names() -> None:
    record = LogRecord.model_validate(
        {
            "logEvents": [{"id": "1", "message": "m", "timestamp": 5}],
            "logGroup": "/aws/lambda/f",
        }
    )
    assert record.log_events == [LogEvent(id="1", message="m", timestamp=5)]
    assert record.log_group == "/aws/lambda/f"


def test_models_are_frozen() -> None:
    event = LogEvent(id="1", message="m", timestamp=5)
    with pytest.raises(ValidationError):
        event.message = "changed"  # type: ignore[misc]


def test_outbound_payload_entry_must_be_a_string() -> None:
    with pytest.raises(ValidationError):
        OutboundPayload.model_validate(
            {
                "context": {
                    "function_name": "f",
                    "invoked_function_arn": "arn",
                    "log_group_name": "/aws/lambda/f",
                    "log_stream_name": "placeholder",
                },
                "entry": {"logEvents": []},
            }
        )


def test_telemetry_request_only_allows_post() -> None:
    with pytest.raises(ValidationError):
        TelemetryRequest(method="GET", url="https://example.com/", headers={}, body=b"")  # type: ignore[arg-type]
