"""Wire models for the log ingest envelope.

The ingest service accepts a two-level document:

- an outer payload with a snake_case `context` block and an `entry` string;
- the `entry` string, which is itself a JSON-encoded CloudWatch Logs style
  record (camelCase keys).

Field names on both levels are part of the ingest contract. Renaming a field
or alias here breaks ingestion.
"""

from __future__ import annotations

from typing import Any, Literal

import requests
from pydantic import BaseModel, ConfigDict, Field


class _Model(BaseModel):
    # Built fresh per request and never mutated afterwards.
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class InvocationContext(_Model):
    """Function identity sent alongside every entry."""

    function_name: str
    invoked_function_arn: str
    # Not meaningful for extensions, but ingest requires both to be present.
    log_group_name: str
    log_stream_name: str


class LogEvent(_Model):
    """A single CloudWatch Logs style event."""

    id: str
    message: str
    timestamp: int


class LogRecord(_Model):
    """A CloudWatch Logs delivery record holding one event."""

    log_events: list[LogEvent] = Field(alias="logEvents")
    log_group: str = Field(alias="logGroup")
    # Ingest expects these keys even though nothing fills them in.
    log_stream: str = Field(default="", alias="logStream")
    message_type: str = Field(default="", alias="messageType")
    owner: str = ""


class OutboundPayload(_Model):
    """The outer document. `entry` is a JSON string, not a nested object."""

    context: InvocationContext
    entry: str


class InvocationEvent(_Model):
    """Subset of the Lambda Extensions API `INVOKE` event used here."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    event_type: str = Field(default="INVOKE", alias="eventType")
    deadline_ms: int = Field(default=0, alias="deadlineMs")
    request_id: str = Field(default="", alias="requestId")
    invoked_function_arn: str = Field(alias="invokedFunctionArn")
    tracing: dict[str, Any] | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> InvocationEvent:
        """Build from a decoded `/extension/event/next` response body."""
        return cls.model_validate(data)


class TelemetryRequest(_Model):
    """A fully built ingest request, ready for a transport to send.

    `headers` holds exactly the protocol headers. `to_prepared()` hands the
    request to `requests`, which adds its own framing headers (Content-Length)
    at that point.
    """

    method: Literal["POST"] = "POST"
    url: str
    headers: dict[str, str]
    body: bytes

    def to_prepared(self) -> requests.PreparedRequest:
        """Convert to a `requests.PreparedRequest` for `Session.send`."""
        return requests.Request(self.method, self.url, headers=dict(self.headers), data=self.body).prepare()
