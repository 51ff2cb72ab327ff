"""Envelope and context construction for a single captured payload."""

from __future__ import annotations

from typing import Final

from .ids import DEFAULT_IDENTIFIER_SOURCE, IdentifierSource
from .models import InvocationContext, LogEvent, LogRecord

LOG_GROUP_PREFIX: Final[str] = "/aws/lambda"

# The extension has no real log stream; ingest only needs a non-empty value.
LOG_STREAM_PLACEHOLDER: Final[str] = "placeholder"


def log_group_name(function_name: str) -> str:
    """Return the CloudWatch log group a Lambda function writes to."""
    return f"{LOG_GROUP_PREFIX}/{function_name}"


def build_log_record(
    payload: bytes,
    function_name: str,
    *,
    ids: IdentifierSource | None = None,
) -> LogRecord:
    """Wrap `payload` as the single event of a CloudWatch Logs style record.

    Invalid UTF-8 in the payload is replaced with U+FFFD rather than rejected.
    """
    source = ids or DEFAULT_IDENTIFIER_SOURCE
    event = LogEvent(
        id=source.new_id(),
        message=payload.decode("utf-8", errors="replace"),
        timestamp=source.now_ms(),
    )
    return LogRecord(log_events=[event], log_group=log_group_name(function_name))


def build_context(function_name: str, invoked_function_arn: str) -> InvocationContext:
    """Build the invocation context block for `function_name`."""
    return InvocationContext(
        function_name=function_name,
        invoked_function_arn=invoked_function_arn,
        log_group_name=log_group_name(function_name),
        log_stream_name=LOG_STREAM_PLACEHOLDER,
    )
