"""Encoding boundary between captured Lambda output and the log ingest service.

One payload in, one ready-to-send request out:

- `build_log_record` / `build_context` shape the envelope.
- `serialize` applies the double JSON encoding ingest expects.
- `compress` gzips the result.
- `assemble_request` attaches method, URL and headers.

`build_request` chains all of the above. Transmission is left to the caller.
"""

from .codec import DEFAULT_COMPRESSION_LEVEL, compress, encode_entry, serialize
from .envelope import LOG_GROUP_PREFIX, LOG_STREAM_PLACEHOLDER, build_context, build_log_record, log_group_name
from .errors import CompressionError, RequestConstructionError, SerializationError, TelemetryError
from .ids import IdentifierSource, SystemIdentifierSource
from .models import InvocationContext, InvocationEvent, LogEvent, LogRecord, OutboundPayload, TelemetryRequest
from .request import assemble_request, build_request

__all__ = [
    "DEFAULT_COMPRESSION_LEVEL",
    "LOG_GROUP_PREFIX",
    "LOG_STREAM_PLACEHOLDER",
    "CompressionError",
    "IdentifierSource",
    "InvocationContext",
    "InvocationEvent",
    "LogEvent",
    "LogRecord",
    "OutboundPayload",
    "RequestConstructionError",
    "SerializationError",
    "SystemIdentifierSource",
    "TelemetryError",
    "TelemetryRequest",
    "assemble_request",
    "build_context",
    "build_log_record",
    "build_request",
    "compress",
    "encode_entry",
    "log_group_name",
    "serialize",
]
