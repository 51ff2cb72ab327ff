"""Serialization and compression of the ingest envelope.

Serialization is two-stage: the log record is encoded to a JSON string which
becomes the `entry` field of the outer payload, and the outer payload is then
encoded to bytes. The receiving service decodes `entry` separately, so it must
stay a string.
"""

from __future__ import annotations

import gzip
import zlib
from typing import Final

from loguru import logger
from pydantic_core import PydanticSerializationError

from .errors import CompressionError, SerializationError
from .models import InvocationContext, LogRecord, OutboundPayload

DEFAULT_COMPRESSION_LEVEL: Final[int] = 6

_SERIALIZE_ERRORS = (PydanticSerializationError, TypeError, ValueError)


def encode_entry(record: LogRecord) -> str:
    """Encode a log record to the JSON string carried in `entry`."""
    try:
        return record.model_dump_json(by_alias=True)
    except _SERIALIZE_ERRORS as exc:
        raise SerializationError(f"cannot encode log record: {exc}", stage="entry") from exc


def serialize(record: LogRecord, context: InvocationContext) -> bytes:
    """Encode `record` and `context` into the outer payload bytes."""
    entry = encode_entry(record)
    try:
        payload = OutboundPayload(context=context, entry=entry)
        data = payload.model_dump_json().encode("utf-8")
    except _SERIALIZE_ERRORS as exc:
        raise SerializationError(f"cannot encode payload: {exc}", stage="payload") from exc

    logger.trace("Serialized payload: entry={} chars, total={} bytes", len(entry), len(data))
    return data


def compress(data: bytes, *, level: int = DEFAULT_COMPRESSION_LEVEL) -> bytes:
    """Gzip `data`. There is no uncompressed fallback."""
    try:
        return gzip.compress(data, compresslevel=level)
    except (OSError, TypeError, ValueError, zlib.error) as exc:
        raise CompressionError(f"error compressing data: {exc}") from exc
