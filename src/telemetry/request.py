"""Outbound ingest request assembly.

`build_request` runs the whole pipeline for one captured payload:

- wrap the payload in a single-event log record and build the context block;
- serialize (record -> `entry` string -> outer payload bytes);
- gzip the bytes;
- assemble a POST carrying the license key and user agent.

Nothing here performs network I/O. Sending, retries and backoff belong to the
transport that receives the `TelemetryRequest`.
"""

from __future__ import annotations

from typing import Final

import requests
from loguru import logger

from .codec import DEFAULT_COMPRESSION_LEVEL, compress, serialize
from .envelope import build_context, build_log_record
from .errors import RequestConstructionError
from .ids import IdentifierSource
from .models import InvocationEvent, TelemetryRequest

METHOD: Final[str] = "POST"

_ALLOWED_SCHEMES: Final[frozenset[str]] = frozenset({"http", "https"})


def _prepare_url(url: str) -> str:
    """Validate and normalize `url` the way `requests` will when sending."""
    prepared = requests.PreparedRequest()
    try:
        prepared.prepare_method(METHOD)
        prepared.prepare_url(url, None)
    except (requests.exceptions.RequestException, ValueError, UnicodeError) as exc:
        raise RequestConstructionError(f"error creating request: {exc}") from exc

    scheme = prepared.url.split("://", 1)[0].lower()
    if scheme not in _ALLOWED_SCHEMES:
        raise RequestConstructionError(f"error creating request: unsupported URL scheme {scheme!r} in {url!r}")
    return prepared.url


def assemble_request(
    compressed_body: bytes,
    url: str,
    license_key: str,
    user_agent: str,
) -> TelemetryRequest:
    """Build the ingest POST for an already compressed body.

    Raises:
    - `RequestConstructionError` if `url` is not an absolute http(s) URL.
    """
    headers = {
        "Content-Encoding": "gzip",
        "Content-Type": "application/json",
        "User-Agent": user_agent,
        "X-License-Key": license_key,
    }
    return TelemetryRequest(method=METHOD, url=_prepare_url(url), headers=headers, body=compressed_body)


def build_request(
    payload: bytes,
    invocation: InvocationEvent | str,
    function_name: str,
    license_key: str,
    url: str,
    user_agent: str,
    *,
    ids: IdentifierSource | None = None,
    compression_level: int = DEFAULT_COMPRESSION_LEVEL,
) -> TelemetryRequest:
    """Encode, compress and wrap one payload into a ready-to-send request.

    `invocation` is the invoke event the payload belongs to, or just its
    invoked function ARN. Errors from any stage propagate unchanged; there is
    never a partial result.
    """
    invoked_function_arn = invocation if isinstance(invocation, str) else invocation.invoked_function_arn

    record = build_log_record(payload, function_name, ids=ids)
    context = build_context(function_name, invoked_function_arn)

    uncompressed = serialize(record, context)
    compressed = compress(uncompressed, level=compression_level)
    request = assemble_request(compressed, url, license_key, user_agent)

    logger.debug(
        "Built telemetry request for {}: {} bytes -> {} bytes gzip",
        function_name,
        len(uncompressed),
        len(compressed),
    )
    return request
