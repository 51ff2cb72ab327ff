"""Manual harness for the telemetry request pipeline.

Reads a payload from stdin and:

- Loads configuration from environment.
- Builds the ingest request for a synthetic invoke event.
- Logs the target, header names and body sizes.

It does **not** send the request; transport lives outside this package.
"""

from __future__ import annotations

import sys

from loguru import logger

from config import load_config
from telemetry import InvocationEvent, build_request
from telemetry.log import setup_logging


def main() -> None:
    config = load_config().telemetry
    setup_logging(config.log_level)

    payload = sys.stdin.buffer.read()
    invocation = InvocationEvent(
        invoked_function_arn=f"arn:aws:lambda:us-east-1:000000000000:function:{config.function_name}",
    )

    request = build_request(
        payload,
        invocation,
        config.function_name,
        config.license_key,
        config.telemetry_endpoint,
        config.user_agent,
        compression_level=config.compression_level,
    )
    logger.info(
        "{} {} headers={} body={} bytes (payload {} bytes)",
        request.method,
        request.url,
        sorted(request.headers),
        len(request.body),
        len(payload),
    )


if __name__ == "__main__":
    main()
