"""Errors raised by the telemetry request pipeline.

Every failure carries the pipeline `stage` it came from so the caller can log
it and decide on a retry policy. The underlying exception is chained.
"""

from __future__ import annotations


class TelemetryError(RuntimeError):
    """Base error for a failed request build."""

    def __init__(self, message: str, *, stage: str) -> None:
        """Create an error tagged with the pipeline stage that failed."""
        self.stage = stage
        super().__init__(f"{stage}: {message}")


class SerializationError(TelemetryError):
    """JSON encoding of the log entry or the outer payload failed."""


class CompressionError(TelemetryError):
    """Gzip compression of the serialized payload failed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, stage="compress")


class RequestConstructionError(TelemetryError):
    """The outbound request could not be built (bad URL or method)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, stage="assemble")
