from __future__ import annotations

import sys
from typing import Any

import pytest
from loguru import logger

from telemetry.log import setup_logging


@pytest.fixture
def _restore_default_sink():
    yield
    logger.remove()
    logger.add(sys.__stderr__)


def test_setup_logging_accepts_levels(_restore_default_sink) -> None:
    setup_logging()
    setup_logging(level="debug")
    setup_logging(level="INFO")


def test_setup_logging_filters_below_level(capsys, _restore_default_sink) -> None:
    setup_logging(level="WARNING")
    logger.info("quiet message")
    logger.warning("loud message")

    err = capsys.readouterr().err
    assert "loud message" in err
    assert "quiet message" not in err


def test_custom_sinks_see_debug_records() -> None:
    captured: list[Any] = []
    handler_id = logger.add(lambda message: captured.append(message.record["message"]), level="DEBUG")
    try:
        logger.debug("hello {}", "there")
    finally:
        logger.remove(handler_id)
    assert captured == ["hello there"]
