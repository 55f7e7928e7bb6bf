import json
import logging

import pytest
from loguru import logger

from src.api.logging_config import setup_logging


@pytest.fixture(autouse=True)
def _clean_loguru():
    logger.remove()
    yield
    logger.remove()


def test_setup_logging_adds_handler():
    assert len(logger._core.handlers) == 0
    setup_logging("INFO", "text")
    assert len(logger._core.handlers) == 1


def test_stdlib_logging_intercepted():
    setup_logging("INFO", "text")
    messages = []
    logger.add(lambda m: messages.append(str(m)), format="{message}")

    logging.getLogger("test.intercept").warning("intercepted message")

    assert any("intercepted message" in m for m in messages)


def test_noisy_loggers_quieted():
    setup_logging("DEBUG", "text")
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


def test_json_format(capsys):
    setup_logging("INFO", "json")
    logger.info("structured line")
    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["record"]["message"] == "structured line"


def test_level_filters(capsys):
    setup_logging("WARNING", "json")
    logger.info("hidden")
    logger.warning("shown")
    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out
