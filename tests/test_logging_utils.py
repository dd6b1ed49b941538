"""Tests for logging setup and the JSONL formatter."""

import json
import logging

from rich.logging import RichHandler

from tip_catalog.config import LoggingConfig
from tip_catalog.logging_utils import log_event, setup_logging


def test_setup_logging_console_only():
    logger = setup_logging(LoggingConfig(level="INFO"))

    assert logger.name == "tip_catalog"
    assert logger.level == logging.INFO
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)


def test_file_logger_writes_jsonl(tmp_path):
    """Events logged with extra fields land as JSON lines"""
    cfg = LoggingConfig(level="INFO", console=False, file=True, filename="run.jsonl")
    logger = setup_logging(cfg, tmp_path)

    log_event(logging.getLogger("tip_catalog.core.store"), "Loaded 3 entries", entries=3, source="tips.md")

    for handler in logger.handlers:
        handler.flush()
        handler.close()
    logger.handlers = []

    lines = (tmp_path / "run.jsonl").read_text(encoding="utf-8").strip().split("\n")
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["message"] == "Loaded 3 entries"
    assert record["logger"] == "tip_catalog.core.store"
    assert record["level"] == "INFO"
    assert record["entries"] == 3
    assert record["source"] == "tips.md"
    assert "timestamp" in record


def test_plain_format_and_configured_directory(tmp_path):
    cfg = LoggingConfig(
        level="WARNING", console=False, file=True, format="plain", directory=str(tmp_path / "logs")
    )
    logger = setup_logging(cfg)
    logger.warning("something odd")

    for handler in logger.handlers:
        handler.flush()
        handler.close()
    logger.handlers = []

    text = (tmp_path / "logs" / "catalog.jsonl").read_text(encoding="utf-8")
    assert "WARNING tip_catalog something odd" in text


def test_log_event_ignores_missing_logger():
    log_event(None, "nothing happens")
