import logging
from pathlib import Path

import pytest

SAMPLE_MARKDOWN = """# Swift Tips

Intro text that belongs to no entry.

## 1. Auto closures
- Link: https://example.com/autoclosures
- Tags: Closures, attributes

`@autoclosure` delays evaluation of an argument.

## 2. Guard statement
- Link: https://example.com/guard
- Tags: control-flow

Exit early with `guard` when a condition fails.

## 3. Defer
- Tags: control-flow, cleanup

Run cleanup code when the scope exits.
"""


@pytest.fixture
def sample_markdown() -> str:
    return SAMPLE_MARKDOWN


@pytest.fixture
def corpus_path(tmp_path: Path) -> Path:
    path = tmp_path / "tips.md"
    path.write_text(SAMPLE_MARKDOWN, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_catalog_logger():
    """CLI runs configure the package logger; restore propagation for caplog."""
    yield
    logger = logging.getLogger("tip_catalog")
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
