"""
Source document loading.

Resolves source paths (files or directories) and dispatches each
document to the Markdown or YAML parser by file suffix.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from ..core.errors import ParseError
from ..core.types import Entry
from .markdown_parser import parse_markdown
from .yaml_parser import parse_yaml

MARKDOWN_SUFFIXES = {".md", ".markdown"}
YAML_SUFFIXES = {".yaml", ".yml"}

__all__ = ["parse_markdown", "parse_yaml", "parse_document", "resolve_sources", "read_document"]


def resolve_sources(sources: str | Path | Iterable[str | Path]) -> list[Path]:
    """Expand source paths into the list of documents to read.

    Directories contribute their Markdown/YAML files in name order.
    A file named explicitly must exist; a missing path raises
    FileNotFoundError.
    """
    if isinstance(sources, (str, Path)):
        sources = [sources]
    paths: list[Path] = []
    for source in sources:
        path = Path(source)
        if path.is_dir():
            paths.extend(
                sorted(
                    p
                    for p in path.iterdir()
                    if p.is_file() and p.suffix.lower() in MARKDOWN_SUFFIXES | YAML_SUFFIXES
                )
            )
        elif path.exists():
            paths.append(path)
        else:
            raise FileNotFoundError(f"source not found: {path}")
    return paths


def parse_document(text: str, source: str, suffix: str) -> list[Entry]:
    suffix = suffix.lower()
    if suffix in MARKDOWN_SUFFIXES:
        return parse_markdown(text, source)
    if suffix in YAML_SUFFIXES:
        return parse_yaml(text, source)
    raise ParseError(f"unsupported source type '{suffix or '(none)'}'", source)


def read_document(path: Path) -> list[Entry]:
    """Read and parse a single source document.

    Raises:
        ParseError: If the document is not valid UTF-8 or is malformed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"not valid UTF-8: {exc.reason}", str(path)) from exc
    return parse_document(text, str(path), path.suffix)
