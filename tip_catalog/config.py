"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- CatalogConfig: Where source documents are read from
- DedupConfig: Near-duplicate title detection settings
- OutputConfig: Plain-text output settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml


@dataclass
class CatalogConfig:
    """Configuration for the source corpus.

    Attributes:
        sources: Files or directories holding Markdown/YAML tip documents
    """

    sources: list[str] = field(default_factory=lambda: ["tips.md"])


@dataclass
class DedupConfig:
    """Configuration for near-duplicate detection.

    Attributes:
        enabled: Whether to warn about near-duplicate titles at load time
        title_similarity_threshold: Fuzzy match threshold (0-100) for title similarity
    """

    enabled: bool = True
    title_similarity_threshold: int = 92


@dataclass
class OutputConfig:
    """Configuration for command output.

    Attributes:
        show_tags: Whether list/search lines include the entry tags
    """

    show_tags: bool = True


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to the console (stderr)
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
        directory: Directory for the log file (current directory if unset)
    """

    level: str = "WARNING"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "catalog.jsonl"
    directory: str | None = None


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    dedup: DedupConfig = field(default_factory=DedupConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise TypeError(f"config must be a mapping, got {type(raw).__name__}")

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if not isinstance(value, dict):
            raise TypeError(f"config section '{key}' must be a mapping, got {type(value).__name__}")
        data[key].update(value)
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "catalog": {
            "sources": list(cfg.catalog.sources),
        },
        "dedup": {
            "enabled": cfg.dedup.enabled,
            "title_similarity_threshold": cfg.dedup.title_similarity_threshold,
        },
        "output": {
            "show_tags": cfg.output.show_tags,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
            "directory": cfg.logging.directory,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    catalog = dict(data["catalog"])
    # A single source may be given as a plain string
    if isinstance(catalog.get("sources"), str):
        catalog["sources"] = [catalog["sources"]]
    sources = catalog.get("sources")
    if not isinstance(sources, list) or not all(isinstance(s, str) for s in sources):
        raise TypeError(f"catalog.sources must be a list of paths, got {sources!r}")
    return AppConfig(
        catalog=CatalogConfig(**catalog),
        dedup=DedupConfig(**data["dedup"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )
