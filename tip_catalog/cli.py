"""
Command-line interface for the tip catalog.

Uses Typer to provide `list`, `show`, `search`, `tags` and `duplicates`
subcommands. Entries are printed as plain text on stdout; errors and
logs go to stderr. Supports loading .env files for TIP_CATALOG_SOURCE.
"""

from __future__ import annotations

from pathlib import Path

import typer
import yaml
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from .config import AppConfig, load_config
from .core.errors import ParseError
from .core.types import Entry
from .logging_utils import setup_logging
from .query import QueryService, open_catalog

app = typer.Typer(add_completion=False, no_args_is_help=True, help="Browse and search the tip catalog.")
err_console = Console(stderr=True)

EXIT_NOT_FOUND = 1
EXIT_LOAD_FAILED = 2

SourceOption = typer.Option(
    None,
    "--source",
    "-s",
    envvar="TIP_CATALOG_SOURCE",
    help="Markdown/YAML file or directory to load (repeatable).",
)
ConfigOption = typer.Option(None, "--config", "-c", exists=True, dir_okay=False, help="YAML config file.")
LogLevelOption = typer.Option(None, "--log-level", help="Logging level.")


def _open(
    source: list[Path] | None,
    config: Path | None,
    log_level: str | None,
    warn_duplicates: bool = True,
) -> tuple[AppConfig, QueryService]:
    """Load config, set up logging and load the catalog.

    Exits with EXIT_LOAD_FAILED if the config or the corpus cannot be loaded.
    """
    load_dotenv()

    try:
        cfg = load_config(str(config) if config else None)
    except (TypeError, yaml.YAMLError) as exc:
        err_console.print(f"[red]Invalid config:[/red] {escape(str(exc))}")
        raise typer.Exit(code=EXIT_LOAD_FAILED) from exc
    if log_level:
        cfg.logging.level = log_level
    if source:
        cfg.catalog.sources = [str(path) for path in source]
    if not warn_duplicates:
        cfg.dedup.enabled = False

    setup_logging(cfg.logging)

    try:
        service = open_catalog(cfg.catalog.sources, cfg.dedup)
    except (ParseError, OSError) as exc:
        err_console.print(f"[red]Failed to load catalog:[/red] {escape(str(exc))}")
        raise typer.Exit(code=EXIT_LOAD_FAILED) from exc
    return cfg, service


def _format_line(entry: Entry, show_tags: bool) -> str:
    line = f"{entry.id}. {entry.title}"
    if show_tags and entry.tags:
        line += f" [{', '.join(entry.sorted_tags())}]"
    return line


def _format_entry(entry: Entry) -> str:
    lines = [f"{entry.id}. {entry.title}"]
    if entry.tags:
        lines.append(f"Tags: {', '.join(entry.sorted_tags())}")
    if entry.link:
        lines.append(f"Link: {entry.link}")
    if entry.body:
        lines.append("")
        lines.append(entry.body)
    return "\n".join(lines)


def _echo_entries(entries: list[Entry], cfg: AppConfig) -> None:
    for entry in entries:
        typer.echo(_format_line(entry, cfg.output.show_tags))


@app.command("list")
def list_entries(
    tag: str | None = typer.Option(None, "--tag", "-t", help="Only entries carrying this tag."),
    source: list[Path] | None = SourceOption,
    config: Path | None = ConfigOption,
    log_level: str | None = LogLevelOption,
):
    """List every entry in load order."""
    cfg, service = _open(source, config, log_level)
    entries = service.by_tag(tag) if tag else service.all()
    _echo_entries(entries, cfg)


@app.command()
def show(
    entry_id: int = typer.Argument(..., metavar="ID", help="Entry id."),
    source: list[Path] | None = SourceOption,
    config: Path | None = ConfigOption,
    log_level: str | None = LogLevelOption,
):
    """Print one entry in full."""
    _, service = _open(source, config, log_level)
    entry = service.by_id(entry_id)
    if entry is None:
        err_console.print(f"no such entry: {entry_id}")
        raise typer.Exit(code=EXIT_NOT_FOUND)
    typer.echo(_format_entry(entry))


@app.command()
def search(
    term: str = typer.Argument(..., help="Case-insensitive text to look for."),
    word: bool = typer.Option(False, "--word", "-w", help="Match whole words only."),
    source: list[Path] | None = SourceOption,
    config: Path | None = ConfigOption,
    log_level: str | None = LogLevelOption,
):
    """Search entry titles and bodies."""
    cfg, service = _open(source, config, log_level)
    entries = service.search(term, whole_word=word)
    if not entries:
        err_console.print(f"No entries match '{escape(term)}'.")
        return
    _echo_entries(entries, cfg)


@app.command()
def tags(
    source: list[Path] | None = SourceOption,
    config: Path | None = ConfigOption,
    log_level: str | None = LogLevelOption,
):
    """List every tag with its entry count."""
    _, service = _open(source, config, log_level)
    for tag, count in service.tags().items():
        typer.echo(f"{tag} ({count})")


@app.command()
def duplicates(
    threshold: int | None = typer.Option(
        None, "--threshold", min=0, max=100, help="Title similarity threshold (0-100)."
    ),
    source: list[Path] | None = SourceOption,
    config: Path | None = ConfigOption,
    log_level: str | None = LogLevelOption,
):
    """Report entries whose titles are nearly identical."""
    cfg, service = _open(source, config, log_level, warn_duplicates=False)
    if threshold is None:
        threshold = cfg.dedup.title_similarity_threshold
    for pair in service.duplicates(threshold):
        typer.echo(
            f"{pair.first.id} <-> {pair.second.id} ({pair.score:.0f}%): "
            f"{pair.first.title} | {pair.second.title}"
        )


if __name__ == "__main__":
    app()
