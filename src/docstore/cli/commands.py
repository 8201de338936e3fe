"""CLI command implementations"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from docstore.config import Settings, load_config
from docstore.crud.memory_repo import MemoryRepo
from docstore.loader import load_into
from docstore.models import Document, SearchRequest


FixtureArg = Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True,
                                            help="YAML or JSON file of documents")]
ConfigOpt = Annotated[Optional[Path], typer.Option("--config", help="Settings file (default: ./config.yaml)")]
LogLevelOpt = Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None, config_file: Path = None) -> Settings:
    """Load config with standard CLI error handling and apply the log level."""
    try:
        settings = load_config(overrides=overrides, config_file=config_file)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _load(path: Path, settings: Settings) -> MemoryRepo:
    """Fresh store populated from the fixture file."""
    repo = MemoryRepo(max_id_attempts=settings.max_id_attempts)
    try:
        load_into(repo, path)
    except ValueError as e:
        _fail(str(e))
    return repo


def _echo_docs(docs: list[Document], fmt: str) -> None:
    if fmt == "table":
        for doc in docs:
            typer.echo(f"{doc.id}\t{doc.title}")
    else:
        typer.echo(json.dumps([d.model_dump(mode="json") for d in docs], indent=2, ensure_ascii=False))


def search_cmd(
    path: FixtureArg,
    prefixes: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title prefix (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Content substring, case-insensitive (repeatable)")] = None,
    authors: Annotated[Optional[list[str]], typer.Option("--author", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[str], typer.Option("--created-from", help="Exclusive lower bound, ISO-8601")] = None,
    created_to: Annotated[Optional[str], typer.Option("--created-to", help="Exclusive upper bound, ISO-8601")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="json or table")] = None,
    config: ConfigOpt = None,
    log_level: LogLevelOpt = None,
    ):
    """Load documents from a fixture file and print those matching every given criterion."""
    settings = _settings(overrides={"output_format": fmt, "log_level": log_level}, config_file=config)
    repo = _load(path, settings)
    try:
        request = SearchRequest(
            title_prefixes=prefixes or None,
            contains_contents=contains or None,
            author_ids=authors or None,
            created_from=created_from,
            created_to=created_to,
        )
    except ValidationError as e:
        _fail("Invalid search criteria", e)

    docs = repo.search(request)
    _echo_docs(docs, settings.output_format)
    typer.echo(f"{len(docs)} of {len(repo)} document(s) matched", err=True)


def show_cmd(
    path: FixtureArg,
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    config: ConfigOpt = None,
    log_level: LogLevelOpt = None,
    ):
    """Print a single document from a fixture file as JSON."""
    settings = _settings(overrides={"log_level": log_level}, config_file=config)
    repo = _load(path, settings)
    doc = repo.find_by_id(doc_id)
    if doc is None:
        typer.echo(f"No document with id '{doc_id}'.", err=True)
        raise typer.Exit(1)
    typer.echo(doc.model_dump_json(indent=2))
