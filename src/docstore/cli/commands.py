"""CLI command implementations"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer
import yaml

from docstore.config import Settings, load_config
from docstore.memory_repo import DocumentStore
from docstore.models import Document, SearchRequest
from docstore.seed import load_documents


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
        logging.basicConfig(level=settings.log_level)
    except ValueError as e:
        _fail(str(e))
    return settings


def _open_store(path: Path, settings: Settings) -> DocumentStore:
    """Fresh store holding every document in the seed file."""
    try:
        docs = load_documents(path)
    except ValueError as e:
        _fail(str(e))
    store = DocumentStore(save_mode=settings.save_mode)
    for doc in docs:
        store.save(doc)
    return store


def _echo_docs(docs: list[Document], output_format: str) -> None:
    data = [d.model_dump(mode="json") for d in docs]
    if output_format == "yaml":
        typer.echo(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), nl=False)
    else:
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def search_cmd(
    path: Annotated[Path, typer.Argument(exists=True, readable=True, help="YAML/JSON file of documents")],
    title_prefix: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    author: Annotated[Optional[list[str]], typer.Option("--author", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--from", help="Created at or after")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--to", help="Created at or before")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="json or yaml")] = None,
    ):
    """Print documents matching every given filter."""
    settings = _settings(overrides={"output_format": fmt})
    store = _open_store(path, settings)
    # typer passes [] for an omitted repeatable option; treat that as no filter
    request = SearchRequest(
        title_prefixes=title_prefix or None,
        contains_contents=contains or None,
        author_ids=author or None,
        created_from=created_from,
        created_to=created_to,
    )
    try:
        found = store.search(request)
    except (ValueError, TypeError) as e:
        _fail("Search failed", e)
    _echo_docs(found, settings.output_format)
    typer.echo(f"Matched {len(found)} of {len(store)} document(s)", err=True)


def get_cmd(
    path: Annotated[Path, typer.Argument(exists=True, readable=True, help="YAML/JSON file of documents")],
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    fmt: Annotated[Optional[str], typer.Option("--format", help="json or yaml")] = None,
    ):
    """Print the first document with the given id."""
    settings = _settings(overrides={"output_format": fmt})
    store = _open_store(path, settings)
    doc = store.find_by_id(doc_id)
    if doc is None:
        typer.echo(f"No document with id {doc_id!r}.", err=True)
        raise typer.Exit(1)
    _echo_docs([doc], settings.output_format)
