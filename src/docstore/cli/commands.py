"""CLI command implementations"""

import json
import logging
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from docstore.config import Settings, load_config
from docstore.core.loader import load_documents, seed_store
from docstore.crud.memory_repo import MemoryRepo
from docstore.crud.models import SearchRequest


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _store(seed: Optional[str]) -> MemoryRepo:
    """Build a fresh store from the given seed file, or the configured default."""
    settings = _settings(overrides={"seed_file": seed})
    if not settings.seed_file:
        _fail("No seed file given. Pass SEED_FILE or set DOCSTORE_SEED_FILE.")
    try:
        documents = load_documents(settings.seed_file)
    except ValueError as e:
        _fail(str(e))
    store = MemoryRepo(thread_safe=settings.thread_safe)
    seed_store(store, documents)
    return store


SeedArg = Annotated[Optional[str], typer.Argument(help="YAML/JSON seed file (default: configured seed_file)")]


def get_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id to look up")],
    seed: SeedArg = None,
    ):
    """Print a single document as JSON."""
    store = _store(seed)
    doc = store.find_by_id(doc_id)
    if doc is None:
        typer.echo(f"Document not found: {doc_id}", err=True)
        raise typer.Exit(1)
    typer.echo(doc.model_dump_json(indent=2))


def search_cmd(
    seed: SeedArg = None,
    title_prefix: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    author_id: Annotated[Optional[list[str]], typer.Option("--author-id", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[str], typer.Option("--created-from", help="Created strictly after (ISO 8601)")] = None,
    created_to: Annotated[Optional[str], typer.Option("--created-to", help="Created strictly before (ISO 8601)")] = None,
    ):
    """Print documents matching every given criterion as a JSON array."""
    try:
        request = SearchRequest(
            title_prefixes=set(title_prefix) if title_prefix else None,
            contains_contents=set(contains) if contains else None,
            author_ids=set(author_id) if author_id else None,
            created_from=created_from,
            created_to=created_to,
        )
    except ValidationError as e:
        _fail("Invalid search criteria", e)

    store = _store(seed)
    results = store.search(request)
    typer.echo(json.dumps([d.model_dump(mode="json") for d in results], indent=2, ensure_ascii=False))


def count_cmd(seed: SeedArg = None):
    """Print the number of documents in the seeded store."""
    store = _store(seed)
    typer.echo(str(len(store)))
