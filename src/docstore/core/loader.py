"""Seed file loading: documents from YAML or JSON into a store"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable

import yaml
from pydantic import ValidationError

from docstore.crud.models import Document
from docstore.crud.repo import DocumentRepo


logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


def _read_raw(path: Path) -> Any:
    """Parse a YAML or JSON file by suffix. Raises ValueError naming the file on failure."""
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e

    if suffix in _YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {path.name}: {e}") from e
    if suffix == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid {path.name}: {e}") from e
    raise ValueError(f"Invalid {path.name}: unsupported file type '{suffix}' (use .yaml, .yml or .json)")


def load_documents(path: str | Path) -> list[Document]:
    """Read documents from a seed file.

    The file holds either a list of document mappings or a mapping with a
    'documents' list. An empty file yields no documents.
    """
    path = Path(path)
    raw = _read_raw(path)
    if raw is None:
        raw = []
    if isinstance(raw, dict):
        raw = raw.get("documents") or []
    if not isinstance(raw, list):
        raise ValueError(f"Invalid {path.name}: expected a list of documents")

    try:
        docs = [Document.model_validate(item) for item in raw]
    except ValidationError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e

    logger.info("loaded %d document(s) from %s", len(docs), path)
    return docs


def seed_store(store: DocumentRepo, documents: Iterable[Document]) -> int:
    """Save each document into store; return how many were saved."""
    count = 0
    for doc in documents:
        store.save(doc)
        count += 1
    return count
