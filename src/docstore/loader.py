"""Fixture loading: read documents from YAML or JSON into a store"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from docstore.crud.repo import DocumentRepo
from docstore.models import Document


logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def _parse(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        return yaml.safe_load(text)
    return json.loads(text)


def read_documents(path: Path) -> list[Document]:
    """Parse a fixture file: a list of documents, or a mapping with a 'documents' list.

    Raises ValueError for unreadable content or entries that are not valid documents.
    """
    try:
        raw = _parse(path)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ValueError(f"Invalid fixture {path}: {e}") from e

    if isinstance(raw, dict):
        raw = raw.get("documents")
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError(f"Invalid fixture {path}: expected a list of documents")

    try:
        return [Document.model_validate(entry) for entry in raw]
    except ValidationError as e:
        raise ValueError(f"Invalid fixture {path}: {e}") from e


def load_into(repo: DocumentRepo, path: Path) -> list[Document]:
    """Save every document from path into repo. Returns the saved documents."""
    saved = repo.save_all(read_documents(path))
    logger.info("Loaded %d document(s) from %s", len(saved), path)
    return saved
