"""Search predicates built from a SearchRequest"""

from datetime import datetime
from typing import Callable

from docstore.models import Document, SearchRequest


Predicate = Callable[[Document], bool]


def title_prefix(prefixes: list[str]) -> Predicate:
    """Match when the title starts with any prefix (case-sensitive)."""
    return lambda doc: any(doc.title.startswith(p) for p in prefixes)


def contains_content(needles: list[str]) -> Predicate:
    """Match when the content contains any needle, ignoring case."""
    folded = [n.casefold() for n in needles]
    return lambda doc: any(n in doc.content.casefold() for n in folded)


def author_id(ids: list[str]) -> Predicate:
    """Match when the document author's id is one of ids. Authorless documents never match."""
    wanted = set(ids)
    return lambda doc: doc.author is not None and doc.author.id in wanted


def created_after(bound: datetime) -> Predicate:
    """Match documents created strictly after bound."""
    return lambda doc: doc.created is not None and doc.created > bound


def created_before(bound: datetime) -> Predicate:
    """Match documents created strictly before bound."""
    return lambda doc: doc.created is not None and doc.created < bound


def build_filters(request: SearchRequest) -> list[Predicate]:
    """Return one predicate per active criterion; None or empty fields are skipped."""
    filters: list[Predicate] = []
    if request.title_prefixes:
        filters.append(title_prefix(request.title_prefixes))
    if request.contains_contents:
        filters.append(contains_content(request.contains_contents))
    if request.author_ids:
        filters.append(author_id(request.author_ids))
    if request.created_from is not None:
        filters.append(created_after(request.created_from))
    if request.created_to is not None:
        filters.append(created_before(request.created_to))
    return filters


def apply_filters(docs, filters: list[Predicate]) -> list[Document]:
    """Narrow docs by each predicate in turn (AND)."""
    for f in filters:
        docs = [d for d in docs if f(d)]
    return list(docs)
