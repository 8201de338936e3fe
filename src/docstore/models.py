"""Document, author and search request models"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, field_validator


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive timestamps are taken to be UTC so every comparison is between absolute times."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    """Author embedded in a document; matched by id during search."""
    id: str
    name: str = ""


class Document(BaseModel):
    """A stored document. The id is assigned on first save when absent or blank."""
    id: Optional[str] = None
    title: str = ""
    content: str = ""
    author: Optional[Author] = None
    created: Optional[datetime] = None

    @field_validator("id", mode="before")
    @classmethod
    def id_as_str(cls, value: Any) -> Any:
        # ids are opaque; YAML reads unquoted 42 as an int
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("created")
    @classmethod
    def created_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(value)


class SearchRequest(BaseModel):
    """Optional search criteria; None or empty fields are not applied."""
    title_prefixes: Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    author_ids: Optional[list[str]] = None
    created_from: Optional[datetime] = None    # exclusive
    created_to: Optional[datetime] = None      # exclusive

    @field_validator("created_from", "created_to")
    @classmethod
    def bounds_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(value)

    def is_empty(self) -> bool:
        """True when no criterion is active."""
        return not (
            self.title_prefixes or self.contains_contents or self.author_ids
            or self.created_from or self.created_to
        )
