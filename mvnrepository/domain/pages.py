"""Transient page shapes produced by the page deserializer.

These only live for one pagination step or one lookup and are mapped into
domain models right after decoding.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class RepositoryEntry:
    """One raw entry of a repositories page."""
    id: str
    name: str
    uri: str


@dataclass(frozen=True)
class RepositoryPage:
    """Entries of a single repositories page, in page order."""
    entries: Tuple[RepositoryEntry, ...] = ()


@dataclass(frozen=True)
class ArtifactPage:
    """Decoded artifact detail page.

    ``date`` is an absolute (timezone aware) instant.
    """
    license: Optional[str]
    homepage: Optional[str]
    date: datetime
    snippets: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PageResponse(Generic[T]):
    """Outcome of one page request: HTTP status and the decoded body, if any."""
    status_code: int
    body: Optional[T] = None

    @property
    def is_successful(self) -> bool:
        return 200 <= self.status_code < 300
