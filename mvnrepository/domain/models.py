"""Domain models representing core business entities."""
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple


@dataclass(frozen=True)
class Repository:
    """Immutable domain entity representing an upstream Maven repository.

    Examples are Maven Central or JCenter as listed on the repositories pages.
    """
    id: str
    name: str
    uri: str


@dataclass(frozen=True)
class Artifact:
    """Immutable domain entity representing one published artifact version.

    Identity is the (group_id, artifact_id, version) triple supplied by the
    caller, never derived from the page content.
    """
    group_id: str
    artifact_id: str
    version: str
    license: Optional[str]
    homepage: Optional[str]
    release_date: date
    snippets: Tuple[str, ...] = ()

    @property
    def coordinates(self) -> str:
        """Returns the Maven coordinates (group:artifact:version)."""
        return f"{self.group_id}:{self.artifact_id}:{self.version}"
