"""Public API interface (port) of the mvnrepository client.

Callers depend on this contract; the scraping implementation lives in the
application layer.
"""
from abc import ABC, abstractmethod
from typing import Optional, Sequence
from mvnrepository.domain.models import Artifact, Repository


class IMvnRepositoryApi(ABC):
    """Abstract interface for querying the Maven artifact metadata site."""

    @abstractmethod
    def get_repositories(self) -> Sequence[Repository]:
        """Get the repositories known to the site.

        Returns:
            Repositories in the order the site lists them
        """
        pass

    @abstractmethod
    def get_artifact(
        self,
        group_id: str,
        artifact_id: str,
        version: str
    ) -> Optional[Artifact]:
        """Get the metadata of one artifact version.

        Args:
            group_id: Maven group id, e.g. ``org.slf4j``
            artifact_id: Maven artifact id, e.g. ``slf4j-api``
            version: Artifact version, e.g. ``1.7.25``

        Returns:
            The artifact, or None when it could not be found
        """
        pass
