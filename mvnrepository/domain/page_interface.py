"""Page API interface (port) for fetching and decoding site pages.

This is the anti-corruption layer that shields the domain from the site's markup.
"""
from abc import ABC, abstractmethod
from mvnrepository.domain.pages import ArtifactPage, PageResponse, RepositoryPage


class IMvnRepositoryPageApi(ABC):
    """Abstract interface for typed page requests."""

    @abstractmethod
    def get_repositories_page(self, page: int) -> PageResponse[RepositoryPage]:
        """Fetch one page of the repositories listing.

        Args:
            page: 1-based page index
        """
        pass

    @abstractmethod
    def get_artifact_page(
        self,
        group_id: str,
        artifact_id: str,
        version: str
    ) -> PageResponse[ArtifactPage]:
        """Fetch the detail page of one artifact version."""
        pass
