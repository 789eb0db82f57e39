"""Repository catalog: paginated fetch of the known repositories."""
import logging
from typing import List, Tuple
from mvnrepository.application.memoize import Memoized
from mvnrepository.domain.models import Repository
from mvnrepository.domain.page_interface import IMvnRepositoryPageApi


logger = logging.getLogger(__name__)


class RepositoryCatalog:
    """Application service listing the repositories known to the site.

    Repositories are unlikely to change, so the list is fetched once per
    instance and served from memory afterwards.
    """

    FIRST_PAGE = 1

    def __init__(self, page_api: IMvnRepositoryPageApi, base_url: str = ""):
        """Initialize repository catalog.

        Args:
            page_api: Page API implementation
            base_url: Site URL, used in log messages
        """
        self._page_api = page_api
        self._base_url = base_url
        self._repositories = Memoized(self._fetch_all)

    def get_repositories(self) -> Tuple[Repository, ...]:
        """Get all repositories, fetching them on the first call only."""
        return self._repositories()

    def _fetch_all(self) -> Tuple[Repository, ...]:
        """Walk the repositories pages until one is empty or fails.

        Returns:
            Entries of every page fetched, in page order. On a failed page
            the entries gathered so far are returned.
        """
        page = self.FIRST_PAGE
        repositories: List[Repository] = []

        while True:
            response = self._page_api.get_repositories_page(page)
            if not response.is_successful:
                logger.warning(
                    f"Request to {self._base_url} failed while fetching repositories "
                    f"(page {page}), got: {response.status_code}"
                )
                break

            body = response.body
            if body is None:
                logger.debug(f"Repositories page {page} had no readable body, stopping")
                break

            # An empty page means we went past the last one
            if not body.entries:
                break

            repositories.extend(
                Repository(id=entry.id, name=entry.name, uri=entry.uri)
                for entry in body.entries
            )
            logger.debug(f"Fetched repositories page {page} ({len(body.entries)} entries)")
            page += 1

        logger.info(f"Fetched {len(repositories)} repositories from {page - 1} page(s)")
        return tuple(repositories)
