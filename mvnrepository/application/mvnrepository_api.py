"""Scraping implementation of the mvnrepository client API."""
import logging
from typing import Optional, Tuple

import requests

from mvnrepository.application.artifact_lookup import ArtifactLookup
from mvnrepository.application.repository_catalog import RepositoryCatalog
from mvnrepository.domain.models import Artifact, Repository
from mvnrepository.domain.mvnrepository_interface import IMvnRepositoryApi
from mvnrepository.domain.page_interface import IMvnRepositoryPageApi
from mvnrepository.infrastructure.page_client import ScrapingPageApi
from mvnrepository.infrastructure.settings import DEFAULT_BASE_URL, Settings


logger = logging.getLogger(__name__)


class ScrapingMvnRepositoryApi(IMvnRepositoryApi):
    """Client API backed by scraping the site's HTML pages.

    Implements the IMvnRepositoryApi port by wiring the repository catalog
    and the artifact lookup to one page API.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = 30,
        page_api: Optional[IMvnRepositoryPageApi] = None,
        owns_session: bool = False
    ):
        """Initialize the client.

        Args:
            base_url: Site root URL
            session: HTTP session to issue requests with
            timeout: Per request timeout in seconds
            page_api: Prebuilt page API; when given, session and timeout are unused
            owns_session: Close the given session on close()

        Raises:
            PageContractError: When the page request bindings are malformed
        """
        self._owns_session = page_api is None and (owns_session or session is None)
        if page_api is None:
            page_api = ScrapingPageApi(base_url, session=session, timeout=timeout, validate_eagerly=True)

        self._base_url = base_url
        self._page_api = page_api
        self._catalog = RepositoryCatalog(page_api, base_url)
        self._lookup = ArtifactLookup(page_api, base_url)

    def get_repositories(self) -> Tuple[Repository, ...]:
        return self._catalog.get_repositories()

    def get_artifact(
        self,
        group_id: str,
        artifact_id: str,
        version: str
    ) -> Optional[Artifact]:
        return self._lookup.get_artifact(group_id, artifact_id, version)

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session and isinstance(self._page_api, ScrapingPageApi):
            self._page_api.close()


def create_api(
    settings: Optional[Settings] = None,
    session: Optional[requests.Session] = None
) -> ScrapingMvnRepositoryApi:
    """Build a client from settings (environment by default).

    Args:
        settings: Client settings; read from the environment when None
        session: HTTP session; a new one carrying the configured User-Agent when None

    Returns:
        Ready to use client
    """
    if settings is None:
        settings = Settings.from_env()

    owns_session = session is None
    if owns_session:
        session = requests.Session()
        session.headers["User-Agent"] = settings.user_agent

    logger.info(f"Creating mvnrepository client for {settings.base_url}")
    try:
        return ScrapingMvnRepositoryApi(
            settings.base_url,
            session=session,
            timeout=settings.timeout_seconds,
            owns_session=owns_session
        )
    except Exception:
        if owns_session:
            session.close()
        raise
