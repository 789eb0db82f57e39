"""Scraping page API: typed requests against the mvnrepository site."""
import inspect
import logging
from dataclasses import dataclass
from string import Formatter
from typing import Any, Callable, Dict, Optional
from urllib.parse import quote, urljoin, urlparse

import requests

from mvnrepository.domain.page_interface import IMvnRepositoryPageApi
from mvnrepository.domain.pages import ArtifactPage, PageResponse, RepositoryPage
from mvnrepository.infrastructure.page_parsers import (
    PageParseError,
    parse_artifact_page,
    parse_repositories_page,
)


logger = logging.getLogger(__name__)


class PageContractError(Exception):
    """Raised when the page request bindings are malformed."""
    pass


@dataclass(frozen=True)
class PageRoute:
    """Binding of a page request to its relative URL template and decoder."""
    template: str
    parser: Callable[[str], Any]

    @property
    def placeholders(self) -> set:
        return {name for _, name, _, _ in Formatter().parse(self.template) if name is not None}


class ScrapingPageApi(IMvnRepositoryPageApi):
    """Page API that issues GET requests and decodes the returned HTML.

    Implements the IMvnRepositoryPageApi port. The ``requests.Session`` is the
    pluggable transport: proxies, TLS, adapters and default headers are
    configured on it by the caller.
    """

    ROUTES: Dict[str, PageRoute] = {
        "get_repositories_page": PageRoute("repos?p={page}", parse_repositories_page),
        "get_artifact_page": PageRoute(
            "artifact/{group_id}/{artifact_id}/{version}", parse_artifact_page
        ),
    }

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 30,
        validate_eagerly: bool = True
    ):
        """Initialize page API.

        Args:
            base_url: Absolute http(s) URL of the site root
            session: HTTP session used for every request
            timeout: Per request timeout in seconds
            validate_eagerly: Check every route binding now instead of on first use

        Raises:
            PageContractError: When the base URL or a route binding is malformed
        """
        self._base_url = self._normalize_base_url(base_url)
        self._timeout = timeout
        self._validated = set()

        if validate_eagerly:
            for name in self.ROUTES:
                self._validate_route(name)

        # Only create a session once the bindings are known to be valid
        self._session = session if session is not None else requests.Session()

    @property
    def base_url(self) -> str:
        return self._base_url

    @staticmethod
    def _normalize_base_url(base_url: str) -> str:
        parsed = urlparse(base_url or "")
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise PageContractError(f"Base URL must be an absolute http(s) URL, got: {base_url!r}")
        if not base_url.endswith("/"):
            base_url += "/"
        return base_url

    def _validate_route(self, name: str) -> None:
        """Check that a route matches the signature of the method it serves."""
        if name in self._validated:
            return

        route = self.ROUTES[name]
        method = getattr(self, name, None)
        if not callable(method):
            raise PageContractError(f"Route '{name}' has no matching request method")
        if not callable(route.parser):
            raise PageContractError(f"Route '{name}' has no callable parser")

        parameters = set(inspect.signature(method).parameters)
        if route.placeholders != parameters:
            raise PageContractError(
                f"Route '{name}' template {route.template!r} does not match "
                f"parameters {sorted(parameters)}"
            )

        self._validated.add(name)

    def _url(self, name: str, **values: Any) -> str:
        route = self.ROUTES[name]
        encoded = {key: quote(str(value), safe="") for key, value in values.items()}
        return urljoin(self._base_url, route.template.format(**encoded))

    def _execute(self, name: str, **values: Any) -> PageResponse:
        """Issue the GET request of a route and decode a successful body.

        Raises:
            requests.RequestException: On transport failures
        """
        self._validate_route(name)
        url = self._url(name, **values)

        response = self._session.get(url, timeout=self._timeout)
        if not 200 <= response.status_code < 300:
            return PageResponse(response.status_code)

        if not response.text:
            return PageResponse(response.status_code)

        try:
            body = self.ROUTES[name].parser(response.text)
        except PageParseError as e:
            logger.debug(f"Could not decode {url}: {e}")
            return PageResponse(response.status_code)

        return PageResponse(response.status_code, body)

    def get_repositories_page(self, page: int) -> PageResponse[RepositoryPage]:
        return self._execute("get_repositories_page", page=page)

    def get_artifact_page(
        self,
        group_id: str,
        artifact_id: str,
        version: str
    ) -> PageResponse[ArtifactPage]:
        return self._execute(
            "get_artifact_page",
            group_id=group_id,
            artifact_id=artifact_id,
            version=version
        )

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()
