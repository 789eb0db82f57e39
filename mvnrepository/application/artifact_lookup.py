"""Artifact lookup: single-shot fetch of one artifact version."""
import logging
from typing import Optional
from mvnrepository.domain.models import Artifact
from mvnrepository.domain.page_interface import IMvnRepositoryPageApi


logger = logging.getLogger(__name__)


class ArtifactLookup:
    """Application service resolving artifact coordinates to metadata.

    Stateless: every call performs a fresh request.
    """

    def __init__(self, page_api: IMvnRepositoryPageApi, base_url: str = ""):
        self._page_api = page_api
        self._base_url = base_url

    def get_artifact(
        self,
        group_id: str,
        artifact_id: str,
        version: str
    ) -> Optional[Artifact]:
        """Fetch one artifact version.

        Args:
            group_id: Maven group id
            artifact_id: Maven artifact id
            version: Artifact version

        Returns:
            The artifact, or None on a failed request or an unreadable page
        """
        response = self._page_api.get_artifact_page(group_id, artifact_id, version)
        if not response.is_successful:
            logger.warning(
                f"Request to {self._base_url} failed while fetching artifact "
                f"'{group_id}:{artifact_id}:{version}', got: {response.status_code}"
            )
            return None

        body = response.body
        if body is None:
            return None

        # Release date as seen from the local timezone, time of day dropped
        release_date = body.date.astimezone().date()

        return Artifact(
            group_id=group_id,
            artifact_id=artifact_id,
            version=version,
            license=body.license,
            homepage=body.homepage,
            release_date=release_date,
            snippets=tuple(body.snippets)
        )
