"""Tests for single artifact lookups."""
import logging
from datetime import date, datetime, timezone

from mvnrepository.application.artifact_lookup import ArtifactLookup
from mvnrepository.domain.pages import ArtifactPage, PageResponse
from mvnrepository.infrastructure.page_parsers import parse_release_date
from tests.fakes import FakePageApi

RELEASED = datetime(2018, 5, 1, 0, 0, 0, tzinfo=timezone.utc)


def artifact_response(**overrides) -> PageResponse:
    fields = dict(
        license="Apache-2.0",
        homepage="http://example.org",
        date=RELEASED,
        snippets=("a", "b"),
    )
    fields.update(overrides)
    return PageResponse(200, ArtifactPage(**fields))


def test_artifact_present():
    """A successful page becomes an Artifact with the caller's coordinates."""
    page_api = FakePageApi(artifact_response=artifact_response())
    lookup = ArtifactLookup(page_api)

    artifact = lookup.get_artifact("g", "a", "1.0")

    assert artifact is not None
    assert artifact.group_id == "g"
    assert artifact.artifact_id == "a"
    assert artifact.version == "1.0"
    assert artifact.license == "Apache-2.0"
    assert artifact.homepage == "http://example.org"
    assert artifact.release_date == RELEASED.astimezone().date()
    assert artifact.snippets == ("a", "b")
    assert page_api.artifact_requests == [("g", "a", "1.0")]


def test_release_date_uses_local_timezone(local_timezone):
    """The release instant is converted to the local calendar date."""
    lookup = ArtifactLookup(FakePageApi(artifact_response=artifact_response()))

    local_timezone("UTC")
    assert lookup.get_artifact("g", "a", "1.0").release_date == date(2018, 5, 1)

    local_timezone("America/New_York")
    assert lookup.get_artifact("g", "a", "1.0").release_date == date(2018, 4, 30)


def test_artifact_absent_on_failed_status(caplog):
    """A failed request is logged and reported as absent."""
    lookup = ArtifactLookup(FakePageApi(artifact_response=PageResponse(404)), "https://mvnrepository.example/")

    with caplog.at_level(logging.WARNING):
        artifact = lookup.get_artifact("org.example", "missing", "9.9")

    assert artifact is None
    assert "org.example:missing:9.9" in caplog.text
    assert "404" in caplog.text


def test_artifact_absent_on_empty_body():
    """A successful response without a body is reported as absent."""
    lookup = ArtifactLookup(FakePageApi(artifact_response=PageResponse(200, None)))

    assert lookup.get_artifact("g", "a", "1.0") is None


def test_optional_fields_pass_through():
    """Missing license and homepage stay None on the Artifact."""
    lookup = ArtifactLookup(FakePageApi(
        artifact_response=artifact_response(license=None, homepage=None, snippets=())
    ))

    artifact = lookup.get_artifact("g", "a", "1.0")

    assert artifact.license is None
    assert artifact.homepage is None
    assert artifact.snippets == ()


def test_every_lookup_hits_the_network():
    """Lookups are not cached."""
    page_api = FakePageApi(artifact_response=artifact_response())
    lookup = ArtifactLookup(page_api)

    lookup.get_artifact("g", "a", "1.0")
    lookup.get_artifact("g", "a", "1.0")

    assert len(page_api.artifact_requests) == 2


def test_printed_date_survives_midnight_clock_change(local_timezone):
    """A date printed on the page stays the same day where DST starts at midnight."""
    local_timezone("America/Santiago")
    response = artifact_response(date=parse_release_date("(Sep 08, 2019)"))
    lookup = ArtifactLookup(FakePageApi(artifact_response=response))

    assert lookup.get_artifact("g", "a", "1.0").release_date == date(2019, 9, 8)
