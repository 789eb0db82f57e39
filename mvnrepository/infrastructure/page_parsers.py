"""HTML decoding of mvnrepository pages into typed page shapes."""
import re
from datetime import datetime
from typing import Dict, Optional

from bs4 import BeautifulSoup, Tag

from mvnrepository.domain.pages import (
    ArtifactPage,
    RepositoryEntry,
    RepositoryPage,
)

REPOSITORY_HREF = re.compile(r"/repos/(?P<id>[^/?#]+)")
RELEASE_DATE = re.compile(r"\(?\s*(?P<month>[A-Za-z]{3})[a-z]*\.? (?P<day>\d{1,2}), (?P<year>\d{4})\s*\)?")
MONTHS = {
    name: number for number, name in enumerate(
        ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
        start=1
    )
}


class PageParseError(Exception):
    """Raised when a page does not have the expected structure."""

    def __init__(self, message: str, html_snippet: str = ""):
        super().__init__(message)
        self.html_snippet = html_snippet[:200] if html_snippet else ""


def parse_repositories_page(html_content: str) -> RepositoryPage:
    """
    Scans a repositories listing page and returns its entries in page order.

    A page past the last one simply has no ``div.im`` blocks and decodes
    to an empty page.
    """
    soup = BeautifulSoup(html_content, "lxml")
    entries = []

    for block in soup.select("div.im"):
        link = block.select_one(".im-title > a")
        if link is None:
            raise PageParseError("Repository entry without title link", str(block))

        href = link.get("href", "")
        match = REPOSITORY_HREF.search(href)
        if not match:
            raise PageParseError(f"Unexpected repository link: {href!r}", str(block))

        subtitle = block.select_one(".im-subtitle")
        entries.append(RepositoryEntry(
            id=match.group("id"),
            name=link.get_text(" ", strip=True),
            uri=subtitle.get_text(strip=True) if subtitle else ""
        ))

    return RepositoryPage(entries=tuple(entries))


def parse_artifact_page(html_content: str) -> ArtifactPage:
    """
    Decodes an artifact version page.

    The details table rows are looked up by their header label; the release
    date row is mandatory, license and homepage are optional. Every
    ``textarea`` on the page holds one build tool snippet.
    """
    soup = BeautifulSoup(html_content, "lxml")
    rows = _grid_rows(soup)

    date_cell = rows.get("date")
    if date_cell is None:
        raise PageParseError("Artifact page has no release date", html_content)

    snippets = tuple(area.get_text() for area in soup.find_all("textarea"))

    return ArtifactPage(
        license=_license(rows.get("license")),
        homepage=_homepage(rows.get("homepage")),
        date=parse_release_date(date_cell.get_text(" ", strip=True)),
        snippets=snippets
    )


def parse_release_date(text: str) -> datetime:
    """Parse a date such as ``(May 01, 2018)`` as local noon.

    Noon exists on every local calendar day, so converting the result back
    to the local zone always yields the printed date. Month names are the
    site's English abbreviations regardless of the process locale.

    Returns:
        Timezone aware datetime in the system local zone
    """
    match = RELEASE_DATE.fullmatch(text.strip())
    month = MONTHS.get(match.group("month").title()) if match else None
    if month is None:
        raise PageParseError(f"Unparseable release date {text!r}", text)

    try:
        parsed = datetime(int(match.group("year")), month, int(match.group("day")), 12)
    except ValueError as e:
        raise PageParseError(f"Unparseable release date {text!r}: {e}", text) from e
    return parsed.astimezone()


def _grid_rows(soup: BeautifulSoup) -> Dict[str, Tag]:
    rows: Dict[str, Tag] = {}
    for row in soup.select("table.grid tr"):
        header = row.find("th")
        cell = row.find("td")
        if header is None or cell is None:
            continue
        rows.setdefault(header.get_text(strip=True).lower(), cell)
    return rows


def _license(cell: Optional[Tag]) -> Optional[str]:
    if cell is None:
        return None
    span = cell.select_one("span.lic")
    text = (span or cell).get_text(" ", strip=True)
    return text or None


def _homepage(cell: Optional[Tag]) -> Optional[str]:
    if cell is None:
        return None
    link = cell.find("a", href=True)
    if link is not None:
        return link["href"]
    return cell.get_text(strip=True) or None
