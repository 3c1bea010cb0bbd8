"""Parsing of RFC 5988 style `Link` headers as returned by the GitHub API.

A header looks like::

    <https://api.github.com/...?page=2>; rel="next", <https://...?page=5>; rel="last"

Every comma-separated entry is parsed on its own so that one malformed entry
never hides the others.
"""

import logging
import re

from gh_comments.link_header.schemas import LinkEntry, LinkParseError, LinkParseResult

logger = logging.getLogger(__name__)

REL_PATTERN = re.compile(r'rel="([^"]*)"')
URL_PATTERN = re.compile(r"<([^>]*)>")
PAGE_PATTERN = re.compile(r"[?&]page=(\d+)(?!.*[?&]page=)")


def parse_link_entry(segment: str) -> LinkEntry:
    rel_match = REL_PATTERN.search(segment)
    if not rel_match or not rel_match.group(1):
        raise LinkParseError(segment, "missing rel attribute")

    url_match = URL_PATTERN.search(segment)
    if not url_match:
        raise LinkParseError(segment, "missing <url>")
    url = url_match.group(1)

    page_match = PAGE_PATTERN.search(url)
    if not page_match:
        raise LinkParseError(segment, "missing page parameter")

    return LinkEntry(relation=rel_match.group(1), url=url, page=int(page_match.group(1)))


def parse_link_header_entries(header: str | None) -> list[LinkParseResult]:
    if not header or not header.strip():
        return []

    results: list[LinkParseResult] = []
    for segment in header.split(","):
        segment = segment.strip()
        if not segment:
            continue
        try:
            results.append(LinkParseResult(entry=parse_link_entry(segment)))
        except LinkParseError as e:
            results.append(LinkParseResult(error=e))
    return results


def build_link_set(results: list[LinkParseResult]) -> dict[str, LinkEntry]:
    """Build a mapping of relation name to link entry.

    Malformed entries are logged and skipped. When a relation appears more than once the last entry
    wins.
    """
    links: dict[str, LinkEntry] = {}
    for result in results:
        if result.entry is not None:
            links[result.entry.relation] = result.entry
        elif result.error is not None:
            logger.warning(str(result.error))
    return links


def parse_link_header(header: str | None) -> dict[str, LinkEntry]:
    """A missing or empty header gives an empty mapping, never an error."""
    return build_link_set(parse_link_header_entries(header))
