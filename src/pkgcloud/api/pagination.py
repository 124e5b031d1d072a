"""Pagination headers and links of packagecloud list responses.

See https://packagecloud.io/docs/api#pagination
"""

from __future__ import annotations

from collections.abc import Mapping

import requests

from .exceptions import PaginationError
from .types import Pagination

TOTAL_HEADER = "Total"
PER_PAGE_HEADER = "Per-Page"
MAX_PER_PAGE_HEADER = "Max-Per-Page"


def _int_header(headers: Mapping[str, str], name: str) -> int:
    value = headers.get(name)
    if value is None:
        raise PaginationError(f"missing pagination header: {name}")
    try:
        return int(value)
    except ValueError as e:
        raise PaginationError(f"malformed pagination header {name}: {value!r}") from e


def parse_pagination_headers(headers: Mapping[str, str]) -> Pagination:
    """Read Total, Per-Page and Max-Per-Page from response headers.

    Args:
        headers: Response headers (case-insensitive mapping).

    Raises:
        PaginationError: If any of the headers is missing or not an integer.
    """
    return Pagination(
        total=_int_header(headers, TOTAL_HEADER),
        per_page=_int_header(headers, PER_PAGE_HEADER),
        max_per_page=_int_header(headers, MAX_PER_PAGE_HEADER),
    )


def next_page_url(response: requests.Response) -> str | None:
    """Return the URL of the "next" relation in the Link header, if any."""
    link = response.links.get("next")
    if not link:
        return None
    return link.get("url") or None
